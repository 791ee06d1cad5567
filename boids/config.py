class Config:
    # Flock
    N_BOIDS = 25              # Number of boids
    RADIUS = 5                # Spawn inset from the world edges
    SPEED = 3.0               # Distance per tick, constant per boid
    COLOR_MAX = 250           # Color channels drawn from [0, COLOR_MAX)

    # World (toroidal)
    WIDTH = 640.0
    HEIGHT = 360.0

    # Rule radii
    COHESION = 50.0
    AVOIDANCE = 20.0
    ALIGNMENT = 100.0
    VISION = 100.0            # Outer cutoff, the other radii filter inside it

    # Rule toggles
    COHERE = True
    AVOID = True
    ALIGN = True

    # Carried with the parameters but not applied by any rule
    MAX_SPEED = 3.5

    # Fixed heading change for cohere/avoid, in radians
    TURN_STEP = 0.1

    # Animation
    STEPS = 2000
    INTERVAL_MS = 30
    TRAIL_LENGTH = 5          # Previous frames drawn behind each boid
    SLIDER_MIN = 1
    SLIDER_MAX = 100

    @staticmethod
    def info():
        return (
            f"Flocking Config: N={Config.N_BOIDS}, World={Config.WIDTH:g}x{Config.HEIGHT:g}, "
            f"Vision={Config.VISION:g}, Cohesion={Config.COHESION:g}, "
            f"Avoidance={Config.AVOIDANCE:g}, Alignment={Config.ALIGNMENT:g}"
        )
