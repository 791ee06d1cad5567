import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from boids.config import Config
from boids.core.flock import make_flock
from boids.vis.interactive import InteractiveVisualizer


def main(n_boids=Config.N_BOIDS, seed=None):
    print("Interactive Mode: Use sliders to set the rule radii and buttons to toggle rules.")
    flock = make_flock(n_boids, Config.RADIUS, Config.WIDTH, Config.HEIGHT, rng=seed)
    vis = InteractiveVisualizer(flock)
    vis.run()


if __name__ == "__main__":
    main()
