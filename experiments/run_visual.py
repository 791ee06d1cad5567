import os
import sys

# Put project root in path
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from boids.config import Config
from boids.core.flock import make_flock
from boids.vis.visualizer import Visualizer


def main(n_boids=Config.N_BOIDS, seed=None):
    print(Config.info())
    flock = make_flock(n_boids, Config.RADIUS, Config.WIDTH, Config.HEIGHT, rng=seed)
    vis = Visualizer(flock)
    vis.run()


if __name__ == "__main__":
    main()
