from collections import deque

import matplotlib.animation as animation
import matplotlib.pyplot as plt
import numpy as np

from boids.config import Config
from boids.core.simulation import step


def heading_vectors(flock):
    return np.cos(flock.direction), np.sin(flock.direction)


def boid_colors(flock):
    return flock.color / 255.0


class Visualizer:
    def __init__(self, flock, figsize=(10, 6)):
        self.flock = flock
        # Last few frames of positions, drawn faded behind the boids
        self.history = deque(maxlen=Config.TRAIL_LENGTH)

        self.fig, self.ax = plt.subplots(figsize=figsize)
        self.setup_axes()

        self.trail = self.ax.scatter(
            np.empty(0), np.empty(0), s=2, c="lightgray", marker="."
        )

        u, v = heading_vectors(self.flock)
        self.quiver = self.ax.quiver(
            self.flock.pos[:, 0], self.flock.pos[:, 1], u, v,
            color=boid_colors(self.flock),
            scale=60, width=0.003, headwidth=4,
        )

        self.time_text = self.ax.text(0.02, 0.95, '', transform=self.ax.transAxes)

    def setup_axes(self):
        params = self.flock.params
        self.ax.set_xlim(0, params.width)
        self.ax.set_ylim(0, params.height)
        self.ax.set_aspect('equal')

    def advance(self, params=None):
        self.history.append(self.flock.pos)
        self.flock = step(self.flock, params)

    def draw_trail(self):
        if self.history:
            self.trail.set_offsets(np.concatenate(list(self.history)))

    def draw_flock(self):
        u, v = heading_vectors(self.flock)
        self.quiver.set_offsets(self.flock.pos)
        self.quiver.set_UVC(u, v)

    def update(self, frame):
        self.advance()

        self.draw_trail()
        self.draw_flock()
        self.time_text.set_text(f"Step: {frame}")
        return self.trail, self.quiver, self.time_text

    def run(self):
        ani = animation.FuncAnimation(
            self.fig, self.update, frames=Config.STEPS,
            interval=Config.INTERVAL_MS, blit=True
        )
        plt.show()
        return ani
