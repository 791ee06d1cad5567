import dataclasses

import matplotlib.animation as animation
import matplotlib.pyplot as plt
from matplotlib.widgets import Button, Slider

from boids.analysis.metrics import (
    calculate_fragmentation,
    calculate_mean_neighbors,
    calculate_order_parameter,
    calculate_rule_usage,
)
from boids.config import Config
from boids.core.rules import Rule
from boids.vis.visualizer import Visualizer

# (slider label, Params field, toggle field or None), top row first
CONTROLS = [
    ("Alignment", "alignment", "align"),
    ("Cohesion", "cohesion", "cohere"),
    ("Avoidance", "avoidance", "avoid"),
    ("Vision", "vision", None),
]


def toggle_label(enabled):
    return "enabled" if enabled else "disabled"


class InteractiveVisualizer(Visualizer):
    def __init__(self, flock):
        super().__init__(flock, figsize=(10, 9))
        # The panel owns the parameters and hands them to every tick
        self.params = flock.params
        self.fig.subplots_adjust(left=0.05, top=0.90, bottom=0.25)
        self.ax.set_xticks([])
        self.ax.set_yticks([])

        # Metrics display panel
        self.time_text.set_position((0.02, 0.98))
        self.time_text.set_fontsize(10)
        self.time_text.set_verticalalignment("top")
        self.time_text.set_fontfamily("monospace")
        self.time_text.set_bbox(dict(boxstyle="round", facecolor="wheat", alpha=0.8))

        # --- Sliders and rule toggles ---
        axcolor = "lightgoldenrodyellow"
        self.sliders = {}
        self.buttons = {}

        for row, (label, field, toggle) in enumerate(reversed(CONTROLS)):
            y = 0.02 + (row * 0.05)
            ax = plt.axes([0.15, y, 0.55, 0.03], facecolor=axcolor)
            slider = Slider(
                ax, label, Config.SLIDER_MIN, Config.SLIDER_MAX,
                valinit=getattr(self.params, field), valfmt="%0.0f", valstep=1,
            )
            slider.on_changed(self.make_slider_callback(field))
            self.sliders[field] = slider

            if toggle is not None:
                bax = plt.axes([0.80, y, 0.12, 0.03])
                button = Button(bax, toggle_label(getattr(self.params, toggle)))
                button.on_clicked(self.make_toggle_callback(toggle))
                self.buttons[toggle] = button

    def set_param(self, **changes):
        self.params = dataclasses.replace(self.params, **changes)

    def make_slider_callback(self, field):
        def callback(val):
            self.set_param(**{field: float(val)})
        return callback

    def make_toggle_callback(self, toggle):
        def callback(event):
            enabled = not getattr(self.params, toggle)
            self.set_param(**{toggle: enabled})
            self.buttons[toggle].label.set_text(toggle_label(enabled))
        return callback

    def update(self, frame):
        self.advance(self.params)

        self.draw_trail()
        self.draw_flock()

        # Calculate real-time metrics
        order = calculate_order_parameter(self.flock.direction)
        n_fragments, largest = calculate_fragmentation(
            self.flock.pos,
            connection_radius=self.params.vision,
            box=(self.params.width, self.params.height),
        )
        usage = calculate_rule_usage(self.flock)
        seen = calculate_mean_neighbors(self.flock.pos, self.params.vision)

        metrics_text = (
            f"Step: {frame:5d}  |  Vision: {self.params.vision:.0f}  |  Neighbours: {seen:.1f}\n"
            f"Order (phi): {order:.3f}  |  Fragments: {n_fragments:3d} (largest {largest})\n"
            f"Avoid: {usage[Rule.AVOID]:3d}  Cohere: {usage[Rule.COHERE]:3d}  "
            f"Align: {usage[Rule.ALIGN]:3d}  Hold: {usage[Rule.HOLD]:3d}"
        )
        self.time_text.set_text(metrics_text)

        return self.trail, self.quiver, self.time_text

    def run(self):
        ani = animation.FuncAnimation(
            self.fig, self.update, frames=Config.STEPS,
            interval=Config.INTERVAL_MS, blit=False
        )
        plt.show()
        return ani
