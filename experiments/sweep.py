"""
Vision Sweep

How far do boids need to see for the flock to hold together? Runs the
simulation at a range of vision radii and records, per radius, the share of
boids in the largest cluster and the polarization of headings.

Usage:
    python experiments/sweep.py
    python experiments/sweep.py --radii 10 --trials 2 --out results/quick
"""

import argparse
import os
import sys

import matplotlib.pyplot as plt
import numpy as np
from tqdm import tqdm

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from boids.analysis.metrics import calculate_fragmentation, calculate_order_parameter
from boids.config import Config
from boids.core.flock import Params, make_flock
from boids.core.simulation import simulate

# One row per vision radius
COLUMNS = ("vision", "cluster_mean", "cluster_std", "order_mean", "order_std")


def measure(flock, steps, connection_radius):
    """Average (cluster share, order) over `steps` further ticks."""
    box = (flock.params.width, flock.params.height)
    clusters = []
    orders = []
    for state in simulate(flock, steps):
        _, largest = calculate_fragmentation(state.pos, connection_radius, box=box)
        clusters.append(largest / state.N)
        orders.append(calculate_order_parameter(state.direction))
    return np.mean(clusters), np.mean(orders)


def run_trial(params, n_boids, warmup_steps, measure_steps, rng):
    flock = make_flock(
        n_boids, Config.RADIUS, Config.WIDTH, Config.HEIGHT, params=params, rng=rng
    )
    for flock in simulate(flock, warmup_steps):
        pass
    return measure(flock, measure_steps, connection_radius=Config.COHESION)


def run_sweep(
    n_radii=20, max_radius=100, n_trials=3, warmup_steps=300, measure_steps=50,
    n_boids=Config.N_BOIDS, seed=0,
):
    """
    Sweep vision from 0 to `max_radius`.

    Returns an (n_radii, len(COLUMNS)) array; the std columns are taken over
    `n_trials` independently spawned flocks.
    """
    rng = np.random.default_rng(seed)
    rows = []
    for r in tqdm(np.linspace(0, max_radius, n_radii), desc="Sweeping Vision"):
        params = Params(vision=r)
        trials = np.array(
            [run_trial(params, n_boids, warmup_steps, measure_steps, rng) for _ in range(n_trials)]
        )
        clusters, orders = trials[:, 0], trials[:, 1]
        rows.append((r, clusters.mean(), clusters.std(), orders.mean(), orders.std()))
    return np.array(rows)


def save_results(table, path):
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    np.savetxt(path, table, delimiter=",", fmt="%.4f", header=",".join(COLUMNS), comments="")
    print(f"Data exported to {path}")


def plot_results(table, path):
    vision, cluster, cluster_std, order, order_std = table.T

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.fill_between(vision, cluster - cluster_std, cluster + cluster_std, color="tab:red", alpha=0.2)
    ax.plot(vision, cluster, "o-", color="tab:red", label="Largest cluster share")
    ax.fill_between(vision, order - order_std, order + order_std, color="tab:blue", alpha=0.2)
    ax.plot(vision, order, "s-", color="tab:blue", label="Polarization")

    for name, radius in (("avoidance", Config.AVOIDANCE), ("cohesion", Config.COHESION)):
        ax.axvline(radius, color="gray", linestyle=":", alpha=0.6)
        ax.text(radius, 1.02, name, rotation=90, va="bottom", ha="right", fontsize=8)

    ax.set_xlabel("Vision Radius")
    ax.set_ylim(0, 1.1)
    ax.grid(True, alpha=0.3)
    ax.legend(loc="lower right")
    ax.set_title(f"Vision sweep ({Config.WIDTH:g}x{Config.HEIGHT:g} world)")

    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"Plot saved to {path}")


def main():
    parser = argparse.ArgumentParser(description="Vision radius sweep")
    parser.add_argument("--radii", type=int, default=20, help="Number of vision values")
    parser.add_argument("--max-radius", type=float, default=100.0)
    parser.add_argument("--trials", type=int, default=3, help="Flocks per vision value")
    parser.add_argument("--warmup", type=int, default=300)
    parser.add_argument("--measure", type=int, default=50)
    parser.add_argument("--boids", type=int, default=Config.N_BOIDS)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--out", default="results/vision_sweep", help="Output path without extension")
    args = parser.parse_args()

    print(Config.info())
    table = run_sweep(
        n_radii=args.radii, max_radius=args.max_radius, n_trials=args.trials,
        warmup_steps=args.warmup, measure_steps=args.measure,
        n_boids=args.boids, seed=args.seed,
    )
    save_results(table, args.out + ".csv")
    plot_results(table, args.out + ".png")

    held = table[table[:, 1] >= 0.5]
    if len(held):
        print(f"Half the flock holds together from vision {held[0, 0]:.1f}")
    else:
        print("The flock never holds half its boids together")


if __name__ == "__main__":
    main()
