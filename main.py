#!/usr/bin/env python3
"""
Boid Flocking Simulation

A 2D flock of boids steering by three local rules (avoidance, cohesion and
alignment), after Reynolds (1987). Each boid follows exactly one rule per
tick, picked in that priority order, and the world wraps at its edges.

Usage:
    python main.py                      # Run 2D visualization
    python main.py --interactive        # Run with radius sliders and rule toggles
    python main.py --boids 50 --seed 7  # Bigger, reproducible flock

For parameter sweeps:
    python experiments/sweep.py         # Vision radius sweep
"""

import argparse
import logging

from boids.config import Config


def main():
    parser = argparse.ArgumentParser(
        description="Boid Flocking Simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        "--interactive", "-i",
        action="store_true",
        help="Run in interactive mode with parameter sliders"
    )
    parser.add_argument(
        "--boids", "-n",
        type=int,
        default=Config.N_BOIDS,
        help=f"Number of boids (default: {Config.N_BOIDS})"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the initial flock"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log per-tick rule usage"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.interactive:
        from experiments.run_interactive import main as run
    else:
        from experiments.run_visual import main as run

    run(n_boids=args.boids, seed=args.seed)


if __name__ == "__main__":
    main()
