"""
Main entry point for the flocking simulation.

Run with:
    python -m flocksim.main                       # Interactive viewer
    python -m flocksim.main --headless            # Headless runs + report
    python -m flocksim.main --config run.json     # Load config/parameters from JSON
"""

import json
import os
import random
from typing import Optional, Tuple

from .core.config import SimulationConfig, StepParameters, HEADLESS_CONFIG


def set_headless():
    """Enable headless mode (no window, no audio)."""
    os.environ["SDL_VIDEODRIVER"] = "dummy"
    os.environ.setdefault("MPLBACKEND", "Agg")


def load_config(path: Optional[str], base: SimulationConfig) -> Tuple[SimulationConfig, StepParameters]:
    """
    Load a JSON file holding simulation config keys and an optional
    "parameters" object with step tunables.

    Args:
        path: JSON file path, or None for defaults
        base: Config whose values are used for keys the file omits

    Returns:
        Tuple of (SimulationConfig, StepParameters)
    """
    if path is None:
        return SimulationConfig.from_dict(base.to_dict()), StepParameters()

    with open(path) as f:
        data = json.load(f)

    merged = base.to_dict()
    merged.update({k: v for k, v in data.items() if k != "parameters"})
    return SimulationConfig.from_dict(merged), StepParameters.from_dict(data.get("parameters", {}))


def run_interactive(config: SimulationConfig, params: StepParameters):
    """Run the interactive viewer."""
    from .simulation.interactive import Viewer

    print("=" * 60)
    print("Flocking Simulation: Predators & Prey")
    print("=" * 60)
    print("\nControls:")
    print("  ESC    - Quit")
    print("  SPACE  - Pause / resume")
    print("  R      - Reset population")
    print("  L      - Toggle light attraction")
    print("  V      - Cycle visualization modes (0=normal, 1=headings, 2=debug)")
    print("  P      - Save run report to JSON")
    print("  WASD   - Move camera, Q/E down/up, arrows rotate")
    print("  1-0, F1-F8 - Lower/raise tunables (see overlay)")
    print("\nStarting simulation...")

    Viewer(config, params).run()


def run_headless(config: SimulationConfig, params: StepParameters, num_trials: int = 5,
                 steps: int = 2000, plot: bool = True):
    """
    Run several headless trials and export the results.

    Args:
        config: Simulation configuration; trial i is seeded with seed + i
        params: Step parameters used for every step
        num_trials: Number of trials
        steps: Steps per trial
        plot: Whether to save survival and cohesion plots

    Returns:
        Report dictionary
    """
    set_headless()

    from .simulation.headless import HeadlessRun
    from .analysis.export import export_run_report, export_trials_to_csv, calculate_aggregate_stats

    print("=" * 60)
    print("HEADLESS FLOCKING RUNS")
    print("=" * 60)
    print(f"Steps per trial: {steps}")
    print(f"Trials: {num_trials}")
    print(f"Prey: {config.preyCount}, Predators: {config.predatorCount}")
    print()

    base_seed = config.seed if config.seed is not None else 42
    results = []
    for trial in range(num_trials):
        print(f"\nTrial {trial + 1}/{num_trials}")
        run = HeadlessRun(config, params, rng=random.Random(base_seed + trial))
        result = run.run(steps)
        result["trial"] = trial + 1
        result["seed"] = base_seed + trial
        results.append(result)

    aggregates = calculate_aggregate_stats(results)
    report = {
        "run_config": {"steps": steps, "trials": num_trials},
        "config": config.to_dict(),
        "parameters": params.to_dict(),
        "trial_results": results,
        "aggregates": aggregates,
    }

    export_run_report(report, config.reportOutputFile)
    csv_file = os.path.splitext(config.reportOutputFile)[0] + ".csv"
    export_trials_to_csv(results, csv_file)

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    print(f"   Killed: {aggregates.get('total_killed_mean', 0):.2f} ± {aggregates.get('total_killed_std', 0):.2f}")
    print(f"   Surviving prey: {aggregates.get('final_alive_prey_mean', 0):.2f}")
    print(f"   First kill: {aggregates.get('first_kill_step_mean', 0):.0f} steps")
    print(f"   Cohesion: {aggregates.get('avg_cohesion_mean', 0):.1f}")

    if plot:
        from .analysis.plotting import plot_survival, plot_cohesion

        print("\nGenerating plots...")
        plot_survival(results)
        plot_cohesion(results)

    return report


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Predator/prey flocking simulation")
    parser.add_argument("--headless", action="store_true", help="Run headless trials and export a report")
    parser.add_argument("--config", help="JSON file with config keys and a 'parameters' object")
    parser.add_argument("--prey", type=int, help="Number of prey")
    parser.add_argument("--predators", type=int, help="Number of predators")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--trials", type=int, default=5, help="Number of headless trials")
    parser.add_argument("--steps", type=int, default=2000, help="Steps per headless trial")
    parser.add_argument("--no-plot", action="store_true", help="Skip plots after headless runs")

    args = parser.parse_args(argv)

    base = HEADLESS_CONFIG if args.headless else SimulationConfig()
    config, params = load_config(args.config, base)
    if args.prey is not None:
        config.preyCount = args.prey
    if args.predators is not None:
        config.predatorCount = args.predators
    if args.seed is not None:
        config.seed = args.seed

    if args.headless:
        run_headless(config, params, num_trials=args.trials, steps=args.steps, plot=not args.no_plot)
    else:
        run_interactive(config, params)


if __name__ == "__main__":
    main()
