"""
Export functions for saving run summaries to CSV and JSON.

Only summary statistics are written; per-step series stay in memory.
"""

import csv
import json
import math
from typing import Any, Dict, List


TRIAL_FIELDS = [
    'trial', 'steps', 'prey_count', 'predator_count', 'final_alive_prey',
    'total_killed', 'first_kill_step', 'avg_cohesion', 'avg_prey_speed',
    'avg_predator_speed',
]

AGGREGATE_METRICS = [
    "total_killed", "final_alive_prey", "first_kill_step", "kills_per_step",
    "avg_cohesion", "avg_prey_speed", "avg_predator_speed", "elapsed_time_seconds",
]


def summarize(result: Dict[str, Any]) -> Dict[str, Any]:
    """Drop the per-step series from a results dictionary."""
    return {k: v for k, v in result.items() if not k.endswith("_over_time")}


def export_trials_to_csv(trial_results: List[Dict], filename: str = "flocksim_trials.csv") -> str:
    """
    Export one summary row per trial to CSV.

    Args:
        trial_results: Results dictionaries from HeadlessRun.run
        filename: Output filename

    Returns:
        Path to saved CSV file
    """
    with open(filename, 'w', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=TRIAL_FIELDS)
        writer.writeheader()

        for idx, result in enumerate(trial_results):
            row = {key: result.get(key, '') for key in TRIAL_FIELDS}
            row['trial'] = result.get('trial', idx + 1)
            if row['first_kill_step'] is None:
                row['first_kill_step'] = ''
            writer.writerow(row)

    print(f"\nCSV results saved to: {filename}")
    return filename


def export_run_report(report: Dict[str, Any], filename: str = "flocksim_report.json") -> str:
    """
    Export a run report to JSON.

    Trial results found under ``trial_results`` are summarized first.

    Args:
        report: Report dictionary (config, trial results, aggregates)
        filename: Output filename

    Returns:
        Path to saved JSON file
    """
    data = dict(report)
    if "trial_results" in data:
        data["trial_results"] = [summarize(r) for r in data["trial_results"]]

    with open(filename, 'w') as f:
        json.dump(data, f, indent=2)

    print(f"\nRun report saved to: {filename}")
    return filename


def calculate_aggregate_stats(trial_results: List[Dict]) -> Dict[str, float]:
    """
    Calculate mean and standard deviation across trials.

    Args:
        trial_results: List of result dictionaries from multiple trials

    Returns:
        Dictionary with mean and std for each metric
    """
    if not trial_results:
        return {}

    aggregates = {}

    for metric in AGGREGATE_METRICS:
        values = [r[metric] for r in trial_results if metric in r and r[metric] is not None]
        if values:
            mean = sum(values) / len(values)
            aggregates[f"{metric}_mean"] = mean
            if len(values) > 1:
                variance = sum((x - mean) ** 2 for x in values) / (len(values) - 1)
                aggregates[f"{metric}_std"] = math.sqrt(variance)
            else:
                aggregates[f"{metric}_std"] = 0

    return aggregates
