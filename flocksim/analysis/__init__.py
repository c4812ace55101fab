"""
Analysis module for metrics, plotting and exporting simulation results.
"""

from .metrics import snapshot_arrays, alive_prey, flock_cohesion, mean_speed
from .export import export_trials_to_csv, export_run_report, calculate_aggregate_stats

__all__ = [
    'snapshot_arrays',
    'alive_prey',
    'flock_cohesion',
    'mean_speed',
    'export_trials_to_csv',
    'export_run_report',
    'calculate_aggregate_stats',
]
