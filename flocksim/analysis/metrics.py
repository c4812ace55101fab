"""
Flock metrics computed from simulation snapshots with numpy.
"""

from typing import List, Tuple

import numpy as np


def snapshot_arrays(state: List) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert a snapshot into arrays.

    Args:
        state: List of (position, heading, is_predator, is_dead) tuples

    Returns:
        Tuple of (positions (n, 3), headings (n, 3), predator mask, dead mask)
    """
    if not state:
        empty = np.zeros((0, 3))
        return empty, empty.copy(), np.zeros(0, dtype=bool), np.zeros(0, dtype=bool)

    positions = np.array([tuple(s[0]) for s in state], dtype=float)
    headings = np.array([tuple(s[1]) for s in state], dtype=float)
    predators = np.array([s[2] for s in state], dtype=bool)
    dead = np.array([s[3] for s in state], dtype=bool)
    return positions, headings, predators, dead


def alive_prey(state: List) -> int:
    """Number of live prey in the snapshot."""
    _, _, predators, dead = snapshot_arrays(state)
    return int(np.count_nonzero(~predators & ~dead))


def flock_cohesion(state: List) -> float:
    """
    Mean distance of live prey from their centroid.

    Lower values mean a tighter flock. Returns 0.0 when no prey is alive.
    """
    positions, _, predators, dead = snapshot_arrays(state)
    live = positions[~predators & ~dead]
    if len(live) == 0:
        return 0.0
    centroid = live.mean(axis=0)
    return float(np.linalg.norm(live - centroid, axis=1).mean())


def mean_speed(state: List, predators: bool = False) -> float:
    """Average heading magnitude of live prey, or of predators when predators=True."""
    _, headings, is_predator, dead = snapshot_arrays(state)
    if predators:
        mask = is_predator
    else:
        mask = ~is_predator & ~dead
    if not mask.any():
        return 0.0
    return float(np.linalg.norm(headings[mask], axis=1).mean())
