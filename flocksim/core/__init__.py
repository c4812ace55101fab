"""
Core module containing the vector type, configuration, agent classes and the flocking simulation.
"""

from .vector import Vector3
from .config import SimulationConfig, StepParameters, DEFAULT_CONFIG, HEADLESS_CONFIG, DEFAULT_PARAMETERS
from .flocking import FlockingSimulation, boundary_penalty

__all__ = [
    'Vector3', 'SimulationConfig', 'StepParameters', 'DEFAULT_CONFIG', 'HEADLESS_CONFIG',
    'DEFAULT_PARAMETERS', 'FlockingSimulation', 'boundary_penalty',
]
