"""
Predator/prey flocking simulation in a bounded 3D volume.
"""

from .core import FlockingSimulation, SimulationConfig, StepParameters, Vector3

__version__ = "0.1.0"

__all__ = ['FlockingSimulation', 'SimulationConfig', 'StepParameters', 'Vector3']
