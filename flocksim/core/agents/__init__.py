"""
Agent classes for the flocking simulation.
"""

from .base import Bird, BirdState
from .boid import Boid
from .predator import Predator

__all__ = ['Bird', 'BirdState', 'Boid', 'Predator']
