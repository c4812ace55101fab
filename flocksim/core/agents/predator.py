"""
Predator agent class implementing hunting behavior.
"""

from typing import List, Optional

from .base import Bird
from ..config import BIRDFATNESS
from ..vector import Vector3, zero


class Predator(Bird):
    """
    A predator agent that chases the nearest prey in its visual range.

    Predators keep apart from each other with the separation rule and
    kill any live prey that comes within BIRDFATNESS. They never die.
    """

    is_predator = True

    def __init__(self, position: Vector3, heading: Vector3):
        """
        Initialize a predator.

        Args:
            position: Current location in the volume
            heading: Current velocity vector
        """
        super().__init__(position, heading, is_dead=False)

    def hunt(self, flock: list) -> List[Bird]:
        """
        Mark every live prey within BIRDFATNESS as dead.

        Args:
            flock: The full population

        Returns:
            Prey killed by this predator in this call
        """
        caught = []
        for bird in flock:
            if bird.is_predator or bird.is_dead:
                continue
            if bird.distance(self) < BIRDFATNESS:
                bird.is_dead = True
                caught.append(bird)
        return caught

    def nearest_prey(self, flock: list, visual_range: float) -> Optional[Vector3]:
        """Position of the closest live prey within visual_range, if any."""
        closest = None
        closest_dist = float("inf")
        for bird in flock:
            if bird.is_predator or bird.is_dead:
                continue
            dist = bird.distance(self)
            if dist <= visual_range and dist < closest_dist:
                closest_dist = dist
                closest = bird.position
        return closest

    def steer(self, flock: list, params) -> Vector3:
        """
        Compute the new heading: momentum, separation from other predators
        and a pull of 2 * predatorSpeed toward the nearest prey.

        Args:
            flock: The full pre-step population
            params: StepParameters for this step

        Returns:
            New (unclamped) heading vector
        """
        separation_threshold = 2 * params.separation * params.separation
        sep_dir = zero()

        for other in flock:
            if other is self or not other.is_predator:
                continue
            dist = other.distance(self)
            if dist <= params.predatorVisualRange and dist < separation_threshold:
                sep_dir.add_ip(self.position.subtract(other.position))

        new_dir = self.heading.scale(params.momentum)
        new_dir.add_ip(sep_dir.scale_ip(params.separation * 2))

        target = self.nearest_prey(flock, params.predatorVisualRange)
        if target is not None:
            new_dir.add_ip(target.subtract(self.position).normalize_ip().scale_ip(params.predatorSpeed * 2))

        return new_dir

    def spawn(self, position: Vector3, heading: Vector3) -> "Predator":
        return Predator(position, heading)
