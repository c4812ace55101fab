"""
Base Bird class for all simulation entities.
"""

from typing import NamedTuple

from ..vector import Vector3


class BirdState(NamedTuple):
    """Read-only snapshot of one agent, as handed to callers."""

    position: Vector3
    heading: Vector3
    is_predator: bool
    is_dead: bool


class Bird:
    """
    Base class for all agents in the simulation.

    A bird is never moved in place: each step the simulation asks it for a
    steering heading and builds a fresh successor with ``spawn``, so every
    neighbor read within a step sees pre-step positions and headings.
    """

    is_predator = False

    def __init__(self, position: Vector3, heading: Vector3, is_dead: bool = False):
        """
        Initialize a bird.

        Args:
            position: Current location in the volume
            heading: Current velocity vector (not normalized)
            is_dead: Whether the bird has been caught
        """
        self.position = position
        self.heading = heading
        self.is_dead = is_dead

    def distance(self, other: "Bird") -> float:
        """Distance between this bird's position and another's."""
        return self.position.distance(other.position)

    def state(self) -> BirdState:
        return BirdState(self.position, self.heading, self.is_predator, self.is_dead)

    def steer(self, flock: list, params) -> Vector3:
        """
        Compute the raw heading for the next step, before bounds and speed limiting.

        Args:
            flock: The full pre-step population
            params: StepParameters for this step

        Returns:
            New heading vector
        """
        raise NotImplementedError

    def spawn(self, position: Vector3, heading: Vector3) -> "Bird":
        """Create this bird's successor for the next generation."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(position={self.position!r}, "
                f"heading={self.heading!r}, is_dead={self.is_dead})")
