"""
Flocking simulation: owns the population and advances it one step at a time.
"""

import math
import random
from typing import List, Optional

from .agents import Bird, BirdState, Boid, Predator
from .config import (
    SPEEDLIMIT, TIMESTEP, BOUNDARY_MARGIN, BOUNDARY_SATURATION,
    INITIAL_HEADING_RANGE, DEFAULT_PARAMETERS, SimulationConfig, StepParameters
)
from .vector import Vector3


def boundary_penalty(excess: float, margin: float = BOUNDARY_MARGIN) -> float:
    """
    Heading adjustment for a position that is `excess` past a wall.

    Follows the hyperbola (-margin * 1000 / (excess - margin)) - 1000, which is
    0 at the wall and grows without bound toward the margin, then saturates
    at BOUNDARY_SATURATION once the excess passes the margin.

    Args:
        excess: Distance past the wall (>= 0)
        margin: Distance at which the penalty saturates

    Returns:
        Magnitude to push the heading back toward the interior
    """
    if excess > margin:
        return BOUNDARY_SATURATION
    denominator = excess - margin
    if denominator == 0:
        # Exactly on the pole: the float result of -margin * 1000 / +0.0 - 1000
        return -math.inf
    return ((-margin * 1000) / denominator) - 1000


class FlockingSimulation:
    """
    Predator/prey flocking simulation in the box [0, width] x [0, height] x [0, depth].

    Population order is prey first, then predators, and never changes.
    Each ``step`` kills prey caught by predators, then replaces every agent
    with a successor computed from the pre-step population.
    """

    def __init__(self, num_prey: int, num_predators: int, width: float, height: float,
                 depth: float, rng: Optional[random.Random] = None):
        """
        Initialize the simulation with randomly placed agents.

        Args:
            num_prey: Number of prey agents
            num_predators: Number of predator agents
            width: Extent of the volume along x
            height: Extent of the volume along y
            depth: Extent of the volume along z
            rng: Random source for initial placement (a fresh one if None)
        """
        self.width = width
        self.height = height
        self.depth = depth
        self.rng = rng if rng is not None else random.Random()

        self.birds: List[Bird] = []
        for _ in range(num_prey):
            self.birds.append(Boid(self._random_position(), self._random_heading()))
        for _ in range(num_predators):
            self.birds.append(Predator(self._random_position(), self._random_heading()))

        self.step_count = 0
        self.deaths_last_step = 0

    @classmethod
    def from_config(cls, config: SimulationConfig,
                    rng: Optional[random.Random] = None) -> "FlockingSimulation":
        """Create a simulation from a SimulationConfig, seeded by config.seed when no rng is given."""
        if rng is None:
            rng = random.Random(config.seed)
        return cls(config.preyCount, config.predatorCount,
                   config.width, config.height, config.depth, rng=rng)

    def _random_position(self) -> Vector3:
        return Vector3(
            self.rng.random() * self.width,
            self.rng.random() * self.height,
            self.rng.random() * self.depth,
        )

    def _random_heading(self) -> Vector3:
        heading = Vector3(
            self.rng.random() * INITIAL_HEADING_RANGE,
            self.rng.random() * INITIAL_HEADING_RANGE,
            self.rng.random() * INITIAL_HEADING_RANGE,
        )
        return heading.normalize_ip()

    @property
    def population_size(self) -> int:
        return len(self.birds)

    @property
    def prey_count(self) -> int:
        return sum(1 for b in self.birds if not b.is_predator)

    @property
    def predator_count(self) -> int:
        return sum(1 for b in self.birds if b.is_predator)

    @property
    def alive_prey_count(self) -> int:
        return sum(1 for b in self.birds if not b.is_predator and not b.is_dead)

    def get_current_state(self) -> List[BirdState]:
        """Snapshot of every agent, in population order."""
        return [bird.state() for bird in self.birds]

    @staticmethod
    def limit_speed(heading: Vector3, limit: float = SPEEDLIMIT) -> None:
        """Rescale heading in place so its magnitude does not exceed limit."""
        speed = heading.norm()
        if speed > limit:
            heading.x = heading.x / speed * limit
            heading.y = heading.y / speed * limit
            heading.z = heading.z / speed * limit

    def apply_bounds(self, position: Vector3, heading: Vector3) -> None:
        """
        Bias heading back toward the volume on every axis the position has left.

        The position itself is not clamped; an agent may sit outside the
        volume for a few steps while it turns around.

        Args:
            position: Agent position (read only)
            heading: Heading to adjust in place
        """
        if position.x < 0:
            heading.x += boundary_penalty(-position.x)
        if position.y < 0:
            heading.y += boundary_penalty(-position.y)
        if position.z < 0:
            heading.z += boundary_penalty(-position.z)
        if position.x > self.width:
            heading.x -= boundary_penalty(position.x - self.width)
        if position.y > self.height:
            heading.y -= boundary_penalty(position.y - self.height)
        if position.z > self.depth:
            heading.z -= boundary_penalty(position.z - self.depth)

    def step(self, params: Optional[StepParameters] = None) -> List[BirdState]:
        """
        Advance the simulation by one timestep.

        Args:
            params: Tunables for this step (defaults if None)

        Returns:
            Snapshot of the new generation, in population order
        """
        if params is None:
            params = DEFAULT_PARAMETERS

        # Pass 1: predation. Only death flags change here.
        deaths = 0
        for bird in self.birds:
            if bird.is_predator:
                deaths += len(bird.hunt(self.birds))

        # Pass 2: motion. Successors go into a new list so every read below
        # sees the pre-step positions and headings.
        next_birds = []
        for bird in self.birds:
            if bird.is_dead:
                next_birds.append(bird)
                continue

            new_dir = bird.steer(self.birds, params)
            self.apply_bounds(bird.position, new_dir)
            if bird.is_predator:
                self.limit_speed(new_dir, params.predatorSpeed)
            else:
                self.limit_speed(new_dir)

            new_pos = bird.position.add(new_dir.scale(TIMESTEP))
            next_birds.append(bird.spawn(new_pos, new_dir))

        self.birds = next_birds
        self.step_count += 1
        self.deaths_last_step = deaths

        return self.get_current_state()
