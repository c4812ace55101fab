"""
Boid (prey) agent class implementing flocking behavior.
"""

from .base import Bird
from ..vector import Vector3, zero


class Boid(Bird):
    """
    A boid (prey) agent that exhibits flocking behavior.

    Implements Reynolds' boid rules over every other agent in visual range:
    - Separation: push away from prey closer than 2 * separation^2
    - Alignment: steer toward the average neighbor heading
    - Cohesion: steer toward the average neighbor position

    Also flees predators in range and is drawn to the light when enabled.
    Dead prey still count as flock neighbors.
    """

    def steer(self, flock: list, params) -> Vector3:
        """
        Compute the new heading from flocking, predator avoidance and light.

        Args:
            flock: The full pre-step population
            params: StepParameters for this step

        Returns:
            New (unclamped) heading vector
        """
        visual_range = params.visualRange
        separation_threshold = 2 * params.separation * params.separation

        avg_pos = zero()
        avg_dir = zero()
        sep_dir = zero()
        avoid_dir = zero()
        num_in_range = 0

        for other in flock:
            if other is self:
                continue

            dist = other.position.distance(self.position)
            if dist > visual_range:
                continue

            if other.is_predator:
                # Pass 1 kills anything this close, so dist is never 0 here
                avoid_dir.add_ip(
                    self.position.subtract(other.position).normalize_ip().scale_ip(visual_range / dist)
                )
                continue

            if dist < separation_threshold:
                sep_dir.add_ip(self.position.subtract(other.position))
            avg_pos.add_ip(other.position)
            avg_dir.add_ip(other.heading)
            num_in_range += 1

        if num_in_range > 0:
            avg_pos.scale_down_ip(num_in_range)
            avg_dir.scale_down_ip(num_in_range)

        new_dir = avg_pos.subtract_ip(self.position).scale_ip(params.cohesion)
        new_dir.add_ip(sep_dir.scale_ip(params.separation))
        new_dir.add_ip(avoid_dir.scale_ip(params.fear * 20))
        new_dir.add_ip(avg_dir.scale_ip(params.alignment / 3))
        new_dir.add_ip(self.heading.scale(params.momentum * 5))

        if params.useLight and params.light.distance(self.position) < visual_range * 4:
            new_dir.add_ip(params.light.subtract(self.position).scale_ip(params.lightAttraction))

        return new_dir

    def spawn(self, position: Vector3, heading: Vector3) -> "Boid":
        return Boid(position, heading, self.is_dead)
