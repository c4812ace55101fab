"""
Headless simulation runs for batch experiments and data collection.
"""

import random
import time
from typing import Any, Dict, Optional, Union

from ..core.config import SimulationConfig, StepParameters, DEFAULT_PARAMETERS
from ..core.flocking import FlockingSimulation
from ..analysis.metrics import flock_cohesion, mean_speed


class HeadlessRun:
    """
    Runs a flocking simulation without a display and collects statistics.

    Survival and cohesion are sampled every ``sampleInterval`` steps;
    speeds are averaged over every step.
    """

    def __init__(self, config: Union[SimulationConfig, Dict], params: Optional[StepParameters] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize a headless run.

        Args:
            config: SimulationConfig or configuration dictionary
            params: Step parameters used for every step (defaults if None)
            rng: Random source for initial placement (seeded from config if None)
        """
        if isinstance(config, dict):
            config = SimulationConfig.from_dict(config)
        self.config = config
        self.params = params if params is not None else DEFAULT_PARAMETERS
        self.simulation = FlockingSimulation.from_config(config, rng=rng)

        self.prey_count = self.simulation.prey_count
        self.predator_count = self.simulation.predator_count
        self.start_time = time.time()

        self.stats = {
            "total_killed": 0,
            "first_kill_step": None,
            "prey_speed_sum": 0.0,
            "predator_speed_sum": 0.0,
            "speed_samples": 0,
            "cohesion_sum": 0.0,
            "cohesion_samples": 0,
            "survival_over_time": [],
            "cohesion_over_time": [],
        }
        self._sample(self.simulation.get_current_state())

    def update(self) -> None:
        """Advance the simulation by one step and update statistics."""
        state = self.simulation.step(self.params)
        killed = self.simulation.deaths_last_step

        if killed:
            self.stats["total_killed"] += killed
            if self.stats["first_kill_step"] is None:
                self.stats["first_kill_step"] = self.simulation.step_count

        self.stats["prey_speed_sum"] += mean_speed(state)
        self.stats["predator_speed_sum"] += mean_speed(state, predators=True)
        self.stats["speed_samples"] += 1

        interval = self.config.sampleInterval
        if interval and self.simulation.step_count % interval == 0:
            self._sample(state)

    def _sample(self, state) -> None:
        """Record survival and cohesion for the current step."""
        cohesion = flock_cohesion(state)
        alive = self.simulation.alive_prey_count
        step = self.simulation.step_count

        self.stats["survival_over_time"].append({"step": step, "alive": alive})
        self.stats["cohesion_over_time"].append({"step": step, "cohesion": cohesion})
        if alive:
            self.stats["cohesion_sum"] += cohesion
            self.stats["cohesion_samples"] += 1

    def run(self, max_steps: int) -> Dict[str, Any]:
        """
        Run for the given number of steps.

        Args:
            max_steps: Number of steps to simulate

        Returns:
            Results dictionary with all statistics
        """
        print(f"Running {max_steps} steps with {self.prey_count} prey and {self.predator_count} predators...")

        interval = self.config.progressInterval
        while self.simulation.step_count < max_steps:
            self.update()

            if interval and self.simulation.step_count % interval == 0:
                elapsed = time.time() - self.start_time
                progress = (self.simulation.step_count / max_steps) * 100
                print(f"  Progress: {progress:.1f}% ({self.simulation.step_count}/{max_steps} steps, "
                      f"{elapsed:.1f}s elapsed, {self.stats['total_killed']} killed)")

        return self.get_results()

    def get_results(self) -> Dict[str, Any]:
        """
        Get run results.

        Returns:
            Dictionary containing all statistics and derived metrics
        """
        elapsed = time.time() - self.start_time
        samples = self.stats["speed_samples"]

        avg_prey_speed = self.stats["prey_speed_sum"] / samples if samples else 0.0
        avg_predator_speed = self.stats["predator_speed_sum"] / samples if samples else 0.0

        avg_cohesion = 0.0
        if self.stats["cohesion_samples"] > 0:
            avg_cohesion = self.stats["cohesion_sum"] / self.stats["cohesion_samples"]

        kill_rate = 0.0
        if self.simulation.step_count > 0:
            kill_rate = self.stats["total_killed"] / self.simulation.step_count

        return {
            "steps": self.simulation.step_count,
            "elapsed_time_seconds": elapsed,
            "prey_count": self.prey_count,
            "predator_count": self.predator_count,
            "final_alive_prey": self.simulation.alive_prey_count,
            "total_killed": self.stats["total_killed"],
            "first_kill_step": self.stats["first_kill_step"],
            "kills_per_step": kill_rate,
            "avg_cohesion": avg_cohesion,
            "avg_prey_speed": avg_prey_speed,
            "avg_predator_speed": avg_predator_speed,
            "parameters": self.params.to_dict(),
            "survival_over_time": self.stats["survival_over_time"],
            "cohesion_over_time": self.stats["cohesion_over_time"],
        }
