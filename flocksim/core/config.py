"""
Configuration classes, defaults and algorithm constants for the flocking simulation.
"""

from dataclasses import dataclass, field, fields
from typing import List, Optional

from .vector import Vector3


# Algorithm constants (fixed, not caller-configurable)
SPEEDLIMIT = 200
BIRDFATNESS = 20
TIMESTEP = 0.03

# Boundary penalty: hyperbola up to the margin, constant beyond it
BOUNDARY_MARGIN = 70
BOUNDARY_SATURATION = 9999

# Initial heading components are drawn from [0, INITIAL_HEADING_RANGE)
INITIAL_HEADING_RANGE = 100


@dataclass
class SimulationConfig:
    """Configuration for constructing and running a simulation."""

    # Population
    preyCount: int = 150
    predatorCount: int = 3

    # Bounding volume
    width: float = 1000.0
    height: float = 700.0
    depth: float = 800.0

    # Randomness (None draws a fresh unseeded generator)
    seed: Optional[int] = None

    # Viewer
    screenWidth: int = 1200
    screenHeight: int = 800
    fpsTarget: int = 60
    visualizationMode: int = 0  # 0=normal, 1=headings, 2=debug
    backgroundColor: List[int] = field(default_factory=lambda: [20, 20, 30])
    preyColor: List[int] = field(default_factory=lambda: [200, 200, 255])
    predatorColor: List[int] = field(default_factory=lambda: [255, 50, 50])
    deadColor: List[int] = field(default_factory=lambda: [90, 90, 90])
    lightColor: List[int] = field(default_factory=lambda: [255, 230, 120])

    # Headless runs
    progressInterval: int = 1000
    sampleInterval: int = 10

    # Output
    reportOutputFile: str = "flocksim_report.json"

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "preyCount": self.preyCount,
            "predatorCount": self.predatorCount,
            "width": self.width,
            "height": self.height,
            "depth": self.depth,
            "seed": self.seed,
            "screenWidth": self.screenWidth,
            "screenHeight": self.screenHeight,
            "fpsTarget": self.fpsTarget,
            "visualizationMode": self.visualizationMode,
            "backgroundColor": list(self.backgroundColor),
            "preyColor": list(self.preyColor),
            "predatorColor": list(self.predatorColor),
            "deadColor": list(self.deadColor),
            "lightColor": list(self.lightColor),
            "progressInterval": self.progressInterval,
            "sampleInterval": self.sampleInterval,
            "reportOutputFile": self.reportOutputFile,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create config from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass
class StepParameters:
    """
    Tunables consumed by a single simulation step.

    Weights are typically on a 0-100 scale but no range is enforced;
    extreme values simply produce extreme motion.
    """

    separation: float = 5.0
    alignment: float = 30.0
    cohesion: float = 1.0
    momentum: float = 10.0
    lightAttraction: float = 2.0
    fear: float = 20.0
    visualRange: float = 100.0
    predatorVisualRange: float = 300.0
    predatorSpeed: float = 150.0
    light: Vector3 = field(default_factory=lambda: Vector3(500, 350, 400))
    useLight: bool = False

    def to_dict(self) -> dict:
        """Convert parameters to a JSON-friendly dictionary."""
        return {
            "separation": self.separation,
            "alignment": self.alignment,
            "cohesion": self.cohesion,
            "momentum": self.momentum,
            "lightAttraction": self.lightAttraction,
            "fear": self.fear,
            "visualRange": self.visualRange,
            "predatorVisualRange": self.predatorVisualRange,
            "predatorSpeed": self.predatorSpeed,
            "light": list(self.light.as_tuple()),
            "useLight": self.useLight,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "StepParameters":
        """
        Create parameters from dictionary.

        Unknown keys are dropped and ``light`` may be any 3-item sequence.
        """
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        if "light" in values and not isinstance(values["light"], Vector3):
            x, y, z = values["light"]
            values["light"] = Vector3(x, y, z)
        return cls(**values)


# Default configuration for the interactive viewer
DEFAULT_CONFIG = SimulationConfig()

# Reproducible configuration for headless runs
HEADLESS_CONFIG = SimulationConfig(seed=42, sampleInterval=10)

DEFAULT_PARAMETERS = StepParameters()
