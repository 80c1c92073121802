import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import numpy as np

from ballistics import position_at
from utils import norm


@dataclass(frozen=True)
class LaunchParameters:
    """Caller-facing pitch inputs: speed in mph, breaks in inches (signed)."""
    speed_mph: float
    vertical_break_in: float
    horizontal_break_in: float

    def __post_init__(self):
        for name in ("speed_mph", "vertical_break_in", "horizontal_break_in"):
            v = float(getattr(self, name))
            if not math.isfinite(v):
                raise ValueError(f"{name} must be finite, got {v!r}")
            object.__setattr__(self, name, v)
        if self.speed_mph <= 0.0:
            raise ValueError(f"speed_mph must be positive, got {self.speed_mph!r}")

    def key(self) -> Tuple[float, float, float]:
        return (self.speed_mph, self.vertical_break_in, self.horizontal_break_in)


class SolveStatus(Enum):
    SOLVED = "solved"
    UNREACHABLE = "unreachable"
    DEGENERATE = "degenerate"


@dataclass(frozen=True, eq=False)
class TrajectorySolution:
    """Constant-acceleration flight from release_point, valid on [0, flight_time].

    Vectors are read-only numpy arrays in the scene frame (x right, y up,
    z toward the target plane). When status is not SOLVED, flight_time is the
    estimated time and the launch speed no longer matches the requested one.
    """
    release_point: np.ndarray
    target_point: np.ndarray
    flight_time: float
    estimated_time: float
    initial_velocity: np.ndarray
    acceleration: np.ndarray
    status: SolveStatus

    @property
    def reachable(self) -> bool:
        return self.status is SolveStatus.SOLVED

    @property
    def speed_mps(self) -> float:
        return norm(self.initial_velocity)

    @property
    def end_point(self) -> np.ndarray:
        return self.position_at(self.flight_time)

    @property
    def miss(self) -> np.ndarray:
        return self.end_point - self.target_point

    def position_at(self, t: float) -> np.ndarray:
        return position_at(self.release_point, self.initial_velocity, self.acceleration, self.flight_time, t)
