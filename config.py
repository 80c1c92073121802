from __future__ import annotations

import json
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Tuple, Union

G = 9.81
INCHES_TO_METERS = 0.0254
FEET_TO_METERS = 0.3048
MILES_TO_METERS = 1609.344
MPH_TO_MPS = MILES_TO_METERS / 3600.0

# Scene frame: x = right from the catcher's view, y = up, z = toward the catcher.
PITCHER_PLATE_DISTANCE_FT = 60.5
PITCHER_EXTENSION_FT = 5.5
RELEASE_HEIGHT_FT = 6.0

STRIKE_ZONE_WIDTH_M = 17 * INCHES_TO_METERS
STRIKE_ZONE_BOTTOM_M = 1.5 * FEET_TO_METERS
STRIKE_ZONE_TOP_M = 3.5 * FEET_TO_METERS
STRIKE_ZONE_CENTER_Y_M = (STRIKE_ZONE_BOTTOM_M + STRIKE_ZONE_TOP_M) / 2

PLATE_WIDTH_M = 17 * INCHES_TO_METERS
PLATE_POINT_LENGTH_M = 8.5 * INCHES_TO_METERS
PLATE_SIDE_LENGTH_M = 8.5 * INCHES_TO_METERS
PLATE_TOTAL_DEPTH_M = PLATE_SIDE_LENGTH_M + PLATE_POINT_LENGTH_M
PLATE_BACK_Z_M = 2 * PLATE_POINT_LENGTH_M

RELEASE_DISTANCE_M = (PITCHER_PLATE_DISTANCE_FT - PITCHER_EXTENSION_FT) * FEET_TO_METERS
RELEASE_HEIGHT_M = RELEASE_HEIGHT_FT * FEET_TO_METERS

FALLBACK_TIME_S = 0.1
MAX_TARGET_DISTANCE_M = 1000.0

Vec3Tuple = Tuple[float, float, float]


@dataclass(frozen=True)
class SolverConfig:
    """Read-only constants handed to the solver once at startup."""
    gravity: float = G
    release_point: Vec3Tuple = (0.0, RELEASE_HEIGHT_M, -RELEASE_DISTANCE_M)
    fallback_time: float = FALLBACK_TIME_S
    max_target_distance: float = MAX_TARGET_DISTANCE_M

    def __post_init__(self):
        if len(self.release_point) != 3:
            raise ValueError(f"release_point needs 3 coordinates, got {self.release_point!r}")
        object.__setattr__(self, "release_point", tuple(float(c) for c in self.release_point))
        for v in (self.gravity, self.fallback_time, self.max_target_distance, *self.release_point):
            if not math.isfinite(v):
                raise ValueError(f"config values must be finite, got {v!r}")
        if self.fallback_time <= 0.0:
            raise ValueError(f"fallback_time must be positive, got {self.fallback_time!r}")
        if self.max_target_distance <= 0.0:
            raise ValueError(f"max_target_distance must be positive, got {self.max_target_distance!r}")

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_CONFIG = SolverConfig()


def load_config(path: Union[str, Path]) -> SolverConfig:
    """Build a SolverConfig from a JSON file; missing keys keep their defaults."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"config file must hold a JSON object: {path}")
    known = {f.name for f in fields(SolverConfig)}
    unknown = sorted(set(payload) - known)
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(unknown)}")
    if "release_point" in payload:
        payload["release_point"] = tuple(payload["release_point"])
    return SolverConfig(**payload)


def default_target() -> Vec3Tuple:
    """Strike-zone centre over the back point of home plate."""
    return (0.0, STRIKE_ZONE_CENTER_Y_M, PLATE_BACK_Z_M)
