import math
from typing import Sequence

import numpy as np

from config import MPH_TO_MPS, INCHES_TO_METERS, FEET_TO_METERS


def mph_to_mps(mph: float) -> float:
    return mph * MPH_TO_MPS

def mps_to_mph(mps: float) -> float:
    return mps / MPH_TO_MPS

def inches_to_meters(inches: float) -> float:
    return inches * INCHES_TO_METERS

def meters_to_inches(m: float) -> float:
    return m / INCHES_TO_METERS

def feet_to_meters(ft: float) -> float:
    return ft * FEET_TO_METERS

def meters_to_feet(m: float) -> float:
    return m / FEET_TO_METERS


def as_vec3(p: Sequence[float], name: str = "point") -> np.ndarray:
    """Copy a 3-coordinate sequence into a read-only float vector."""
    v = np.array(p, dtype=float).reshape(-1)
    if v.shape != (3,):
        raise ValueError(f"{name} must have 3 coordinates, got {p!r}")
    if not np.all(np.isfinite(v)):
        raise ValueError(f"{name} must be finite, got {p!r}")
    v.flags.writeable = False
    return v

def frozen(v: np.ndarray) -> np.ndarray:
    v = np.array(v, dtype=float)
    v.flags.writeable = False
    return v

def norm(v: np.ndarray) -> float:
    return math.sqrt(float(np.dot(v, v)))
