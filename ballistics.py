import math
import numpy as np
from dataclasses import dataclass
from typing import Tuple

from utils import frozen, norm

FLIGHT_AXIS = 2


@dataclass
class Trajectory:
    t: np.ndarray
    x: np.ndarray
    y: np.ndarray
    z: np.ndarray

    def points(self) -> np.ndarray:
        return np.column_stack((self.x, self.y, self.z))


def estimate_flight_time(displacement: np.ndarray, speed_mps: float, fallback: float) -> float:
    """Time to cover the flight-axis displacement at the launch speed."""
    axis = float(displacement[FLIGHT_AXIS])
    if axis > 0.0 and speed_mps > 0.0:
        t = axis / speed_mps
        if t > 0.0 and math.isfinite(t):
            return t
    return fallback

def break_acceleration(vertical_break_m: float, horizontal_break_m: float,
                       t_est: float, gravity: float) -> np.ndarray:
    """Constant acceleration that deflects the path by the given breaks at t_est.

    Uses deviation = 0.5 * a * t**2, so a = 2 * break / t**2 per axis; the
    vertical component also carries gravity. No acceleration along the flight axis.
    """
    t2 = t_est * t_est
    ax = 0.0; ay_spin = 0.0
    if t_est > 0.0 and t2 > 0.0:
        ax = 2.0 * horizontal_break_m / t2
        ay_spin = 2.0 * vertical_break_m / t2
        if not (math.isfinite(ax) and math.isfinite(ay_spin)):
            ax = 0.0; ay_spin = 0.0
    return frozen([ax, ay_spin - gravity, 0.0])

def initial_velocity(displacement: np.ndarray, accel: np.ndarray, flight_time: float,
                     speed_mps: float) -> Tuple[np.ndarray, bool]:
    """Back-solve v0 from dP = v0*T + 0.5*a*T**2.

    Returns (v0, exact). For a non-positive flight time the ball is aimed
    straight at the target at the requested speed and exact is False.
    """
    if flight_time > 0.0:
        return frozen(displacement / flight_time - 0.5 * accel * flight_time), True
    dist = norm(displacement)
    if dist > 0.0:
        return frozen(displacement * (speed_mps / dist)), False
    v = np.zeros(3)
    v[FLIGHT_AXIS] = speed_mps
    return frozen(v), False

def position_at(release: np.ndarray, v0: np.ndarray, accel: np.ndarray,
                flight_time: float, t: float) -> np.ndarray:
    t = float(t)
    if math.isnan(t) or flight_time <= 0.0:
        t = 0.0
    else:
        t = min(max(t, 0.0), flight_time)
    return release + v0 * t + 0.5 * accel * t * t

def sample_path(sol, samples: int) -> Trajectory:
    n = max(2, int(samples))
    t = np.linspace(0.0, max(sol.flight_time, 0.0), n)
    p = sol.release_point + np.outer(t, sol.initial_velocity) + 0.5 * np.outer(t * t, sol.acceleration)
    return Trajectory(t=t, x=p[:, 0], y=p[:, 1], z=p[:, 2])

def closest_approach(tr: Trajectory, tx: float, ty: float, tz: float):
    dx = tr.x - tx; dy = tr.y - ty; dz = tr.z - tz
    d2 = dx*dx + dy*dy + dz*dz
    idx = int(np.argmin(d2))
    return float(tr.t[idx]), float(tr.x[idx]), float(tr.y[idx]), float(tr.z[idx]), float(math.sqrt(float(d2[idx])))
