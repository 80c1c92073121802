import logging
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from ballistics import estimate_flight_time, break_acceleration, initial_velocity
from config import SolverConfig, DEFAULT_CONFIG
from models import LaunchParameters, SolveStatus, TrajectorySolution
from utils import as_vec3, inches_to_meters, mph_to_mps

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlightTimeResult:
    flight_time: float
    status: SolveStatus
    discriminant: float = 0.0


def flight_time_coefficients(displacement: np.ndarray, speed_mps: float,
                             accel: np.ndarray) -> Tuple[float, float, float]:
    """Coefficients of A*u**2 + B*u + C = 0 with u = T**2.

    Squaring |v0| = speed in dP = v0*T + 0.5*a*T**2 leaves
    0.25*|a|**2 * T**4 - (speed**2 + dP.a) * T**2 + |dP|**2 = 0.
    """
    quad_a = 0.25 * float(np.dot(accel, accel))
    quad_b = -(speed_mps * speed_mps + float(np.dot(displacement, accel)))
    quad_c = float(np.dot(displacement, displacement))
    return quad_a, quad_b, quad_c

def solve_flight_time(quad_a: float, quad_b: float, quad_c: float, t_est: float) -> FlightTimeResult:
    """Pick the flight time from the quadratic in T**2, falling back to t_est.

    With two positive roots the one nearer t_est wins; on a tie the +sqrt(D)
    root is kept.
    """
    if quad_a == 0.0:
        u = -quad_c / quad_b if quad_b != 0.0 else 0.0
        if u > 0.0 and math.isfinite(u):
            return FlightTimeResult(math.sqrt(u), SolveStatus.SOLVED)
        logger.debug("no linear flight time solution (B=%g, C=%g), using estimate %.4fs", quad_b, quad_c, t_est)
        return FlightTimeResult(t_est, SolveStatus.DEGENERATE)

    disc = quad_b * quad_b - 4.0 * quad_a * quad_c
    if not disc >= 0.0:
        logger.debug("unreachable target: discriminant %g < 0, using estimate %.4fs", disc, t_est)
        return FlightTimeResult(t_est, SolveStatus.UNREACHABLE, disc)

    # u1 is the +sqrt(D) root, u2 the -sqrt(D) root; the smaller-magnitude
    # one comes from C/q to avoid cancellation when |a| is small.
    root = math.sqrt(disc)
    if quad_b <= 0.0:
        q = 0.5 * (-quad_b + root)
        u1 = q / quad_a
        u2 = quad_c / q if q != 0.0 else 0.0
    else:
        q = -0.5 * (quad_b + root)
        u1 = quad_c / q
        u2 = q / quad_a
    t1 = math.sqrt(u1) if u1 > 0.0 and math.isfinite(u1) else None
    t2 = math.sqrt(u2) if u2 > 0.0 and math.isfinite(u2) else None

    if t1 is not None and t2 is not None:
        t = t1 if abs(t1 - t_est) <= abs(t2 - t_est) else t2
    elif t1 is not None:
        t = t1
    elif t2 is not None:
        t = t2
    else:
        logger.debug("no positive flight time root (u1=%g, u2=%g), using estimate %.4fs", u1, u2, t_est)
        return FlightTimeResult(t_est, SolveStatus.UNREACHABLE, disc)
    return FlightTimeResult(t, SolveStatus.SOLVED, disc)


class TrajectorySolver:
    """Finds the constant-acceleration path from the release point through a target.

    Accelerations come from the breaks spread over an estimated flight time;
    the exact flight time then follows from the launch speed.
    """

    def __init__(self, config: SolverConfig = DEFAULT_CONFIG):
        self.config = config
        self.release_point = as_vec3(config.release_point, "release_point")

    def solve(self, launch: LaunchParameters, target: Sequence[float]) -> TrajectorySolution:
        target_point = as_vec3(target, "target")
        displacement = target_point - self.release_point
        dist = math.hypot(*displacement)
        if not dist <= self.config.max_target_distance:
            raise ValueError(f"target is {dist:g} m from release, beyond {self.config.max_target_distance:g} m")
        speed = mph_to_mps(launch.speed_mph)

        t_est = estimate_flight_time(displacement, speed, self.config.fallback_time)
        accel = break_acceleration(inches_to_meters(launch.vertical_break_in),
                                   inches_to_meters(launch.horizontal_break_in),
                                   t_est, self.config.gravity)

        ft = solve_flight_time(*flight_time_coefficients(displacement, speed, accel), t_est)
        v0, exact = initial_velocity(displacement, accel, ft.flight_time, speed)
        status = ft.status
        flight_time = ft.flight_time
        if not exact:
            # solve_flight_time only hands back positive times; this covers a zero or negative one
            logger.debug("flight time %.4fs not positive, aiming straight at target", flight_time)
            status = SolveStatus.DEGENERATE
            flight_time = max(flight_time, 0.0)

        sol = TrajectorySolution(release_point=self.release_point, target_point=target_point,
                                 flight_time=flight_time, estimated_time=t_est,
                                 initial_velocity=v0, acceleration=accel, status=status)
        logger.debug("solved %s -> %s: T=%.4fs (est %.4fs) v0=%s a=%s",
                     launch.key(), tuple(target_point), flight_time, t_est,
                     np.round(v0, 3).tolist(), np.round(accel, 3).tolist())
        return sol
