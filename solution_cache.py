import logging
from typing import Optional, Sequence, Tuple

from models import LaunchParameters, TrajectorySolution
from solver import TrajectorySolver

logger = logging.getLogger(__name__)

CacheKey = Tuple[float, float, float, float, float, float]


def cache_key(launch: LaunchParameters, target: Sequence[float]) -> CacheKey:
    tx, ty, tz = (float(c) for c in target)
    return (*launch.key(), tx, ty, tz)


class SolutionCache:
    """Keeps the solution for the latest six-scalar input.

    A changed input builds a fresh solution and swaps the stored (key, solution)
    pair in one assignment, so readers holding the old solution are unaffected.
    """

    def __init__(self, solver: Optional[TrajectorySolver] = None):
        self.solver = solver if solver is not None else TrajectorySolver()
        self._entry: Optional[Tuple[CacheKey, TrajectorySolution]] = None
        self.hits = 0
        self.misses = 0

    @property
    def current(self) -> Optional[TrajectorySolution]:
        entry = self._entry
        return entry[1] if entry is not None else None

    def solve(self, launch: LaunchParameters, target: Sequence[float]) -> TrajectorySolution:
        key = cache_key(launch, target)
        entry = self._entry
        if entry is not None and entry[0] == key:
            self.hits += 1
            return entry[1]
        self.misses += 1
        logger.debug("recalculating trajectory for %s", key)
        sol = self.solver.solve(launch, target)
        self._entry = (key, sol)
        return sol

    def clear(self):
        self._entry = None
