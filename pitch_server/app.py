from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

import config
from ballistics import sample_path
from config import DEFAULT_CONFIG, default_target
from models import LaunchParameters, TrajectorySolution
from pitches import DEFAULT_PITCH_CATALOG
from solution_cache import SolutionCache
from solver import TrajectorySolver

logger = logging.getLogger(__name__)

app = FastAPI(title="Pitch Trajectory Server")


@app.get("/api/ping")
def api_ping():
    return {"ok": True}


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

CACHE = SolutionCache(TrajectorySolver(DEFAULT_CONFIG))


def configure(cfg: config.SolverConfig):
    """Swap in a new solver config; the old cache is dropped, not edited."""
    global CACHE
    CACHE = SolutionCache(TrajectorySolver(cfg))
    logger.info("solver configured: %s", cfg.to_dict())


class LaunchIn(BaseModel):
    speed_mph: float = Field(gt=0)
    vertical_break_in: float = 0.0
    horizontal_break_in: float = 0.0
    target_x_m: Optional[float] = None
    target_y_m: Optional[float] = None
    target_z_m: Optional[float] = None

    def launch(self) -> LaunchParameters:
        return LaunchParameters(self.speed_mph, self.vertical_break_in, self.horizontal_break_in)

    def target(self):
        dx, dy, dz = default_target()
        return (dx if self.target_x_m is None else self.target_x_m,
                dy if self.target_y_m is None else self.target_y_m,
                dz if self.target_z_m is None else self.target_z_m)

class SolveIn(LaunchIn):
    samples: int = Field(default=0, ge=0, le=2000)

class PositionIn(LaunchIn):
    times: List[float] = Field(default_factory=list, max_length=2000)


def _solution_payload(sol: TrajectorySolution) -> dict:
    return {
        "status": sol.status.value,
        "reachable": sol.reachable,
        "flight_time": sol.flight_time,
        "estimated_time": sol.estimated_time,
        "release_point": sol.release_point.tolist(),
        "target_point": sol.target_point.tolist(),
        "initial_velocity": sol.initial_velocity.tolist(),
        "acceleration": sol.acceleration.tolist(),
        "speed_mps": sol.speed_mps,
        "end_point": sol.end_point.tolist(),
        "miss_m": sol.miss.tolist(),
    }


def _solve(data: LaunchIn) -> TrajectorySolution:
    try:
        return CACHE.solve(data.launch(), data.target())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.get("/api/config")
def api_config():
    cfg = CACHE.solver.config
    return {
        "ok": True,
        **cfg.to_dict(),
        "default_target": list(default_target()),
        "strike_zone": {
            "width_m": config.STRIKE_ZONE_WIDTH_M,
            "bottom_m": config.STRIKE_ZONE_BOTTOM_M,
            "top_m": config.STRIKE_ZONE_TOP_M,
        },
        "plate": {
            "width_m": config.PLATE_WIDTH_M,
            "depth_m": config.PLATE_TOTAL_DEPTH_M,
            "back_z_m": config.PLATE_BACK_Z_M,
        },
    }

@app.get("/api/pitches")
def api_pitches():
    return {"ok": True, "pitches": {k: {"name": p.name, "speed_mph": p.speed_mph,
                                        "vertical_break_in": p.vertical_break_in,
                                        "horizontal_break_in": p.horizontal_break_in}
                                    for k, p in DEFAULT_PITCH_CATALOG.items()}}

@app.post("/api/solve")
def api_solve(data: SolveIn):
    sol = _solve(data)
    out = {"ok": True, **_solution_payload(sol)}
    if data.samples:
        out["path"] = sample_path(sol, data.samples).points().tolist()
    return out

@app.post("/api/position")
def api_position(data: PositionIn):
    sol = _solve(data)
    return {"ok": True, "flight_time": sol.flight_time, "reachable": sol.reachable,
            "positions": [sol.position_at(t).tolist() for t in data.times]}
