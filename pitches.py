from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from models import LaunchParameters


@dataclass(frozen=True)
class PitchProfile:
    name: str
    speed_mph: float
    vertical_break_in: float
    horizontal_break_in: float

    def launch(self) -> LaunchParameters:
        return LaunchParameters(self.speed_mph, self.vertical_break_in, self.horizontal_break_in)


DEFAULT_PITCH = "four_seam"

# Horizontal break is positive to the catcher's right.
DEFAULT_PITCH_CATALOG: Dict[str, PitchProfile] = {
    "four_seam": PitchProfile(name="Four-seam fastball", speed_mph=95.0,
                              vertical_break_in=15.0, horizontal_break_in=8.0),
    "sinker": PitchProfile(name="Sinker", speed_mph=93.0,
                           vertical_break_in=8.0, horizontal_break_in=15.0),
    "changeup": PitchProfile(name="Changeup", speed_mph=86.0,
                             vertical_break_in=6.0, horizontal_break_in=14.0),
    "slider": PitchProfile(name="Slider", speed_mph=85.0,
                           vertical_break_in=2.0, horizontal_break_in=-5.0),
    "curveball": PitchProfile(name="Curveball", speed_mph=79.0,
                              vertical_break_in=-10.0, horizontal_break_in=-8.0),
}


def launch_for(pitch: str) -> LaunchParameters:
    key = (pitch or "").strip().lower().replace("-", "_")
    if key not in DEFAULT_PITCH_CATALOG:
        raise ValueError(f"unknown pitch {pitch!r}, expected one of {', '.join(DEFAULT_PITCH_CATALOG)}")
    return DEFAULT_PITCH_CATALOG[key].launch()
