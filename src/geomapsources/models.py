"""Typed result models for geomapsources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from geomapsources._format import format_number


@dataclass(frozen=True)
class ParsedCoordinate:
    """A position read from a coordinate parameter string."""

    params: str
    lat_deg: float
    lon_deg: float
    lat_min: Optional[float] = None   # only set for "A to B" ranges
    lat_max: Optional[float] = None
    lon_min: Optional[float] = None
    lon_max: Optional[float] = None
    # Tokens left after the coordinate; mined for attributes later
    remaining_tokens: tuple[str, ...] = ()
    # Coordinate tokens exactly as given; empty for ranges
    coordinate_literals: tuple[str, ...] = ()

    @property
    def is_range(self) -> bool:
        return self.lat_min is not None

    @property
    def position(self) -> str:
        """Composite ``lat;lon`` position."""
        return f"{format_number(self.lat_deg)};{format_number(self.lon_deg)}"

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        d = {
            "params": self.params,
            "lat_deg": self.lat_deg,
            "lon_deg": self.lon_deg,
            "coordinate_literals": list(self.coordinate_literals),
        }
        if self.is_range:
            d.update(
                lat_min=self.lat_min,
                lat_max=self.lat_max,
                lon_min=self.lon_min,
                lon_max=self.lon_max,
            )
        return d


@dataclass(frozen=True)
class MinSec:
    """Decimal degrees split into degrees, minutes, seconds and hemisphere."""

    deg: float      # rounded to 1e-6, keeps its sign
    min: float      # rounded to 1e-4
    sec: float      # rounded to 1e-2
    ns: str         # "N" or "S"
    ew: str         # "E" or "W"


@dataclass(frozen=True)
class ProjectionResult:
    """Northing/easting pair produced by one of the grid projections."""

    northing: float
    easting: float
    zone: str = ""              # UTM only
    grid_reference: str = ""    # OSGB36 only; empty outside the lettered grid
