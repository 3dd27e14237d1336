"""Degree/minute/second breakdown and the coordinate placeholder values."""

from __future__ import annotations

import math
from dataclasses import dataclass

from geomapsources._format import format_number, round_half_away
from geomapsources.models import MinSec
from geomapsources.tokens import Placeholder as P
from geomapsources.tokens import TokenMap


def _round_to(value: float, factor: float) -> float:
    return round_half_away(value * factor) / factor


def make_minsec(deg: float) -> MinSec:
    """
    Split decimal degrees into degrees, minutes and seconds.

    Degrees are rounded to 1e-6, minutes to 1e-4 and seconds to 1e-2.
    The hemisphere follows the sign of the unrounded input.
    """
    ns, ew = ("N", "E") if deg >= 0 else ("S", "W")

    deg_rounded = _round_to(deg, 1_000_000.0)
    deg_abs = abs(deg_rounded)
    minutes = _round_to(60.0 * (deg_abs - math.floor(deg_abs)), 10_000.0)
    seconds = _round_to(60.0 * (minutes - math.floor(minutes)), 100.0)

    return MinSec(deg=deg_rounded, min=minutes, sec=seconds, ns=ns, ew=ew)


def _signed_int_str(value: float, original: float) -> str:
    # -0.3 degrees truncates to 0; keep the sign so it reads as south/west
    if original < 0 and int(value) == 0:
        return "-0"
    return format_number(float(int(value)))


def antipodal_longitude(lon: float) -> float:
    return lon - 180.0 if lon > 0 else lon + 180.0


@dataclass(frozen=True)
class CoordinateGroup:
    """Display values derived from one decimal-degree position."""

    lat: MinSec
    lon: MinSec
    latdegint: str
    londegint: str
    latdeground: str
    londeground: str
    latdeg_outer_abs: int
    londeg_outer_abs: int
    longantipodes: float

    @classmethod
    def from_degrees(cls, lat_deg: float, lon_deg: float) -> CoordinateGroup:
        lat = make_minsec(lat_deg)
        lon = make_minsec(lon_deg)
        return cls(
            lat=lat,
            lon=lon,
            latdegint=_signed_int_str(lat.deg, lat_deg),
            londegint=_signed_int_str(lon.deg, lon_deg),
            latdeground=_signed_int_str(round_half_away(lat.deg), lat_deg),
            londeground=_signed_int_str(round_half_away(lon.deg), lon_deg),
            latdeg_outer_abs=math.ceil(abs(lat.deg)),
            londeg_outer_abs=math.ceil(abs(lon.deg)),
            longantipodes=antipodal_longitude(lon.deg),
        )

    def tokens(self) -> TokenMap:
        lat, lon = self.lat, self.lon
        values = {
            P.LATDEGDEC: lat.deg,
            P.LONDEGDEC: lon.deg,
            P.LATDEGDECABS: abs(lat.deg),
            P.LONDEGDECABS: abs(lon.deg),
            P.LATDEGROUND: self.latdeground,
            P.LONDEGROUND: self.londeground,
            P.LATDEGROUNDABS: abs(round_half_away(lat.deg)),
            P.LONDEGROUNDABS: abs(round_half_away(lon.deg)),
            P.LATDEG_OUTER_ABS: self.latdeg_outer_abs,
            P.LONDEG_OUTER_ABS: self.londeg_outer_abs,
            P.LATANTIPODES: -lat.deg,
            P.LONGANTIPODES: self.longantipodes,
            P.LONDEGNEG: -lon.deg,
            P.LATDEGINT: self.latdegint,
            P.LONDEGINT: self.londegint,
            P.LATDEGABS: int(abs(lat.deg)),
            P.LONDEGABS: int(abs(lon.deg)),
            P.LATMINDEC: lat.min,
            P.LONMINDEC: lon.min,
            P.LATMININT: int(lat.min),
            P.LONMININT: int(lon.min),
            P.LATSECDEC: lat.sec,
            P.LONSECDEC: lon.sec,
            P.LATSECINT: int(lat.sec),
            P.LONSECINT: int(lon.sec),
            P.LATNS: lat.ns,
            P.LONEW: lon.ew,
        }
        return {key: format_number(value) for key, value in values.items()}
