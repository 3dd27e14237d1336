"""
Latitude/longitude to Transverse Mercator grid coordinates.

One generic projector, parameterised by ellipsoid, scale factor and
false origin, serves the UTM zones and the British National Grid
(OSGB36). The Swiss grid (CH1903) uses swisstopo's published
polynomial approximation instead of the series.

Every projection returns ``None`` when the point lies outside the
domain where the grid is defined.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from geomapsources.geodesy import (
    AIRY_1830,
    WGS84,
    Ellipsoid,
    deg2rad,
    meridional_arc,
    normalize_longitude,
)
from geomapsources.models import ProjectionResult

# Latitude bands C..X without I and O; the ends are repeated so that
# (lat + 96) // 8 indexes safely from -96 up to 96.
_UTM_ZONE_LETTERS = "CCCDEFGHJKLMNPQRSTUVWXXX"

# 25 letters, I left out
_OSGB36_LETTERS = "ABCDEFGHJKLMNOPQRSTUVWXYZ"


@dataclass(frozen=True)
class TransverseMercator:
    """Projection parameters for one Transverse Mercator grid."""

    ellipsoid: Ellipsoid = WGS84
    scale: float = 0.9996
    easting_offset: float = 500000.0
    northing_offset: float = 0.0
    northing_offset_south: float = 10000000.0

    def project(
        self,
        latitude: float,
        longitude: float,
        latitude_origin: float = 0.0,
        longitude_origin: float = 0.0,
    ) -> Optional[ProjectionResult]:
        """
        Project a point in decimal degrees relative to the given origin.

        Returns None outside longitude -180..180 and latitude -80..84.
        """
        if not (-180.0 <= longitude <= 180.0) or not (-80.0 <= latitude <= 84.0):
            return None

        lat_rad = deg2rad(latitude)
        e = self.ellipsoid.eccentricity
        e_prime_sq = self.ellipsoid.second_eccentricity

        sin_lat = math.sin(lat_rad)
        cos_lat = math.cos(lat_rad)
        tan_lat = math.tan(lat_rad)

        v = self.ellipsoid.radius / math.sqrt(1.0 - e * sin_lat * sin_lat)
        t = tan_lat * tan_lat
        c = e_prime_sq * cos_lat * cos_lat
        a = deg2rad(normalize_longitude(longitude) - longitude_origin) * cos_lat
        m = meridional_arc(lat_rad, self.ellipsoid)
        m0 = (
            meridional_arc(deg2rad(latitude_origin), self.ellipsoid)
            if latitude_origin != 0.0
            else 0.0
        )

        northing = self.northing_offset + self.scale * (
            (m - m0)
            + v * tan_lat * (
                a * a / 2.0
                + (5.0 - t + 9.0 * c + 4.0 * c * c) * a ** 4 / 24.0
                + (61.0 - 58.0 * t + t * t + 600.0 * c - 330.0 * e_prime_sq)
                * a ** 6 / 720.0
            )
        )
        easting = self.easting_offset + self.scale * v * (
            a
            + (1.0 - t + c) * a ** 3 / 6.0
            + (5.0 - 18.0 * t + t * t + 72.0 * c - 58.0 * e_prime_sq)
            * a ** 5 / 120.0
        )

        if latitude < 0.0:
            northing += self.northing_offset_south

        return ProjectionResult(northing=northing, easting=easting)


UTM = TransverseMercator()

OSGB36 = TransverseMercator(
    ellipsoid=AIRY_1830,
    scale=0.9996013,
    easting_offset=400000.0,
    northing_offset=-100000.0,
    northing_offset_south=0.0,
)
# True origin of the National Grid: 49N 2W
OSGB36_ORIGIN = (49.0, -2.0)


# ── UTM ───────────────────────────────────────────────────────

def compute_utm_zone(latitude: float, longitude: float) -> str:
    """
    Return the UTM zone label, e.g. ``"18T"``, for a point.

    Handles the Norway (32V) and Svalbard (31X/33X/35X/37X) exceptions.
    """
    lon = normalize_longitude(longitude)

    if 56.0 <= latitude < 64.0 and 3.0 <= lon < 12.0:
        zone = 32
    elif 72.0 <= latitude < 84.0 and 0.0 <= lon < 42.0:
        if lon < 9.0:
            zone = 31
        elif lon < 21.0:
            zone = 33
        elif lon < 33.0:
            zone = 35
        else:
            zone = 37
    else:
        zone = int((lon + 180.0) / 6.0) + 1

    index = int((latitude + 96.0) / 8.0)
    if 0 <= index < len(_UTM_ZONE_LETTERS):
        letter = _UTM_ZONE_LETTERS[index]
    else:
        letter = "X"
    return f"{zone}{letter}"


def utm_zone_origin(zone: str) -> float:
    """Central meridian of the numbered zone at the start of *zone*."""
    digits = ""
    for ch in zone:
        if not ch.isdigit():
            break
        digits += ch
    number = int(digits) if digits else 1
    return (number - 1) * 6.0 - 180.0 + 3.0


def utm_in_zone(
    latitude: float, longitude: float, zone: str
) -> Optional[ProjectionResult]:
    """Project into a fixed UTM *zone*, whichever zone the point lies in."""
    result = UTM.project(latitude, longitude, 0.0, utm_zone_origin(zone))
    if result is None:
        return None
    return ProjectionResult(result.northing, result.easting, zone=zone)


def utm(latitude: float, longitude: float) -> Optional[ProjectionResult]:
    """Project into the point's own UTM zone."""
    return utm_in_zone(latitude, longitude, compute_utm_zone(latitude, longitude))


# ── OSGB36 ────────────────────────────────────────────────────

def osgb36_grid_reference(easting: float, northing: float) -> str:
    """
    Two-letter National Grid reference with 1 m resolution, e.g.
    ``TQ3007880523``. Empty when the point is off the lettered grid.
    """
    grid_x = math.floor(easting / 100000.0)
    grid_y = math.floor(northing / 100000.0)
    if not (0 <= grid_x <= 6) or not (0 <= grid_y <= 12):
        return ""

    c1 = _OSGB36_LETTERS[17 - (grid_y // 5) * 5 + grid_x // 5]
    c2 = _OSGB36_LETTERS[20 - (grid_y % 5) * 5 + grid_x % 5]
    e = int(easting) % 100000
    n = int(northing) % 100000
    return f"{c1}{c2}{e:05d}{n:05d}"


def osgb36(latitude: float, longitude: float) -> Optional[ProjectionResult]:
    """
    Project onto the Ordnance Survey National Grid.

    The result carries an empty grid reference when the point projects
    but falls outside the 700 km x 1300 km lettered area.
    """
    result = OSGB36.project(latitude, longitude, *OSGB36_ORIGIN)
    if result is None:
        return None
    return ProjectionResult(
        result.northing,
        result.easting,
        grid_reference=osgb36_grid_reference(result.easting, result.northing),
    )


# ── CH1903 ────────────────────────────────────────────────────

def ch1903(latitude: float, longitude: float) -> Optional[ProjectionResult]:
    """
    Swiss grid coordinates by swisstopo's approximation formulas.

    Only defined for latitude 45.5..48 and longitude 5..11.
    """
    if not (45.5 <= latitude <= 48.0) or not (5.0 <= longitude <= 11.0):
        return None

    # Arc seconds relative to the old Bern observatory
    pp = (latitude * 3600.0 - 169028.66) / 10000.0
    lp = (longitude * 3600.0 - 26782.5) / 10000.0

    northing = (
        200147.07
        + 308807.95 * pp
        + 3745.25 * lp * lp
        + 76.63 * pp * pp
        - 194.56 * lp * lp * pp
        + 119.79 * pp * pp * pp
    )
    easting = (
        600072.37
        + 211455.93 * lp
        - 10938.51 * lp * pp
        - 0.36 * lp * pp * pp
        - 44.54 * lp * lp * lp
    )
    return ProjectionResult(northing=northing, easting=easting)
