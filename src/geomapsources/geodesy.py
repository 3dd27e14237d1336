"""Ellipsoid constants and the series formulas shared by the projections."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Ellipsoid:
    """Reference ellipsoid given by its semi-major axis and eccentricity."""

    name: str
    radius: float           # semi-major axis a, metres
    eccentricity: float     # square of the first eccentricity, e^2

    @property
    def second_eccentricity(self) -> float:
        """Square of the second eccentricity, e'^2 = e^2 / (1 - e^2)."""
        return self.eccentricity / (1.0 - self.eccentricity)


# Inverse flattening 298.2572236
WGS84 = Ellipsoid("WGS-84", 6378137.0, 0.006694379990)
# Inverse flattening 299.3249647
AIRY_1830 = Ellipsoid("Airy 1830", 6377563.396, 0.00667054)


def deg2rad(deg: float) -> float:
    return (math.pi / 180.0) * deg


def normalize_longitude(longitude: float) -> float:
    """Fold *longitude* into the half-open interval [-180, 180)."""
    return longitude - math.floor((longitude + 180.0) / 360.0) * 360.0


def meridional_arc(lat_rad: float, ellipsoid: Ellipsoid) -> float:
    """
    Distance along the meridian from the equator to *lat_rad*.

    Four-term series in the squared eccentricity, accurate to well under
    a millimetre for the ellipsoids used here.
    """
    e = ellipsoid.eccentricity
    e2 = e * e
    e3 = e2 * e
    return ellipsoid.radius * (
        (1.0 - e / 4.0 - 3.0 * e2 / 64.0 - 5.0 * e3 / 256.0) * lat_rad
        - (3.0 * e / 8.0 + 3.0 * e2 / 32.0 + 45.0 * e3 / 1024.0)
        * math.sin(2.0 * lat_rad)
        + (15.0 * e2 / 256.0 + 45.0 * e3 / 1024.0) * math.sin(4.0 * lat_rad)
        - (35.0 * e3 / 3072.0) * math.sin(6.0 * lat_rad)
    )
