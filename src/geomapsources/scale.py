"""
Map scale resolution and the per-provider values derived from it.

A scale is the denominator of the representative fraction, so 100000
means 1:100 000. Zoom levels, Google Earth altitude, span and the
Multimap scale are all approximations computed from it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Mapping, Optional
from urllib.parse import quote

from geomapsources._format import format_number, round_half_away
from geomapsources.tokens import Placeholder as P
from geomapsources.tokens import TokenMap

DEFAULT_SCALE = 300_000

# Default scale by object type
DEFAULT_SCALES: Mapping[str, int] = {
    "country": 10_000_000,
    "satellite": 10_000_000,
    "state": 3_000_000,
    "adm1st": 1_000_000,
    "adm2nd": 300_000,
    "adm3rd": 100_000,
    "city": 100_000,
    "isle": 100_000,
    "mountain": 100_000,
    "river": 100_000,
    "waterbody": 100_000,
    "event": 50_000,
    "forest": 50_000,
    "glacier": 50_000,
    "airport": 30_000,
    "railwaystation": 10_000,
    "edu": 10_000,
    "pass": 10_000,
    "camera": 10_000,
    "landmark": 10_000,
}

# (threshold, multimap scale), largest first
MMSCALE_THRESHOLDS: tuple[tuple[int, int], ...] = (
    (30_000_000, 40_000_000),
    (14_000_000, 20_000_000),
    (6_300_000, 10_000_000),
    (2_800_000, 4_000_000),
    (1_400_000, 2_000_000),
    (700_000, 1_000_000),
    (310_000, 500_000),
    (140_000, 200_000),
    (70_000, 100_000),
    (35_000, 50_000),
    (15_000, 25_000),
    (7_000, 10_000),
)
MMSCALE_MIN = 5_000

# Viewport assumed to be 10 cm across
_VIEWPORT_METRES = 0.1

# Larger scales overflow the altitude and zoom arithmetic
MAX_SCALE = 1e12


def _positive(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def _usable(scale: Optional[float]) -> Optional[float]:
    if scale is None or not math.isfinite(scale) or not 0 < scale <= MAX_SCALE:
        return None
    return scale


def scale_from_dim(dim: str) -> Optional[float]:
    """Scale that fits an object *dim* across (``"10km"``, ``"500m"``, ``"800"``)."""
    dim = dim.strip().lower()
    factor = 1.0
    if dim.endswith("km"):
        dim, factor = dim[:-2], 1000.0
    elif dim.endswith("m"):
        dim = dim[:-1]
    metres = _positive(dim)
    if metres is None:
        return None
    return _usable(metres * factor / _VIEWPORT_METRES)


def scale_from_zoom(zoom: str) -> Optional[float]:
    """Scale for the legacy nlwiki ``zoom:`` attribute."""
    try:
        level = float(zoom)
    except ValueError:
        return None
    if not math.isfinite(level):
        return None
    try:
        scale = 2.0 ** (12.0 - level) * 100000.0
    except OverflowError:
        return None
    return _usable(scale)


def scale_from_precision(literal_count: int) -> int:
    """Guess a scale from how many coordinate tokens were written."""
    if literal_count == 8:
        return 10_000
    if literal_count == 6:
        return 100_000
    return DEFAULT_SCALE


def resolve_scale(attributes: Mapping[str, str], literal_count: int = 0) -> float:
    """
    Pick the map scale for a set of attributes.

    The first of these that yields a positive value no larger than
    MAX_SCALE wins: ``scale``, ``dim``, ``zoom``, ``default``, the
    default for ``type``, and finally a guess from the coordinate
    precision.
    """
    scale = _usable(_positive(attributes.get("scale")))
    if scale is not None:
        return scale
    if "dim" in attributes:
        scale = scale_from_dim(attributes["dim"])
        if scale is not None:
            return scale
    if "zoom" in attributes:
        scale = scale_from_zoom(attributes["zoom"])
        if scale is not None:
            return scale
    scale = _usable(_positive(attributes.get("default")))
    if scale is not None:
        return scale
    by_type = DEFAULT_SCALES.get(attributes.get("type", ""))
    if by_type is not None:
        return float(by_type)
    return float(scale_from_precision(literal_count))


def get_mmscale(scale: float) -> int:
    for threshold, mmscale in MMSCALE_THRESHOLDS:
        if scale >= threshold:
            return mmscale
    return MMSCALE_MIN


def get_altitude(scale: float) -> int:
    """Google Earth eye altitude in km."""
    return max(1, int(round_half_away(scale * 143.0 / 1_000_000.0)))


def get_span(scale: float) -> float:
    return scale / 1_000_000.0


def get_zoom(scale: float) -> int:
    if scale <= 0:
        return 9
    return min(9, max(0, math.floor(18.0 - math.log(scale))))


def get_osmzoom(scale: float) -> int:
    """OpenStreetMap zoom level; 1:1693 is zoom 18."""
    if scale <= 0:
        return 12
    zoom = 18 - int(round_half_away(math.log2(scale) - math.log2(1693)))
    return min(18, max(0, zoom))


def geocountry(attributes: Mapping[str, str]) -> str:
    """``/XX`` country suffix, unless a subpage or globe was asked for."""
    if "page" in attributes or "globe" in attributes:
        return ""
    region = attributes.get("region", "")
    if not region:
        return ""
    return "/" + region[:2].upper()


def first_level_region(region: str) -> str:
    """Characters 4 to 12 of *region*, upper-cased: ``US-NY-NYC`` -> ``Y-NYC``."""
    if len(region) < 4:
        return ""
    return region[4:12].upper()


@dataclass(frozen=True)
class MiscMapSourceValues:
    """Scale-dependent values plus the page and attribute placeholders."""

    scale: float = float(DEFAULT_SCALE)
    pagename: str = ""
    title: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_attributes(
        cls,
        attributes: Mapping[str, str],
        literal_count: int = 0,
        pagename: str = "",
        title: str = "",
    ) -> MiscMapSourceValues:
        return cls(
            scale=resolve_scale(attributes, literal_count),
            pagename=pagename,
            title=title,
            attributes=dict(attributes),
        )

    @property
    def mmscale(self) -> int:
        return get_mmscale(self.scale)

    @property
    def altitude(self) -> int:
        return get_altitude(self.scale)

    @property
    def span(self) -> float:
        return get_span(self.scale)

    @property
    def zoom(self) -> int:
        return get_zoom(self.scale)

    @property
    def osmzoom(self) -> int:
        return get_osmzoom(self.scale)

    def tokens(self) -> TokenMap:
        attr = self.attributes
        return {
            P.SCALE: format_number(self.scale),
            P.MMSCALE: str(self.mmscale),
            P.ALTITUDE: str(self.altitude),
            P.ZOOM: str(self.zoom),
            P.OSMZOOM: str(self.osmzoom),
            P.SPAN: format_number(self.span),
            P.TYPE: attr.get("type", ""),
            P.REGION: attr.get("region", ""),
            P.GLOBE: attr.get("globe", ""),
            P.PAGE: attr.get("page", ""),
            P.PAGENAME: self.pagename,
            P.TITLE: self.title,
            P.PAGENAMEE: quote(self.pagename, safe=""),
            P.TITLEE: quote(self.title, safe=""),
            P.GEOCOUNTRY: geocountry(attr),
            P.GEOA1: first_level_region(attr.get("region", "")),
        }
