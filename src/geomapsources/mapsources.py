"""MapSources: turns a coordinate parameter string into template text."""

from __future__ import annotations

import html
from typing import Optional
from urllib.parse import quote

from geomapsources._format import format_number, round_half_away
from geomapsources.coordinates import CoordinateGroup
from geomapsources.geoparam import extract_attributes, parse
from geomapsources.models import ParsedCoordinate
from geomapsources.projection import ch1903, osgb36, utm, utm_in_zone
from geomapsources.scale import MiscMapSourceValues
from geomapsources.substitution import substitute
from geomapsources.tokens import Placeholder as P
from geomapsources.tokens import TokenMap

# Fixed zone used by the iNatur links
_FIXED_UTM_ZONE = "33V"


def _rounded(value: Optional[float]) -> str:
    if value is None:
        return ""
    return format_number(round_half_away(value))


def projection_tokens(lat: float, lon: float) -> TokenMap:
    """Grid coordinates for every supported system; empty where undefined."""
    own = utm(lat, lon)
    fixed = utm_in_zone(lat, lon, _FIXED_UTM_ZONE)
    uk = osgb36(lat, lon)
    swiss = ch1903(lat, lon)
    return {
        P.UTMZONE: own.zone if own else "",
        P.UTMNORTHING: _rounded(own.northing if own else None),
        P.UTMEASTING: _rounded(own.easting if own else None),
        P.UTM33NORTHING: _rounded(fixed.northing if fixed else None),
        P.UTM33EASTING: _rounded(fixed.easting if fixed else None),
        P.OSGB36REF: uk.grid_reference if uk else "",
        P.OSGB36NORTHING: _rounded(uk.northing if uk else None),
        P.OSGB36EASTING: _rounded(uk.easting if uk else None),
        P.CH1903NORTHING: _rounded(swiss.northing if swiss else None),
        P.CH1903EASTING: _rounded(swiss.easting if swiss else None),
    }


def gmaps_pagename(pagename: str) -> str:
    """Page name as Google Maps expects it inside an already-encoded query."""
    once = quote(pagename, safe="").replace("%20", "+")
    return quote(once, safe="")


def derive_tokens(
    parsed: ParsedCoordinate,
    page_name: str = "",
    page_title: str = "",
    params: Optional[str] = None,
    language: str = "en",
) -> TokenMap:
    """
    Build the full placeholder map for a parsed coordinate.

    Blocks are merged in a fixed order: coordinate values, projections,
    scale and page values, then the request values.
    """
    attributes = extract_attributes(parsed)
    misc = MiscMapSourceValues.from_attributes(
        attributes,
        literal_count=len(parsed.coordinate_literals),
        pagename=page_name,
        title=page_title,
    )

    tokens: TokenMap = {}
    tokens.update(CoordinateGroup.from_degrees(parsed.lat_deg, parsed.lon_deg).tokens())
    tokens.update(projection_tokens(parsed.lat_deg, parsed.lon_deg))
    tokens.update(misc.tokens())
    tokens[P.PARAMS] = html.escape(
        parsed.params if params is None else params, quote=False
    )
    tokens[P.LANGUAGE] = html.escape(language, quote=False)
    tokens[P.PAGENAME_GMAPS] = gmaps_pagename(page_name)
    return tokens


class MapSources:
    """
    Map-link values for one coordinate parameter string.

    Parses on construction, so invalid parameters raise straight away
    (NoCoordinatesProvided, UnrecognizedFormat or OutOfRange).
    """

    def __init__(self, params: str, language: str = "en"):
        self.params = params
        self.language = language
        self.parsed = parse(params)
        self.attributes = extract_attributes(self.parsed)

    # ── Public API ────────────────────────────────────────────────

    @property
    def globe(self) -> str:
        return self.attributes.get("globe", "").lower()

    def tokens(self, pagename: str = "", title: str = "") -> TokenMap:
        return derive_tokens(
            self.parsed, pagename, title, params=self.params, language=self.language
        )

    def render(self, template_text: str, pagename: str = "", title: str = "") -> str:
        """Fill every placeholder in *template_text*."""
        return substitute(template_text, self.tokens(pagename, title))
