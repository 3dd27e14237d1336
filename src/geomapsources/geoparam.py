"""
Coordinate parameter parsing.

Reads the ``params`` string that wiki coordinate templates pass along,
e.g. ``51_30_26_N_0_7_39_W_region:GB_type:city(7556900)``: a position
in one of four layouts (optionally a range ``A to B``) followed by
``key:value`` attributes.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple, Optional, Sequence

from geomapsources._format import format_number
from geomapsources.coordinates import make_minsec
from geomapsources.exceptions import (
    CoordinateParseError,
    NoCoordinatesProvided,
    OutOfRange,
    UnrecognizedFormat,
)
from geomapsources.models import ParsedCoordinate

logger = logging.getLogger(__name__)

_NBSP = "\u00a0"


class _Coordinate(NamedTuple):
    lat: float
    lon: float
    literals: tuple[str, ...]
    end: int    # index of the first token after this coordinate


def tokenize(raw: str) -> tuple[str, ...]:
    """
    Split a parameter string into tokens.

    Underscores act as spaces. A standalone ``O`` (Ost/Oest) means east;
    the rule is applied to whole tokens only so that attribute values
    such as ``region:JO`` or ``region:CA-ON`` survive intact.
    """
    tokens = []
    for tok in raw.replace("_", " ").split():
        tokens.append("E" if tok in ("O", "o") else tok)
    return tuple(tokens)


def _is_direction_pair(ns: str, ew: str) -> bool:
    return ns.upper() in ("N", "S") and ew.upper() in ("E", "W")


def _number(raw: str, params: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise UnrecognizedFormat(params) from None
    if not math.isfinite(value):
        raise UnrecognizedFormat(params)
    return value


def _to_decimal(deg: float, minutes: float, seconds: float, direction: str) -> float:
    # Minutes move the value away from zero whichever sign deg carries
    value = deg + math.copysign((minutes + seconds / 60.0) / 60.0, deg)
    if direction.upper() in ("S", "W"):
        value = -value
    return value


def _read_coordinate(
    tokens: Sequence[str], pos: int, params: str
) -> _Coordinate:
    """Recognise one coordinate starting at *pos*."""
    rest = tokens[pos:]
    if not rest:
        raise NoCoordinatesProvided(params)

    lat_min = lon_min = lat_sec = lon_sec = 0.0
    lat_ns, lon_ew = "N", "E"

    if ";" in rest[0]:
        lat_raw, lon_raw = rest[0].split(";", 1)
        lat = _number(lat_raw, params)
        lon = _number(lon_raw, params)
        width = 1
        literals = (lat_raw, lon_raw)
    elif len(rest) >= 4 and _is_direction_pair(rest[1], rest[3]):
        width = 4
        literals = tuple(rest[:4])
        lat, lon = _number(rest[0], params), _number(rest[2], params)
        lat_ns, lon_ew = rest[1], rest[3]
    elif len(rest) >= 6 and _is_direction_pair(rest[2], rest[5]):
        width = 6
        literals = tuple(rest[:6])
        lat, lat_min = _number(rest[0], params), _number(rest[1], params)
        lon, lon_min = _number(rest[3], params), _number(rest[4], params)
        lat_ns, lon_ew = rest[2], rest[5]
    elif len(rest) >= 8 and _is_direction_pair(rest[3], rest[7]):
        width = 8
        literals = tuple(rest[:8])
        lat, lat_min, lat_sec = (_number(t, params) for t in rest[0:3])
        lon, lon_min, lon_sec = (_number(t, params) for t in rest[4:7])
        lat_ns, lon_ew = rest[3], rest[7]
    else:
        raise UnrecognizedFormat(params)

    if (
        not -90.0 <= lat <= 90.0
        or not -360.0 <= lon <= 360.0
        or not all(0.0 <= v <= 60.0 for v in (lat_min, lon_min, lat_sec, lon_sec))
    ):
        raise OutOfRange(params)

    lat_deg = _to_decimal(lat, lat_min, lat_sec, lat_ns)
    lon_deg = _to_decimal(lon, lon_min, lon_sec, lon_ew)
    # Minutes and seconds can push 90 N or 360 E past the limit
    if abs(lat_deg) > 90.0 or abs(lon_deg) > 360.0:
        raise OutOfRange(params)

    return _Coordinate(lat=lat_deg, lon=lon_deg, literals=literals, end=pos + width)


def parse(raw: str) -> ParsedCoordinate:
    """
    Parse a coordinate parameter string.

    Raises NoCoordinatesProvided, UnrecognizedFormat or OutOfRange.
    """
    tokens = tokenize(raw)
    try:
        first = _read_coordinate(tokens, 0, raw)
        if first.end < len(tokens) and tokens[first.end] == "to":
            second = _read_coordinate(tokens, first.end + 1, raw)
        else:
            second = None
    except CoordinateParseError as exc:
        logger.debug("Could not parse coordinates %r: %s", raw, exc)
        raise

    if second is None:
        return ParsedCoordinate(
            params=raw,
            lat_deg=first.lat,
            lon_deg=first.lon,
            remaining_tokens=tokens[first.end:],
            coordinate_literals=first.literals,
        )

    lat_min, lat_max = sorted((first.lat, second.lat))
    lon_min, lon_max = sorted((first.lon, second.lon))
    return ParsedCoordinate(
        params=raw,
        lat_deg=(lat_min + lat_max) / 2.0,
        lon_deg=(lon_min + lon_max) / 2.0,
        lat_min=lat_min,
        lat_max=lat_max,
        lon_min=lon_min,
        lon_max=lon_max,
        remaining_tokens=tokens[second.end:],
    )


def _positive_int(token: str) -> Optional[int]:
    if not (token.isascii() and token.isdigit()):
        return None
    value = int(token)
    return value if value > 0 else None


def extract_attributes(parsed: ParsedCoordinate) -> dict[str, str]:
    """
    Collect the ``key:value`` attributes that follow the coordinate.

    Tokens are read from the last one backwards, and a later token
    overwrites what an earlier one set, so for a repeated key the
    leftmost occurrence ends up in the map. ``key:value(arg)`` also
    records ``arg:key``. A bare positive integer becomes ``scale``
    unless a scale has already been seen.
    """
    attributes: dict[str, str] = {}
    for token in reversed(parsed.remaining_tokens):
        i = token.find(":")
        if i >= 1:
            name, value = token[:i], token[i + 1:]
            j, k = value.find("("), value.find(")")
            if j >= 0 and k > j:
                attributes[f"arg:{name}"] = value[j + 1:k]
                value = value[:j]
            attributes[name] = value
        elif i < 0:
            scale = _positive_int(token)
            if scale is not None and "scale" not in attributes:
                attributes["scale"] = str(scale)
    return attributes


def make_position(lat: float, lon: float) -> str:
    """
    Render a position as ``51° 30′ 26″ N 0° 7′ 39″ W``.

    Minutes and seconds are dropped when they are zero on both axes.
    """
    lat_dms = make_minsec(lat)
    lon_dms = make_minsec(lon)

    out_lat = f"{int(abs(lat_dms.deg))}°{_NBSP}"
    out_lon = f"{int(abs(lon_dms.deg))}°{_NBSP}"

    if lat_dms.min or lon_dms.min or lat_dms.sec or lon_dms.sec:
        out_lat += f"{int(lat_dms.min)}′{_NBSP}"
        out_lon += f"{int(lon_dms.min)}′{_NBSP}"
        if lat_dms.sec or lon_dms.sec:
            out_lat += f"{format_number(lat_dms.sec)}″{_NBSP}"
            out_lon += f"{format_number(lon_dms.sec)}″{_NBSP}"

    return f"{out_lat}{lat_dms.ns} {out_lon}{lon_dms.ew}"


def make_markup(parsed: ParsedCoordinate) -> str:
    """Reproduce the coordinate for display, keeping the original digits."""
    c = parsed.coordinate_literals
    if parsed.is_range:
        return (
            f"{make_position(parsed.lat_min, parsed.lon_min)} to "
            f"{make_position(parsed.lat_max, parsed.lon_max)}"
        )
    if len(c) == 2:
        return f"{c[0]};{c[1]}"
    if len(c) == 4:
        return f"{c[0]}°{_NBSP}{c[1]} {c[2]}°{_NBSP}{c[3]}"
    if len(c) == 6:
        return f"{c[0]}°{c[1]}′{_NBSP}{c[2]} {c[3]}°{c[4]}′{_NBSP}{c[5]}"
    return (
        f"{c[0]}°{c[1]}′{c[2]}″{_NBSP}{c[3]} "
        f"{c[4]}°{c[5]}′{c[6]}″{_NBSP}{c[7]}"
    )
