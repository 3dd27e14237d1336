"""geomapsources: Coordinate parameters to map-provider link values."""

from geomapsources.coordinates import CoordinateGroup, make_minsec
from geomapsources.exceptions import (
    CoordinateParseError,
    GeoMapSourcesError,
    NoCoordinatesProvided,
    OutOfRange,
    TemplateFetchError,
    UnrecognizedFormat,
)
from geomapsources.geoparam import extract_attributes, make_markup, make_position, parse
from geomapsources.mapsources import MapSources, derive_tokens
from geomapsources.models import MinSec, ParsedCoordinate, ProjectionResult
from geomapsources.projection import ch1903, compute_utm_zone, osgb36, utm, utm_in_zone
from geomapsources.scale import get_mmscale
from geomapsources.substitution import substitute
from geomapsources.tokens import Placeholder, TokenMap

__all__ = [
    "MapSources",
    "parse",
    "extract_attributes",
    "derive_tokens",
    "substitute",
    "make_minsec",
    "make_position",
    "make_markup",
    "compute_utm_zone",
    "utm",
    "utm_in_zone",
    "osgb36",
    "ch1903",
    "get_mmscale",
    "CoordinateGroup",
    "ParsedCoordinate",
    "MinSec",
    "ProjectionResult",
    "Placeholder",
    "TokenMap",
    "GeoMapSourcesError",
    "CoordinateParseError",
    "NoCoordinatesProvided",
    "UnrecognizedFormat",
    "OutOfRange",
    "TemplateFetchError",
]
