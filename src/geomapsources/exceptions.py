"""Custom exception hierarchy for geomapsources."""


class GeoMapSourcesError(Exception):
    """Base exception for all geomapsources errors."""


class CoordinateParseError(GeoMapSourcesError):
    """The coordinate parameter string could not be turned into a position."""

    reason = "Invalid coordinates"

    def __init__(self, params: str):
        self.params = params
        super().__init__(f"{self.reason}: '{params}'")


class NoCoordinatesProvided(CoordinateParseError):
    """The parameter string holds no tokens at all."""

    reason = "No coordinates provided"


class UnrecognizedFormat(CoordinateParseError):
    """None of the known coordinate layouts matched the front of the input."""

    reason = "Unrecognized format"


class OutOfRange(CoordinateParseError):
    """A degree, minute or second value lies outside its allowed bounds."""

    reason = "Out of range"


class TemplateFetchError(GeoMapSourcesError):
    """The map-sources template page could not be downloaded."""

    def __init__(self, url: str, detail: str):
        self.url = url
        super().__init__(f"Could not fetch template from {url}: {detail}")
