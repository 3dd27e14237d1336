"""The closed set of placeholders a map-sources template may contain."""

from enum import Enum


class Placeholder(str, Enum):
    """Every ``{name}`` the substitution pass knows how to fill."""

    # Decimal and sexagesimal degrees
    LATDEGDEC = "latdegdec"
    LONDEGDEC = "londegdec"
    LATDEGDECABS = "latdegdecabs"
    LONDEGDECABS = "londegdecabs"
    LATDEGROUND = "latdeground"
    LONDEGROUND = "londeground"
    LATDEGROUNDABS = "latdegroundabs"
    LONDEGROUNDABS = "londegroundabs"
    LATDEG_OUTER_ABS = "latdeg_outer_abs"
    LONDEG_OUTER_ABS = "londeg_outer_abs"
    LATANTIPODES = "latantipodes"
    LONGANTIPODES = "longantipodes"
    LONDEGNEG = "londegneg"
    LATDEGINT = "latdegint"
    LONDEGINT = "londegint"
    LATDEGABS = "latdegabs"
    LONDEGABS = "londegabs"
    LATMINDEC = "latmindec"
    LONMINDEC = "lonmindec"
    LATMININT = "latminint"
    LONMININT = "lonminint"
    LATSECDEC = "latsecdec"
    LONSECDEC = "lonsecdec"
    LATSECINT = "latsecint"
    LONSECINT = "lonsecint"
    LATNS = "latNS"
    LONEW = "lonEW"

    # Grid projections
    UTMZONE = "utmzone"
    UTMNORTHING = "utmnorthing"
    UTMEASTING = "utmeasting"
    UTM33NORTHING = "utm33northing"
    UTM33EASTING = "utm33easting"
    OSGB36REF = "osgb36ref"
    OSGB36NORTHING = "osgb36northing"
    OSGB36EASTING = "osgb36easting"
    CH1903NORTHING = "ch1903northing"
    CH1903EASTING = "ch1903easting"

    # Scale and page values
    SCALE = "scale"
    MMSCALE = "mmscale"
    ALTITUDE = "altitude"
    ZOOM = "zoom"
    OSMZOOM = "osmzoom"
    SPAN = "span"
    TYPE = "type"
    REGION = "region"
    GLOBE = "globe"
    PAGE = "page"
    PAGENAME = "pagename"
    TITLE = "title"
    PAGENAMEE = "pagenamee"
    TITLEE = "titlee"
    GEOCOUNTRY = "geocountry"
    GEOA1 = "geoa1"

    # Request values
    PARAMS = "params"
    LANGUAGE = "language"
    PAGENAME_GMAPS = "pagename_gmaps"

    def __str__(self) -> str:
        return self.value


# Rendered value for each placeholder
TokenMap = dict[Placeholder, str]
