"""Tests for geomapsources.geoparam module."""

import pytest

from geomapsources.exceptions import (
    CoordinateParseError,
    NoCoordinatesProvided,
    OutOfRange,
    UnrecognizedFormat,
)
from geomapsources.geoparam import (
    extract_attributes,
    make_markup,
    make_position,
    parse,
    tokenize,
)


class TestTokenize:
    def test_underscores_are_spaces(self):
        assert tokenize("40_N_74_W") == ("40", "N", "74", "W")

    def test_standalone_o_means_east(self):
        assert tokenize("40 N 74 O") == ("40", "N", "74", "E")
        assert tokenize("40 N 74 o") == ("40", "N", "74", "E")

    @pytest.mark.parametrize("region", ["region:JO", "region:CA-ON", "region:RO"])
    def test_region_codes_untouched(self, region: str):
        assert tokenize(f"40_N_74_W_{region}")[-1] == region

    def test_collapses_whitespace(self):
        assert tokenize("  40   N 74__W ") == ("40", "N", "74", "W")


class TestParseLayouts:
    def test_decimal_pair(self):
        p = parse("40.7128;-74.0060")
        assert p.lat_deg == pytest.approx(40.7128)
        assert p.lon_deg == pytest.approx(-74.0060)
        assert p.coordinate_literals == ("40.7128", "-74.0060")

    def test_degrees_with_direction(self):
        p = parse("40 N 74 W")
        assert p.lat_deg == 40.0
        assert p.lon_deg == -74.0

    def test_degrees_minutes(self):
        p = parse("40 30 N 74 15 W")
        assert p.lat_deg == 40.5
        assert p.lon_deg == -74.25

    def test_degrees_minutes_seconds(self):
        p = parse("40_42_46_N_74_0_21_W")
        assert p.lat_deg == pytest.approx(40 + 42 / 60 + 46 / 3600)
        assert p.lon_deg == pytest.approx(-(74 + 21 / 3600))
        assert len(p.coordinate_literals) == 8

    def test_southern_western(self):
        p = parse("33_52_S_151_12_E")
        assert p.lat_deg == pytest.approx(-(33 + 52 / 60))
        assert p.lon_deg == pytest.approx(151.2)

    def test_lowercase_directions(self):
        p = parse("40 n 74 w")
        assert (p.lat_deg, p.lon_deg) == (40.0, -74.0)

    def test_minutes_follow_sign_of_negative_degree(self):
        p = parse("-10 30 N 20 30 E")
        assert p.lat_deg == pytest.approx(-10.5)
        assert p.lon_deg == pytest.approx(20.5)

    def test_negative_zero_degree_keeps_sign(self):
        p = parse("-0 30 N 0 30 E")
        assert p.lat_deg == pytest.approx(-0.5)
        assert p.lon_deg == pytest.approx(0.5)

    def test_east_given_as_o(self):
        p = parse("52_31_N_13_24_O")
        assert p.lon_deg == pytest.approx(13.4)

    def test_remaining_tokens_kept(self):
        p = parse("40_N_74_W_type:city_region:US-NY")
        assert p.remaining_tokens == ("type:city", "region:US-NY")

    def test_position(self):
        assert parse("40 N 74 W").position == "40;-74"


class TestParseRange:
    def test_range(self):
        p = parse("40 N 74 W to 41 N 73 W")
        assert p.is_range
        assert p.lat_min == 40.0
        assert p.lat_max == 41.0
        assert p.lon_min == -74.0
        assert p.lon_max == -73.0
        assert p.lat_deg == 40.5
        assert p.lon_deg == -73.5

    def test_range_reversed_order(self):
        p = parse("41 N 73 W to 40 N 74 W")
        assert (p.lat_min, p.lat_max) == (40.0, 41.0)
        assert (p.lon_min, p.lon_max) == (-74.0, -73.0)

    def test_range_clears_literals(self):
        p = parse("40 N 74 W to 41 N 73 W_type:river")
        assert p.coordinate_literals == ()
        assert p.remaining_tokens == ("type:river",)

    def test_mixed_layouts(self):
        p = parse("40;-74_to_41_30_N_73_0_W")
        assert p.lat_max == 41.5

    def test_missing_second_coordinate(self):
        with pytest.raises(NoCoordinatesProvided):
            parse("40 N 74 W to")

    def test_point_is_not_range(self):
        assert not parse("40 N 74 W").is_range


class TestParseErrors:
    def test_empty(self):
        with pytest.raises(NoCoordinatesProvided):
            parse("")

    def test_only_separators(self):
        with pytest.raises(NoCoordinatesProvided):
            parse("___")

    def test_unrecognized(self):
        with pytest.raises(UnrecognizedFormat):
            parse("invalid coordinates here")

    @pytest.mark.parametrize(
        "params",
        ["91 N 180 E", "40 N 361 E", "-91;0", "40 61 N 74 0 W", "40 0 61 N 74 0 0 W",
         "40 -1 N 74 0 W", "90_30_N_0_0_E", "89_60_1_S_0_0_0_E", "0_0_N_360_30_E"],
    )
    def test_out_of_range(self, params: str):
        with pytest.raises(OutOfRange):
            parse(params)

    @pytest.mark.parametrize("params", ["abc N 74 W", "nan;0", "40;", "inf N 0 E"])
    def test_non_numeric(self, params: str):
        with pytest.raises(UnrecognizedFormat):
            parse(params)

    def test_pole_and_antimeridian_limits_accepted(self):
        assert parse("90_0_N_0_0_E").lat_deg == 90.0
        assert parse("89_60_S_0_0_E").lat_deg == -90.0
        assert parse("0_0_N_360_0_E").lon_deg == 360.0

    def test_error_carries_params(self):
        with pytest.raises(CoordinateParseError) as exc_info:
            parse("91 N 180 E")
        assert exc_info.value.params == "91 N 180 E"
        assert "Out of range" in str(exc_info.value)


class TestExtractAttributes:
    def test_key_value_with_argument(self):
        attrs = extract_attributes(parse("40_N_74_W_type:city(7000000)"))
        assert attrs["type"] == "city"
        assert attrs["arg:type"] == "7000000"

    def test_bare_number_is_scale(self):
        attrs = extract_attributes(parse("40_N_74_W_100000"))
        assert attrs == {"scale": "100000"}

    def test_explicit_scale_attribute_wins_over_bare_number(self):
        attrs = extract_attributes(parse("40_N_74_W_100000_scale:5000"))
        assert attrs["scale"] == "5000"

    def test_bare_number_after_scale_attribute_ignored(self):
        attrs = extract_attributes(parse("40_N_74_W_scale:5000_100000"))
        assert attrs["scale"] == "5000"

    def test_repeated_key_leftmost_wins(self):
        attrs = extract_attributes(parse("40_N_74_W_type:city_type:river"))
        assert attrs["type"] == "city"

    @pytest.mark.parametrize("region", ["JO", "CA-ON"])
    def test_region_preserved(self, region: str):
        attrs = extract_attributes(parse(f"31.95_N_35.93_O_region:{region}"))
        assert attrs["region"] == region

    @pytest.mark.parametrize("token", ["0", "-5", ":foo", "word"])
    def test_ignored_tokens(self, token: str):
        assert extract_attributes(parse(f"40_N_74_W_{token}")) == {}

    def test_extraction_does_not_consume(self):
        p = parse("40_N_74_W_globe:moon")
        assert extract_attributes(p) == extract_attributes(p) == {"globe": "moon"}


NBSP = "\u00a0"


class TestMarkup:
    def test_make_position(self):
        assert make_position(40.7128, -74.0060) == (
            f"40°{NBSP}42′{NBSP}46.08″{NBSP}N 74°{NBSP}0′{NBSP}21.6″{NBSP}W"
        )

    def test_make_position_whole_degrees(self):
        assert make_position(40.0, -74.0) == f"40°{NBSP}N 74°{NBSP}W"

    def test_markup_decimal(self):
        assert make_markup(parse("40.7128;-74.0060")) == "40.7128;-74.0060"

    def test_markup_degrees(self):
        assert make_markup(parse("40_N_74_W")) == f"40°{NBSP}N 74°{NBSP}W"

    def test_markup_minutes(self):
        assert make_markup(parse("40_30_N_74_15_W")) == (
            f"40°30′{NBSP}N 74°15′{NBSP}W"
        )

    def test_markup_seconds(self):
        assert make_markup(parse("40_42_46_N_74_0_21_W")) == (
            f"40°42′46″{NBSP}N 74°0′21″{NBSP}W"
        )

    def test_markup_range(self):
        assert make_markup(parse("40 N 74 W to 41 N 73 W")) == (
            f"40°{NBSP}N 74°{NBSP}W to 41°{NBSP}N 73°{NBSP}W"
        )
