"""Tests for geomapsources.substitution module."""

from geomapsources.substitution import quote_html, substitute
from geomapsources.tokens import Placeholder as P


class TestQuoteHtml:
    def test_escapes_braces(self):
        assert quote_html("{pagename_gmaps}") == "&#123;pagename_gmaps&#125;"

    def test_plain_text_untouched(self):
        assert quote_html("no braces") == "no braces"


class TestSubstitute:
    def test_raw_and_escaped(self):
        text = "a {x} b &#123;x&#125; c"
        assert substitute(text, {"x": "1"}) == "a 1 b 1 c"

    def test_unknown_placeholder_left_verbatim(self):
        text = "{nope} &#123;nope&#125; {x}"
        assert substitute(text, {"x": "1"}) == "{nope} &#123;nope&#125; 1"

    def test_values_not_rescanned(self):
        assert substitute("{a}{b}", {"a": "{b}", "b": "2"}) == "{b}2"
        assert substitute("{a}", {"a": "&#123;b&#125;", "b": "2"}) == "&#123;b&#125;"

    def test_longest_name_wins(self):
        tokens = {"pagename": "P", "pagename_gmaps": "G"}
        assert substitute("{pagename_gmaps}/{pagename}", tokens) == "G/P"

    def test_placeholder_keys(self):
        assert substitute("z={zoom}", {P.ZOOM: "5"}) == "z=5"

    def test_mixed_escaping_not_matched(self):
        text = "&#123;x} {x&#125;"
        assert substitute(text, {"x": "1"}) == text

    def test_empty_token_map(self):
        assert substitute("{x}", {}) == "{x}"

    def test_empty_value(self):
        assert substitute("[{osgb36ref}]", {P.OSGB36REF: ""}) == "[]"

    def test_names_are_literal(self):
        # A name containing regex syntax must only match itself
        assert substitute("{a.b} {axb}", {"a.b": "1"}) == "1 {axb}"
