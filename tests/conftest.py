"""Shared test fixtures: parsed coordinates and a small GeoTemplate page."""

import pytest
import requests

from geomapsources import MapSources, parse


@pytest.fixture()
def london():
    """Trafalgar Square, written in degrees/minutes/seconds."""
    return parse("51_30_28_N_0_07_41_W_region:GB_type:landmark")


@pytest.fixture()
def bern_sources() -> MapSources:
    return MapSources("46.9480;7.4474_region:CH-BE", "de")


@pytest.fixture()
def template_text() -> str:
    """Excerpt of a map-sources page as MediaWiki renders it."""
    return (
        '<div id="GEOTEMPLATE-GLOBAL">'
        '<a href="https://www.openstreetmap.org/?mlat={latdegdec}'
        '&amp;mlon={londegdec}&amp;zoom={osmzoom}">OpenStreetMap</a> '
        '<a href="https://maps.google.com/maps?ll={latdegdec},{londegdec}'
        '&amp;q={latdegdec},{londegdec}+({pagename_gmaps})">Google</a>'
        '</div>'
        '<div id="GEOTEMPLATE-GB">'
        '<a href="https://gridreferencefinder.com/?gr=&#123;osgb36ref&#125;">'
        'Grid Reference Finder</a>'
        '</div>'
        '<p>{latdegabs}° {latminint}′ {latsecint}″ {latNS} '
        'UTM {utmzone} {utmeasting} {utmnorthing} {nztmeasting}</p>'
    )


class FakeResponse:
    def __init__(self, text: str, status: int = 200):
        self.text = text
        self.status_code = status

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


class FakeSession:
    """Stands in for requests.Session; maps URL -> response or exception."""

    def __init__(self, responses: dict):
        self.responses = responses
        self.calls: list[str] = []

    def get(self, url: str, timeout=None):
        self.calls.append(url)
        outcome = self.responses.get(url)
        if outcome is None:
            return FakeResponse("", 404)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture()
def fake_session_factory():
    return FakeSession


@pytest.fixture()
def fake_response_factory():
    return FakeResponse
