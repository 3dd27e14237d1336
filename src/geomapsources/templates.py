"""
Download of the wiki page holding the map-sources template.

The page (``Template:GeoTemplate`` and its per-globe subpages) lists
the map providers with ``{placeholder}`` links; it is fetched once per
language/globe and kept in memory for an hour.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from geomapsources.exceptions import TemplateFetchError

logger = logging.getLogger(__name__)

HTTP_USER_AGENT = "GeoHack/2.0"
HTTP_TIMEOUT = 60           # seconds
CACHE_DURATION = 60 * 60    # seconds
MAX_REDIRECTS = 10

TEMPLATE_PAGE = "Template:GeoTemplate"


def template_page_name(globe: str = "", sandbox: bool = False) -> str:
    """Wiki page name for a globe, e.g. ``Template:GeoTemplate/mars``."""
    pagename = TEMPLATE_PAGE
    if globe and globe != "earth":
        pagename += "/" + globe.replace("&", "%26")
    if sandbox:
        pagename += "/sandbox"
    return pagename


def template_url(language: str, pagename: str, project: Optional[str] = None) -> str:
    if project:
        return (
            f"http://meta.wikimedia.org/w/index.php"
            f"?title={pagename}/{project}&useskin=monobook"
        )
    return (
        f"http://{language}.wikipedia.org/w/index.php"
        f"?title={pagename}&useskin=monobook"
    )


def fallback_url(language: str, pagename: str) -> str:
    """English wiki page, with the interface in *language*."""
    return (
        f"http://en.wikipedia.org/w/index.php"
        f"?title={pagename}&uselang={language}&useskin=monobook"
    )


@dataclass
class _Entry:
    html: str
    expires: float


class TemplateCache:
    """
    Fetches template pages and caches them in memory until they expire.

    Pass a ``requests.Session`` (or anything with a compatible ``get``)
    to control networking; *clock* is injectable for tests.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        ttl: float = CACHE_DURATION,
        timeout: float = HTTP_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._session = session if session is not None else self._make_session()
        self._ttl = ttl
        self._timeout = timeout
        self._clock = clock
        self._entries: dict[tuple, _Entry] = {}

    # ── Public API ────────────────────────────────────────────────

    def fetch(
        self,
        language: str,
        globe: str = "",
        sandbox: bool = False,
        project: Optional[str] = None,
        purge: bool = False,
    ) -> str:
        """
        Return the template HTML for *language* and *globe*.

        Tries the language's own wiki (or meta-wiki for a *project*)
        first and falls back to the English wiki. Raises
        TemplateFetchError if both requests fail.
        """
        key = (language, globe, sandbox, project)
        self._evict_expired()
        if not purge and not sandbox:
            entry = self._entries.get(key)
            if entry is not None:
                logger.debug("Template cache hit for %s", key)
                return entry.html

        pagename = template_page_name(globe, sandbox)
        url = template_url(language, pagename, project)
        try:
            text = self._get(url)
        except requests.RequestException as exc:
            logger.warning("Template fetch from %s failed (%s); using fallback", url, exc)
            url = fallback_url(language, pagename)
            try:
                text = self._get(url)
            except requests.RequestException as exc2:
                raise TemplateFetchError(url, str(exc2)) from exc2

        self._entries[key] = _Entry(text, self._clock() + self._ttl)
        return text

    def clear(self) -> None:
        """Forget every cached template."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    # ── Private helpers ───────────────────────────────────────────

    @staticmethod
    def _make_session() -> requests.Session:
        session = requests.Session()
        session.headers["User-Agent"] = HTTP_USER_AGENT
        session.max_redirects = MAX_REDIRECTS
        return session

    def _evict_expired(self) -> None:
        now = self._clock()
        self._entries = {k: e for k, e in self._entries.items() if e.expires > now}

    def _get(self, url: str) -> str:
        resp = self._session.get(url, timeout=self._timeout)
        resp.raise_for_status()
        return resp.text
