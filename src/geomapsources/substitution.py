"""Placeholder substitution over map-sources template text."""

from __future__ import annotations

import re
from typing import Mapping, Union

from geomapsources.tokens import Placeholder

_OPEN_ESCAPED = "&#123;"
_CLOSE_ESCAPED = "&#125;"


def quote_html(text: str) -> str:
    """Entity-escape curly braces the way MediaWiki renders them."""
    return text.replace("{", _OPEN_ESCAPED).replace("}", _CLOSE_ESCAPED)


def _compile(names) -> re.Pattern:
    # Longest first so that e.g. "pagename_gmaps" beats "pagename"
    alternatives = "|".join(
        re.escape(name) for name in sorted(names, key=len, reverse=True)
    )
    return re.compile(
        rf"\{{({alternatives})\}}"
        rf"|{re.escape(_OPEN_ESCAPED)}({alternatives}){re.escape(_CLOSE_ESCAPED)}"
    )


def substitute(
    template_text: str, tokens: Mapping[Union[Placeholder, str], str]
) -> str:
    """
    Replace every ``{name}`` and ``&#123;name&#125;`` in *template_text*.

    Both spellings are matched in a single scan, so a substituted value
    is never searched again for placeholders. Unknown names are left
    untouched.
    """
    values = {str(key): value for key, value in tokens.items()}
    if not values:
        return template_text
    pattern = _compile(values)

    def _replace(match: re.Match) -> str:
        return values[match.group(1) or match.group(2)]

    return pattern.sub(_replace, template_text)
