"""
Map Sources: interactive CLI
============================
Thin wrapper around the geomapsources library.

Usage:
    geomapsources                                  # interactive mode
    geomapsources "51_30_N_0_7_W_type:city"        # print all values
    geomapsources "51_30_N_0_7_W" template.html    # render a template

Settings are read from environment variables:
    GEOMAPSOURCES_LANGUAGE    Language code for {language} (default: en)
    GEOMAPSOURCES_LOG_LEVEL   Logging level (default: WARNING)
"""

import logging
import os
import sys
from pathlib import Path

from geomapsources import MapSources, make_markup
from geomapsources.exceptions import CoordinateParseError
from geomapsources.tokens import Placeholder as P

_LANGUAGE = os.environ.get("GEOMAPSOURCES_LANGUAGE", "en")
_LOG_LEVEL = os.environ.get("GEOMAPSOURCES_LOG_LEVEL", "WARNING")

_BANNER = """\
╔══════════════════════════════════════╗
║            Map Sources               ║
║  Coordinates → Map link values       ║
╚══════════════════════════════════════╝
Type 'q' to quit.
"""


def _print_tokens(sources: MapSources) -> None:
    for key, val in sources.tokens().items():
        print(f"{key.value:>20}: {val}")


def _run_interactive() -> None:
    print(_BANNER)

    while True:
        try:
            raw_params = input("\nCoordinates:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw_params.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not raw_params:
            print("  ✗ Coordinates are required.")
            continue

        try:
            sources = MapSources(raw_params, _LANGUAGE)
        except CoordinateParseError as exc:
            print(f"  ✗ {exc}")
            continue

        tokens = sources.tokens()
        print(f"  ✓ {make_markup(sources.parsed)}")
        print()
        print(f"  ┌──────────────────────────────────────────────────────┐")
        print(f"  │  Decimal          {tokens[P.LATDEGDEC] + ', ' + tokens[P.LONDEGDEC]:<35}│")
        print(f"  │  UTM              {tokens[P.UTMZONE] + ' ' + tokens[P.UTMEASTING] + ' ' + tokens[P.UTMNORTHING]:<35}│")
        print(f"  │  OSGB36           {tokens[P.OSGB36REF] or '—':<35}│")
        print(f"  │  CH1903           {tokens[P.CH1903EASTING] + ' ' + tokens[P.CH1903NORTHING]:<35}│")
        print(f"  │  Scale            {'1:' + tokens[P.SCALE]:<35}│")
        print(f"  │  OSM zoom         {tokens[P.OSMZOOM]:<35}│")
        print(f"  └──────────────────────────────────────────────────────┘")


def main() -> None:
    """Entry point for both command-line arguments and interactive mode."""
    logging.basicConfig(level=_LOG_LEVEL.upper())

    if len(sys.argv) == 1:
        _run_interactive()
        return

    try:
        sources = MapSources(sys.argv[1], _LANGUAGE)
    except CoordinateParseError as exc:
        print(f"Invalid coordinates: {exc}", file=sys.stderr)
        sys.exit(1)

    if len(sys.argv) >= 3:
        template = Path(sys.argv[2]).read_text(encoding="utf-8")
        sys.stdout.write(sources.render(template))
    else:
        _print_tokens(sources)


if __name__ == "__main__":
    main()
