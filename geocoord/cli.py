"""``geocoord`` console command.

Shows the decimal and DMS form of one coordinate, and with a second
coordinate the distance, bearing and compass direction between them.

Example:
    $ geocoord "51.0504, 13.7373" "Europe/Oslo"
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from geocoord.errors import CoordinateError
from geocoord.geo import RETURN_KILOMETERS, Coordinate, DmsFormat
from geocoord.parser import CoordinateParser

SUCCESS = 0
INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geocoord",
        description="Shows information about the given coordinate(s).",
    )
    parser.add_argument("source", help="The source coordinate string to parse.")
    parser.add_argument("target", nargs="?", help="The target coordinate string to parse.")
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in DmsFormat],
        default=DmsFormat.SHORT_1.value,
        help="DMS layout: short1 (51°3′1.44″N) or short2 (N51°3′1.44″).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def coordinate_table(title: str, coordinate: Coordinate, fmt: DmsFormat) -> Table:
    t = Table(title=title, header_style="bold green")
    t.add_column("Value")
    t.add_column("Latitude", justify="right")
    t.add_column("Longitude", justify="right")
    t.add_row("[b]Decimal[/b]", f"{coordinate.latitude}", f"{coordinate.longitude}")
    t.add_row("[b]DMS[/b]", coordinate.latitude_dms(fmt), coordinate.longitude_dms(fmt))
    return t


def distance_table(source: Coordinate, target: Coordinate) -> Table:
    t = Table(title="Distance", header_style="bold green")
    t.add_column("Key")
    t.add_column("Value", justify="right")
    t.add_row("[b]Distance[/b]", f"{source.distance_to(target, RETURN_KILOMETERS):.3f} km")
    t.add_row("[b]Degree[/b]", f"{source.bearing_to(target):.2f}°")
    t.add_row("[b]Direction[/b]", source.compass_direction(target).value)
    return t


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    fmt = DmsFormat(args.format)
    console = Console()
    error_console = Console(stderr=True)
    coordinate_parser = CoordinateParser()

    try:
        source = Coordinate.from_string(args.source, parser=coordinate_parser)
        console.print(coordinate_table(f"Source coordinate ({escape(args.source)})", source, fmt))

        if args.target is not None:
            target = Coordinate.from_string(args.target, parser=coordinate_parser)
            console.print(coordinate_table(f"Target coordinate ({escape(args.target)})", target, fmt))
            console.print(distance_table(source, target))
    except CoordinateError as exc:
        error_console.print(f"[red]{escape(str(exc))}[/red]", highlight=False)
        return INVALID

    return SUCCESS


if __name__ == "__main__":
    sys.exit(main())
