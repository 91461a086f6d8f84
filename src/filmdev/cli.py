"""Film development calculator command line.

Usage:
    filmdev films
    filmdev developers tri-x-400
    filmdev calculate tri-x-400 d76 --temperature 22 --push-pull 1 --volume 500
    filmdev calculate portra-400 kodak_flexicolor_c41 --format json --output result.json
    filmdev stats
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from filmdev import __version__
from filmdev.config import get_settings
from filmdev.core.exceptions import CalculationError, FilmDevError
from filmdev.core.logging import setup_logging
from filmdev.core.models import CalculationRequest
from filmdev.core.types import ExportFormat, ProcessFamily
from filmdev.database.loader import load_database_file, load_reference_database
from filmdev.engine.calculator import DevelopmentCalculator
from filmdev.export.exporter import ResultExporter

FAMILY_CHOICES = tuple(f.value for f in ProcessFamily)
FORMAT_CHOICES = tuple(f.value for f in ExportFormat)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    calc = settings.calculator

    parser = argparse.ArgumentParser(
        prog="filmdev",
        description=f"{settings.app_name}: development time and chemistry",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"{settings.app_name} {__version__}"
    )
    parser.add_argument(
        "--database",
        type=Path,
        default=None,
        help="JSON reference database (bundled data if omitted)",
    )
    parser.add_argument(
        "--log-level",
        default="DEBUG" if settings.debug else settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")

    sub = parser.add_subparsers(dest="command", required=True)

    films = sub.add_parser("films", help="List film stocks")
    films.add_argument("--family", choices=FAMILY_CHOICES, default=None, help="Process family")

    developers = sub.add_parser("developers", help="List developers available for a film")
    developers.add_argument("film", help="Film id")

    calculate = sub.add_parser(
        "calculate",
        help="Calculate development time and chemistry",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    calculate.add_argument("film", help="Film id")
    calculate.add_argument("developer", help="Developer key as listed by 'developers'")
    calculate.add_argument(
        "--temperature", "-t", type=float, default=calc.default_temperature_c, help="°C"
    )
    calculate.add_argument(
        "--push-pull",
        "-p",
        type=int,
        choices=range(-2, 4),
        default=calc.default_push_pull,
        metavar="{-2..3}",
        help="Stops of push (+) or pull (-)",
    )
    calculate.add_argument(
        "--volume", "-v", type=int, default=calc.default_volume_ml, help="Working solution, ml"
    )
    calculate.add_argument(
        "--format",
        "-f",
        dest="export_format",
        choices=FORMAT_CHOICES,
        default=ExportFormat(settings.export.default_format).value,
        help="Output format",
    )
    calculate.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write to file (relative paths go under FILMDEV_EXPORTS_DIR when set)",
    )

    sub.add_parser("stats", help="Show database statistics")

    return parser


def _cmd_films(calculator: DevelopmentCalculator, args: argparse.Namespace) -> int:
    family = ProcessFamily(args.family) if args.family else None
    for film in calculator.available_films(family):
        print(f"{film.id:<20} {film.name:<28} ISO {film.iso:<5} {film.film_type.label}")
    return 0


def _cmd_developers(calculator: DevelopmentCalculator, args: argparse.Namespace) -> int:
    for option in calculator.available_developers(args.film):
        print(f"{option.key:<24} {option.name}")
    return 0


def _cmd_calculate(calculator: DevelopmentCalculator, args: argparse.Namespace) -> int:
    max_volume = get_settings().calculator.max_volume_ml
    if args.volume > max_volume:
        print(f"Error: volume must not exceed {max_volume} ml", file=sys.stderr)
        return 2

    try:
        request = CalculationRequest(
            film_id=args.film,
            developer_id=args.developer,
            temperature=args.temperature,
            push_pull=args.push_pull,
            volume=args.volume,
        )
    except ValidationError as e:
        print(f"Error: invalid request: {e}", file=sys.stderr)
        return 2

    result = calculator.calculate(request)
    exporter = ResultExporter()
    content = exporter.export(result, args.export_format, args.output)
    if args.output is None:
        print(content)
    else:
        print(f"Wrote {args.export_format} to {exporter.resolve_path(args.output)}")
    return 0


def _cmd_stats(calculator: DevelopmentCalculator, args: argparse.Namespace) -> int:
    stats = calculator.database.stats()
    print(f"Version:       {stats.version}")
    print(f"Last updated:  {stats.last_updated or 'N/A'}")
    print(f"Films:         {stats.film_count}")
    print(f"Developers:    {stats.developer_count}")
    print(f"Combinations:  {stats.total_combinations}")
    return 0


COMMANDS = {
    "films": _cmd_films,
    "developers": _cmd_developers,
    "calculate": _cmd_calculate,
    "stats": _cmd_stats,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, json_format=args.json_logs)

    try:
        if args.database is not None:
            database = load_database_file(args.database)
        else:
            database = load_reference_database()
        calculator = DevelopmentCalculator(database)
        return COMMANDS[args.command](calculator, args)
    except CalculationError as e:
        print(f"Error ({e.kind}): {e.message}", file=sys.stderr)
        return 1
    except FilmDevError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
