"""Command-line interface for trip equipment selection."""

import argparse
import asyncio
import json
import logging
import sys

from trail_pack.catalog.loader import CatalogError, load_catalog
from trail_pack.climate.classifier import InsufficientDataError
from trail_pack.config import get_settings
from trail_pack.models.selection import SelectionCriteria, SelectionResult
from trail_pack.planner import PlaceNotFoundError, plan_criteria_from_place
from trail_pack.providers.base import ProviderError
from trail_pack.providers.nominatim import NominatimGeocoder
from trail_pack.providers.open_meteo import OpenMeteoArchiveProvider
from trail_pack.selection.engine import select
from trail_pack.selection.presets import DEFAULT_PRESETS, apply_preset, get_preset
from trail_pack.selection.summary import summarize

logger = logging.getLogger(__name__)


def _autonomy(value: str) -> bool:
    value = value.strip().lower()
    if value in ("yes", "oui", "true", "1"):
        return True
    if value in ("no", "non", "false", "0"):
        return False
    raise argparse.ArgumentTypeError(f"expected yes or no, got {value!r}")


def _add_criteria_arguments(parser: argparse.ArgumentParser, default_days: int) -> None:
    parser.add_argument("--activity", help="Activity (e.g., Randonnée, Trek, Alpinisme)")
    parser.add_argument("--climate", help="Climate (Froid, Tempéré, Chaud, Pluie, Neige)")
    parser.add_argument(
        "--autonomy",
        type=_autonomy,
        default=None,
        help="Self-sufficiency trip (yes/no); unset keeps autonomy gear",
    )
    parser.add_argument(
        "--tech-level", type=int, default=1, help="Highest technical level (default: 1)"
    )
    parser.add_argument(
        "--days",
        type=int,
        default=default_days,
        help=f"Trip duration in days (default: {default_days})",
    )
    parser.add_argument(
        "--preset", choices=sorted(DEFAULT_PRESETS), help="Destination preset"
    )
    parser.add_argument("--catalog", help="Catalog JSON file (default: configured catalog)")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")


def _criteria_from_args(args: argparse.Namespace) -> SelectionCriteria:
    criteria = SelectionCriteria(
        activity=args.activity,
        climate=args.climate,
        autonomy_required=args.autonomy,
        tech_level_ceiling=max(args.tech_level, 1),
        trip_duration_days=max(args.days, 1),
    )
    if args.preset:
        criteria = apply_preset(criteria, get_preset(args.preset))
    return criteria


def _print_result(criteria: SelectionCriteria, result: SelectionResult, as_json: bool) -> None:
    summary = summarize(criteria, result)
    if as_json:
        payload = {
            "criteria": criteria.model_dump(mode="json"),
            "result": result.model_dump(mode="json"),
            "summary": summary,
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    print(summary)
    for line in result.items:
        weight = f"{line.line_weight_g:.0f} g" if line.line_weight_g is not None else "?"
        name = line.item.display_name or line.item.category
        print(f"  {line.quantity:>3} x {name} [{line.item.category}] {weight}")
    unknown = f" ({result.unknown_weight_count} without weight)" if result.unknown_weight_count else ""
    print(f"Total: {result.total_quantity} items, {result.total_weight_g:.0f} g{unknown}")


def _run_select(args: argparse.Namespace, criteria: SelectionCriteria) -> int:
    settings = get_settings()
    try:
        catalog = load_catalog(args.catalog or settings.catalog_path)
    except CatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = select(
        catalog,
        criteria,
        restrict_autonomy_packs=settings.autonomy_trip_pack_restriction,
    )
    _print_result(criteria, result, args.json)
    return 0


async def _plan_from_place(args: argparse.Namespace) -> SelectionCriteria:
    settings = get_settings()
    async with NominatimGeocoder(
        base_url=settings.nominatim_url,
        user_agent=settings.user_agent,
        timeout=settings.request_timeout_seconds,
    ) as geocoder, OpenMeteoArchiveProvider(
        base_url=settings.open_meteo_archive_url,
        user_agent=settings.user_agent,
        timeout=settings.request_timeout_seconds,
    ) as weather:
        planned = await plan_criteria_from_place(
            _criteria_from_args(args),
            args.address,
            args.month,
            geocoder=geocoder,
            weather=weather,
            thresholds=settings.climate_thresholds,
        )
    return planned.criteria


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Trail Pack - Pick the equipment to pack for an outdoor trip"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {settings.app_version}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Select command
    select_parser = subparsers.add_parser(
        "select", help="Select equipment from explicit criteria"
    )
    _add_criteria_arguments(select_parser, settings.default_trip_duration_days)

    # From-place command
    place_parser = subparsers.add_parser(
        "from-place", help="Select equipment for a place and month using weather history"
    )
    place_parser.add_argument("address", help="Trip location (address or place name)")
    place_parser.add_argument(
        "month", type=int, choices=range(1, 13), metavar="MONTH", help="Trip month (1-12)"
    )
    _add_criteria_arguments(place_parser, settings.default_trip_duration_days)

    # Presets command
    subparsers.add_parser("presets", help="List destination presets")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.host)
    serve_parser.add_argument("--port", type=int, default=settings.port)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "presets":
        for preset in DEFAULT_PRESETS.values():
            autonomy = {True: "yes", False: "no", None: "-"}[preset.autonomy]
            print(
                f"{preset.key:<12} {preset.label:<24} {preset.activity or '-':<12} "
                f"{preset.climate or '-':<8} autonomy={autonomy} tech={preset.tech_level}"
            )
        return 0

    if args.command == "select":
        return _run_select(args, _criteria_from_args(args))

    if args.command == "from-place":
        try:
            criteria = asyncio.run(_plan_from_place(args))
        except PlaceNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except InsufficientDataError as e:
            print(f"Error: cannot classify the climate: {e}", file=sys.stderr)
            return 1
        except ProviderError as e:
            print(f"Error: {e.provider} unavailable: {e}", file=sys.stderr)
            return 1
        return _run_select(args, criteria)

    if args.command == "serve":
        import uvicorn

        from trail_pack.api import create_app

        uvicorn.run(create_app(), host=args.host, port=args.port)
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
