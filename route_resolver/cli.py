"""Command-line entry point for resolving routes against a schema file."""

import argparse
import json
import logging
import sys
from pathlib import Path

from route_resolver.component import ComponentKind
from route_resolver.errors import ResolutionError
from route_resolver.load_config import load_config
from route_resolver.load_schemas import load_schemas
from route_resolver.resolution_report import ResolutionReport
from route_resolver.route_resolver import RouteResolver

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the route-resolver command."""
    ap = argparse.ArgumentParser(
        description="Resolve dot-delimited routes (e.g. users.5.posts.create).",
    )
    ap.add_argument(
        "schemas",
        type=Path,
        help="YAML file with a top-level 'schemas' mapping",
    )
    ap.add_argument(
        "routes",
        nargs="+",
        help="Routes to resolve",
    )
    ap.add_argument(
        "--form",
        action="store_true",
        help="Resolve for a form component instead of a plain component",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON report of all resolutions to this path",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log every resolution phase",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Resolve each route and print it as JSON; return 1 if any failed."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    level = "DEBUG" if args.verbose else str(config["logging"]["level"]).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        registry = load_schemas(args.schemas)
    except (OSError, ResolutionError) as e:
        print(f"Error loading schemas: {e}", file=sys.stderr)
        return 2

    resolver = RouteResolver(registry, config=config)
    kind = ComponentKind.FORM if args.form else ComponentKind.COMPONENT
    report = ResolutionReport(config)

    failed = 0
    for route in args.routes:
        try:
            resolved = resolver.resolve(route, kind)
        except ResolutionError as e:
            failed += 1
            report.add_failure(route, e)
            print(f"{route}: {e}", file=sys.stderr)
            continue
        report.add_result(resolved)
        print(json.dumps(resolved.to_dict(), indent=2))

    if args.report:
        report.generate_report(args.report)
        logger.info("Wrote report to %s", args.report)

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
