"""
Command-line interface for the exception catalogue demonstrations.

Runs each error-handling scenario in turn against the console and prints a
one-line report per scenario.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, TextIO

from src.core.config import DemoConfig, load_config
from src.core.demo_runner import run_demonstrations
from src.core.exceptions import ConfigLoadError, ValidationError
from src.core.scenario_registry import (
    get_global_registry,
    register_builtin_scenarios,
)
from src.report.writer import ReportWriter


def show_banner(stream: TextIO | None = None) -> None:
    """Display the catalogue banner."""
    out = stream or sys.stdout
    banner = """+----------------------------------------+
|           EXCEPTION CATALOGUE          |
|  eleven ways for a program to go wrong |
+----------------------------------------+"""
    print(banner, file=out)
    print(file=out)


def show_available_scenarios() -> NoReturn:
    """Show the scenario sequence and exit."""
    show_banner()

    register_builtin_scenarios()
    registry = get_global_registry()

    print("Available Scenarios:")
    print("=" * 60)

    for key in registry.get_available_keys():
        info = registry.get_scenario_info(key)
        print(f"  {info['number']:>2}. {key:<15} - {info['title']}")

    sys.exit(0)


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Log records go to stderr so stdout carries only the demonstration output.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable info-level progress logging if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.WARNING
        format_str = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stderr,
        force=True,  # Override existing configuration
    )


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse and validate command line arguments."""
    register_builtin_scenarios()
    registry = get_global_registry()
    available_keys = registry.get_available_keys()

    parser = argparse.ArgumentParser(
        description="Walk through common error conditions and how they are handled",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run every scenario interactively
  python -m src.main

  # Feed scripted answers and keep a YAML record of the outcomes
  python -m src.main --report output/run.yaml < answers.txt

  # Run only the arithmetic and parsing scenarios
  python -m src.main --only divide --only parse-number

  # List the scenarios
  python -m src.main --list-scenarios
        """,
    )

    parser.add_argument(
        "--list-scenarios",
        action="store_true",
        help="List the scenarios in execution order and exit",
    )
    parser.add_argument(
        "--only",
        action="append",
        dest="only",
        metavar="KEY",
        help=f"Run only this scenario (repeatable). Keys: {', '.join(available_keys)}",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="YAML or JSON file overriding the run configuration",
    )
    parser.add_argument(
        "--report",
        type=Path,
        help="Write a YAML report of the outcomes to this path",
    )
    parser.add_argument(
        "--no-banner", action="store_true", help="Do not print the banner"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging for detailed output"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable progress logging from the runner",
    )

    args = parser.parse_args(argv)

    if args.list_scenarios:
        show_available_scenarios()

    if args.only:
        unknown = [key for key in args.only if not registry.is_key_available(key)]
        if unknown:
            parser.error(
                f"Unknown scenario(s): {', '.join(unknown)}. "
                f"Available: {', '.join(available_keys)}"
            )

    if args.report and args.report.suffix.lower() not in {".yaml", ".yml"}:
        parser.error(
            f"Report file must have .yaml or .yml extension, got: {args.report.suffix}"
        )

    return args


def run_catalogue(
    config_path: Path | None = None,
    report_path: Path | None = None,
    only: list[str] | None = None,
    banner: bool = True,
    debug: bool = False,
    verbose: bool = False,
) -> NoReturn:
    """Run the demonstrations and exit.

    Raises:
        SystemExit: 0 once the sequence completes, 1 when the run cannot start
            or an unclassified error escapes a scenario.
    """
    configure_logging(debug, verbose)
    logger = logging.getLogger(__name__)

    try:
        config = load_config(config_path) if config_path else DemoConfig()
    except ConfigLoadError as e:
        logger.error(f"Configuration error: {e}")
        logger.info(f"Suggestion: {e.get_recovery_hint()}")
        sys.exit(1)

    if banner:
        show_banner()

    try:
        results = run_demonstrations(config=config, only=only)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if debug:
            logger.exception("Full traceback:")
        sys.exit(1)

    if report_path:
        try:
            ReportWriter().write(results, report_path)
        except ValidationError as e:
            logger.error(f"Report not written: {e}")
            logger.info(f"Suggestion: {e.get_recovery_hint()}")
        except OSError as e:
            logger.error(f"Report not written: {e}")

    sys.exit(0)


def main(argv: list[str] | None = None) -> NoReturn:
    args = parse_arguments(argv)
    run_catalogue(
        config_path=args.config,
        report_path=args.report,
        only=args.only,
        banner=not args.no_banner,
        debug=args.debug,
        verbose=args.verbose,
    )


if __name__ == "__main__":
    main()
