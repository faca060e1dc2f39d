"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Configuration and logging setup
- Command routing and execution
"""
import argparse
import contextlib
import os
import sys
from typing import Any, Dict, List, Optional, TextIO

from design_patterns._version import __version__
from design_patterns.catalog import PatternCategory
from design_patterns.cli.formatters import format_output
from design_patterns.config import ConfigurationManager, get_config_manager, reset_config_manager
from design_patterns.config.schemas import OUTPUT_FORMATS
from design_patterns.exceptions import PatternError
from design_patterns.infrastructure.logging import setup_logging
from design_patterns.interface.command_handlers import (
    ListPatternsHandler,
    RunDemosHandler,
    ShowPatternHandler,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Command handler mapping
COMMAND_HANDLERS = {
    "list": ListPatternsHandler,
    "show": ShowPatternHandler,
    "run": RunDemosHandler,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]),
        description="Gang of Four design patterns - catalog and runnable demos",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                          # List all patterns
  %(prog)s list --category structural    # List structural patterns
  %(prog)s show command --format yaml    # Show one pattern as YAML
  %(prog)s run singleton --seed 7        # Run a demo reproducibly
  %(prog)s run --all                     # Run every demo
        """,
    )

    # Global options
    parser.add_argument("--config", help="Configuration file path (JSON or YAML)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Set logging level")
    parser.add_argument("--format", choices=list(OUTPUT_FORMATS), help="Output format")
    parser.add_argument("--output", help="Output file (default: stdout)")
    parser.add_argument("--seed", type=int, help="Random seed for demos that use randomness")
    parser.add_argument("--quiet", action="store_true", help="Suppress non-essential output")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # list
    list_parser = subparsers.add_parser("list", help="List patterns")
    list_parser.add_argument(
        "--category",
        choices=[category.value for category in PatternCategory],
        help="Filter by pattern category",
    )

    # show
    show_parser = subparsers.add_parser("show", help="Show pattern details")
    show_parser.add_argument("slug", help="Pattern slug, e.g. abstract-factory")

    # run
    run_parser = subparsers.add_parser("run", help="Run pattern demos")
    run_parser.add_argument("slugs", nargs="*", help="Pattern slugs to run")
    run_parser.add_argument("--all", action="store_true", help="Run every registered demo")

    return parser.parse_args(argv)


def load_configuration(args: argparse.Namespace) -> ConfigurationManager:
    """Load configuration and apply command line overrides."""
    # Each invocation starts from freshly loaded configuration
    reset_config_manager()
    config_manager = get_config_manager(args.config)

    if args.verbose:
        log_level = "DEBUG"
    elif args.quiet:
        log_level = "ERROR"
    else:
        log_level = args.log_level
    config_manager.override("logging", level=log_level)
    config_manager.override(
        "demo",
        random_seed=args.seed,
        show_banner=False if args.quiet else None,
    )
    config_manager.override("cli", output_format=args.format)
    return config_manager


def execute_command(
    args: argparse.Namespace,
    config_manager: ConfigurationManager,
    stream: Optional[TextIO] = None,
) -> Optional[Dict[str, Any]]:
    """Execute the appropriate command handler."""
    handler_class = COMMAND_HANDLERS.get(args.command)
    if handler_class is None:
        raise ValueError(f"Unknown command: {args.command}")

    handler = handler_class(settings=config_manager.get_demo_config(), stream=stream)
    return handler.handle(args)


def _open_output(path: Optional[str]):
    if path:
        return open(path, "w", encoding="utf-8")
    return contextlib.nullcontext()


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)

        # Validate required arguments
        if not args.command:
            print("Error: No command specified. Use --help for usage information.")
            sys.exit(1)

        if args.command == "run" and not args.all and not args.slugs:
            print("Error: No patterns specified. Name one or more patterns or use --all.")
            sys.exit(1)

        # Initialize configuration and logging
        try:
            config_manager = load_configuration(args)
            logger = setup_logging(config_manager.get_logging_config())
        except (PatternError, ValueError) as e:
            print(f"Error: {e}")
            sys.exit(1)

        # Execute command
        try:
            with _open_output(args.output) as output_stream:
                result = execute_command(args, config_manager, output_stream)

                # Format and output result
                if result is not None:
                    output_format = config_manager.get_cli_config().output_format
                    formatted_output = format_output(result, output_format)
                    print(formatted_output.rstrip("\n"), file=output_stream or sys.stdout)

            if args.output and not args.quiet:
                print(f"Output written to {args.output}")

        except PatternError as e:
            logger.error("Domain error", error=str(e))
            if not args.quiet:
                print(f"Error: {e}")
            sys.exit(1)
        except Exception as e:
            logger.error("Unexpected error", error=str(e))
            if args.verbose:
                import traceback

                traceback.print_exc()
            if not args.quiet:
                print(f"Unexpected error: {e}")
            sys.exit(1)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
