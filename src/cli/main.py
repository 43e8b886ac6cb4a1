"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the pattern application service
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from src._package import DESCRIPTION, PACKAGE_NAME, __version__
from src.application.service import PatternApplicationService
from src.cli.formatters import OUTPUT_FORMATS, format_output
from src.domain.base.exceptions import DomainException
from src.infrastructure.exceptions import InfrastructureError
from src.infrastructure.logging.logger import get_logger

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the resource-action argument parser."""

    # Main parser with global options
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) or PACKAGE_NAME,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s strategy execute a b c d e          # Sort with the default strategy
  %(prog)s strategy execute --strategy reverse a b c
  %(prog)s strategy compare d a c b           # Run every strategy
  %(prog)s creator run --creator creator2
  %(prog)s --format text facade run
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Override the configured logging level')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, default='json', help='Output format')
    parser.add_argument('--output', help='Output file (default: stdout)')
    parser.add_argument('--quiet', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    # Resource subparsers
    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Strategy resource
    strategy_parser = subparsers.add_parser('strategy', help='Run transform strategies')
    strategy_subparsers = strategy_parser.add_subparsers(dest='action', help='Strategy actions')

    strategy_execute = strategy_subparsers.add_parser('execute', help='Transform items with one strategy')
    strategy_execute.add_argument('--strategy', help='Strategy name (default: configured strategy)')
    strategy_execute.add_argument('items', nargs='*', help='Items to transform')

    strategy_compare = strategy_subparsers.add_parser('compare', help='Transform items with every strategy')
    strategy_compare.add_argument('items', nargs='*', help='Items to transform')

    strategy_subparsers.add_parser('list', help='List registered strategies')

    # Creator resource
    creator_parser = subparsers.add_parser('creator', help='Run factory method creators')
    creator_subparsers = creator_parser.add_subparsers(dest='action', help='Creator actions')

    creator_run = creator_subparsers.add_parser('run', help='Run a creator')
    creator_run.add_argument('--creator', help='Creator name (default: configured creator)')

    creator_subparsers.add_parser('list', help='List registered creators')

    # Facade resource
    facade_parser = subparsers.add_parser('facade', help='Run the subsystem facade')
    facade_subparsers = facade_parser.add_subparsers(dest='action', help='Facade actions')
    facade_subparsers.add_parser('run', help='Run the facade operation')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def execute_command(args: argparse.Namespace, service: PatternApplicationService) -> Dict[str, Any]:
    """Route a parsed command to the application service."""
    if args.resource == 'strategy':
        if args.action == 'execute':
            return service.execute_strategy(args.items, args.strategy)
        elif args.action == 'compare':
            return service.compare_strategies(args.items)
        elif args.action == 'list':
            return service.list_strategies()

    elif args.resource == 'creator':
        if args.action == 'run':
            return service.run_creator(args.creator)
        elif args.action == 'list':
            return service.list_creators()

    elif args.resource == 'facade':
        if args.action == 'run':
            return service.run_facade()

    raise ValueError(f"Unknown command: {args.resource} {args.action}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    args = parse_args(argv)
    logger = get_logger(__name__)

    # Validate required arguments
    if not args.resource:
        print("Error: No resource specified. Use --help for usage information.", file=sys.stderr)
        return EXIT_USAGE

    if not args.action:
        print(f"Error: No action specified for {args.resource}. Use --help for usage information.",
              file=sys.stderr)
        return EXIT_USAGE

    try:
        from src.bootstrap import create_application

        app = create_application(args.config, log_level=args.log_level)
        result = execute_command(args, app.get_service())
    except (DomainException, InfrastructureError) as e:
        if args.quiet:
            logger.debug("Command failed: %s", e)
        else:
            logger.error("Command failed: %s", e)
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    formatted_output = format_output(result, args.format)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(formatted_output)
        if not args.quiet:
            print(f"Output written to {args.output}")
    else:
        print(formatted_output)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
