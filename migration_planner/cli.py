"""
Command line interface for the Org Migration Planner.
"""

import argparse
import sys
from typing import List, Optional

from .analysis.engine import create_analyzer
from .config import LOG_LEVELS, SUPPORTED_FORMATS, get_default_config_path, load_config
from .exceptions import MigrationPlannerError
from .inventory import load_inventory
from .logging_config import get_logger, setup_logging
from .reporting import get_reporter
from .version import get_full_name_with_version

logger = get_logger('cli')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='migration-planner',
        description='Resolve component dependencies and plan migrations between orgs.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  migration-planner analyze -i source.json -s a01 -s a02
  migration-planner analyze -i source.yaml -s obj-invoice --format json -o analysis.json
  migration-planner plan -i source.json -i target.json
        """
    )
    parser.add_argument('--version', action='version', version=get_full_name_with_version())

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('-i', '--inventory', action='append', required=True, metavar='FILE',
                        help='Inventory snapshot (JSON or YAML); repeat to merge several')
    common.add_argument('-c', '--config', help='Path to configuration file')
    common.add_argument('-f', '--format', choices=SUPPORTED_FORMATS,
                        help='Output format (default from configuration)')
    common.add_argument('-o', '--output', help='Write the report to this file')
    common.add_argument('--no-notes', action='store_true', help='Omit analysis notes from the report')
    common.add_argument('--log-level', choices=LOG_LEVELS,
                        help='Logging level')
    common.add_argument('--log-file', help='Also write logs to this file')
    common.add_argument('-v', '--verbose', action='store_true', help='Verbose log format')

    subparsers = parser.add_subparsers(dest='command', required=True)

    analyze_parser = subparsers.add_parser(
        'analyze', parents=[common],
        help='Resolve and categorize the dependencies of selected components'
    )
    analyze_parser.add_argument('-s', '--select', action='append', required=True, metavar='ID',
                                help='Id of a selected component; repeat for several')

    subparsers.add_parser(
        'plan', parents=[common],
        help='Detect cycles and compute a migration order for the whole inventory'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config or get_default_config_path())
    except MigrationPlannerError as e:
        setup_logging()
        logger.error(str(e))
        return 1

    setup_logging(
        level=args.log_level or config.logging.level,
        log_file=args.log_file or config.logging.log_file,
        verbose=args.verbose or config.logging.verbose,
    )

    format_name = args.format or config.output.default_format
    show_notes = config.output.show_notes and not args.no_notes
    if format_name == 'json':
        reporter = get_reporter('json', include_notes=show_notes)
    else:
        reporter = get_reporter('text', show_notes=show_notes)

    try:
        inventory = load_inventory(args.inventory)
        analyzer = create_analyzer(config)

        if args.command == 'analyze':
            result = analyzer.analyze(args.select, inventory)
            report = reporter.generate_report(result, args.output)
        else:
            plan = analyzer.plan_order(inventory)
            report = reporter.generate_plan_report(plan, args.output)
    except MigrationPlannerError as e:
        logger.error(str(e))
        return 1

    if args.output:
        logger.info(f"Report written to {args.output}")
    else:
        print(report)

    return 0


if __name__ == '__main__':
    sys.exit(main())
