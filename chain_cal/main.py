#!/usr/bin/env python3
"""
chain-cal - "don't break the chain" habit calendar.

Reads a marks file and shows months, years, single days and streaks.
"""

import argparse
import logging
import sys

from chain_cal.core.config import load_config, get_default_config_path
from chain_cal.commands import (
    MonthCommand,
    YearCommand,
    CheckCommand,
    StreakCommand
)


def main(argv=None):
    """Main entry point for chain-cal."""
    parser = argparse.ArgumentParser(
        description="Show marked days and streaks from a marks file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  chain-cal month 2016 3         # Grid for March 2016
  chain-cal year 2016 --list     # Every marked day of 2016
  chain-cal check 2016-03-15     # Exit status 0 if marked
  chain-cal streak               # Current and best streak
        """
    )

    default_config = get_default_config_path()

    parser.add_argument(
        '--config',
        help=f'Path to configuration file (default: {default_config})',
        default=None
    )

    parser.add_argument(
        '--marks',
        metavar='PATH',
        help='Marks file, one YYYY-MM-DD per line (default: from config)',
        default=None
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    month_parser = subparsers.add_parser('month', help='Show one month')
    month_parser.add_argument('year', type=int)
    month_parser.add_argument('month', type=int)
    month_parser.add_argument(
        '--list',
        action='store_true',
        help='List marked days instead of drawing a grid'
    )

    year_parser = subparsers.add_parser('year', help='Show one year')
    year_parser.add_argument('year', type=int)
    year_parser.add_argument(
        '--list',
        action='store_true',
        help='List marked days instead of drawing grids'
    )

    check_parser = subparsers.add_parser('check', help='Check whether a day is marked')
    check_parser.add_argument('date', help='Day to check (YYYY-MM-DD)')

    streak_parser = subparsers.add_parser('streak', help='Show current and best streak')
    streak_parser.add_argument(
        '--today',
        help='Reference day (YYYY-MM-DD, default: today in UTC)'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args.config)

        if args.verbose:
            actual_config_path = args.config if args.config else default_config
            print(f"Using config: {actual_config_path}")

        if args.command == 'month':
            cmd = MonthCommand(config, marks_path=args.marks, verbose=args.verbose)
            success = cmd.run(year=args.year, month=args.month, as_list=args.list)

        elif args.command == 'year':
            cmd = YearCommand(config, marks_path=args.marks, verbose=args.verbose)
            success = cmd.run(year=args.year, as_list=args.list)

        elif args.command == 'check':
            cmd = CheckCommand(config, marks_path=args.marks, verbose=args.verbose)
            success = cmd.run(date_str=args.date)

        elif args.command == 'streak':
            cmd = StreakCommand(config, marks_path=args.marks, verbose=args.verbose)
            success = cmd.run(today_str=args.today)

        else:
            print(f"Unknown command '{args.command}'.")
            return 1

        return 0 if success else 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130
    except Exception as e:
        print(f"Error: {e}")
        if not args.verbose:
            print("Re-run with --verbose for more detail.")
        else:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
