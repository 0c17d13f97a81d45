"""
Command-line entry point:

    geodist Type Lat1 Lon1 Lat2 Lon2

Exit codes:
    0: success
    1: invalid arguments (usage is printed)
    2: the calculation failed
"""

__all__ = ['EXIT_COMPUTATION_FAULT', 'EXIT_INVALID_ARGUMENTS', 'EXIT_OK', 'build_parser', 'main']

import argparse
import sys
from typing import List, Optional

from geodist.calc import calculate
from geodist.errors import ErrorKind, Failure
from geodist.report import USAGE, format_report
from geodist.utils.logging import LOGGER, set_verbose
from geodist.validation import validate_arguments

EXIT_OK = 0
EXIT_INVALID_ARGUMENTS = 1
EXIT_COMPUTATION_FAULT = 2


class _ArgumentParserError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that reports errors to the caller instead of exiting"""

    def error(self, message):
        raise _ArgumentParserError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog='geodist',
        description='Distance between two points from their latitude/longitude.',
        epilog=USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'values', nargs='*', metavar='Type Lat1 Lon1 Lat2 Lon2',
        help='ellipsoid selector followed by two latitude/longitude pairs, in degrees'
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='enable debug logging'
    )
    return parser


def _report_failure(failure: Failure) -> int:
    if failure.kind is ErrorKind.INVALID_ARGUMENTS:
        LOGGER.debug(str(failure))
        print(USAGE)
        return EXIT_INVALID_ARGUMENTS

    print(str(failure), file=sys.stderr)
    return EXIT_COMPUTATION_FAULT


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parses arguments, computes both distances and prints the report.

    Args:
        argv:
            (Optional) The arguments, excluding the program name. Defaults to sys.argv[1:]

    Returns:
        (int) the process exit code
    """
    try:
        namespace = build_parser().parse_intermixed_args(argv)
    except _ArgumentParserError as exc:
        return _report_failure(Failure(ErrorKind.INVALID_ARGUMENTS, str(exc), 'main'))

    set_verbose(namespace.verbose)

    query = validate_arguments(namespace.values)
    if isinstance(query, Failure):
        return _report_failure(query)

    LOGGER.debug('Computing distance for %r', query)
    result = calculate(query)
    if isinstance(result, Failure):
        return _report_failure(result)

    print(format_report(query, result))
    return EXIT_OK
