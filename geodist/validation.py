"""
Validation of raw command-line strings into a typed distance query
"""

__all__ = [
    'DistanceQuery', 'is_valid_latitude', 'is_valid_longitude',
    'is_valid_selector', 'validate_arguments'
]

import re
from typing import NamedTuple, Sequence, Union

from geodist.coordinates import GeoPoint
from geodist.ellipsoids import Ellipsoid
from geodist.errors import ErrorKind, Failure

_SELECTOR_RE = re.compile(r'^[012]$')

# Up to 8 decimal places; the range endpoints only accept zeros after the point
_LATITUDE_RE = re.compile(
    r'^[+-]?(?:(?:\d|[1-8]\d)(?:\.\d{1,8})?|90(?:\.0{1,8})?)$'
)
_LONGITUDE_RE = re.compile(
    r'^[+-]?(?:(?:\d{1,2}|1[0-7]\d)(?:\.\d{1,8})?|180(?:\.0{1,8})?)$'
)

_ARG_COUNT = 5


class DistanceQuery(NamedTuple):
    """A validated request to measure the distance between two points"""
    ellipsoid: Ellipsoid
    point1: GeoPoint
    point2: GeoPoint


def is_valid_selector(value: str) -> bool:
    return bool(_SELECTOR_RE.fullmatch(value))


def is_valid_latitude(value: str) -> bool:
    return bool(_LATITUDE_RE.fullmatch(value))


def is_valid_longitude(value: str) -> bool:
    return bool(_LONGITUDE_RE.fullmatch(value))


def validate_arguments(args: Sequence[str]) -> Union[DistanceQuery, Failure]:
    """
    Checks the raw (selector, lat1, lon1, lat2, lon2) strings and converts them
    into a DistanceQuery.

    Args:
        args:
            A sequence of exactly five strings

    Returns:
        DistanceQuery, or a Failure of kind INVALID_ARGUMENTS naming the first
        offending argument
    """
    if len(args) != _ARG_COUNT:
        return Failure(
            ErrorKind.INVALID_ARGUMENTS,
            f'Expected {_ARG_COUNT} arguments, received {len(args)}',
            'validate_arguments'
        )

    selector, lat1, lon1, lat2, lon2 = args
    checks = (
        ('Type', selector, is_valid_selector),
        ('Lat1', lat1, is_valid_latitude),
        ('Lon1', lon1, is_valid_longitude),
        ('Lat2', lat2, is_valid_latitude),
        ('Lon2', lon2, is_valid_longitude),
    )
    for name, value, check in checks:
        if not isinstance(value, str) or not check(value):
            return Failure(
                ErrorKind.INVALID_ARGUMENTS,
                f'Invalid value for {name}: {value!r}',
                'validate_arguments'
            )

    return DistanceQuery(
        Ellipsoid(int(selector)),
        GeoPoint(lat1, lon1),
        GeoPoint(lat2, lon2),
    )
