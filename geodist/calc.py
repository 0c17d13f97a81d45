"""
Distance calculations between two GeoPoints on a reference ellipsoid.

Two estimates are produced for every pair of points:

    * An ellipsoidal estimate using Hubeny's formula, which treats the
      short arc between the points as planar on the ellipsoid's local radii
      of curvature. Accuracy degrades for long or near-polar
      spans; no correction is applied for them.
    * A spherical estimate using the spherical law of cosines, with the
      ellipsoid's equatorial radius standing in for the earth's radius.
"""

__all__ = [
    'DistanceResult', 'calculate', 'clamped_acos', 'compute',
    'great_circle_distance', 'hubeny_distance',
]

import math
from typing import NamedTuple, Union

import numpy as np

from geodist.coordinates import GeoPoint
from geodist.ellipsoids import Ellipsoid
from geodist.errors import ErrorKind, Failure
from geodist.utils.logging import LOGGER
from geodist.validation import DistanceQuery


class DistanceResult(NamedTuple):
    """A pair of distances, in meters"""
    ellipsoidal_distance: float
    spherical_distance: float


def _to_ellipsoid(ellipsoid: Union[Ellipsoid, int]) -> Ellipsoid:
    if isinstance(ellipsoid, Ellipsoid):
        return ellipsoid

    if isinstance(ellipsoid, bool) or not isinstance(ellipsoid, int):
        raise TypeError(
            f'Ellipsoid must be an Ellipsoid or an integer selector, not {type(ellipsoid)}'
        )

    try:
        return Ellipsoid(ellipsoid)
    except ValueError as exc:
        raise ValueError(
            f"Unknown ellipsoid selector {ellipsoid!r}. Options: {[x.value for x in Ellipsoid]}"
        ) from exc


def clamped_acos(value: float) -> float:
    """
    Arc cosine of a value clipped to [-1, 1].

    Floating point rounding can push the cosine of a central angle slightly past
    +/-1 for identical or antipodal points, which math.acos would reject.

    Args:
        value:
            The cosine of an angle

    Returns:
        (float) the angle, in radians
    """
    clipped = float(np.clip(value, -1.0, 1.0))
    if clipped != value and not math.isnan(value):
        LOGGER.debug('Clamped acos argument %r to %r', value, clipped)
    return math.acos(clipped)


def hubeny_distance(
    ellipsoid: Union[Ellipsoid, int],
    point1: GeoPoint,
    point2: GeoPoint
) -> float:
    """
    Calculate the distance between two points using Hubeny's formula.

    Args:
        ellipsoid:
            The reference Ellipsoid (or its integer selector)

        point1:
            A GeoPoint

        point2:
            A GeoPoint

    Returns:
        (float) the distance in meters
    """
    ellipsoid = _to_ellipsoid(ellipsoid)
    lat1, lon1 = point1.radians
    lat2, lon2 = point2.radians

    d_lon = lon1 - lon2
    d_lat = lat1 - lat2
    mean_lat = (lat1 + lat2) / 2

    m = ellipsoid.meridional_radius(mean_lat)
    n = ellipsoid.prime_vertical_radius(mean_lat)

    return math.sqrt(
        (d_lat * m) ** 2 +
        (d_lon * n * math.cos(mean_lat)) ** 2
    )


def great_circle_distance(
    ellipsoid: Union[Ellipsoid, int],
    point1: GeoPoint,
    point2: GeoPoint
) -> float:
    """
    Calculate the distance between two points using the spherical law of cosines,
    on a sphere with the ellipsoid's equatorial radius.

    Args:
        ellipsoid:
            The reference Ellipsoid (or its integer selector)

        point1:
            A GeoPoint

        point2:
            A GeoPoint

    Returns:
        (float) the distance in meters
    """
    ellipsoid = _to_ellipsoid(ellipsoid)
    lat1, lon1 = point1.radians
    lat2, lon2 = point2.radians

    cos_angle = (
        math.sin(lat1) * math.sin(lat2) +
        math.cos(lat1) * math.cos(lat2) * math.cos(lon2 - lon1)
    )
    return ellipsoid.r_x * clamped_acos(cos_angle)


def compute(
    ellipsoid: Union[Ellipsoid, int],
    point1: GeoPoint,
    point2: GeoPoint
) -> DistanceResult:
    """
    Calculate both the ellipsoidal and spherical distance between two points.

    Args:
        ellipsoid:
            The reference Ellipsoid, or its selector (0: BESSEL, 1: GRS80, 2: WGS84)

        point1:
            A GeoPoint

        point2:
            A GeoPoint

    Returns:
        DistanceResult
    """
    ellipsoid = _to_ellipsoid(ellipsoid)
    return DistanceResult(
        hubeny_distance(ellipsoid, point1, point2),
        great_circle_distance(ellipsoid, point1, point2),
    )


def calculate(query: DistanceQuery) -> Union[DistanceResult, Failure]:
    """
    Run compute() for a validated DistanceQuery, returning a Failure instead of
    raising if the arithmetic goes wrong.

    Args:
        query:
            A validated DistanceQuery

    Returns:
        DistanceResult, or a Failure of kind NUMERIC_DOMAIN_FAULT (the arc cosine
        produced NaN) or UNEXPECTED_COMPUTATION_FAULT
    """
    try:
        result = compute(query.ellipsoid, query.point1, query.point2)
    except (ArithmeticError, ValueError) as exc:
        return Failure(ErrorKind.UNEXPECTED_COMPUTATION_FAULT, str(exc), 'calculate')

    if math.isnan(result.spherical_distance):
        return Failure(
            ErrorKind.NUMERIC_DOMAIN_FAULT,
            f'acos argument outside of [-1, 1]: {result!r}',
            'calculate'
        )

    if not all(math.isfinite(x) for x in result):
        return Failure(
            ErrorKind.UNEXPECTED_COMPUTATION_FAULT,
            f'Non-finite distance computed: {result!r}',
            'calculate'
        )

    return result
