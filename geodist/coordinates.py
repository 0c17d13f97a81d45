"""
Representation of a specific point on earth
"""

__all__ = ['GeoPoint']

from functools import cached_property
from typing import Tuple, Union

import numpy as np

from geodist._const import COORDINATE_PRECISION
from geodist.utils.logging import warn_once


class GeoPoint:
    """
    A point on the globe, as a (latitude, longitude) pair in decimal degrees.

    Values outside of [-90, 90] / [-180, 180] are kept as given (with a one-time
    warning) so that downstream calculations still produce a number.
    """

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        lat, lon = float(latitude), float(longitude)
        if not -90 <= lat <= 90:
            warn_once(
                'Latitude outside of [-90, 90] received; distances involving it '
                'will not be meaningful. (this warning will not repeat)'
            )
        if not -180 <= lon <= 180:
            warn_once(
                'Longitude outside of [-180, 180] received; distances involving it '
                'will not be meaningful. (this warning will not repeat)'
            )

        self._latitude = lat
        self._longitude = lon

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    @cached_property
    def radians(self) -> Tuple[float, float]:
        """The (latitude, longitude) pair converted to radians"""
        lat, lon = np.deg2rad([self.latitude, self.longitude])
        return float(lat), float(lon)

    def to_str(self, precision: int = COORDINATE_PRECISION) -> Tuple[str, str]:
        """
        Converts the point to a tuple of fixed-width strings (latitude, longitude),
        e.g. ('  35.53820000', ' 132.99980000')

        Args:
            precision: (int)
                (Default 8) The number of decimal places to print

        Returns:
            Tuple of (latitude, longitude)
        """
        width = precision + 5
        return (
            f'{self.latitude:{width}.{precision}f}',
            f'{self.longitude:{width}.{precision}f}',
        )
