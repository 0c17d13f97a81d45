"""Text rendering for the command-line interface"""

__all__ = ['USAGE', 'format_report']

from geodist.calc import DistanceResult
from geodist.validation import DistanceQuery

USAGE = (
    'USAGE : geodist Type Lat1 Lon1 Lat2 Lon2\n'
    'Type       : 0:BESSEL, 1:GRS80, 2:WGS84\n'
    'Lat1, Lat2 :  -90.00000000 -  [+]90.00000000\n'
    'Lon1, Lon2 : -180.00000000 - [+]180.00000000'
)


def format_report(query: DistanceQuery, result: DistanceResult) -> str:
    """
    Renders a query and its result, e.g.

        Mode        : GRS-80
        Latitude (1):   35.53820000 degrees
        Longitude(1):  132.99980000 degrees
        Latitude (2):   89.99990000 degrees
        Longitude(2):  179.99990000 degrees
        Distance = <ellipsoidal> m ( <spherical> m )
    """
    lat1, lon1 = query.point1.to_str()
    lat2, lon2 = query.point2.to_str()
    return '\n'.join([
        f'Mode        : {query.ellipsoid.display_name}',
        f'Latitude (1): {lat1} degrees',
        f'Longitude(1): {lon1} degrees',
        f'Latitude (2): {lat2} degrees',
        f'Longitude(2): {lon2} degrees',
        f'Distance = {result.ellipsoidal_distance} m ( {result.spherical_distance} m )',
    ])
