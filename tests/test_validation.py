import pytest

from geodist.coordinates import GeoPoint
from geodist.ellipsoids import Ellipsoid
from geodist.errors import ErrorKind, Failure
from geodist.validation import *


def test_is_valid_selector():
    assert all(is_valid_selector(x) for x in ('0', '1', '2'))
    assert not any(is_valid_selector(x) for x in ('3', '-1', '01', '1.0', '', 'a'))


@pytest.mark.parametrize('value', [
    '0', '-0', '+0', '9', '35.5382', '-35.5382', '+89.99999999', '90', '-90', '90.00000000',
])
def test_is_valid_latitude(value):
    assert is_valid_latitude(value)


@pytest.mark.parametrize('value', [
    '91', '-90.5', '90.00000001', '100', '35.123456789', '35.', '.5', 'abc', '', '|35', '1e1',
])
def test_is_invalid_latitude(value):
    assert not is_valid_latitude(value)


@pytest.mark.parametrize('value', [
    '0', '99', '-99', '132.9998', '+179.99999999', '180', '-180', '-180.0',
])
def test_is_valid_longitude(value):
    assert is_valid_longitude(value)


@pytest.mark.parametrize('value', [
    '181', '180.5', '-180.00000001', '200', '099', '132.123456789', '1,5', '',
])
def test_is_invalid_longitude(value):
    assert not is_valid_longitude(value)


def test_validate_arguments():
    query = validate_arguments(['1', '35.5382', '132.9998', '89.9999', '179.9999'])
    assert query == DistanceQuery(
        Ellipsoid.GRS80,
        GeoPoint(35.5382, 132.9998),
        GeoPoint(89.9999, 179.9999),
    )
    assert query.ellipsoid is Ellipsoid.GRS80


@pytest.mark.parametrize('args,name', [
    (['3', '0', '0', '0', '0'], 'Type'),
    (['0', '91', '0', '0', '0'], 'Lat1'),
    (['0', '0', '181', '0', '0'], 'Lon1'),
    (['0', '0', '0', 'x', '0'], 'Lat2'),
    (['0', '0', '0', '0', '-180.1'], 'Lon2'),
])
def test_validate_arguments_invalid(args, name):
    result = validate_arguments(args)
    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.INVALID_ARGUMENTS
    assert name in result.message


@pytest.mark.parametrize('args', [
    [],
    ['1', '0', '0', '0'],
    ['1', '0', '0', '0', '0', '0'],
])
def test_validate_arguments_count(args):
    result = validate_arguments(args)
    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.INVALID_ARGUMENTS
    assert result.message == f'Expected 5 arguments, received {len(args)}'
