import math

from pytest import approx

from geodist.coordinates import GeoPoint
from geodist.utils import logging as geodist_logging

def test_geopoint_init():
    p = GeoPoint(1., 0.)
    assert p.latitude == 1.
    assert p.longitude == 0.

    p = GeoPoint('-35.5382', '+132.9998')
    assert p.latitude == -35.5382
    assert p.longitude == 132.9998

    p = GeoPoint(90, -180)
    assert p.latitude == 90.
    assert p.longitude == -180.

def test_geopoint_out_of_range(caplog, monkeypatch):
    monkeypatch.setattr(geodist_logging, '_WARNINGS', set())

    # Kept as given
    p = GeoPoint(91., 0.)
    assert p.latitude == 91.
    assert 'Latitude outside of [-90, 90]' in caplog.text

    p = GeoPoint(0., -181.)
    assert p.longitude == -181.
    assert 'Longitude outside of [-180, 180]' in caplog.text

def test_geopoint_eq():
    assert GeoPoint(0., 0.) == GeoPoint(0., 0.)
    assert GeoPoint(0., 0.) == GeoPoint('0', '0.0')
    assert GeoPoint(0., 1.) != GeoPoint(1., 0.)
    assert GeoPoint(0., 0.) != (0., 0.)

def test_geopoint_hash():
    points = [
        GeoPoint(0., 0.),
        GeoPoint(0., 0.),
        GeoPoint(1., 1.)
    ]
    assert len(set(points)) == 2
    assert GeoPoint(1., 1.) in set(points)

def test_geopoint_repr():
    assert repr(GeoPoint(1., 0.)) == '<GeoPoint(1.0, 0.0)>'

def test_geopoint_radians():
    lat, lon = GeoPoint(90., -180.).radians
    assert lat == approx(math.pi / 2)
    assert lon == approx(-math.pi)
    assert isinstance(lat, float)

def test_geopoint_to_str():
    assert GeoPoint(35.5382, 132.9998).to_str() == ('  35.53820000', ' 132.99980000')
    assert GeoPoint(-89.99999999, -180).to_str() == (' -89.99999999', '-180.00000000')
    assert GeoPoint(1.5, 2.25).to_str(precision=2) == ('   1.50', '   2.25')
