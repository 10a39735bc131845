"""
Fixed point AIS positions and the geometry needed to compare them.

Coordinates are stored the way AIS transmits them: signed 32 bit integers
in units of 1/10000 minute (1/600000 degree).
"""


import math
from collections import namedtuple

from ais_seqmaker.numeric import adjacent_diff


AIS_UNITS_PER_DEG = 600000
NM_PER_DEG = 60.0

MAX_LATITUDE = 180 * AIS_UNITS_PER_DEG
MIN_LATITUDE = -MAX_LATITUDE
MAX_LONGITUDE = 180 * AIS_UNITS_PER_DEG
MIN_LONGITUDE = -MAX_LONGITUDE

MIN_MMSI = 200000000
MAX_MMSI = 799999999


def ais2deg(value):
    return value / AIS_UNITS_PER_DEG


class Point(namedtuple("Point", ["latitude", "longitude"])):

    """
    Latitude and longitude in AIS units.
    """

    __slots__ = ()

    def is_valid(self):
        return (
            MIN_LATITUDE <= self.latitude <= MAX_LATITUDE
            and MIN_LONGITUDE <= self.longitude <= MAX_LONGITUDE
        )

    def dist_nm(self, other):
        return distance(self, other)

    def interpolate(self, other, w):
        return interpolate(self, other, w)


Position = namedtuple("Position", ["t", "x"])
Position.__doc__ = "A `Point` observed at `t`, integer seconds since the epoch."


def is_valid_mmsi(mmsi):
    return MIN_MMSI <= mmsi <= MAX_MMSI


def distance(a, b):
    """
    Distance between two points in nautical miles.

    Uses a flat earth approximation where the longitude difference is
    scaled by the cosine of the mean latitude.  Good enough for the short
    hops between consecutive AIS reports.

    Parameters
    ----------
    a : Point
    b : Point

    Returns
    -------
    float
    """
    dlat_deg = ais2deg(a.latitude - b.latitude)
    dlon_deg = ais2deg(a.longitude - b.longitude)
    mlat_deg = ais2deg(a.latitude + b.latitude) / 2.0

    cos_mlat = math.cos(mlat_deg / 180.0 * math.pi)
    dist_deg = math.sqrt(dlat_deg * dlat_deg + cos_mlat * cos_mlat * dlon_deg * dlon_deg)

    return dist_deg * NM_PER_DEG


def interpolate(a, b, w):
    """
    Blend `a` towards `b` by weight `w` in [0, 1].  The result is truncated
    toward zero, so some precision below one AIS unit is lost.

    Returns
    -------
    Point
    """
    def blend(u, v):
        return int((1.0 - w) * u + w * v)

    return Point(blend(a.latitude, b.latitude), blend(a.longitude, b.longitude))


def accumulated_distance(points):
    """
    Length in nautical miles of the path through `points`.
    """
    return sum(adjacent_diff(points, distance), 0.0)
