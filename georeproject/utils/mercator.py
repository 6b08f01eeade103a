"""Closed-form spherical (Web) Mercator formulas.

These never go through pyproj. The sphere has the radius of the Earth at the equator,
which is what web-mapping tile schemes use.
"""

import math
from typing import Tuple

from georeproject.utils.exceptions import InvalidInputException
from georeproject.utils.geo import EARTH_RADIUS_AT_EQUATOR_METERS, to_degrees, to_radians

# Beyond this latitude the forward projection produces infinity or NaN
MAX_MERCATOR_LATITUDE = 89.999999


def longitude_to_mercator_x(longitude: float) -> float:
    return EARTH_RADIUS_AT_EQUATOR_METERS * to_radians(longitude)


def latitude_to_mercator_y(latitude: float) -> float:
    """
    Project a latitude in decimal degrees to a Web Mercator northing in meters.

    Raises:
        InvalidInputException: If the latitude is outside +/- 89.999999 degrees
    """
    if latitude > MAX_MERCATOR_LATITUDE or latitude < -MAX_MERCATOR_LATITUDE:
        raise InvalidInputException(
            f"Latitude {latitude} is outside the valid range, would produce infinity or NaN."
        )
    sin_lat = math.sin(to_radians(latitude))
    return EARTH_RADIUS_AT_EQUATOR_METERS / 2.0 * math.log((1.0 + sin_lat) / (1.0 - sin_lat))


def mercator_x_to_longitude(x: float) -> float:
    """
    Convert a Web Mercator easting to a longitude in [-180, 180).

    An easting may correspond to a longitude that has wrapped around the globe any number
    of times (e.g. a map panned east past the antimeridian); whole rotations are removed,
    so 181 degrees comes back as -179.
    """
    longitude = to_degrees(x / EARTH_RADIUS_AT_EQUATOR_METERS)
    rotations = math.floor((longitude + 180) / 360)
    return longitude - rotations * 360


def mercator_y_to_latitude(y: float) -> float:
    try:
        scale = math.exp(-y / EARTH_RADIUS_AT_EQUATOR_METERS)
    except OverflowError:
        # far enough south that the latitude is -90
        scale = math.inf
    return to_degrees(math.pi / 2 - 2 * math.atan(scale))


def lon_lat_to_mercator(lon: float, lat: float) -> Tuple[float, float]:
    """
    Transform WGS84 longitude/latitude to Web Mercator coordinates.

    Args:
        lon: The longitude in decimal degrees
        lat: The latitude in decimal degrees; must be within +/- 89.999999

    Returns:
        A tuple of (x, y) in Web Mercator meters

    Raises:
        InvalidInputException: If the latitude is too close to (or beyond) a pole

    Examples:
        >>> x, y = lon_lat_to_mercator(45, 0)
        >>> print(f"X: {x:.2f}m")
        X: 5009377.09m
    """
    return longitude_to_mercator_x(lon), latitude_to_mercator_y(lat)


def mercator_to_lon_lat(x: float, y: float) -> Tuple[float, float]:
    """
    Transform Web Mercator coordinates to WGS84 longitude/latitude.

    Any finite (x, y) is accepted: longitudes are normalized into [-180, 180) and
    latitudes saturate toward +/- 90 as |y| grows.

    Args:
        x: The easting in Web Mercator meters
        y: The northing in Web Mercator meters

    Returns:
        A tuple of (lon, lat) in decimal degrees
    """
    return mercator_x_to_longitude(x), mercator_y_to_latitude(y)
