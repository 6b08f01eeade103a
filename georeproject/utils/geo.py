import logging
import math

from shapely.geometry import Point

from georeproject.utils.keys import (
    VINCENTY_CONVERGENCE_THRESHOLD,
    VINCENTY_ITERATION_LIMIT,
)

log = logging.getLogger(__name__)

# Unit conversions; multiply a distance in meters by one of these
FEET_PER_METER = 3.2808399
MILES_PER_METER = 0.000621371192
KM_PER_METER = 0.001

EARTH_RADIUS_AVERAGE_METERS = 6371000
EARTH_RADIUS_AT_EQUATOR_METERS = 6378137

# WGS84 ellipsoid parameters
WGS84_ELLIPSOID_A = EARTH_RADIUS_AT_EQUATOR_METERS
WGS84_ELLIPSOID_B = 6356752.3142
WGS84_ELLIPSOID_F = 1 / 298.257223563


def to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * (180 / math.pi)


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * (math.pi / 180)


def haversine_distance_meters(
    lon1: float, lat1: float, lon2: float, lat2: float
) -> float:
    """
    Calculate the great-circle distance between two lat/lon points on a spherical Earth.

    The sphere has the radius of the Earth at the equator. Haversine is faster but less
    accurate than Vincenty.

    Args:
        lon1: The longitude of the first point in decimal degrees
        lat1: The latitude of the first point in decimal degrees
        lon2: The longitude of the second point in decimal degrees
        lat2: The latitude of the second point in decimal degrees

    Returns:
        The distance between the two points in meters. Multiply by FEET_PER_METER,
        MILES_PER_METER, etc. to get other units.

    Examples:
        >>> # Philadelphia City Hall to the Liberty Bell
        >>> d = haversine_distance_meters(-75.163526, 39.952724, -75.150282, 39.949610)
        >>> round(d, -2)
        1200.0
    """
    lat_diff = to_radians(lat2 - lat1)
    lon_diff = to_radians(lon2 - lon1)
    a = math.sin(lat_diff / 2) * math.sin(lat_diff / 2) + math.cos(
        to_radians(lat1)
    ) * math.cos(to_radians(lat2)) * math.sin(lon_diff / 2) * math.sin(lon_diff / 2)
    # rounding can push antipodal points just past 1
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_AT_EQUATOR_METERS * c


def _cos_2sigma_m(
    cos_sigma: float, sin_u1: float, sin_u2: float, cos_sq_alpha: float
) -> float:
    if cos_sq_alpha != 0:
        return cos_sigma - 2 * sin_u1 * sin_u2 / cos_sq_alpha
    if sin_u1 * sin_u2 == 0:
        # equatorial line: the 0/0 term is defined as 0
        return 0.0
    # x / 0 is infinite, which drives the iteration to NaN
    return -math.copysign(math.inf, sin_u1 * sin_u2)


def vincenty_distance_meters(
    lon1: float, lat1: float, lon2: float, lat2: float
) -> float:
    """
    Calculate the distance between two lat/lon points on the WGS84 ellipsoid.

    Vincenty's inverse formula is slower but more accurate than Haversine. It iterates on
    the difference in longitude on the auxiliary sphere until successive values agree to
    within 1e-12 radians.

    Args:
        lon1: The longitude of the first point in decimal degrees
        lat1: The latitude of the first point in decimal degrees
        lon2: The longitude of the second point in decimal degrees
        lat2: The latitude of the second point in decimal degrees

    Returns:
        The distance between the two points in meters, 0.0 for coincident points, or
        NaN if the formula did not converge within 100 iterations (which can happen for
        nearly antipodal points). Callers doing bulk calculations should check the
        result with math.isnan rather than expecting an exception.
    """
    f = WGS84_ELLIPSOID_F
    lon_diff = to_radians(lon2 - lon1)
    u1 = math.atan((1 - f) * math.tan(to_radians(lat1)))
    u2 = math.atan((1 - f) * math.tan(to_radians(lat2)))
    sin_u1, cos_u1 = math.sin(u1), math.cos(u1)
    sin_u2, cos_u2 = math.sin(u2), math.cos(u2)

    lam = lon_diff
    for _ in range(VINCENTY_ITERATION_LIMIT):
        sin_lam, cos_lam = math.sin(lam), math.cos(lam)
        sin_sigma = math.sqrt(
            (cos_u2 * sin_lam) ** 2
            + (cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam) ** 2
        )
        if sin_sigma == 0:
            # co-incident points
            return 0.0
        cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
        sigma = math.atan2(sin_sigma, cos_sigma)
        sin_alpha = cos_u1 * cos_u2 * sin_lam / sin_sigma
        cos_sq_alpha = 1 - sin_alpha * sin_alpha
        cos_2sigma_m = _cos_2sigma_m(cos_sigma, sin_u1, sin_u2, cos_sq_alpha)
        c = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))
        lam_prev = lam
        lam = lon_diff + (1 - c) * f * sin_alpha * (
            sigma
            + c
            * sin_sigma
            * (cos_2sigma_m + c * cos_sigma * (-1 + 2 * cos_2sigma_m * cos_2sigma_m))
        )
        if abs(lam - lam_prev) <= VINCENTY_CONVERGENCE_THRESHOLD:
            break
    else:
        log.debug(
            f"Vincenty formula failed to converge for ({lon1}, {lat1}) -> ({lon2}, {lat2})"
        )
        return math.nan

    a_sq = WGS84_ELLIPSOID_A * WGS84_ELLIPSOID_A
    b_sq = WGS84_ELLIPSOID_B * WGS84_ELLIPSOID_B
    u_sq = cos_sq_alpha * (a_sq - b_sq) / b_sq
    big_a = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    big_b = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    delta_sigma = (
        big_b
        * sin_sigma
        * (
            cos_2sigma_m
            + big_b
            / 4
            * (
                cos_sigma * (-1 + 2 * cos_2sigma_m * cos_2sigma_m)
                - big_b
                / 6
                * cos_2sigma_m
                * (-3 + 4 * sin_sigma * sin_sigma)
                * (-3 + 4 * cos_2sigma_m * cos_2sigma_m)
            )
        )
    )

    return WGS84_ELLIPSOID_B * big_a * (sigma - delta_sigma)


def point_to_point_haversine_meters(a: Point, b: Point) -> float:
    """
    Haversine distance between two lon/lat points.

    Args:
        a: The first point, with x as longitude and y as latitude
        b: The second point, with x as longitude and y as latitude

    Returns:
        The distance in meters
    """
    return haversine_distance_meters(a.x, a.y, b.x, b.y)


def point_to_point_vincenty_meters(a: Point, b: Point) -> float:
    """
    Vincenty distance between two lon/lat points; NaN if the formula does not converge.
    """
    return vincenty_distance_meters(a.x, a.y, b.x, b.y)
