from __future__ import annotations

import math
import threading
from typing import Optional

from shapely.geometry import Point

from georeproject.constructs.coordinate_system import CoordinateSystem
from georeproject.reprojection.transformation_cache import TransformationCache
from georeproject.utils.crs import (
    KNOWN_COORDINATE_SYSTEMS,
    PA_STATE_PLANE,
    WEB_MERCATOR,
    WGS84,
)
from georeproject.utils.exceptions import UnsupportedTransformException
from georeproject.utils.mercator import lon_lat_to_mercator, mercator_to_lon_lat


def get_coordinate_system_by_srid(srid: int) -> Optional[CoordinateSystem]:
    """
    Look up one of the well-known coordinate systems by its SRID.

    Args:
        srid: The spatial reference id, e.g. 4326

    Returns:
        The matching CoordinateSystem, or None if georeproject doesn't know the SRID

    Examples:
        >>> get_coordinate_system_by_srid(4326).name
        'WGS 84'
        >>> get_coordinate_system_by_srid(27700) is None
        True
    """
    for cs in KNOWN_COORDINATE_SYSTEMS:
        if cs.srid == srid:
            return cs
    return None


class Reprojector:
    """
    Reprojects points between coordinate systems.

    Web Mercator is handled with closed-form spherical Mercator formulas, routed through
    WGS84; every other pair of systems is transformed by pyproj, with one Transformer per
    (from, to) pair kept in a TransformationCache.

    Args:
        cache: The TransformationCache to use; a new, empty one is created if omitted

    Examples:
        >>> from georeproject.utils.crs import PA_STATE_PLANE, WGS84
        >>> reprojector = Reprojector()
        >>> # Philadelphia, to within a foot of (2691389, 233794)
        >>> point = reprojector.reproject(WGS84, PA_STATE_PLANE, -75.171409, 39.946146)
    """

    def __init__(self, cache: Optional[TransformationCache] = None):
        self.cache = cache if cache is not None else TransformationCache()

    def reproject(
        self, from_cs: CoordinateSystem, to_cs: CoordinateSystem, x: float, y: float
    ) -> Point:
        """
        Reproject a point from one coordinate system to another.

        Args:
            from_cs: The coordinate system the point is in
            to_cs: The coordinate system to reproject the point into
            x: The x coordinate (longitude for geographic systems)
            y: The y coordinate (latitude for geographic systems)

        Returns:
            A new Point in the requested coordinate system

        Raises:
            InvalidInputException: If the point has to be projected to Web Mercator and its
                latitude is too close to a pole
            UnsupportedTransformException: If pyproj cannot transform between the systems
        """
        if from_cs.same_system_as(WEB_MERCATOR):
            lon, lat = mercator_to_lon_lat(x, y)
            return self.reproject(WGS84, to_cs, lon, lat)
        if to_cs.same_system_as(WEB_MERCATOR):
            in_wgs84 = self.reproject(from_cs, WGS84, x, y)
            return Point(*lon_lat_to_mercator(in_wgs84.x, in_wgs84.y))

        transformer = self.cache.get_or_create(from_cs, to_cs)
        new_x, new_y = transformer.transform(x, y)

        if math.isinf(new_x) or math.isinf(new_y):
            raise UnsupportedTransformException(
                f"Unable to convert {from_cs.name} ({x}, {y}) -> {to_cs.name} ({new_x}, {new_y})"
            )

        return Point(new_x, new_y)

    def reproject_point(
        self, from_cs: CoordinateSystem, to_cs: CoordinateSystem, point: Point
    ) -> Point:
        return self.reproject(from_cs, to_cs, point.x, point.y)

    def wgs84_to_pa_state_plane(self, lon: float, lat: float) -> Point:
        """Convert WGS84 lon/lat in decimal degrees to PA State Plane South feet."""
        return self.reproject(WGS84, PA_STATE_PLANE, lon, lat)

    def pa_state_plane_to_wgs84(self, x: float, y: float) -> Point:
        """Convert PA State Plane South feet to WGS84 lon/lat in decimal degrees."""
        return self.reproject(PA_STATE_PLANE, WGS84, x, y)

    @staticmethod
    def wgs84_to_web_mercator(lon: float, lat: float) -> Point:
        """
        Convert WGS84 lon/lat in decimal degrees to Web Mercator meters.

        This is a closed-form conversion and does not use pyproj.
        """
        return Point(*lon_lat_to_mercator(lon, lat))

    @staticmethod
    def web_mercator_to_wgs84(x: float, y: float) -> Point:
        """
        Convert Web Mercator meters to WGS84 lon/lat in decimal degrees.

        This is a closed-form conversion and does not use pyproj.
        """
        return Point(*mercator_to_lon_lat(x, y))

    get_coordinate_system_by_srid = staticmethod(get_coordinate_system_by_srid)


_default_reprojector: Optional[Reprojector] = None
_default_lock = threading.Lock()


def get_default_reprojector() -> Reprojector:
    """Get the shared Reprojector used by the module level reproject function."""
    global _default_reprojector
    with _default_lock:
        if _default_reprojector is None:
            _default_reprojector = Reprojector()
    return _default_reprojector


def reproject(
    from_cs: CoordinateSystem, to_cs: CoordinateSystem, x: float, y: float
) -> Point:
    """
    Reproject a point using the shared default Reprojector.

    See Reprojector.reproject for details.
    """
    return get_default_reprojector().reproject(from_cs, to_cs, x, y)
