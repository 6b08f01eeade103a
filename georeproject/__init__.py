from georeproject.constructs.coordinate_system import CoordinateSystem
from georeproject.reprojection.reprojector import (
    Reprojector,
    get_coordinate_system_by_srid,
    reproject,
)
from georeproject.reprojection.transformation_cache import TransformationCache
from georeproject.utils.crs import NZGD2000, PA_STATE_PLANE, WEB_MERCATOR, WGS84

__all__ = [
    "CoordinateSystem",
    "Reprojector",
    "TransformationCache",
    "get_coordinate_system_by_srid",
    "reproject",
    "NZGD2000",
    "PA_STATE_PLANE",
    "WEB_MERCATOR",
    "WGS84",
]
