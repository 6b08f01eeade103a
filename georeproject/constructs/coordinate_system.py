from __future__ import annotations

from typing import NamedTuple

from pyproj import CRS
from pyproj.exceptions import CRSError

from georeproject.utils.exceptions import UnsupportedTransformException


class CoordinateSystem(NamedTuple):
    """
    An immutable identifier for a 2-D geographic or projected coordinate reference system.

    A CoordinateSystem pairs a human-readable name and an authority code (SRID) with the
    well-known text (WKT) definition that pyproj parses when a transformation involving
    this system is first needed. Systems are compared by name when routing reprojections.

    Attributes:
        name: The name of the system, matching the name in its WKT definition
        authority: The authority issuing the SRID, e.g. "EPSG"
        srid: The numeric spatial reference id within the authority, e.g. 4326
        wkt: The well-known text definition of the system

    Examples:
        >>> from georeproject.utils.crs import WGS84
        >>> WGS84.name
        'WGS 84'
        >>> WGS84.authority_code
        'EPSG:4326'
    """

    name: str
    authority: str
    srid: int
    wkt: str

    def __repr__(self):
        return f"CoordinateSystem(name={self.name!r}, srid={self.authority_code})"

    @property
    def authority_code(self) -> str:
        return f"{self.authority}:{self.srid}"

    def same_system_as(self, other: CoordinateSystem) -> bool:
        """Two systems are considered the same if they share a name."""
        return self.name == other.name

    def to_crs(self) -> CRS:
        """
        Parse the WKT definition into a pyproj CRS.

        Returns:
            The pyproj CRS described by this system's WKT

        Raises:
            UnsupportedTransformException: If pyproj cannot parse the WKT
        """
        try:
            return CRS.from_wkt(self.wkt)
        except CRSError as e:
            raise UnsupportedTransformException(
                f"Could not parse the definition of coordinate system {self.name}"
            ) from e
