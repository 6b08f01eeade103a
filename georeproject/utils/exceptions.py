class ReprojectionException(Exception):
    """Base class for errors raised while computing or reprojecting coordinates."""


class InvalidInputException(ReprojectionException, ValueError):
    """
    Raised when a caller passes a coordinate outside the domain of a projection.

    For example, a latitude at or beyond the poles cannot be projected to Web Mercator
    since the resulting northing would be infinite.
    """


class UnsupportedTransformException(ReprojectionException):
    """
    Raised when no transformation can be built between two coordinate systems.

    The underlying pyproj error, if any, is available as ``__cause__``.
    """
