from __future__ import annotations

import logging
import threading
from typing import Dict, Tuple

from pyproj import Transformer
from pyproj.exceptions import ProjError

from georeproject.constructs.coordinate_system import CoordinateSystem
from georeproject.utils.exceptions import UnsupportedTransformException

log = logging.getLogger(__name__)

CacheKey = Tuple[CoordinateSystem, CoordinateSystem]


class TransformationCache:
    """
    A thread-safe cache of pyproj Transformers keyed by an ordered (from, to) pair.

    Transformers are built the first time a pair is requested and kept for the life of
    the cache; the set of coordinate systems in use is small and closed, so entries are
    never evicted. Lookup and construction happen under one lock, so at most one
    Transformer is ever built per pair.

    Examples:
        >>> from georeproject.utils.crs import PA_STATE_PLANE, WGS84
        >>> cache = TransformationCache()
        >>> transformer = cache.get_or_create(WGS84, PA_STATE_PLANE)
        >>> cache.get_or_create(WGS84, PA_STATE_PLANE) is transformer
        True
    """

    def __init__(self):
        self._transformers: Dict[CacheKey, Transformer] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._transformers)

    def __contains__(self, key: CacheKey) -> bool:
        return key in self._transformers

    def get_or_create(
        self, from_cs: CoordinateSystem, to_cs: CoordinateSystem
    ) -> Transformer:
        """
        Get the Transformer for the pair, building and caching it if needed.

        Args:
            from_cs: The coordinate system points are transformed from
            to_cs: The coordinate system points are transformed to

        Returns:
            A Transformer that takes and returns coordinates in (x, y) / (lon, lat) order

        Raises:
            UnsupportedTransformException: If pyproj cannot parse either system or cannot
                build a transformation between them
        """
        key = (from_cs, to_cs)
        with self._lock:
            transformer = self._transformers.get(key)
            if transformer is None:
                transformer = _build_transformer(from_cs, to_cs)
                self._transformers[key] = transformer

        return transformer

    def clear(self):
        with self._lock:
            self._transformers.clear()


def _build_transformer(
    from_cs: CoordinateSystem, to_cs: CoordinateSystem
) -> Transformer:
    log.debug(f"building transformer from {from_cs.name} to {to_cs.name}")
    from_crs = from_cs.to_crs()
    to_crs = to_cs.to_crs()
    try:
        return Transformer.from_crs(from_crs, to_crs, always_xy=True)
    except ProjError as e:
        raise UnsupportedTransformException(
            f"Unable to build a transformation from {from_cs.name} to {to_cs.name}"
        ) from e
