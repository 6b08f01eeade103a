import threading
from unittest import TestCase
from unittest.mock import patch

from shapely.geometry import Point

from georeproject.constructs.coordinate_system import CoordinateSystem
from georeproject.reprojection.reprojector import (
    Reprojector,
    get_coordinate_system_by_srid,
    get_default_reprojector,
    reproject,
)
from georeproject.reprojection.transformation_cache import TransformationCache
from georeproject.utils.crs import NZGD2000, PA_STATE_PLANE, WEB_MERCATOR, WGS84
from georeproject.utils.exceptions import (
    InvalidInputException,
    UnsupportedTransformException,
)

# The center of a parcel in Philadelphia, checked by hand against aerial imagery
PA_STATE_PLANE_POINT = Point(2691389, 233794)
PA_STATE_PLANE_ACCURACY = 1  # feet

WGS84_POINT = Point(-75.171409, 39.946146)
WGS84_ACCURACY = 0.00001  # degrees

NZGD2000_POINT_IN_NZ = Point(1746525.574, 5428516.364)
WGS84_POINT_IN_NZ = Point(174.74967241287231, -41.281499185755614)

WEB_MERCATOR_POINT = Point(-8368042.9720929, 4858119.44634618)
WEB_MERCATOR_ACCURACY = 0.5  # meters


class TestReprojector(TestCase):
    def setUp(self):
        self.reprojector = Reprojector()

    def assertPointsClose(self, actual: Point, expected: Point, accuracy: float):
        self.assertLess(abs(actual.x - expected.x), accuracy, "x not accurate enough")
        self.assertLess(abs(actual.y - expected.y), accuracy, "y not accurate enough")

    def test_pa_state_plane_to_wgs84(self):
        reprojected = self.reprojector.reproject(
            PA_STATE_PLANE, WGS84, PA_STATE_PLANE_POINT.x, PA_STATE_PLANE_POINT.y
        )
        self.assertIsInstance(reprojected, Point)
        self.assertPointsClose(reprojected, WGS84_POINT, WGS84_ACCURACY)

    def test_pa_state_plane_to_wgs84_shortcut(self):
        reprojected = self.reprojector.pa_state_plane_to_wgs84(
            PA_STATE_PLANE_POINT.x, PA_STATE_PLANE_POINT.y
        )
        self.assertPointsClose(reprojected, WGS84_POINT, WGS84_ACCURACY)

    def test_wgs84_to_pa_state_plane(self):
        reprojected = self.reprojector.reproject(
            WGS84, PA_STATE_PLANE, WGS84_POINT.x, WGS84_POINT.y
        )
        self.assertPointsClose(reprojected, PA_STATE_PLANE_POINT, PA_STATE_PLANE_ACCURACY)

    def test_wgs84_to_pa_state_plane_shortcut(self):
        reprojected = self.reprojector.wgs84_to_pa_state_plane(WGS84_POINT.x, WGS84_POINT.y)
        self.assertPointsClose(reprojected, PA_STATE_PLANE_POINT, PA_STATE_PLANE_ACCURACY)

    def test_reproject_point(self):
        reprojected = self.reprojector.reproject_point(WGS84, PA_STATE_PLANE, WGS84_POINT)
        self.assertPointsClose(reprojected, PA_STATE_PLANE_POINT, PA_STATE_PLANE_ACCURACY)

    def test_nzgd2000_to_wgs84(self):
        reprojected = self.reprojector.reproject(
            NZGD2000, WGS84, NZGD2000_POINT_IN_NZ.x, NZGD2000_POINT_IN_NZ.y
        )
        self.assertPointsClose(reprojected, WGS84_POINT_IN_NZ, WGS84_ACCURACY)

    def test_web_mercator_to_wgs84(self):
        reprojected = self.reprojector.reproject(
            WEB_MERCATOR, WGS84, WEB_MERCATOR_POINT.x, WEB_MERCATOR_POINT.y
        )
        self.assertPointsClose(reprojected, WGS84_POINT, WGS84_ACCURACY)

    def test_wgs84_to_web_mercator(self):
        reprojected = self.reprojector.reproject(
            WGS84, WEB_MERCATOR, WGS84_POINT.x, WGS84_POINT.y
        )
        self.assertPointsClose(reprojected, WEB_MERCATOR_POINT, WEB_MERCATOR_ACCURACY)

    def test_web_mercator_shortcuts(self):
        reprojected = Reprojector.wgs84_to_web_mercator(WGS84_POINT.x, WGS84_POINT.y)
        self.assertPointsClose(reprojected, WEB_MERCATOR_POINT, WEB_MERCATOR_ACCURACY)

        reprojected = Reprojector.web_mercator_to_wgs84(
            WEB_MERCATOR_POINT.x, WEB_MERCATOR_POINT.y
        )
        self.assertPointsClose(reprojected, WGS84_POINT, WGS84_ACCURACY)

    def test_web_mercator_never_uses_pyproj(self):
        self.reprojector.reproject(
            WEB_MERCATOR, WEB_MERCATOR, WEB_MERCATOR_POINT.x, WEB_MERCATOR_POINT.y
        )
        self.assertNotIn((WEB_MERCATOR, WGS84), self.reprojector.cache)
        self.assertNotIn((WGS84, WEB_MERCATOR), self.reprojector.cache)
        self.assertNotIn((WEB_MERCATOR, WEB_MERCATOR), self.reprojector.cache)

    def test_pa_state_plane_to_web_mercator_routes_through_wgs84(self):
        direct = self.reprojector.reproject(
            PA_STATE_PLANE, WEB_MERCATOR, PA_STATE_PLANE_POINT.x, PA_STATE_PLANE_POINT.y
        )
        in_wgs84 = self.reprojector.reproject(
            PA_STATE_PLANE, WGS84, PA_STATE_PLANE_POINT.x, PA_STATE_PLANE_POINT.y
        )
        manual = Reprojector.wgs84_to_web_mercator(in_wgs84.x, in_wgs84.y)

        self.assertPointsClose(direct, manual, WEB_MERCATOR_ACCURACY)
        self.assertPointsClose(direct, WEB_MERCATOR_POINT, 2.0)

    def test_web_mercator_to_pa_state_plane(self):
        reprojected = self.reprojector.reproject(
            WEB_MERCATOR, PA_STATE_PLANE, WEB_MERCATOR_POINT.x, WEB_MERCATOR_POINT.y
        )
        self.assertPointsClose(reprojected, PA_STATE_PLANE_POINT, PA_STATE_PLANE_ACCURACY)

    def test_to_web_mercator_rejects_poles(self):
        with self.assertRaises(InvalidInputException):
            self.reprojector.reproject(WGS84, WEB_MERCATOR, 0, 90)
        with self.assertRaises(InvalidInputException):
            Reprojector.wgs84_to_web_mercator(0, -150)

    def test_deterministic(self):
        first = self.reprojector.reproject(NZGD2000, WGS84, 1746525.574, 5428516.364)
        second = self.reprojector.reproject(NZGD2000, WGS84, 1746525.574, 5428516.364)
        self.assertEqual((first.x, first.y), (second.x, second.y))

    def test_bad_wkt_is_unsupported(self):
        bogus = CoordinateSystem("bogus", "EPSG", 0, "PROJCS[this is not wkt")
        with self.assertRaises(UnsupportedTransformException) as ctx:
            self.reprojector.reproject(WGS84, bogus, 0, 0)

        self.assertIsNotNone(ctx.exception.__cause__)
        self.assertEqual(len(self.reprojector.cache), 0)


class TestTransformationCache(TestCase):
    def test_one_transformer_per_pair(self):
        cache = TransformationCache()
        reprojector = Reprojector(cache)

        reprojector.reproject(WGS84, PA_STATE_PLANE, WGS84_POINT.x, WGS84_POINT.y)
        transformer = cache.get_or_create(WGS84, PA_STATE_PLANE)
        reprojector.reproject(WGS84, PA_STATE_PLANE, -75.2, 39.9)

        self.assertEqual(len(cache), 1)
        self.assertIs(cache.get_or_create(WGS84, PA_STATE_PLANE), transformer)

    def test_pairs_are_ordered(self):
        cache = TransformationCache()
        forward = cache.get_or_create(WGS84, PA_STATE_PLANE)
        backward = cache.get_or_create(PA_STATE_PLANE, WGS84)

        self.assertIsNot(forward, backward)
        self.assertEqual(len(cache), 2)
        self.assertIn((WGS84, PA_STATE_PLANE), cache)
        self.assertIn((PA_STATE_PLANE, WGS84), cache)

    def test_instances_are_isolated(self):
        a = Reprojector()
        b = Reprojector()
        a.reproject(WGS84, NZGD2000, *WGS84_POINT_IN_NZ.coords[0])

        self.assertEqual(len(a.cache), 1)
        self.assertEqual(len(b.cache), 0)

    def test_clear(self):
        cache = TransformationCache()
        cache.get_or_create(WGS84, NZGD2000)
        cache.clear()

        self.assertEqual(len(cache), 0)

    def test_concurrent_lookups_build_once(self):
        cache = TransformationCache()
        results = []

        with patch(
            "georeproject.reprojection.transformation_cache._build_transformer",
            side_effect=lambda from_cs, to_cs: object(),
        ) as build:

            def lookup():
                results.append(cache.get_or_create(WGS84, PA_STATE_PLANE))

            threads = [threading.Thread(target=lookup) for _ in range(16)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

        self.assertEqual(build.call_count, 1)
        self.assertEqual(len({id(r) for r in results}), 1)


class TestCoordinateSystemLookup(TestCase):
    def test_known_srids(self):
        self.assertEqual(get_coordinate_system_by_srid(4326).name, "WGS 84")
        self.assertIs(get_coordinate_system_by_srid(2272), PA_STATE_PLANE)
        self.assertIs(get_coordinate_system_by_srid(2193), NZGD2000)
        self.assertIs(get_coordinate_system_by_srid(3857), WEB_MERCATOR)

    def test_unknown_srid(self):
        self.assertIsNone(get_coordinate_system_by_srid(27700))
        self.assertIsNone(Reprojector.get_coordinate_system_by_srid(-1))

    def test_authority_code(self):
        self.assertEqual(WGS84.authority_code, "EPSG:4326")
        self.assertIn("EPSG:2272", repr(PA_STATE_PLANE))

    def test_web_mercator_is_matched_by_name(self):
        renamed = WEB_MERCATOR._replace(srid=900913)
        self.assertTrue(renamed.same_system_as(WEB_MERCATOR))
        self.assertFalse(WGS84.same_system_as(WEB_MERCATOR))


class TestDefaultReprojector(TestCase):
    def test_default_is_shared(self):
        self.assertIs(get_default_reprojector(), get_default_reprojector())

    def test_module_reproject(self):
        reprojected = reproject(WEB_MERCATOR, WGS84, WEB_MERCATOR_POINT.x, WEB_MERCATOR_POINT.y)
        self.assertLess(abs(reprojected.x - WGS84_POINT.x), WGS84_ACCURACY)
        self.assertLess(abs(reprojected.y - WGS84_POINT.y), WGS84_ACCURACY)
