"""
# Reprojection Example

An example of moving a point between the well-known coordinate systems and measuring distances
"""


def main():
    """
    First, let's look up the coordinate systems we want by SRID.
    georeproject only knows a handful of systems, so a lookup for anything else returns None rather than raising:
    """

    from georeproject.reprojection.reprojector import get_coordinate_system_by_srid

    wgs84 = get_coordinate_system_by_srid(4326)
    pa_state_plane = get_coordinate_system_by_srid(2272)
    web_mercator = get_coordinate_system_by_srid(3857)

    print(wgs84, pa_state_plane, web_mercator)
    print(get_coordinate_system_by_srid(27700))

    """
    Now, let's build a Reprojector and convert a point in Philadelphia from lon/lat to the Pennsylvania South state plane (feet).
    The first conversion between a pair of systems builds a pyproj Transformer; later conversions reuse it from the reprojector's cache:
    """

    from georeproject.reprojection.reprojector import Reprojector

    reprojector = Reprojector()

    city_hall = reprojector.reproject(wgs84, pa_state_plane, -75.163526, 39.952724)
    print(city_hall)

    """
    Web Mercator is a special case.
    Conversions to and from it never go through pyproj; georeproject uses the closed-form spherical Mercator formulas and routes through WGS84:
    """

    tile_point = reprojector.reproject(pa_state_plane, web_mercator, city_hall.x, city_hall.y)
    print(tile_point)

    """
    Web Mercator can't represent the poles, so asking for a latitude too close to one raises an error:
    """

    from georeproject.utils.exceptions import InvalidInputException

    try:
        reprojector.reproject(wgs84, web_mercator, 0, 90)
    except InvalidInputException as e:
        print(e)

    """
    Finally, let's measure the distance from City Hall to the Liberty Bell.
    Haversine assumes a spherical Earth; Vincenty uses the WGS84 ellipsoid and returns NaN if it can't converge:
    """

    from georeproject.utils.geo import (
        FEET_PER_METER,
        haversine_distance_meters,
        vincenty_distance_meters,
    )

    haversine = haversine_distance_meters(-75.163526, 39.952724, -75.150282, 39.949610)
    vincenty = vincenty_distance_meters(-75.163526, 39.952724, -75.150282, 39.949610)

    print(f"haversine: {haversine:.1f} m, vincenty: {vincenty:.1f} m")
    print(f"that's about {vincenty * FEET_PER_METER:.0f} feet")


if __name__ == "__main__":
    main()
