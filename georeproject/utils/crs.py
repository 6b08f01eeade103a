"""Well-known coordinate systems used throughout georeproject.

This module defines the fixed set of systems georeproject knows by SRID:
- WGS84: geographic longitude/latitude (EPSG:4326)
- PA_STATE_PLANE: Pennsylvania South state plane, US survey feet (EPSG:2272)
- NZGD2000: New Zealand transverse Mercator, meters (EPSG:2193)
- WEB_MERCATOR: spherical Web Mercator, meters (EPSG:3857)
"""

from georeproject.constructs.coordinate_system import CoordinateSystem
from georeproject.utils.keys import EPSG_AUTHORITY

WGS84_WKT = 'GEOGCS["WGS 84",DATUM["WGS_1984",SPHEROID["WGS 84",6378137,298.257223563,AUTHORITY["EPSG","7030"]],AUTHORITY["EPSG","6326"]],PRIMEM["Greenwich",0,AUTHORITY["EPSG","8901"]],UNIT["degree",0.01745329251994328,AUTHORITY["EPSG","9122"]],AUTHORITY["EPSG","4326"]]'

PA_STATE_PLANE_WKT = 'PROJCS["NAD83 / Pennsylvania South (ftUS)",GEOGCS["NAD83",DATUM["North_American_Datum_1983",SPHEROID["GRS 1980",6378137,298.257222101,AUTHORITY["EPSG","7019"]],AUTHORITY["EPSG","6269"]],PRIMEM["Greenwich",0,AUTHORITY["EPSG","8901"]],UNIT["degree",0.01745329251994328,AUTHORITY["EPSG","9122"]],AUTHORITY["EPSG","4269"]],PROJECTION["Lambert_Conformal_Conic_2SP"],PARAMETER["standard_parallel_1",40.96666666666667],PARAMETER["standard_parallel_2",39.93333333333333],PARAMETER["latitude_of_origin",39.33333333333334],PARAMETER["central_meridian",-77.75],PARAMETER["false_easting",1968500],PARAMETER["false_northing",0],UNIT["US survey foot",0.3048006096012192,AUTHORITY["EPSG","9003"]],AUTHORITY["EPSG","2272"]]'

NZGD2000_WKT = 'PROJCS["NZGD_2000_New_Zealand_Transverse_Mercator",GEOGCS["GCS_NZGD_2000",DATUM["D_NZGD_2000",SPHEROID["GRS_1980",6378137.0,298.257222101]],PRIMEM["Greenwich",0.0],UNIT["Degree",0.0174532925199433]],PROJECTION["Transverse_Mercator"],PARAMETER["False_Easting",1600000.0],PARAMETER["False_Northing",10000000.0],PARAMETER["Central_Meridian",173.0],PARAMETER["Scale_Factor",0.9996],PARAMETER["Latitude_Of_Origin",0.0],UNIT["Meter",1.0]]'

# Not a valid definition of Web Mercator, and never parsed. Standard Web Mercator WKT
# gives good eastings but wrong northings through generic WKT transforms, so Web
# Mercator math always uses georeproject.utils.mercator; this only names the system.
WEB_MERCATOR_WKT = 'PROJCS["Mercator Spheric",GEOGCS["WGS84basedSpheric_GCS",DATUM["WGS84basedSpheric_Datum",SPHEROID["WGS84based_Sphere",6378137.0,0.0],TOWGS84[0, 0, 0, 0, 0, 0, 0]],PRIMEM["Greenwich",0.0],UNIT["Degree",0.0174532925199433 ],],PROJECTION["Mercator"], PARAMETER["False_Easting",0.0], PARAMETER["False_Northing",0.0], PARAMETER["Central_Meridian",0.0], PARAMETER["Standard_Parallel_1",0.0], PARAMETER["Latitude_Of_Origin",0.0], UNIT["Meter", 1.0]]'

# WGS84 latitude/longitude coordinate system (EPSG:4326)
# Range: latitude [-90, 90], longitude [-180, 180]
WGS84 = CoordinateSystem("WGS 84", EPSG_AUTHORITY, 4326, WGS84_WKT)

# Pennsylvania State Plane South (EPSG:2272)
# Coordinates are in US survey feet (easting, northing)
PA_STATE_PLANE = CoordinateSystem(
    "NAD83 / Pennsylvania South (ftUS)", EPSG_AUTHORITY, 2272, PA_STATE_PLANE_WKT
)

# New Zealand Transverse Mercator on the NZGD2000 datum (EPSG:2193)
# Coordinates are in meters (easting, northing)
NZGD2000 = CoordinateSystem(
    "NZGD_2000_New_Zealand_Transverse_Mercator", EPSG_AUTHORITY, 2193, NZGD2000_WKT
)

# Web Mercator projected coordinate system (EPSG:3857)
# Used by web-mapping tile schemes; coordinates are in meters (easting, northing)
WEB_MERCATOR = CoordinateSystem(
    "Mercator Spheric", EPSG_AUTHORITY, 3857, WEB_MERCATOR_WKT
)

KNOWN_COORDINATE_SYSTEMS = (PA_STATE_PLANE, WGS84, NZGD2000, WEB_MERCATOR)
