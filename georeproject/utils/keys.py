"""Authority names and numeric tolerances shared across georeproject.

These are constants rather than runtime settings; the set of coordinate systems
georeproject knows about is closed and fixed at import time.
"""

# Authority used for every well-known coordinate system SRID
EPSG_AUTHORITY = "EPSG"

# Maximum number of Vincenty iterations before the formula is considered divergent
VINCENTY_ITERATION_LIMIT = 100

# Convergence threshold (radians) on successive lambda values in Vincenty's formula
VINCENTY_CONVERGENCE_THRESHOLD = 1e-12
