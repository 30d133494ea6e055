"""
Constants declarations for geoellipsoid
"""

# Named reference ellipsoids: (semi-major axis in meters, inverse flattening)
ELLIPSOIDS = {
    'AIRY': (6377563.396, 299.3249646),
    'AIRY-MODIFIED': (6377340.189, 299.3249646),
    'AUSTRALIAN': (6378160.0, 298.25),
    'BESSEL-1841': (6377397.155, 299.1528128),
    'CLARKE-1880': (6378249.145, 293.465),
    'EVEREST-1830': (6377276.345, 300.8017),
    'EVEREST-MODIFIED': (6377304.063, 300.8017),
    'FISHER-1960': (6378166.0, 298.3),
    'FISHER-1968': (6378150.0, 298.3),
    'GRS80': (6378137.0, 298.25722210088),
    'HOUGH-1956': (6378270.0, 297.0),
    'HAYFORD': (6378388.0, 297.0),
    'IAU76': (6378140.0, 298.257),
    'KRASSOVSKY-1938': (6378245.0, 298.3),
    'NAD27': (6378206.4, 294.9786982138),
    'NWL-9D': (6378145.0, 298.25),
    'SOUTHAMERICAN-1969': (6378160.0, 298.25),
    'SOVIET-1985': (6378136.0, 298.257),
    'WGS72': (6378135.0, 298.26),
    'WGS84': (6378137.0, 298.257223563),
}

# Meters per distance unit
DISTANCE_FACTORS = {
    'meter': 1.0,
    'foot': 0.3048,
    'kilometer': 1000.0,
    'mile': 1609.344,
    'nautical_mile': 1852.0,
}

# Vincenty inverse: lambda iteration
INVERSE_MAX_ITERATIONS = 20
INVERSE_EPSILON = 1.0e-23
# Largest final lambda change accepted once the iteration cap is reached
INVERSE_TOLERANCE = 1.0e-12

# Vincenty direct: sigma iteration
DIRECT_MAX_ITERATIONS = 100
DIRECT_EPSILON = 0.5e-13

# Range (meters) beyond which the flat-earth displacement is unreliable
FLAT_EARTH_LIMIT_METERS = 10_000.0
