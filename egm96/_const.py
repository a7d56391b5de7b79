"""
Constants declarations for egm96
"""

# Truncation of the spherical harmonic expansion
MAX_DEGREE = 360

# Lowest truncation the synthesis supports; degrees 0 and 1 only enter through
# the fixed low-degree correction terms
MIN_DEGREE = 2

# WGS84(G873) Ellipsoid Constants
WGS84_A = 6378137.0  # Semi-major axis (meters)
WGS84_E2 = 0.00669437999013  # First eccentricity squared
WGS84_GEQT = 9.7803253359  # Normal gravity at the equator (m/s^2)
WGS84_K = 0.00193185265246  # Somigliana gravity-flattening constant
WGS84_GM = 0.3986004418e15  # m^3/s^2, mass of Earth's atmosphere included

# Even degree zonals of the WGS84(G873) normal field, keyed by degree
WGS84_EVEN_ZONALS = {
    2: 0.108262982131e-2,
    4: -0.237091120053e-05,
    6: 0.608346498882e-8,
    8: -0.142681087920e-10,
    10: 0.121439275882e-13,
}

# Converts the height anomaly on the ellipsoid to the undulation (cm -> m)
HEIGHT_ANOMALY_SCALE = 100.0

# Refers the undulation to the WGS84 ellipsoid (meters)
WGS84_UNDULATION_OFFSET = -0.53
