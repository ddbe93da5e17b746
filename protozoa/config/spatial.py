"""Spatial pattern constants.

Distances are in world units; every geometric pattern is centred on the
origin.
"""

DEFAULT_PATTERN_RADIUS = 50.0

FIBONACCI_SPIRAL_RADIUS = DEFAULT_PATTERN_RADIUS
SPHERE_RADIUS = DEFAULT_PATTERN_RADIUS

HELIX_RADIUS = 30.0
HELIX_HEIGHT = 100.0
HELIX_TURNS = 3

TORUS_MAJOR_RADIUS = 50.0
TORUS_MINOR_RADIUS = 20.0

LINE_LENGTH = 100.0
CIRCLE_RADIUS = DEFAULT_PATTERN_RADIUS
CUBE_SIZE = 100.0

CYLINDER_RADIUS = 50.0
CYLINDER_HEIGHT = 100.0

# Stochastic scatter fills a cube of this half extent
SCATTER_HALF_EXTENT = DEFAULT_PATTERN_RADIUS
RANDOM_SPHERE_RADIUS = DEFAULT_PATTERN_RADIUS

# Used when a stochastic pattern is requested without a caller stream
DEFAULT_PATTERN_ENTROPY = b"protozoa.spatial"

# Pattern served for ids with no registered geometry
FALLBACK_PATTERN_ID = "scatter"
