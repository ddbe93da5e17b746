"""Trait schema and mutation constants."""

# Bump whenever a field, bound, or draw order changes. Records carrying
# different versions cannot be bred together.
TRAIT_SCHEMA_VERSION = 1

# Category order is also the genesis draw order.
TRAIT_CATEGORY_ORDER = ("visual", "behavioral", "physical", "evolutionary")

# Visual
COLOR_CHANNEL_SPACE = 2**24  # 8 bits each for r, g, b
VISUAL_SIZE_MIN = 0.5
VISUAL_SIZE_MAX = 2.0
OPACITY_MIN = 0.3
OPACITY_MAX = 1.0
PARTICLE_DENSITY_MIN = 0.5
PARTICLE_DENSITY_MAX = 3.0
GLOW_INTENSITY_MIN = 0.0
GLOW_INTENSITY_MAX = 1.0
ORGANISM_SHAPES = ("circle", "square", "triangle", "hexagon", "star", "diamond")

# Behavioral
SPEED_MIN = 0.5
SPEED_MAX = 2.0
AGGRESSION_MIN = 1
AGGRESSION_MAX = 10
EFFICIENCY_MIN = 0.3
EFFICIENCY_MAX = 1.0

# Physical
MASS_MIN = 0.5
MASS_MAX = 2.0
COLLISION_RADIUS_MIN = 0.7
COLLISION_RADIUS_MAX = 1.5
ENERGY_CAPACITY_MIN = 0.5
ENERGY_CAPACITY_MAX = 2.0
DURABILITY_MIN = 0.5
DURABILITY_MAX = 2.0
REGENERATION_MIN = 0.1
REGENERATION_MAX = 1.0

# Evolutionary
FITNESS_MIN = 0.0
FITNESS_MAX = 100.0
LONGEVITY_MIN = 0.5
LONGEVITY_MAX = 2.0

# Mutation
BASE_MUTATION_RATE = 0.01
# Placeholder for blockchain-difficulty scaling; no mapping has been decided.
DIFFICULTY_MULTIPLIER = 1.0
PARENT_SELECTION_THRESHOLD = 0.5

# Identifiers drawn for offspring when the caller does not name them
ORGANISM_ID_PREFIX = "org"
ORGANISM_ID_LENGTH = 10
