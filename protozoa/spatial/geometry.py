"""Pattern geometry.

Closed-form builders depend only on ``count`` and their constants. Stochastic
builders additionally take a stream and draw a fixed number of values per
point, so the layout is still reproducible from the stream position.

Every builder returns exactly ``count`` points and handles ``count`` of 0 and
1 without dividing by zero.
"""

import math
from typing import List

from protozoa.config.spatial import (
    CIRCLE_RADIUS,
    CUBE_SIZE,
    CYLINDER_HEIGHT,
    CYLINDER_RADIUS,
    FIBONACCI_SPIRAL_RADIUS,
    HELIX_HEIGHT,
    HELIX_RADIUS,
    HELIX_TURNS,
    LINE_LENGTH,
    RANDOM_SPHERE_RADIUS,
    SCATTER_HALF_EXTENT,
    SPHERE_RADIUS,
    TORUS_MAJOR_RADIUS,
    TORUS_MINOR_RADIUS,
)
from protozoa.entropy.stream import Stream
from protozoa.math_utils import Vector3

GOLDEN_ANGLE = math.pi * (3.0 - math.sqrt(5.0))
TWO_PI = 2.0 * math.pi


def _ceil_cbrt(count: int) -> int:
    side = 1
    while side * side * side < count:
        side += 1
    return side


# =============================================================================
# Closed-form patterns
# =============================================================================


def fibonacci_spiral(count: int, radius: float = FIBONACCI_SPIRAL_RADIUS) -> List[Vector3]:
    """Golden-angle spiral over a sphere surface.

    Heights are the midpoints of ``count`` equal bands, so the layout is
    mirror-symmetric in ``y`` and every point lies exactly on ``radius``.
    """
    positions = []
    if count <= 0:
        return positions
    offset = 2.0 / count
    for i in range(count):
        y = i * offset - 1.0 + offset / 2.0
        ring = math.sqrt(max(0.0, 1.0 - y * y))
        phi = i * GOLDEN_ANGLE
        positions.append(Vector3(math.cos(phi) * ring * radius, y * radius, math.sin(phi) * ring * radius))
    return positions


def sphere(count: int, radius: float = SPHERE_RADIUS) -> List[Vector3]:
    """Golden spiral running from the north pole (``y = radius``) to the south pole."""
    positions = []
    for i in range(count):
        y = 1.0 - 2.0 * i / (count - 1) if count > 1 else 0.0
        ring = math.sqrt(max(0.0, 1.0 - y * y))
        theta = GOLDEN_ANGLE * i
        positions.append(Vector3(math.cos(theta) * ring * radius, y * radius, math.sin(theta) * ring * radius))
    return positions


def helix(
    count: int,
    radius: float = HELIX_RADIUS,
    height: float = HELIX_HEIGHT,
    turns: int = HELIX_TURNS,
) -> List[Vector3]:
    positions = []
    if count <= 0:
        return positions
    angle_step = turns * TWO_PI / count
    height_step = height / count
    for i in range(count):
        angle = i * angle_step
        positions.append(Vector3(math.cos(angle) * radius, i * height_step - height / 2.0, math.sin(angle) * radius))
    return positions


def torus(
    count: int,
    major_radius: float = TORUS_MAJOR_RADIUS,
    minor_radius: float = TORUS_MINOR_RADIUS,
) -> List[Vector3]:
    positions = []
    for i in range(count):
        u = i / count * TWO_PI
        v = (i * GOLDEN_ANGLE) % TWO_PI
        tube = major_radius + minor_radius * math.cos(v)
        positions.append(Vector3(tube * math.cos(u), minor_radius * math.sin(v), tube * math.sin(u)))
    return positions


def line(count: int, length: float = LINE_LENGTH) -> List[Vector3]:
    """Evenly spaced points along the x axis, centred on the origin."""
    if count <= 1:
        return [Vector3() for _ in range(count)]
    spacing = length / (count - 1)
    offset = length / 2.0
    return [Vector3(i * spacing - offset, 0.0, 0.0) for i in range(count)]


def circle(count: int, radius: float = CIRCLE_RADIUS) -> List[Vector3]:
    """Evenly spaced ring in the xz plane."""
    positions = []
    for i in range(count):
        angle = i / count * TWO_PI
        positions.append(Vector3(math.cos(angle) * radius, 0.0, math.sin(angle) * radius))
    return positions


def cube(count: int, size: float = CUBE_SIZE) -> List[Vector3]:
    """Grid filling a cube, x varying fastest."""
    side = _ceil_cbrt(count)
    if side > 1:
        spacing = size / (side - 1)
        offset = size / 2.0
    else:
        spacing = offset = 0.0
    positions = []
    for i in range(count):
        x = (i % side) * spacing - offset
        y = ((i // side) % side) * spacing - offset
        z = (i // (side * side)) * spacing - offset
        positions.append(Vector3(x, y, z))
    return positions


# =============================================================================
# Stochastic patterns
# =============================================================================


def scatter(count: int, stream: Stream, half_extent: float = SCATTER_HALF_EXTENT) -> List[Vector3]:
    """Uniform points in an axis-aligned cube (three draws per point)."""
    positions = []
    for _ in range(count):
        x = (stream.next_float() * 2.0 - 1.0) * half_extent
        y = (stream.next_float() * 2.0 - 1.0) * half_extent
        z = (stream.next_float() * 2.0 - 1.0) * half_extent
        positions.append(Vector3(x, y, z))
    return positions


def random_sphere(count: int, stream: Stream, radius: float = RANDOM_SPHERE_RADIUS) -> List[Vector3]:
    """Uniform points on a sphere surface (two draws per point)."""
    positions = []
    for _ in range(count):
        theta = TWO_PI * stream.next_float()
        phi = math.acos(2.0 * stream.next_float() - 1.0)
        positions.append(
            Vector3(
                radius * math.sin(phi) * math.cos(theta),
                radius * math.sin(phi) * math.sin(theta),
                radius * math.cos(phi),
            )
        )
    return positions


def cylinder(
    count: int,
    stream: Stream,
    radius: float = CYLINDER_RADIUS,
    height: float = CYLINDER_HEIGHT,
) -> List[Vector3]:
    """Stacked layers with a random radial distance per point (one draw per point)."""
    positions = []
    if count <= 0:
        return positions
    layers = math.isqrt(count - 1) + 1
    per_layer = -(-count // layers)
    for i in range(count):
        layer = i // per_layer
        index_in_layer = i % per_layer
        y = (layer / (layers - 1)) * height - height / 2.0 if layers > 1 else 0.0
        angle = index_in_layer / per_layer * TWO_PI
        r = radius * math.sqrt(stream.next_float())
        positions.append(Vector3(math.cos(angle) * r, y, math.sin(angle) * r))
    return positions
