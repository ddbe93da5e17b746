"""Tests for formation pattern generation and blending."""

import math

import pytest

from protozoa.config.spatial import FIBONACCI_SPIRAL_RADIUS
from protozoa.entropy import derive_stream, seed_from_entropy
from protozoa.math_utils import Vector3, centroid
from protozoa.spatial import (
    BUILTIN_PATTERNS,
    FormationPattern,
    PatternClass,
    PatternDefinition,
    SpatialPatternGenerator,
    blend_patterns,
)

GEOMETRIC_IDS = ["fibonacci-spiral", "sphere", "helix", "torus", "line", "circle", "cube"]
STOCHASTIC_IDS = ["scatter", "random-sphere", "cylinder"]


@pytest.fixture
def generator():
    return SpatialPatternGenerator()


class TestCardinality:
    @pytest.mark.parametrize("count", [0, 1, 2, 3, 7, 64])
    @pytest.mark.parametrize("pattern_id", GEOMETRIC_IDS + STOCHASTIC_IDS + ["no-such-pattern"])
    def test_exact_count(self, generator, pattern_id, count):
        pattern = generator.generate(pattern_id, count)
        assert len(pattern.positions) == count
        assert pattern.id == pattern_id
        for position in pattern.positions:
            assert all(math.isfinite(c) for c in position)

    def test_negative_count(self, generator):
        with pytest.raises(ValueError):
            generator.generate("circle", -1)

    @pytest.mark.parametrize("count", [2.5, "3", True])
    def test_non_int_count(self, generator, count):
        with pytest.raises(TypeError):
            generator.generate("circle", count)


class TestFibonacciSpiral:
    def test_scenario_500(self, generator):
        pattern = generator.generate("fibonacci-spiral", 500)
        assert len(pattern.positions) == 500
        assert pattern.pattern_class is PatternClass.GEOMETRIC
        assert not pattern.fallback
        for position in pattern.positions:
            assert position.length() == pytest.approx(FIBONACCI_SPIRAL_RADIUS)

    def test_heights_mirror_about_origin(self, generator):
        positions = generator.generate("fibonacci-spiral", 500).positions
        heights = [p.y for p in positions]
        for i in range(250):
            assert heights[i] == pytest.approx(-heights[499 - i])

    def test_centroid_near_origin(self, generator):
        center = centroid(generator.generate("fibonacci-spiral", 500).positions)
        assert center.length() < 1.0


class TestGeometricPatterns:
    def test_geometric_ignores_stream(self, generator):
        stream = derive_stream(seed_from_entropy(b"ignored"), "k")
        with_stream = generator.generate("helix", 10, stream)
        assert with_stream == generator.generate("helix", 10)
        assert stream.draws == 0

    def test_sphere_poles(self, generator):
        positions = generator.generate("sphere", 5).positions
        assert positions[0].y == pytest.approx(50.0)
        assert positions[-1].y == pytest.approx(-50.0)

    def test_line_is_centred(self, generator):
        positions = generator.generate("line", 5).positions
        assert [p.x for p in positions] == pytest.approx([-50.0, -25.0, 0.0, 25.0, 50.0])
        assert generator.generate("line", 1).positions[0] == Vector3()

    def test_circle_is_flat_ring(self, generator):
        for position in generator.generate("circle", 12).positions:
            assert position.y == 0.0
            assert position.length() == pytest.approx(50.0)

    def test_cube_grid(self, generator):
        positions = generator.generate("cube", 8).positions
        assert {p.to_tuple() for p in positions} == {
            (x, y, z) for x in (-50.0, 50.0) for y in (-50.0, 50.0) for z in (-50.0, 50.0)
        }

    def test_helix_height_range(self, generator):
        heights = [p.y for p in generator.generate("helix", 30).positions]
        assert min(heights) == pytest.approx(-50.0)
        assert max(heights) < 50.0

    def test_torus_within_radii(self, generator):
        for position in generator.generate("torus", 40).positions:
            ring = math.hypot(position.x, position.z)
            assert 30.0 - 1e-9 <= ring <= 70.0 + 1e-9


class TestStochasticPatterns:
    @pytest.mark.parametrize("pattern_id", STOCHASTIC_IDS)
    def test_reproducible_without_stream(self, pattern_id):
        first = SpatialPatternGenerator().generate(pattern_id, 20)
        second = SpatialPatternGenerator().generate(pattern_id, 20)
        assert first == second
        assert first.pattern_class is PatternClass.STOCHASTIC

    @pytest.mark.parametrize("pattern_id", STOCHASTIC_IDS)
    def test_uses_caller_stream(self, generator, pattern_id):
        stream = derive_stream(seed_from_entropy(b"formation"), "k")
        generator.generate(pattern_id, 10, stream)
        assert stream.draws > 0

    def test_seed_changes_layout(self):
        default = SpatialPatternGenerator().generate("scatter", 10)
        reseeded = SpatialPatternGenerator(seed_from_entropy(b"other")).generate("scatter", 10)
        assert default != reseeded

    def test_scatter_within_cube(self, generator):
        for position in generator.generate("scatter", 200).positions:
            assert all(-50.0 <= c <= 50.0 for c in position)

    def test_random_sphere_on_surface(self, generator):
        for position in generator.generate("random-sphere", 100).positions:
            assert position.length() == pytest.approx(50.0)

    def test_cylinder_within_bounds(self, generator):
        for position in generator.generate("cylinder", 50).positions:
            assert math.hypot(position.x, position.z) <= 50.0 + 1e-9
            assert -50.0 <= position.y <= 50.0


class TestRegistry:
    def test_unknown_pattern_falls_back(self, generator, caplog):
        with caplog.at_level("DEBUG", logger="protozoa.spatial.generator"):
            pattern = generator.generate("no-such-pattern", 4)
        assert pattern.fallback
        assert pattern.pattern_class is PatternClass.STOCHASTIC
        assert "no-such-pattern" in caplog.text

    def test_available_patterns(self, generator):
        assert set(generator.available_patterns()) == set(GEOMETRIC_IDS + STOCHASTIC_IDS)
        assert generator.is_known_pattern("torus")
        assert not generator.is_known_pattern("pentagram")

    def test_register_is_per_instance(self, generator):
        definition = PatternDefinition(
            pattern_id="origin",
            pattern_class=PatternClass.GEOMETRIC,
            build=lambda count, _stream: [Vector3() for _ in range(count)],
        )
        generator.register(definition)
        assert generator.generate("origin", 3).positions == (Vector3(), Vector3(), Vector3())
        assert not SpatialPatternGenerator().is_known_pattern("origin")
        assert "origin" not in BUILTIN_PATTERNS


def _pattern(points):
    return FormationPattern(
        id="manual",
        positions=tuple(Vector3(*p) for p in points),
        pattern_class=PatternClass.GEOMETRIC,
    )


class TestBlending:
    def test_endpoints(self, generator):
        a = generator.generate("circle", 10)
        b = generator.generate("line", 10)
        assert blend_patterns(a, b, 0.0).positions == a.positions
        assert blend_patterns(a, b, 1.0).positions == b.positions
        assert blend_patterns(a, b, 1.0).id == "line"
        assert blend_patterns(a, b, 0.5).id == "circle"

    def test_midpoint(self):
        blended = blend_patterns(_pattern([(0, 0, 0)]), _pattern([(10, -4, 2)]), 0.5)
        assert blended.positions == (Vector3(5, -2, 1),)

    def test_alpha_is_clamped(self):
        a = _pattern([(0, 0, 0)])
        b = _pattern([(10, 0, 0)])
        assert blend_patterns(a, b, -3.0).positions == a.positions
        assert blend_patterns(a, b, 7.0).positions == b.positions

    def test_shorter_length_wins(self):
        blended = blend_patterns(_pattern([(0, 0, 0)] * 5), _pattern([(1, 1, 1)] * 3), 0.5)
        assert len(blended.positions) == 3
