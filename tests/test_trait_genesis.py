"""Tests for founder trait genesis."""

import dataclasses
import os
import subprocess
import sys
from pathlib import Path

import pytest

from protozoa.config.genetics import TRAIT_CATEGORY_ORDER
from protozoa.exceptions import OutOfRangeError
from protozoa.genetics import (
    BEHAVIORAL_TRAIT_SPECS,
    CATEGORY_TYPES,
    EVOLUTIONARY_TRAIT_SPECS,
    PHYSICAL_TRAIT_SPECS,
    VISUAL_TRAIT_SPECS,
    TraitGenesisEngine,
    record_to_json,
)
from protozoa.util.rng import MissingStreamError

REPO_ROOT = Path(__file__).resolve().parents[1]

_SUBPROCESS_SCRIPT = """
import sys
from protozoa.entropy import SeededEntropySource
from protozoa.genetics import TraitGenesisEngine, record_to_json
from protozoa.models import BlockData

block = BlockData(hash=sys.argv[1], height=840000, nonce=123456)
stream = SeededEntropySource.from_block(block).derive_stream("organism-1")
record = TraitGenesisEngine().generate("organism-1", stream)
sys.stdout.write(record_to_json(record).decode("utf-8"))
"""


def _generate_in_subprocess(block_hash: str, hash_seed: str) -> str:
    env = dict(os.environ)
    env["PYTHONHASHSEED"] = hash_seed
    env["PYTHONPATH"] = str(REPO_ROOT) + os.pathsep + env.get("PYTHONPATH", "")
    result = subprocess.run(
        [sys.executable, "-c", _SUBPROCESS_SCRIPT, block_hash],
        capture_output=True,
        check=True,
        cwd=str(REPO_ROOT),
        env=env,
        text=True,
    )
    return result.stdout


class TestGenesisScenario:
    def test_identical_across_processes(self, block_data, entropy_source, genesis_engine):
        local = genesis_engine.generate("organism-1", entropy_source.derive_stream("organism-1"))
        first = _generate_in_subprocess(block_data.hash, "1")
        second = _generate_in_subprocess(block_data.hash, "2")
        assert first == second
        assert first == record_to_json(local).decode("utf-8")

    def test_field_draw_order(self, entropy_source, genesis_engine):
        stream = entropy_source.derive_stream("organism-1")
        replay = stream.clone()
        record = genesis_engine.generate("organism-1", stream)

        for name in TRAIT_CATEGORY_ORDER:
            category = record.category(name)
            for spec in CATEGORY_TYPES[name].SPECS:
                assert getattr(category, spec.name) == spec.random_value(replay), f"{name}.{spec.name}"
        assert replay.draws == stream.draws

    def test_founder_shape(self, stream, genesis_engine):
        record = genesis_engine.generate("organism-1", stream, generated_at=1700000000.0)
        assert record.organism_id == "organism-1"
        assert record.generation == 0
        assert record.parent_ids == ()
        assert record.mutation_history == ()
        assert record.generated_at == 1700000000.0
        assert record.is_founder
        assert record.validate() == []


class TestGenesisDeterminism:
    def test_clone_yields_identical_record(self, stream, genesis_engine):
        twin = stream.clone()
        first = genesis_engine.generate("organism-1", stream)
        second = genesis_engine.generate("organism-1", twin)
        assert first == second
        assert record_to_json(first) == record_to_json(second)

    def test_stream_position_matters(self, stream, genesis_engine):
        first = genesis_engine.generate("organism-1", stream)
        second = genesis_engine.generate("organism-1", stream)
        assert first.categories() != second.categories()

    def test_different_keys_differ(self, entropy_source, genesis_engine):
        a = genesis_engine.generate("a", entropy_source.derive_stream("a"))
        b = genesis_engine.generate("b", entropy_source.derive_stream("b"))
        assert a.categories() != b.categories()


class TestGenesisBounds:
    @pytest.mark.parametrize("index", range(50))
    def test_all_traits_within_bounds(self, entropy_source, genesis_engine, index):
        key = f"organism-{index}"
        record = genesis_engine.generate(key, entropy_source.derive_stream(key))
        for name, category in record.categories().items():
            for spec in category.SPECS:
                value = getattr(category, spec.name)
                assert spec.contains(value), f"{name}.{spec.name}={value!r}"

    def test_aggression_is_discrete(self, stream, genesis_engine):
        record = genesis_engine.generate("organism-1", stream)
        assert isinstance(record.behavioral.aggression, int)
        assert 1 <= record.behavioral.aggression <= 10

    def test_colors_are_lowercase_hex(self, stream, genesis_engine):
        record = genesis_engine.generate("organism-1", stream)
        for color in (record.visual.primary_color, record.visual.secondary_color):
            assert len(color) == 7
            assert color.startswith("#")
            assert color == color.lower()
            int(color[1:], 16)

    def test_replaced_value_fails_validation(self, stream, genesis_engine):
        record = genesis_engine.generate("organism-1", stream)
        broken = dataclasses.replace(record, physical=record.physical.with_value("mass", 99.0))
        assert any("physical.mass" in issue for issue in broken.validate())
        with pytest.raises(OutOfRangeError):
            broken.assert_valid()


class TestGenesisErrors:
    def test_missing_stream(self, genesis_engine):
        with pytest.raises(MissingStreamError):
            genesis_engine.generate("organism-1", None)

    @pytest.mark.parametrize("organism_id", ["", None])
    def test_empty_id(self, stream, genesis_engine, organism_id):
        with pytest.raises(ValueError):
            genesis_engine.generate(organism_id, stream)


class TestSchemaIntrospection:
    def test_schema_field_names_are_pinned(self):
        assert TraitGenesisEngine.schema() == (
            (
                "visual",
                (
                    "primary_color",
                    "secondary_color",
                    "size",
                    "opacity",
                    "shape",
                    "particle_density",
                    "glow_intensity",
                ),
            ),
            ("behavioral", ("speed", "aggression", "sociability", "curiosity", "efficiency", "adaptability")),
            ("physical", ("mass", "collision_radius", "energy_capacity", "durability", "regeneration")),
            ("evolutionary", ("fitness", "stability", "reproductivity", "longevity")),
        )

    def test_spec_tuples_match_schema(self):
        schema = dict(TraitGenesisEngine.schema())
        assert tuple(schema) == TRAIT_CATEGORY_ORDER
        assert schema["visual"] == tuple(s.name for s in VISUAL_TRAIT_SPECS)
        assert schema["behavioral"] == tuple(s.name for s in BEHAVIORAL_TRAIT_SPECS)
        assert schema["physical"] == tuple(s.name for s in PHYSICAL_TRAIT_SPECS)
        assert schema["evolutionary"] == tuple(s.name for s in EVOLUTIONARY_TRAIT_SPECS)

    def test_schema_has_22_fields(self):
        assert sum(len(fields) for _, fields in TraitGenesisEngine.schema()) == 22

    def test_dataclass_fields_follow_specs_order(self):
        for category_type in CATEGORY_TYPES.values():
            names = tuple(f.name for f in dataclasses.fields(category_type))
            assert names == category_type.field_names()

    def test_spec_for(self):
        spec = TraitGenesisEngine.spec_for("behavioral", "aggression")
        assert (spec.min_val, spec.max_val) == (1, 10)
        with pytest.raises(KeyError):
            TraitGenesisEngine.spec_for("behavioral", "wingspan")
        with pytest.raises(KeyError):
            TraitGenesisEngine.spec_for("auditory", "pitch")

    def test_mutate_field_uses_one_mapping(self, stream, genesis_engine):
        value = genesis_engine.mutate_field("visual", "shape", stream)
        assert value in ("circle", "square", "triangle", "hexagon", "star", "diamond")
