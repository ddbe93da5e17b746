"""Tests for the inbound block model."""

import pytest
from pydantic import ValidationError

from protozoa.models import BlockData


def test_from_api_payload():
    block = BlockData.from_api({"hash": "00ab", "height": 10, "nonce": 7, "difficulty": 2.5, "extra": "ignored"})
    assert block.hash == "00ab"
    assert block.height == 10
    assert block.nonce == 7
    assert block.difficulty == 2.5


def test_default_difficulty():
    assert BlockData(hash="00ab", height=0, nonce=0).difficulty == 1.0


@pytest.mark.parametrize(
    "overrides",
    [
        {"hash": ""},
        {"height": -1},
        {"nonce": -1},
        {"nonce": 2**64},
        {"difficulty": -0.5},
    ],
)
def test_field_constraints(overrides):
    data = {"hash": "00ab", "height": 1, "nonce": 1, "difficulty": 1.0}
    data.update(overrides)
    with pytest.raises(ValidationError):
        BlockData(**data)


def test_frozen():
    block = BlockData(hash="00ab", height=1, nonce=1)
    with pytest.raises(ValidationError):
        block.nonce = 2


def test_from_api_missing_key():
    with pytest.raises(KeyError):
        BlockData.from_api({"hash": "00ab", "height": 1})
