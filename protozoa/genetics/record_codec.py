"""Trait record serialization/deserialization helpers.

This module is the transfer boundary for ``TraitRecord``. Keeping codecs
separate from the domain model lets the wire format evolve without touching
genesis or inheritance.

JSON output uses sorted keys so that two equal records always serialize to
identical bytes.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

import orjson

from protozoa.config.genetics import TRAIT_CATEGORY_ORDER, TRAIT_SCHEMA_VERSION
from protozoa.exceptions import InvalidTraitRecordError
from protozoa.genetics.record import CATEGORY_TYPES, MutationCause, MutationEvent, TraitRecord

logger = logging.getLogger(__name__)


def record_to_dict(record: TraitRecord) -> Dict[str, Any]:
    """Serialize a trait record into JSON-compatible primitives."""
    data: Dict[str, Any] = {
        "schema_version": record.schema_version,
        "organism_id": record.organism_id,
        "parent_ids": list(record.parent_ids),
        "generation": record.generation,
        "generated_at": record.generated_at,
        "mutation_history": [
            {
                "trait_key": event.trait_key,
                "old_value": event.old_value,
                "new_value": event.new_value,
                "cause": event.cause.value,
            }
            for event in record.mutation_history
        ],
    }
    for name, category in record.categories().items():
        data[name] = category.values()
    return data


def record_from_dict(data: Dict[str, Any]) -> TraitRecord:
    """Deserialize a trait record.

    Unlike lenient persistence loaders, unknown or missing trait fields are
    rejected: a record that does not match the schema cannot be reproduced.

    Raises:
        InvalidTraitRecordError: On a schema mismatch, missing keys, or
            values outside their bounds.
    """
    if not isinstance(data, dict):
        raise InvalidTraitRecordError(f"Trait record must be a mapping, got {type(data).__name__}")
    version = data.get("schema_version")
    if version != TRAIT_SCHEMA_VERSION:
        raise InvalidTraitRecordError(
            f"Unsupported trait schema version {version!r} (expected {TRAIT_SCHEMA_VERSION})"
        )
    parent_ids = data.get("parent_ids", ())
    if not isinstance(parent_ids, (list, tuple)):
        raise InvalidTraitRecordError(f"parent_ids must be a list, got {type(parent_ids).__name__}")
    try:
        categories = {
            name: CATEGORY_TYPES[name].from_values(data[name]) for name in TRAIT_CATEGORY_ORDER
        }
        history = tuple(
            MutationEvent(
                trait_key=str(item["trait_key"]),
                old_value=item["old_value"],
                new_value=item["new_value"],
                cause=MutationCause(item["cause"]),
            )
            for item in data.get("mutation_history", ())
        )
        record = TraitRecord(
            organism_id=data["organism_id"],
            parent_ids=tuple(parent_ids),
            generation=data.get("generation", 0),
            mutation_history=history,
            generated_at=float(data.get("generated_at", 0.0)),
            schema_version=version,
            **categories,
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidTraitRecordError(f"Malformed trait record: {exc}") from exc

    issues = record.validate()
    if issues:
        logger.debug("Rejected trait record %s: %s", data.get("organism_id"), issues)
        raise InvalidTraitRecordError("Invalid trait record:\n" + "\n".join(issues))
    return record


def record_to_json(record: TraitRecord) -> bytes:
    """Serialize to canonical JSON bytes (sorted keys)."""
    return orjson.dumps(record_to_dict(record), option=orjson.OPT_SORT_KEYS)


def record_from_json(payload: bytes) -> TraitRecord:
    try:
        data = orjson.loads(payload)
    except orjson.JSONDecodeError as exc:
        raise InvalidTraitRecordError(f"Trait record is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidTraitRecordError(f"Trait record must be a JSON object, got {type(data).__name__}")
    return record_from_dict(data)
