"""Validation helpers for trait records.

These are safety checks run after genesis and inheritance. They catch
out-of-range values and wrong types close to the source; a failure means a
mapping function or schema is wrong, not that the caller misbehaved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from protozoa.config.genetics import TRAIT_CATEGORY_ORDER
from protozoa.genetics.trait import TraitCategory

if TYPE_CHECKING:
    from protozoa.genetics.record import TraitRecord


def validate_category(category: TraitCategory, *, path: str) -> List[str]:
    """Validate one category container against its specs.

    Returns a list of human-readable issues; empty means valid.
    """
    issues: List[str] = []
    for spec in category.SPECS:
        if not hasattr(category, spec.name):
            issues.append(f"{path}.{spec.name}: missing attribute")
            continue
        value = getattr(category, spec.name)
        if not spec.contains(value):
            issues.append(f"{path}.{spec.name}: {value!r} not in {spec.describe_bounds()}")
    return issues


def validate_record(record: "TraitRecord") -> List[str]:
    from protozoa.genetics.record import CATEGORY_TYPES, MutationEvent

    issues: List[str] = []
    if not isinstance(record.organism_id, str) or not record.organism_id:
        issues.append(f"record.organism_id: expected non-empty str, got {record.organism_id!r}")
    if isinstance(record.generation, bool) or not isinstance(record.generation, int):
        issues.append(f"record.generation: expected int, got {type(record.generation).__name__}")
    elif record.generation < 0:
        issues.append(f"record.generation: {record.generation} < 0")
    if len(record.parent_ids) not in (0, 2):
        issues.append(f"record.parent_ids: expected 0 or 2 parents, got {len(record.parent_ids)}")
    if record.generation > 0 and not record.parent_ids:
        issues.append(f"record.generation: {record.generation} > 0 but record has no parents")

    for name in TRAIT_CATEGORY_ORDER:
        category = getattr(record, name, None)
        expected = CATEGORY_TYPES[name]
        if not isinstance(category, expected):
            issues.append(f"record.{name}: expected {expected.__name__}, got {type(category).__name__}")
            continue
        issues.extend(validate_category(category, path=f"record.{name}"))

    for index, event in enumerate(record.mutation_history):
        if not isinstance(event, MutationEvent):
            issues.append(f"record.mutation_history[{index}]: expected MutationEvent, got {type(event).__name__}")
    return issues
