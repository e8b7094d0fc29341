from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from program_builder.config import get_settings
from program_builder.models.exercise import ExerciseRef
from program_builder.models.program import ExerciseEntry
from program_builder.models.sets import ExerciseSet
from .ids import new_id, new_superset_group_id
from .sets import (
    PROTECTED_SET_FIELDS,
    clean_updates,
    create_default_set,
    default_weight_type,
    renumber_sets,
    update_set,
)

logger = logging.getLogger(__name__)

MIN_SETS = 1
MAX_SETS = 10

# Carried from the last set onto every set appended by a resize.
STICKY_SET_FIELDS = (
    "reps",
    "intensity_type",
    "intensity_value",
    "rest_bracket",
    "weight_type",
    "hybrid_mode",
)

HYBRID_MODES = ("strength", "cardio")


def default_set_count(category: str) -> int:
    if category == "hyrox":
        return 1
    return get_settings().DEFAULT_SET_COUNT


def new_entry(
    ref: ExerciseRef,
    order: int,
    category: str = "strength",
    set_count: Optional[int] = None,
    superset_group_id: Optional[str] = None,
) -> ExerciseEntry:
    """Create an entry for catalog record ``ref`` with ``category``-default sets."""
    count = set_count if set_count is not None else default_set_count(category)
    count = max(MIN_SETS, min(MAX_SETS, count))
    weight_type = default_weight_type(ref.equipment)
    return ExerciseEntry(
        id=new_id(),
        exercise_ref_id=ref.id,
        exercise_name=ref.name,
        category=ref.category,
        order=order,
        sets=[create_default_set(n, weight_type, category) for n in range(1, count + 1)],
        superset_group_id=superset_group_id,
    )


def resize_set_count(entry: ExerciseEntry, target_count: int, category: str = "strength") -> ExerciseEntry:
    """Grow or shrink ``entry`` to ``target_count`` sets.

    Growth clones the last set's sticky fields onto each new set, so new sets
    follow the most recent edit rather than the schema defaults. Shrinking
    truncates from the end. Set numbers are always re-derived as 1..n.
    """
    if target_count < MIN_SETS or target_count > MAX_SETS:
        logger.debug(f"Set count {target_count} outside [{MIN_SETS}, {MAX_SETS}] for entry {entry.id}")
        return entry

    current = len(entry.sets)
    if target_count == current:
        return entry

    if target_count < current:
        return entry.model_copy(update={"sets": renumber_sets(entry.sets[:target_count])})

    last = entry.sets[-1] if entry.sets else None
    weight_type = entry.sets[0].weight_type if entry.sets else None
    sets: List[ExerciseSet] = renumber_sets(entry.sets)
    for n in range(current + 1, target_count + 1):
        fresh = create_default_set(n, weight_type, category)
        if last is not None:
            carried = {f: getattr(last, f) for f in STICKY_SET_FIELDS if getattr(last, f) is not None}
            fresh = fresh.model_copy(update=carried)
        sets.append(fresh)
    return entry.model_copy(update={"sets": sets})


def bulk_edit_sets(entry: ExerciseEntry, updates: Mapping[str, Any]) -> ExerciseEntry:
    """Write ``updates`` onto every set, overriding any per-set divergence on those fields."""
    fields = clean_updates(ExerciseSet, updates, protected=PROTECTED_SET_FIELDS)
    if not fields or not entry.sets:
        return entry
    return entry.model_copy(update={"sets": [s.model_copy(update=fields) for s in entry.sets]})


def update_single_set(entry: ExerciseEntry, set_id: str, updates: Mapping[str, Any]) -> ExerciseEntry:
    if not any(s.id == set_id for s in entry.sets):
        logger.debug(f"Set {set_id} not found in entry {entry.id}")
        return entry
    sets = [update_set(s, updates) if s.id == set_id else s for s in entry.sets]
    return entry.model_copy(update={"sets": sets})


def set_hybrid_mode(entry: ExerciseEntry, mode: str) -> ExerciseEntry:
    if mode not in HYBRID_MODES:
        logger.debug(f"Unknown hybrid mode '{mode}'")
        return entry
    return bulk_edit_sets(entry, {"hybrid_mode": mode})


def replace_exercise_identity(entry: ExerciseEntry, ref: ExerciseRef) -> ExerciseEntry:
    """Swap which exercise this is; sets, order, notes and grouping stay."""
    return entry.model_copy(update={
        "exercise_ref_id": ref.id,
        "exercise_name": ref.name,
        "category": ref.category,
    })


def set_entry_notes(entry: ExerciseEntry, notes: str) -> ExerciseEntry:
    return entry.model_copy(update={"notes": notes})


def clone_entry(entry: ExerciseEntry, group_ids: Dict[str, str]) -> ExerciseEntry:
    """Deep copy with fresh ids. ``group_ids`` maps source superset ids to their replacements."""
    group = entry.superset_group_id
    if group is not None:
        group = group_ids.setdefault(group, new_superset_group_id())
    return entry.model_copy(update={
        "id": new_id(),
        "superset_group_id": group,
        "sets": [s.model_copy(update={"id": new_id()}) for s in entry.sets],
    })


def renumber_entries(entries: Sequence[ExerciseEntry], start: int = 0) -> List[ExerciseEntry]:
    return [
        e if e.order == i else e.model_copy(update={"order": i})
        for i, e in enumerate(entries, start=start)
    ]
