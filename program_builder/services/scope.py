"""Mutation engine over one exercise scope.

A scope is the ordered entry list of a workout (``exercises`` or
``warmup_exercises``) or of its finisher. Every operation takes the scope and
returns a new one; the input list and its entries are never modified. An
invalid request (unknown id, grouped entry where a single one is required,
bad count) returns the very same list object.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from program_builder.models.exercise import ExerciseRef
from program_builder.models.program import ExerciseBlock, ExerciseEntry, SingleBlock, SupersetBlock
from .entries import (
    bulk_edit_sets,
    new_entry,
    renumber_entries,
    replace_exercise_identity,
    resize_set_count,
    set_entry_notes,
    set_hybrid_mode,
    update_single_set,
)
from .ids import new_id, new_superset_group_id
from .sets import HYROX_STATIONS, create_hyrox_station_set, create_warmup_set, default_weight_type

logger = logging.getLogger(__name__)

Scope = List[ExerciseEntry]


def find_entry(scope: Sequence[ExerciseEntry], entry_id: str) -> Optional[ExerciseEntry]:
    return next((e for e in scope if e.id == entry_id), None)


def _edit_entry(scope: Scope, entry_id: str, fn: Callable[..., ExerciseEntry], *args: Any) -> Scope:
    target = find_entry(scope, entry_id)
    if target is None:
        logger.debug(f"Entry {entry_id} not found in scope")
        return scope
    updated = fn(target, *args)
    if updated is target:
        return scope
    return [updated if e.id == entry_id else e for e in scope]


# ---- add / remove ----


def add_exercise(scope: Scope, ref: ExerciseRef, category: str = "strength", set_count: Optional[int] = None) -> Scope:
    return [*scope, new_entry(ref, len(scope), category, set_count)]


def add_hyrox_station(scope: Scope, station: str) -> Scope:
    first_set = create_hyrox_station_set(station)
    if first_set is None:
        logger.debug(f"Unknown hyrox station '{station}'")
        return scope
    entry = ExerciseEntry(
        id=new_id(),
        exercise_ref_id=f"hyrox_{station}",
        exercise_name=HYROX_STATIONS[station]["label"],
        category="hyrox",
        order=len(scope),
        sets=[first_set],
    )
    return [*scope, entry]


def add_warmup_entry(scope: Scope, ref: ExerciseRef) -> Scope:
    entry = ExerciseEntry(
        id=new_id(),
        exercise_ref_id=ref.id,
        exercise_name=ref.name,
        category=ref.category,
        order=len(scope),
        sets=[create_warmup_set(default_weight_type(ref.equipment))],
    )
    return [*scope, entry]


def delete_exercise(scope: Scope, entry_id: str) -> Scope:
    target = find_entry(scope, entry_id)
    if target is None:
        logger.debug(f"Entry {entry_id} not found; nothing deleted")
        return scope
    if target.superset_group_id is not None:
        logger.debug(f"Entry {entry_id} belongs to {target.superset_group_id}; delete the superset instead")
        return scope
    return renumber_entries([e for e in scope if e.id != entry_id])


def reorder_exercises(scope: Scope, from_id: str, to_id: str) -> Scope:
    """Move ``from_id`` to the position of ``to_id``. Both must be ungrouped entries."""
    if from_id == to_id:
        return scope
    ids = [e.id for e in scope]
    if from_id not in ids or to_id not in ids:
        logger.debug(f"Reorder {from_id} -> {to_id}: unknown entry")
        return scope
    moving = scope[ids.index(from_id)]
    anchor = scope[ids.index(to_id)]
    if moving.superset_group_id is not None or anchor.superset_group_id is not None:
        logger.debug(f"Reorder {from_id} -> {to_id}: grouped entries move only with their superset")
        return scope
    reordered = list(scope)
    reordered.pop(ids.index(from_id))
    reordered.insert(ids.index(to_id), moving)
    return renumber_entries(reordered)


# ---- supersets ----


def create_superset(scope: Scope, refs: Sequence[ExerciseRef], category: str = "strength") -> Scope:
    if len(refs) < 2:
        logger.debug(f"Superset needs at least 2 exercises, got {len(refs)}")
        return scope
    group_id = new_superset_group_id()
    start = len(scope)
    members = [
        new_entry(ref, start + i, category, superset_group_id=group_id)
        for i, ref in enumerate(refs)
    ]
    return [*scope, *members]


def delete_superset(scope: Scope, group_id: str) -> Scope:
    remaining = [e for e in scope if e.superset_group_id != group_id]
    if len(remaining) == len(scope):
        logger.debug(f"Superset {group_id} not found")
        return scope
    return renumber_entries(remaining)


def group_exercises(scope: Sequence[ExerciseEntry]) -> List[ExerciseBlock]:
    """Partition into single and superset blocks, each group placed where it is first seen."""
    members: Dict[str, List[ExerciseEntry]] = {}
    for e in scope:
        if e.superset_group_id is not None:
            members.setdefault(e.superset_group_id, []).append(e)

    blocks: List[ExerciseBlock] = []
    for e in scope:
        group = e.superset_group_id
        if group is None:
            blocks.append(SingleBlock(entry=e))
        elif members[group][0] is e:
            blocks.append(SupersetBlock(group_id=group, entries=members[group]))
    return blocks


# ---- per-entry edits ----


def resize_entry_sets(scope: Scope, entry_id: str, count: int, category: str = "strength") -> Scope:
    return _edit_entry(scope, entry_id, resize_set_count, count, category)


def bulk_edit_entry(scope: Scope, entry_id: str, updates: Mapping[str, Any]) -> Scope:
    return _edit_entry(scope, entry_id, bulk_edit_sets, updates)


def update_entry_set(scope: Scope, entry_id: str, set_id: str, updates: Mapping[str, Any]) -> Scope:
    return _edit_entry(scope, entry_id, update_single_set, set_id, updates)


def set_entry_hybrid_mode(scope: Scope, entry_id: str, mode: str) -> Scope:
    return _edit_entry(scope, entry_id, set_hybrid_mode, mode)


def update_entry_notes(scope: Scope, entry_id: str, notes: str) -> Scope:
    return _edit_entry(scope, entry_id, set_entry_notes, notes)


def replace_exercise(scope: Scope, entry_id: str, ref: ExerciseRef) -> Scope:
    target = find_entry(scope, entry_id)
    if target is not None and target.superset_group_id is not None:
        logger.debug(f"Entry {entry_id} belongs to {target.superset_group_id}; replace is for single entries")
        return scope
    return _edit_entry(scope, entry_id, replace_exercise_identity, ref)
