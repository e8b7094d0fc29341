"""Program-level operations over the flat workout arena.

Weeks and days are tags on each workout (``week_number``, ``day_of_week``);
``weeks`` and ``group_by_day`` derive the hierarchy at read time. A workout's
``order`` is dense within its (week, day) group.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

from program_builder.models.program import DayGroup, Program, Week, Workout
from .workouts import (
    duplicate_workout,
    edit_finisher,
    edit_workout_scope,
    new_workout,
    set_day_of_week,
    set_emom,
    supports_emom,
)

logger = logging.getLogger(__name__)

DAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
UNASSIGNED = "Unassigned"


# ---- lookup ----


def find_workout(program: Program, workout_id: str) -> Optional[Workout]:
    return next((w for w in program.workouts if w.id == workout_id), None)


def week_numbers(program: Program) -> List[int]:
    numbers = sorted({w.week_number for w in program.workouts})
    return numbers or [1]


def next_week_number(program: Program) -> int:
    return max(week_numbers(program)) + 1


def workouts_for_week(program: Program, week: int) -> List[Workout]:
    return [w for w in program.workouts if w.week_number == week]


def weeks(program: Program) -> List[Week]:
    return [Week(number=n, workouts=workouts_for_week(program, n)) for n in week_numbers(program)]


def all_ids(program: Program) -> List[str]:
    """Every entity id in the tree (workouts, finishers, entries, sets), duplicates included."""
    ids: List[str] = []
    for w in program.workouts:
        ids.append(w.id)
        scopes = [w.exercises, w.warmup_exercises]
        if w.finisher is not None:
            ids.append(w.finisher.id)
            scopes.append(w.finisher.exercises)
        for scope in scopes:
            for e in scope:
                ids.append(e.id)
                ids.extend(s.id for s in e.sets)
    return ids


# ---- day groups ----


def _day_sort_key(day: Optional[int]) -> int:
    return 7 if day is None else day


def group_by_day(workouts: Sequence[Workout]) -> List[DayGroup]:
    """Group one week's workouts by day, Monday first and unassigned last."""
    by_day: Dict[Optional[int], List[Workout]] = {}
    for w in workouts:
        by_day.setdefault(w.day_of_week, []).append(w)
    return [
        DayGroup(
            day_of_week=day,
            day_name=UNASSIGNED if day is None else DAY_NAMES[day],
            workouts=sorted(by_day[day], key=lambda w: w.order),
        )
        for day in sorted(by_day, key=_day_sort_key)
    ]


def _day_group(workouts: Sequence[Workout], week: int, day: Optional[int]) -> List[Workout]:
    return sorted(
        (w for w in workouts if w.week_number == week and w.day_of_week == day),
        key=lambda w: w.order,
    )


def _renumber_day_group(workouts: List[Workout], week: int, day: Optional[int]) -> List[Workout]:
    positions = {w.id: i for i, w in enumerate(_day_group(workouts, week, day))}
    return [
        w.model_copy(update={"order": positions[w.id]})
        if w.id in positions and w.order != positions[w.id]
        else w
        for w in workouts
    ]


# ---- workout-level dispatch ----


def update_workout(program: Program, workout_id: str, fn: Callable[..., Workout], *args: Any, **kwargs: Any) -> Program:
    """Apply a workout-level operation to one workout of the program."""
    target = find_workout(program, workout_id)
    if target is None:
        logger.debug(f"Workout {workout_id} not found")
        return program
    updated = fn(target, *args, **kwargs)
    if updated is target:
        return program
    return program.model_copy(update={
        "workouts": [updated if w.id == workout_id else w for w in program.workouts],
    })


def edit_scope(
    program: Program,
    workout_id: str,
    scope_name: str,
    fn: Callable[..., Any],
    *args: Any,
    **kwargs: Any,
) -> Program:
    """Apply a scope operation to a workout's exercises, warmup or finisher exercises."""
    return update_workout(program, workout_id, edit_workout_scope, scope_name, fn, *args, **kwargs)


def scope_category(program: Program, workout_id: str, scope_name: str) -> str:
    """Set schema for new sets in a scope: the finisher's own category, else the program's."""
    workout = find_workout(program, workout_id)
    if scope_name == "finisher" and workout is not None and workout.finisher is not None:
        return workout.finisher.category
    return program.category


# ---- workouts ----


def add_workout(program: Program, week_number: int = 1, name: Optional[str] = None) -> Program:
    if week_number < 1:
        logger.debug(f"Week {week_number} is not a valid week number")
        return program
    in_week = workouts_for_week(program, week_number)
    workout = new_workout(
        name or f"Workout {len(in_week) + 1}",
        week_number=week_number,
        order=len(_day_group(program.workouts, week_number, None)),
    )
    return program.model_copy(update={"workouts": [*program.workouts, workout]})


def delete_workout(program: Program, workout_id: str) -> Program:
    target = find_workout(program, workout_id)
    if target is None:
        logger.debug(f"Workout {workout_id} not found; nothing deleted")
        return program
    remaining = [w for w in program.workouts if w.id != workout_id]
    return program.model_copy(update={
        "workouts": _renumber_day_group(remaining, target.week_number, target.day_of_week),
    })


def assign_day(program: Program, workout_id: str, day: Optional[int]) -> Program:
    """Move a workout to another day group, appending it there."""
    target = find_workout(program, workout_id)
    if target is None:
        return program
    moved = set_day_of_week(target, day)
    if moved is target:
        return program
    moved = moved.model_copy(update={"order": len(_day_group(program.workouts, target.week_number, day))})
    workouts = [moved if w.id == workout_id else w for w in program.workouts]
    return program.model_copy(update={
        "workouts": _renumber_day_group(workouts, target.week_number, target.day_of_week),
    })


def copy_workout(program: Program, workout_id: str) -> Program:
    """Duplicate a workout in place, as "<name> (Copy)" at the end of its day group."""
    source = find_workout(program, workout_id)
    if source is None:
        return program
    copy = duplicate_workout(source).model_copy(update={
        "name": f"{source.name} (Copy)",
        "order": len(_day_group(program.workouts, source.week_number, source.day_of_week)),
    })
    return program.model_copy(update={"workouts": [*program.workouts, copy]})


def reorder_workouts(program: Program, from_id: str, to_id: str) -> Program:
    """Move ``from_id`` to ``to_id``'s slot. Only valid inside one week's day group."""
    moving = find_workout(program, from_id)
    anchor = find_workout(program, to_id)
    if moving is None or anchor is None or from_id == to_id:
        return program
    if (moving.week_number, moving.day_of_week) != (anchor.week_number, anchor.day_of_week):
        logger.debug(f"Reorder {from_id} -> {to_id}: workouts are in different day groups")
        return program

    group = _day_group(program.workouts, moving.week_number, moving.day_of_week)
    ids = [w.id for w in group]
    group.pop(ids.index(from_id))
    group.insert(ids.index(to_id), moving)
    positions = {w.id: i for i, w in enumerate(group)}
    return program.model_copy(update={
        "workouts": [
            w.model_copy(update={"order": positions[w.id]})
            if w.id in positions and w.order != positions[w.id]
            else w
            for w in program.workouts
        ],
    })


def set_workout_emom(program: Program, workout_id: str, enabled: bool, interval_seconds: Optional[int] = None) -> Program:
    if enabled and not supports_emom(program.category):
        logger.debug(f"EMOM is not available for {program.category} programs")
        return program
    return update_workout(program, workout_id, set_emom, enabled, interval_seconds)


def set_finisher_emom(program: Program, workout_id: str, enabled: bool, interval_seconds: Optional[int] = None) -> Program:
    workout = find_workout(program, workout_id)
    if workout is None or workout.finisher is None:
        return program
    if enabled and not supports_emom(workout.finisher.category):
        logger.debug(f"EMOM is not available for {workout.finisher.category} finishers")
        return program
    return update_workout(program, workout_id, edit_finisher, set_emom, enabled, interval_seconds)


# ---- weeks ----


def duplicate_week(program: Program, source_week: int) -> Program:
    """Clone every workout of ``source_week`` into a new week after the last one."""
    sources = workouts_for_week(program, source_week)
    if not sources:
        logger.debug(f"Week {source_week} has no workouts to duplicate")
        return program
    target_week = next_week_number(program)
    clones = [duplicate_workout(w).model_copy(update={"week_number": target_week}) for w in sources]
    logger.info(f"Duplicated week {source_week} into week {target_week} ({len(clones)} workouts)")
    return program.model_copy(update={"workouts": [*program.workouts, *clones]})


def delete_week(program: Program, week: int) -> Program:
    numbers = week_numbers(program)
    if week not in numbers:
        logger.debug(f"Week {week} does not exist")
        return program
    if len(numbers) <= 1:
        logger.debug(f"Week {week} is the only week; a program keeps at least one")
        return program
    logger.info(f"Deleting week {week}")
    return program.model_copy(update={
        "workouts": [w for w in program.workouts if w.week_number != week],
    })
