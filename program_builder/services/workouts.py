from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Literal, Optional, TypeVar, Union

from program_builder.config import get_settings
from program_builder.models.exercise import CATEGORIES, ExerciseRef
from program_builder.models.program import ExerciseEntry, Finisher, Workout
from .entries import clone_entry, renumber_entries
from .ids import new_id
from .scope import add_warmup_entry, find_entry

logger = logging.getLogger(__name__)

ScopeName = Literal["exercises", "warmup", "finisher"]

EMOM_CATEGORIES = ("cardio", "hyrox", "hybrid")

TimedHost = TypeVar("TimedHost", Workout, Finisher)


def new_workout(name: str, week_number: int = 1, order: int = 0, day_of_week: Optional[int] = None) -> Workout:
    return Workout(id=new_id(), name=name, week_number=week_number, order=order, day_of_week=day_of_week)


def rename_workout(workout: Workout, name: str) -> Workout:
    return workout.model_copy(update={"name": name})


def set_workout_notes(workout: Workout, notes: str) -> Workout:
    return workout.model_copy(update={"notes": notes})


def set_recovery_notes(workout: Workout, notes: Optional[str]) -> Workout:
    return workout.model_copy(update={"recovery_notes": notes or None})


def set_day_of_week(workout: Workout, day: Optional[int]) -> Workout:
    if day is not None and not (0 <= day <= 6):
        logger.debug(f"Day {day} is not a weekday index (0=Monday..6=Sunday)")
        return workout
    if day == workout.day_of_week:
        return workout
    return workout.model_copy(update={"day_of_week": day})


# ---- EMOM ----


def supports_emom(category: str) -> bool:
    return category in EMOM_CATEGORIES


def set_emom(host: TimedHost, enabled: bool, interval_seconds: Optional[int] = None) -> TimedHost:
    """Toggle EMOM on a workout or finisher. Disabling drops the interval entirely."""
    if not enabled:
        return host.model_copy(update={"is_emom": False, "emom_interval_seconds": None})
    interval = interval_seconds if interval_seconds and interval_seconds > 0 else None
    return host.model_copy(update={
        "is_emom": True,
        "emom_interval_seconds": interval or get_settings().DEFAULT_EMOM_INTERVAL_SECONDS,
    })


def set_emom_interval(host: TimedHost, seconds: int) -> TimedHost:
    if not host.is_emom or seconds <= 0:
        logger.debug(f"EMOM interval {seconds}s rejected (is_emom={host.is_emom})")
        return host
    return host.model_copy(update={"emom_interval_seconds": seconds})


# ---- duplication ----


def _clone_entries(entries: List[ExerciseEntry]) -> List[ExerciseEntry]:
    group_ids: Dict[str, str] = {}
    return [clone_entry(e, group_ids) for e in entries]


def clone_finisher(finisher: Finisher) -> Finisher:
    return finisher.model_copy(update={"id": new_id(), "exercises": _clone_entries(finisher.exercises)})


def duplicate_workout(workout: Workout) -> Workout:
    """Deep copy with a fresh id on every nested entity and fresh superset group ids.

    Names, values, day, week and order are kept; callers retag as needed.
    """
    return workout.model_copy(update={
        "id": new_id(),
        "exercises": _clone_entries(workout.exercises),
        "warmup_exercises": _clone_entries(workout.warmup_exercises),
        "finisher": clone_finisher(workout.finisher) if workout.finisher else None,
    })


# ---- finisher ----


def attach_finisher(workout: Workout, category: str) -> Workout:
    if workout.finisher is not None:
        logger.debug(f"Workout {workout.id} already has a finisher")
        return workout
    if category not in CATEGORIES:
        logger.debug(f"Unknown finisher category '{category}'")
        return workout
    finisher = Finisher(id=new_id(), name=f"{category.capitalize()} Finisher", category=category)
    return workout.model_copy(update={"finisher": finisher})


def remove_finisher(workout: Workout) -> Workout:
    if workout.finisher is None:
        return workout
    return workout.model_copy(update={"finisher": None})


def update_finisher(
    workout: Workout,
    name: Optional[str] = None,
    notes: Optional[str] = None,
    is_superset: Optional[bool] = None,
) -> Workout:
    if workout.finisher is None:
        return workout
    changes: Dict[str, Any] = {}
    if name is not None:
        changes["name"] = name
    if notes is not None:
        changes["notes"] = notes
    if is_superset is not None:
        changes["is_superset"] = is_superset
    if not changes:
        return workout
    return workout.model_copy(update={"finisher": workout.finisher.model_copy(update=changes)})


def edit_finisher(workout: Workout, fn: Callable[..., Finisher], *args: Any, **kwargs: Any) -> Workout:
    """Apply a finisher-level function (e.g. ``set_emom``) to the workout's finisher."""
    if workout.finisher is None:
        return workout
    updated = fn(workout.finisher, *args, **kwargs)
    if updated is workout.finisher:
        return workout
    return workout.model_copy(update={"finisher": updated})


# ---- warmup ----


def add_warmup_exercise(workout: Workout, ref: ExerciseRef) -> Workout:
    return workout.model_copy(update={"warmup_exercises": add_warmup_entry(workout.warmup_exercises, ref)})


def remove_warmup_exercise(workout: Workout, entry_id: str) -> Workout:
    if find_entry(workout.warmup_exercises, entry_id) is None:
        return workout
    remaining = [e for e in workout.warmup_exercises if e.id != entry_id]
    return workout.model_copy(update={"warmup_exercises": renumber_entries(remaining)})


# ---- scope access ----


def get_scope(workout: Workout, scope_name: str) -> Optional[List[ExerciseEntry]]:
    if scope_name == "exercises":
        return workout.exercises
    if scope_name == "warmup":
        return workout.warmup_exercises
    if scope_name == "finisher":
        return workout.finisher.exercises if workout.finisher else None
    return None


def edit_workout_scope(
    workout: Workout,
    scope_name: Union[ScopeName, str],
    fn: Callable[..., List[ExerciseEntry]],
    *args: Any,
    **kwargs: Any,
) -> Workout:
    """Run a scope operation against one of the workout's entry lists."""
    scope = get_scope(workout, scope_name)
    if scope is None:
        logger.debug(f"Workout {workout.id} has no '{scope_name}' scope")
        return workout
    updated = fn(scope, *args, **kwargs)
    if updated is scope:
        return workout
    if scope_name == "exercises":
        return workout.model_copy(update={"exercises": updated})
    if scope_name == "warmup":
        return workout.model_copy(update={"warmup_exercises": updated})
    return workout.model_copy(update={"finisher": workout.finisher.model_copy(update={"exercises": updated})})
