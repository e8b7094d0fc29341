from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from program_builder.models.program import ExerciseEntry, Finisher, Workout
from program_builder.models.sets import ExerciseSet
from program_builder.models.template import (
    ExerciseTemplate,
    FinisherTemplate,
    SetTemplate,
    TemplateRecord,
    WorkoutTemplate,
)
from .entries import renumber_entries
from .ids import new_id, new_superset_group_id

logger = logging.getLogger(__name__)

TemplatePayload = Union[WorkoutTemplate, TemplateRecord, Mapping[str, Any]]


# ---- export ----


def _entry_to_template(entry: ExerciseEntry) -> ExerciseTemplate:
    return ExerciseTemplate(
        **entry.model_dump(exclude={"id", "sets"}),
        sets=[SetTemplate(**s.model_dump(exclude={"id"})) for s in entry.sets],
    )


def finisher_to_template(finisher: Finisher) -> FinisherTemplate:
    return FinisherTemplate(
        name=finisher.name,
        category=finisher.category,
        exercises=[_entry_to_template(e) for e in finisher.exercises],
        notes=finisher.notes,
        is_emom=finisher.is_emom,
        emom_interval=finisher.emom_interval_seconds,
        is_superset=finisher.is_superset,
    )


def to_template(workout: Workout) -> WorkoutTemplate:
    """Snapshot a workout without any entity ids; exercise refs and all set values are kept."""
    return WorkoutTemplate(
        name=workout.name,
        day_of_week=workout.day_of_week,
        exercises=[_entry_to_template(e) for e in workout.exercises],
        notes=workout.notes,
        is_emom=workout.is_emom,
        emom_interval=workout.emom_interval_seconds,
        finisher=finisher_to_template(workout.finisher) if workout.finisher else None,
    )


def save_template(workout: Workout, name: str, description: str = "", category: str = "strength") -> TemplateRecord:
    return TemplateRecord(
        name=name,
        description=description,
        category=category,
        workout_data=to_template(workout),
    )


# ---- import ----


def _coerce_template(payload: Optional[TemplatePayload]) -> Optional[WorkoutTemplate]:
    if payload is None:
        return None
    if isinstance(payload, WorkoutTemplate):
        return payload
    if isinstance(payload, TemplateRecord):
        return payload.workout_data
    if "workout_data" in payload or "workoutData" in payload:
        return TemplateRecord.model_validate(payload).workout_data
    return WorkoutTemplate.model_validate(payload)


def _entries_from_template(templates: Sequence[ExerciseTemplate], start: int) -> List[ExerciseEntry]:
    # Groups that would arrive with fewer than two members lose their tag.
    sizes = Counter(t.superset_group_id for t in templates if t.superset_group_id)
    group_ids: Dict[str, str] = {}
    entries: List[ExerciseEntry] = []
    for i, t in enumerate(templates):
        group = t.superset_group_id
        if group and sizes[group] >= 2:
            group = group_ids.setdefault(group, new_superset_group_id())
        else:
            group = None
        entries.append(ExerciseEntry(
            **t.model_dump(exclude={"sets", "order", "superset_group_id"}),
            id=new_id(),
            order=start + i,
            superset_group_id=group,
            sets=[
                ExerciseSet(**s.model_dump(exclude={"set_number"}), id=new_id(), set_number=n)
                for n, s in enumerate(t.sets, start=1)
            ],
        ))
    return entries


def _finisher_from_template(template: FinisherTemplate) -> Finisher:
    return Finisher(
        id=new_id(),
        name=template.name,
        category=template.category,
        exercises=_entries_from_template(template.exercises, 0),
        notes=template.notes,
        is_emom=template.is_emom,
        emom_interval_seconds=template.emom_interval,
        is_superset=template.is_superset,
    )


def from_template(workout: Workout, template: Optional[TemplatePayload]) -> Workout:
    """Append a template's exercises to ``workout`` with fresh ids.

    Existing exercises are kept. The template finisher is only attached when
    the workout has none. Malformed mappings raise ``pydantic.ValidationError``.
    """
    data = _coerce_template(template)
    if data is None:
        return workout

    added = _entries_from_template(data.exercises, len(workout.exercises))
    if workout.notes:
        notes = f"{workout.notes}\n\n---\nLoaded from template: {data.name or 'Unknown'}"
    else:
        notes = data.notes

    changes: Dict[str, Any] = {
        "exercises": renumber_entries([*workout.exercises, *added]),
        "notes": notes,
    }
    if workout.finisher is None and data.finisher is not None:
        changes["finisher"] = _finisher_from_template(data.finisher)

    logger.info(f"Loaded template '{data.name}' into workout {workout.id} ({len(added)} exercises)")
    return workout.model_copy(update=changes)


def filter_templates(records: Sequence[TemplateRecord], query: str = "", category: str = "all") -> List[TemplateRecord]:
    q = query.strip().lower()
    out: List[TemplateRecord] = []
    for r in records:
        if category not in ("", "all") and r.category != category:
            continue
        if q and q not in r.name.lower() and q not in r.description.lower():
            continue
        out.append(r)
    return out
