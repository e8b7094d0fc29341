from __future__ import annotations

from typing import Any, Iterator

import pytest
from pydantic import ValidationError

from program_builder.models import ExerciseRef, TemplateRecord, Workout
from program_builder.services.entries import update_single_set
from program_builder.services.scope import add_exercise, create_superset
from program_builder.services.templates import filter_templates, from_template, save_template, to_template
from program_builder.services.workouts import attach_finisher, edit_workout_scope, new_workout, set_emom


def build_ref(name: str) -> ExerciseRef:
    return ExerciseRef(id=name.lower().replace(" ", "_"), name=name, equipment=["barbell"])


def build_source() -> Workout:
    w = new_workout("Upper A", day_of_week=0)
    w = edit_workout_scope(w, "exercises", add_exercise, build_ref("Bench Press"))
    w = edit_workout_scope(w, "exercises", create_superset, [build_ref("Row"), build_ref("Curl")])
    w = set_emom(w, True, 45)
    w = w.model_copy(update={"notes": "Keep rest honest"})
    w = attach_finisher(w, "cardio")
    w = edit_workout_scope(w, "finisher", add_exercise, build_ref("Bike"), "cardio")
    return w


def walk_keys(node: Any) -> Iterator[str]:
    if isinstance(node, dict):
        for k, v in node.items():
            yield k
            yield from walk_keys(v)
    elif isinstance(node, list):
        for item in node:
            yield from walk_keys(item)


def test_template_has_no_entity_ids() -> None:
    data = to_template(build_source()).model_dump(by_alias=True)
    keys = set(walk_keys(data))
    assert "id" not in keys, "templates must be free of entity ids"
    assert {"exerciseRefId", "emomInterval", "supersetGroupId", "setNumber"} <= keys
    assert data["emomInterval"] == 45 and data["isEmom"] is True
    assert data["finisher"]["name"] == "Cardio Finisher"


def test_template_keeps_set_values() -> None:
    w = build_source()
    bench = w.exercises[0]
    w = edit_workout_scope(w, "exercises", lambda scope: [update_single_set(bench, bench.sets[0].id, {"reps": "5"}), *scope[1:]])
    template = to_template(w)
    assert [s.reps for s in template.exercises[0].sets] == ["5", "8-12", "8-12"]
    assert template.exercises[0].exercise_ref_id == "bench_press"


def test_load_appends_with_fresh_ids() -> None:
    template = to_template(build_source())
    target = edit_workout_scope(new_workout("Upper B"), "exercises", add_exercise, build_ref("Dip"))

    loaded = from_template(target, template)

    assert [e.exercise_name for e in loaded.exercises] == ["Dip", "Bench Press", "Row", "Curl"]
    assert [e.order for e in loaded.exercises] == [0, 1, 2, 3]
    assert loaded.exercises[0].id == target.exercises[0].id
    ids = [e.id for e in loaded.exercises] + [s.id for e in loaded.exercises for s in e.sets]
    assert len(ids) == len(set(ids))
    assert [s.set_number for s in loaded.exercises[1].sets] == [1, 2, 3]


def test_load_remaps_superset_groups() -> None:
    source = build_source()
    loaded = from_template(new_workout("Copy"), to_template(source))
    old = {e.superset_group_id for e in source.exercises if e.superset_group_id}
    new = {e.superset_group_id for e in loaded.exercises if e.superset_group_id}
    assert len(new) == 1 and not old & new

    twice = from_template(loaded, to_template(source))
    assert len({e.superset_group_id for e in twice.exercises if e.superset_group_id}) == 2


def test_load_drops_tag_on_singleton_group() -> None:
    payload = {
        "name": "Broken",
        "exercises": [
            {"exerciseRefId": "row", "exerciseName": "Row", "supersetGroupId": "superset_lonely", "sets": [{"reps": "10"}]},
        ],
    }
    loaded = from_template(new_workout("W"), payload)
    assert loaded.exercises[0].superset_group_id is None
    assert loaded.exercises[0].sets[0].reps == "10"


def test_load_notes_marker() -> None:
    template = to_template(build_source())

    fresh = from_template(new_workout("W"), template)
    assert fresh.notes == "Keep rest honest"

    noted = from_template(new_workout("W").model_copy(update={"notes": "Mine"}), template)
    assert noted.notes == "Mine\n\n---\nLoaded from template: Upper A"


def test_load_finisher_only_when_absent() -> None:
    template = to_template(build_source())

    loaded = from_template(new_workout("W"), template)
    assert loaded.finisher is not None
    assert loaded.finisher.name == "Cardio Finisher"
    assert [e.exercise_name for e in loaded.finisher.exercises] == ["Bike"]

    has_one = attach_finisher(new_workout("W"), "hyrox")
    kept = from_template(has_one, template)
    assert kept.finisher == has_one.finisher


def test_load_leaves_workout_identity() -> None:
    target = new_workout("Pull", week_number=3, day_of_week=4)
    loaded = from_template(target, to_template(build_source()))
    assert (loaded.id, loaded.name, loaded.week_number, loaded.day_of_week) == (target.id, "Pull", 3, 4)
    assert not loaded.is_emom


def test_load_none_is_noop() -> None:
    w = new_workout("W")
    assert from_template(w, None) is w


def test_load_accepts_record_and_raw_mapping() -> None:
    record = save_template(build_source(), "Upper", "push pull", "strength")
    by_record = from_template(new_workout("W"), record)
    by_dict = from_template(new_workout("W"), record.model_dump(by_alias=True))
    by_data = from_template(new_workout("W"), record.workout_data.model_dump(by_alias=True))
    for w in (by_record, by_dict, by_data):
        assert [e.exercise_name for e in w.exercises] == ["Bench Press", "Row", "Curl"]


def test_load_malformed_payload_raises() -> None:
    with pytest.raises(ValidationError):
        from_template(new_workout("W"), {"name": "Bad", "exercises": [{"exerciseName": "No ref"}]})


def test_filter_templates() -> None:
    w = new_workout("W")
    records = [
        TemplateRecord(name="Push Day", description="Chest and triceps", category="strength", workout_data=to_template(w)),
        TemplateRecord(name="Engine", description="Zone 2 push", category="cardio", workout_data=to_template(w)),
        TemplateRecord(name="Roxzone", description="Station practice", category="hyrox", workout_data=to_template(w)),
    ]
    assert [r.name for r in filter_templates(records)] == ["Push Day", "Engine", "Roxzone"]
    assert [r.name for r in filter_templates(records, "push")] == ["Push Day", "Engine"]
    assert [r.name for r in filter_templates(records, "PUSH", "cardio")] == ["Engine"]
    assert [r.name for r in filter_templates(records, category="hyrox")] == ["Roxzone"]
    assert filter_templates(records, "deadlift") == []


@pytest.mark.parametrize("set_count", [0, 11])
def test_load_rejects_set_count_outside_bounds(set_count: int) -> None:
    payload = {
        "name": "Too Many",
        "exercises": [
            {"exerciseRefId": "row", "exerciseName": "Row", "sets": [{"reps": "10"}] * set_count},
        ],
    }
    with pytest.raises(ValidationError):
        from_template(new_workout("W"), payload)


def test_load_rejects_empty_finisher_exercise() -> None:
    payload = {
        "name": "Finisher",
        "finisher": {"name": "Burner", "category": "cardio", "exercises": [{"exerciseRefId": "bike", "exerciseName": "Bike"}]},
    }
    with pytest.raises(ValidationError):
        from_template(new_workout("W"), payload)
