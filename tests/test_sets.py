from __future__ import annotations

from program_builder.services.sets import (
    create_default_set,
    create_hyrox_station_set,
    default_weight_type,
    update_set,
)


def test_strength_defaults() -> None:
    s = create_default_set(1, "machine", "strength")
    assert s.set_number == 1
    assert (s.reps, s.intensity_type, s.intensity_value) == ("8-12", "rir", "2")
    assert s.rest_bracket == "90-120" and s.rest_seconds == 90
    assert s.weight_type == "machine"
    assert s.cardio_type is None and s.hyrox_station is None and s.hybrid_mode is None


def test_cardio_defaults() -> None:
    s = create_default_set(2, "machine", "cardio")
    assert s.set_number == 2
    assert (s.cardio_type, s.cardio_value, s.cardio_unit) == ("duration", "20", "min")
    assert s.heart_rate_zone == 2
    assert s.weight_type == "bodyweight", "cardio sets ignore the exercise weight type"


def test_hyrox_defaults() -> None:
    s = create_default_set(1, category="hyrox")
    assert (s.hyrox_station, s.hyrox_distance, s.hyrox_unit) == ("run", "1000", "m")
    assert s.hyrox_weight_class == "open_male"
    assert s.rest_seconds == 0


def test_hybrid_defaults_carry_strength_shape() -> None:
    s = create_default_set(1, "freeweight", "hybrid")
    assert s.hybrid_mode == "strength"
    assert (s.reps, s.intensity_type, s.intensity_value) == ("8-12", "rir", "2")


def test_unknown_category_falls_back_to_strength() -> None:
    s = create_default_set(1, "cable", "yoga")
    assert s.reps == "8-12"
    assert s.weight_type == "cable"
    assert s.hybrid_mode is None


def test_sets_get_distinct_ids() -> None:
    ids = {create_default_set(1).id for _ in range(50)}
    assert len(ids) == 50


def test_hyrox_station_set_uses_station_distance() -> None:
    s = create_hyrox_station_set("wall_balls")
    assert s is not None
    assert (s.hyrox_station, s.hyrox_distance, s.hyrox_unit) == ("wall_balls", "100", "reps")
    assert create_hyrox_station_set("underwater_basket_weaving") is None


def test_update_set_is_pure_and_accepts_aliases() -> None:
    original = create_default_set(1)
    updated = update_set(original, {"reps": "5", "intensityValue": "1"})
    assert (updated.reps, updated.intensity_value) == ("5", "1")
    assert (original.reps, original.intensity_value) == ("8-12", "2"), "input set must not change"
    assert updated.id == original.id


def test_update_set_ignores_identity_and_unknown_fields() -> None:
    original = create_default_set(3)
    same = update_set(original, {"id": "hijack", "setNumber": 9, "colour": "red"})
    assert same is original


def test_update_set_does_not_validate_free_text() -> None:
    s = update_set(create_default_set(1), {"reps": "AMRAP", "intensity_value": ""})
    assert s.reps == "AMRAP"


def test_default_weight_type_from_equipment() -> None:
    assert default_weight_type(["barbell", "dumbbell"]) == "plate_loaded"
    assert default_weight_type(["dumbbell"]) == "freeweight"
    assert default_weight_type(["smith"]) == "smith_machine"
    assert default_weight_type(["pullupbar"]) == "bodyweight"
    assert default_weight_type(["bands"]) == "resistance_band"
    assert default_weight_type([]) == "freeweight"
    assert default_weight_type(None) == "freeweight"


def test_set_serializes_with_camel_case_keys() -> None:
    data = create_default_set(1, category="cardio").model_dump(by_alias=True)
    assert data["setNumber"] == 1
    assert data["intensityType"] == "rpe"
    assert data["heartRateZone"] == 2
    assert "set_number" not in data
