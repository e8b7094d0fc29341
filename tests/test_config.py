from __future__ import annotations

import logging
from typing import Iterator

import pytest

from program_builder.config import configure_logging, get_settings
from program_builder.services.entries import default_set_count
from program_builder.services.sets import (
    HEART_RATE_ZONES,
    HYROX_STATIONS,
    HYROX_WEIGHT_CLASSES,
    REST_BRACKETS,
    WEIGHT_TYPES,
    create_default_set,
    create_warmup_set,
    default_weight_type,
)
from program_builder.services.workouts import new_workout, set_emom


@pytest.fixture
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_settings_defaults(fresh_settings: pytest.MonkeyPatch) -> None:
    for key in ("DEFAULT_SET_COUNT", "DEFAULT_EMOM_INTERVAL_SECONDS", "DEFAULT_WEIGHT_TYPE", "CATALOG_PATH"):
        fresh_settings.delenv(key, raising=False)
    s = get_settings()
    assert s.DEFAULT_SET_COUNT == 3
    assert s.DEFAULT_EMOM_INTERVAL_SECONDS == 60
    assert s.DEFAULT_WEIGHT_TYPE == "freeweight"
    assert s.CATALOG_PATH is None
    assert get_settings() is s


def test_settings_from_environment(fresh_settings: pytest.MonkeyPatch) -> None:
    fresh_settings.setenv("DEFAULT_SET_COUNT", "4")
    fresh_settings.setenv("DEFAULT_EMOM_INTERVAL_SECONDS", "90")
    assert default_set_count("strength") == 4
    assert default_set_count("hyrox") == 1
    assert set_emom(new_workout("W"), True).emom_interval_seconds == 90


def test_configure_logging_applies_level() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        # basicConfig is a no-op once the root logger has handlers (pytest installs some)
        assert root.level in (logging.DEBUG, previous)
    finally:
        root.setLevel(previous)


def test_defaults_use_known_options() -> None:
    weight_types = {w["id"] for w in WEIGHT_TYPES}
    brackets = {b["value"] for b in REST_BRACKETS}
    for category in ("strength", "cardio", "hyrox", "hybrid"):
        s = create_default_set(1, category=category)
        assert s.rest_bracket in brackets, category
        assert s.weight_type in weight_types, category
    assert create_warmup_set().rest_bracket in brackets

    cardio = create_default_set(1, category="cardio")
    assert cardio.heart_rate_zone in HEART_RATE_ZONES
    hyrox = create_default_set(1, category="hyrox")
    assert hyrox.hyrox_station in HYROX_STATIONS
    assert hyrox.hyrox_weight_class in HYROX_WEIGHT_CLASSES


def test_equipment_maps_to_known_weight_types() -> None:
    weight_types = {w["id"] for w in WEIGHT_TYPES}
    for equipment in ("barbell", "smith", "dumbbell", "cable", "machine", "kettlebell",
                      "bands", "trx", "medicineball", "bodyweight", "pullupbar", "sled"):
        assert default_weight_type([equipment]) in weight_types, equipment
