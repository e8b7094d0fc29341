from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Type

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from program_builder.config import get_settings
from program_builder.models.sets import ExerciseSet
from .ids import new_id

logger = logging.getLogger(__name__)


WEIGHT_TYPES: List[Dict[str, str]] = [
    {"id": "bodyweight", "label": "Bodyweight"},
    {"id": "freeweight", "label": "Freeweight (DB/BB)"},
    {"id": "machine", "label": "Machine"},
    {"id": "cable", "label": "Cable"},
    {"id": "kettlebell", "label": "Kettlebell"},
    {"id": "weight_belt", "label": "Weight Belt"},
    {"id": "smith_machine", "label": "Smith Machine"},
    {"id": "plate_loaded", "label": "Plate Loaded"},
    {"id": "resistance_band", "label": "Resistance Band"},
    {"id": "medicine_ball", "label": "Medicine Ball"},
    {"id": "trx", "label": "TRX/Suspension"},
]

REST_BRACKETS: List[Dict[str, str]] = [
    {"value": "30-60", "label": "30-60s"},
    {"value": "60-90", "label": "60-90s"},
    {"value": "90-120", "label": "90-120s"},
    {"value": "120-180", "label": "2-3min"},
    {"value": "180-300", "label": "3-5min"},
]

HEART_RATE_ZONES: Dict[int, str] = {
    1: "Recovery (50-60%)",
    2: "Aerobic (60-70%)",
    3: "Tempo (70-80%)",
    4: "Threshold (80-90%)",
    5: "Max (90-100%)",
}

HYROX_STATIONS: Dict[str, Dict[str, str]] = {
    "run": {"label": "1km Run", "distance": "1000", "unit": "m"},
    "skierg": {"label": "SkiErg", "distance": "1000", "unit": "m"},
    "sled_push": {"label": "Sled Push", "distance": "50", "unit": "m"},
    "sled_pull": {"label": "Sled Pull", "distance": "50", "unit": "m"},
    "burpee_broad_jump": {"label": "Burpee Broad Jump", "distance": "80", "unit": "m"},
    "row": {"label": "Rowing", "distance": "1000", "unit": "m"},
    "farmers_carry": {"label": "Farmers Carry", "distance": "200", "unit": "m"},
    "sandbag_lunges": {"label": "Sandbag Lunges", "distance": "100", "unit": "m"},
    "wall_balls": {"label": "Wall Balls", "distance": "100", "unit": "reps"},
}

HYROX_WEIGHT_CLASSES: Dict[str, Dict[str, str]] = {
    "pro_male": {"sled": "152kg", "sandbag": "30kg", "wallball": "9kg", "farmers": "2x32kg"},
    "pro_female": {"sled": "102kg", "sandbag": "20kg", "wallball": "6kg", "farmers": "2x24kg"},
    "open_male": {"sled": "152kg", "sandbag": "20kg", "wallball": "6kg", "farmers": "2x24kg"},
    "open_female": {"sled": "102kg", "sandbag": "10kg", "wallball": "4kg", "farmers": "2x16kg"},
    "doubles_male": {"sled": "152kg", "sandbag": "20kg", "wallball": "6kg", "farmers": "2x24kg"},
    "doubles_female": {"sled": "102kg", "sandbag": "10kg", "wallball": "4kg", "farmers": "2x16kg"},
    "custom": {},
}

# First match wins, so barbell beats dumbbell for a barbell+dumbbell record.
_EQUIPMENT_WEIGHT_TYPES: Sequence[tuple[str, str]] = (
    ("barbell", "plate_loaded"),
    ("smith", "smith_machine"),
    ("dumbbell", "freeweight"),
    ("cable", "cable"),
    ("machine", "machine"),
    ("kettlebell", "kettlebell"),
    ("bands", "resistance_band"),
    ("trx", "trx"),
    ("medicineball", "medicine_ball"),
    ("bodyweight", "bodyweight"),
    ("pullupbar", "bodyweight"),
)

PROTECTED_SET_FIELDS = ("id", "set_number")


def clean_updates(
    model_cls: Type[BaseModel],
    updates: Mapping[str, Any],
    protected: Iterable[str] = (),
) -> Dict[str, Any]:
    """Resolve camelCase aliases to attribute names and drop keys that may not be written."""
    fields = model_cls.model_fields
    by_alias = {(info.alias or to_camel(name)): name for name, info in fields.items()}
    blocked = set(protected)
    out: Dict[str, Any] = {}
    for key, value in updates.items():
        name = key if key in fields else by_alias.get(key)
        if name is None:
            logger.debug(f"Ignoring unknown {model_cls.__name__} field '{key}'")
            continue
        if name in blocked:
            logger.debug(f"Ignoring protected {model_cls.__name__} field '{key}'")
            continue
        out[name] = value
    return out


def default_weight_type(equipment: Iterable[str] | None) -> str:
    eq = set(equipment or [])
    for needle, weight_type in _EQUIPMENT_WEIGHT_TYPES:
        if needle in eq:
            return weight_type
    return get_settings().DEFAULT_WEIGHT_TYPE


def create_default_set(
    set_number: int,
    weight_type: Optional[str] = None,
    category: str = "strength",
) -> ExerciseSet:
    """Build a set pre-filled for ``category``; unknown categories get strength defaults."""
    weight_type = weight_type or get_settings().DEFAULT_WEIGHT_TYPE

    if category == "cardio":
        return ExerciseSet(
            id=new_id(),
            set_number=set_number,
            reps="1",
            intensity_type="rpe",
            intensity_value="",
            rest_seconds=60,
            rest_bracket="60-90",
            weight_type="bodyweight",
            cardio_type="duration",
            cardio_value="20",
            cardio_unit="min",
            heart_rate_zone=2,
        )

    if category == "hyrox":
        return ExerciseSet(
            id=new_id(),
            set_number=set_number,
            reps="1",
            intensity_type="rpe",
            intensity_value="",
            rest_seconds=0,
            rest_bracket="30-60",
            weight_type="bodyweight",
            hyrox_station="run",
            hyrox_distance="1000",
            hyrox_unit="m",
            hyrox_target_time="",
            hyrox_weight_class="open_male",
        )

    strength = ExerciseSet(
        id=new_id(),
        set_number=set_number,
        reps="8-12",
        intensity_type="rir",
        intensity_value="2",
        rest_seconds=90,
        rest_bracket="90-120",
        weight_type=weight_type,
    )
    if category == "hybrid":
        return strength.model_copy(update={"hybrid_mode": "strength"})
    return strength


def create_hyrox_station_set(station: str, set_number: int = 1) -> Optional[ExerciseSet]:
    station_info = HYROX_STATIONS.get(station)
    if station_info is None:
        return None
    base = create_default_set(set_number, category="hyrox")
    return base.model_copy(update={
        "hyrox_station": station,
        "hyrox_distance": station_info["distance"],
        "hyrox_unit": station_info["unit"],
    })


def create_warmup_set(weight_type: Optional[str] = None) -> ExerciseSet:
    return ExerciseSet(
        id=new_id(),
        set_number=1,
        reps="10",
        intensity_type="rir",
        intensity_value="3",
        rest_seconds=60,
        rest_bracket="30-60",
        weight_type=weight_type or get_settings().DEFAULT_WEIGHT_TYPE,
    )


def update_set(set_: ExerciseSet, updates: Mapping[str, Any]) -> ExerciseSet:
    """Return a copy of ``set_`` with ``updates`` applied. Values are not validated."""
    fields = clean_updates(ExerciseSet, updates, protected=PROTECTED_SET_FIELDS)
    if not fields:
        return set_
    return set_.model_copy(update=fields)


def renumber_sets(sets: Sequence[ExerciseSet]) -> List[ExerciseSet]:
    return [
        s if s.set_number == i else s.model_copy(update={"set_number": i})
        for i, s in enumerate(sets, start=1)
    ]
