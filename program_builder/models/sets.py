from __future__ import annotations

from pydantic import Field
from typing import Literal, Optional

from .exercise import EditorModel


IntensityType = Literal["percentage", "rir", "rpe", "failure", "time"]

CardioType = Literal["duration", "distance", "calories", "intervals", "steps"]

HybridMode = Literal["strength", "cardio"]

HeartRateZone = Literal[1, 2, 3, 4, 5]


class SetFields(EditorModel):
    """Every value a set carries, strength, cardio and hyrox shapes side by side.

    A hybrid set fills both the strength and cardio shapes; ``hybrid_mode``
    only selects which one is edited and displayed.
    """

    reps: str = ""
    intensity_type: IntensityType = "rir"
    intensity_value: str = ""
    rest_seconds: int = 0
    rest_bracket: str = ""
    weight_type: str = "freeweight"
    notes: str = ""

    # cardio
    cardio_type: Optional[CardioType] = None
    cardio_value: Optional[str] = None
    cardio_unit: Optional[str] = None
    heart_rate_zone: Optional[HeartRateZone] = None
    pace: Optional[str] = None
    intervals: Optional[int] = None
    work_time: Optional[str] = None
    rest_time: Optional[str] = None

    # hyrox
    hyrox_station: Optional[str] = None
    hyrox_distance: Optional[str] = None
    hyrox_unit: Optional[str] = None
    hyrox_target_time: Optional[str] = None
    hyrox_weight_class: Optional[str] = None
    hyrox_custom_weight: Optional[str] = None

    # hybrid
    hybrid_mode: Optional[HybridMode] = None


class ExerciseSet(SetFields):
    id: str
    set_number: int = Field(..., ge=1)
