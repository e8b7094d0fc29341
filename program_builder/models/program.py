from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union
from pydantic import Field

from .exercise import Category, EditorModel
from .sets import ExerciseSet


class EntryFields(EditorModel):
    exercise_ref_id: str
    exercise_name: str
    category: str = "strength"
    order: int = Field(0, ge=0)
    notes: str = ""
    superset_group_id: Optional[str] = None


class ExerciseEntry(EntryFields):
    id: str
    sets: List[ExerciseSet] = Field(default_factory=list)


class Finisher(EditorModel):
    id: str
    name: str
    category: Category = "strength"
    exercises: List[ExerciseEntry] = Field(default_factory=list)
    notes: str = ""
    is_emom: bool = False
    emom_interval_seconds: Optional[int] = None
    is_superset: bool = False


class Workout(EditorModel):
    id: str
    name: str
    day_of_week: Optional[int] = Field(None, ge=0, le=6, description="0=Monday .. 6=Sunday")
    order: int = Field(0, ge=0)
    exercises: List[ExerciseEntry] = Field(default_factory=list)
    warmup_exercises: List[ExerciseEntry] = Field(default_factory=list)
    notes: str = ""
    recovery_notes: Optional[str] = None
    finisher: Optional[Finisher] = None
    is_emom: bool = False
    emom_interval_seconds: Optional[int] = None
    week_number: int = Field(1, ge=1)


class Program(EditorModel):
    """The flat arena of workouts; weeks and days are tags on each workout."""

    name: str = ""
    category: Category = "strength"
    workouts: List[Workout] = Field(default_factory=list)


# Derived read views. Recomputed from the flat tree on every read, never stored.


class Week(EditorModel):
    number: int
    workouts: List[Workout]


class DayGroup(EditorModel):
    day_of_week: Optional[int]
    day_name: str
    workouts: List[Workout]


class SingleBlock(EditorModel):
    type: Literal["single"] = "single"
    entry: ExerciseEntry


class SupersetBlock(EditorModel):
    type: Literal["superset"] = "superset"
    group_id: str
    entries: List[ExerciseEntry]


ExerciseBlock = Annotated[Union[SingleBlock, SupersetBlock], Field(discriminator="type")]
