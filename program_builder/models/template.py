from __future__ import annotations

from typing import List, Optional
from pydantic import Field

from .exercise import Category, EditorModel
from .program import EntryFields
from .sets import SetFields


class SetTemplate(SetFields):
    set_number: int = Field(1, ge=1)


class ExerciseTemplate(EntryFields):
    sets: List[SetTemplate] = Field(default_factory=list, min_length=1, max_length=10)


class FinisherTemplate(EditorModel):
    name: str
    category: Category = "strength"
    exercises: List[ExerciseTemplate] = Field(default_factory=list)
    notes: str = ""
    is_emom: bool = False
    emom_interval: Optional[int] = None
    is_superset: bool = False


class WorkoutTemplate(EditorModel):
    """De-identified snapshot of a workout: no entity ids at any level."""

    name: str
    day_of_week: Optional[int] = Field(None, ge=0, le=6)
    exercises: List[ExerciseTemplate] = Field(default_factory=list)
    notes: str = ""
    is_emom: bool = False
    emom_interval: Optional[int] = None
    finisher: Optional[FinisherTemplate] = None


class TemplateRecord(EditorModel):
    """A template as handed to template storage, tagged for later search."""

    name: str
    description: str = ""
    category: Category = "strength"
    workout_data: WorkoutTemplate
