from .exercise import CATEGORIES, Category, Difficulty, EditorModel, ExerciseRef
from .sets import CardioType, ExerciseSet, HeartRateZone, HybridMode, IntensityType, SetFields
from .program import (
    DayGroup,
    EntryFields,
    ExerciseBlock,
    ExerciseEntry,
    Finisher,
    Program,
    SingleBlock,
    SupersetBlock,
    Week,
    Workout,
)
from .template import (
    ExerciseTemplate,
    FinisherTemplate,
    SetTemplate,
    TemplateRecord,
    WorkoutTemplate,
)

__all__ = [
    "CATEGORIES",
    "Category",
    "Difficulty",
    "EditorModel",
    "ExerciseRef",
    "CardioType",
    "ExerciseSet",
    "HeartRateZone",
    "HybridMode",
    "IntensityType",
    "SetFields",
    "DayGroup",
    "EntryFields",
    "ExerciseBlock",
    "ExerciseEntry",
    "Finisher",
    "Program",
    "SingleBlock",
    "SupersetBlock",
    "Week",
    "Workout",
    "ExerciseTemplate",
    "FinisherTemplate",
    "SetTemplate",
    "TemplateRecord",
    "WorkoutTemplate",
]
