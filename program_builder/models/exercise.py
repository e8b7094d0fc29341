from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import List, Literal, Optional


Category = Literal["strength", "cardio", "hyrox", "hybrid"]

CATEGORIES: tuple[str, ...] = ("strength", "cardio", "hyrox", "hybrid")

Difficulty = Literal["beginner", "intermediate", "advanced"]


class EditorModel(BaseModel):
    """Base for every editor entity: snake_case attributes, camelCase on the wire."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class ExerciseRef(EditorModel):
    """One Exercise Directory record, as supplied when adding or replacing an entry."""

    id: str = Field(..., description="Catalog ID, e.g., barbell_back_squat")
    name: str
    category: str = "strength"
    equipment: List[str] = Field(default_factory=list)
    primary_muscles: List[str] = Field(default_factory=list)
    difficulty: Optional[Difficulty] = None

    model_config = {
        **EditorModel.model_config,
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "barbell_back_squat",
                    "name": "Back Squat",
                    "category": "strength",
                    "equipment": ["barbell"],
                    "primaryMuscles": ["quads", "glutes"],
                    "difficulty": "intermediate",
                }
            ]
        },
    }
