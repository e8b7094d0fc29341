from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from program_builder.config import get_settings
from program_builder.models.exercise import ExerciseRef

CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "exercise_catalog.json"


@lru_cache(maxsize=4)
def _load(path: str) -> tuple[ExerciseRef, ...]:
    with Path(path).open("r", encoding="utf-8") as f:
        raw = json.load(f)
    return tuple(ExerciseRef.model_validate(item) for item in raw)


def load_catalog(path: str | Path | None = None) -> List[ExerciseRef]:
    resolved = path or get_settings().CATALOG_PATH or CATALOG_PATH
    return list(_load(str(resolved)))


def get_by_id(exercise_id: str, exercises: Sequence[ExerciseRef] | None = None) -> Optional[ExerciseRef]:
    pool = exercises if exercises is not None else load_catalog()
    return next((ex for ex in pool if ex.id == exercise_id), None)


def get_by_ids(ids: Iterable[str], exercises: Sequence[ExerciseRef] | None = None) -> List[ExerciseRef]:
    id_set = set(ids)
    pool = exercises if exercises is not None else load_catalog()
    return [ex for ex in pool if ex.id in id_set]


def filter_by_equipment(exercises: Sequence[ExerciseRef], allowed: Sequence[str] | None = None,
                        blacklisted: Sequence[str] | None = None) -> List[ExerciseRef]:
    allowed_set = set(allowed or [])
    black_set = set(blacklisted or [])
    out: List[ExerciseRef] = []
    for ex in exercises:
        eq = set(ex.equipment)
        if allowed_set and eq.isdisjoint(allowed_set):
            continue
        if black_set and not eq.isdisjoint(black_set):
            continue
        out.append(ex)
    return out


def search(
    exercises: Sequence[ExerciseRef],
    query: str = "",
    category: str | None = None,
    equipment: Sequence[str] | None = None,
) -> List[ExerciseRef]:
    """Case-insensitive name/muscle search, optionally narrowed by category and equipment."""
    q = query.strip().lower()
    pool = filter_by_equipment(exercises, allowed=equipment)
    out: List[ExerciseRef] = []
    for ex in pool:
        if category and ex.category != category:
            continue
        if q and q not in ex.name.lower() and not any(q in m.lower() for m in ex.primary_muscles):
            continue
        out.append(ex)
    return out
