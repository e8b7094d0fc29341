from __future__ import annotations

import uuid

SUPERSET_PREFIX = "superset_"


def new_id() -> str:
    return uuid.uuid4().hex


def new_superset_group_id() -> str:
    return f"{SUPERSET_PREFIX}{new_id()}"
