from .catalog import load_catalog, get_by_id, get_by_ids, filter_by_equipment, search
from .sets import create_default_set, update_set, default_weight_type
from .entries import (
    resize_set_count,
    bulk_edit_sets,
    update_single_set,
    set_hybrid_mode,
    replace_exercise_identity,
)
from .scope import (
    add_exercise,
    add_hyrox_station,
    delete_exercise,
    reorder_exercises,
    create_superset,
    delete_superset,
    group_exercises,
    resize_entry_sets,
    bulk_edit_entry,
    update_entry_set,
    set_entry_hybrid_mode,
    update_entry_notes,
    replace_exercise,
)
from .workouts import (
    set_day_of_week,
    set_emom,
    set_emom_interval,
    duplicate_workout,
    attach_finisher,
    remove_finisher,
    update_finisher,
    add_warmup_exercise,
    remove_warmup_exercise,
)
from .program import (
    week_numbers,
    weeks,
    group_by_day,
    add_workout,
    delete_workout,
    update_workout,
    edit_scope,
    scope_category,
    assign_day,
    copy_workout,
    reorder_workouts,
    duplicate_week,
    delete_week,
)
from .templates import to_template, save_template, from_template, filter_templates

__all__ = [
    "load_catalog",
    "get_by_id",
    "get_by_ids",
    "filter_by_equipment",
    "search",
    "create_default_set",
    "update_set",
    "default_weight_type",
    "resize_set_count",
    "bulk_edit_sets",
    "update_single_set",
    "set_hybrid_mode",
    "replace_exercise_identity",
    "add_exercise",
    "add_hyrox_station",
    "delete_exercise",
    "reorder_exercises",
    "create_superset",
    "delete_superset",
    "group_exercises",
    "resize_entry_sets",
    "bulk_edit_entry",
    "update_entry_set",
    "set_entry_hybrid_mode",
    "update_entry_notes",
    "replace_exercise",
    "set_day_of_week",
    "set_emom",
    "set_emom_interval",
    "duplicate_workout",
    "attach_finisher",
    "remove_finisher",
    "update_finisher",
    "add_warmup_exercise",
    "remove_warmup_exercise",
    "week_numbers",
    "weeks",
    "group_by_day",
    "add_workout",
    "delete_workout",
    "update_workout",
    "edit_scope",
    "scope_category",
    "assign_day",
    "copy_workout",
    "reorder_workouts",
    "duplicate_week",
    "delete_week",
    "to_template",
    "save_template",
    "from_template",
    "filter_templates",
]
