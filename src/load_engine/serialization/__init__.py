"""Serialization module: convert records to and from JSON-ready dicts."""

from load_engine.serialization.records import (
    performance_from_dict,
    performance_to_dict,
    plan_from_dict,
    plan_to_dict,
    player_from_dict,
    player_to_dict,
    week_plan_from_dict,
    week_plan_to_dict,
)

__all__ = [
    "performance_from_dict",
    "performance_to_dict",
    "plan_from_dict",
    "plan_to_dict",
    "player_from_dict",
    "player_to_dict",
    "week_plan_from_dict",
    "week_plan_to_dict",
]
