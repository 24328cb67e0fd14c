"""Serialization: export mesocycles as persistence-ready records."""

from periodization_engine.serialization.plan import to_plan_json_string, to_plan_records

__all__ = ["to_plan_json_string", "to_plan_records"]
