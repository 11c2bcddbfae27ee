"""
Pydantic models for constraint rules.
These define the exact shape accepted by Constraint.from_dict / parse_constraints.
"""
from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


# Accepted spellings for each constraint kind, normalized to the kind value.
KIND_ALIASES = {
    "equal": "equal",
    "eq": "equal",
    "==": "equal",
    "not_equal": "not_equal",
    "ne": "not_equal",
    "!=": "not_equal",
    "greater": "greater",
    "gt": "greater",
    ">": "greater",
    "greater_or_equal": "greater_or_equal",
    "ge": "greater_or_equal",
    ">=": "greater_or_equal",
    "less": "less",
    "lt": "less",
    "<": "less",
    "less_or_equal": "less_or_equal",
    "le": "less_or_equal",
    "<=": "less_or_equal",
}


class ConstraintRule(BaseModel):
    """A single (kind, operand) rule, e.g. {"kind": ">=", "operand": 0}."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: str = Field(..., description="Kind name (greater_or_equal) or symbol (>=)")
    operand: StrictInt = Field(..., description="Integer the candidate is compared against")

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, value):
        if not isinstance(value, str):
            raise ValueError("kind must be a string")
        key = value.strip().lower()
        if key not in KIND_ALIASES:
            raise ValueError(f"unknown constraint kind: {value!r}")
        return KIND_ALIASES[key]
