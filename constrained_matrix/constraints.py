"""Per-element value constraints.

A constraint is a (kind, operand) pair; ``check(candidate)`` evaluates
``candidate <kind> operand``. The kind set is closed.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple
import operator

import numpy as np

from .schemas import ConstraintRule


class ConstraintKind(str, Enum):
    EQUAL = "equal"
    NOT_EQUAL = "not_equal"
    GREATER = "greater"
    GREATER_OR_EQUAL = "greater_or_equal"
    LESS = "less"
    LESS_OR_EQUAL = "less_or_equal"


_PREDICATES = {
    ConstraintKind.EQUAL: operator.eq,
    ConstraintKind.NOT_EQUAL: operator.ne,
    ConstraintKind.GREATER: operator.gt,
    ConstraintKind.GREATER_OR_EQUAL: operator.ge,
    ConstraintKind.LESS: operator.lt,
    ConstraintKind.LESS_OR_EQUAL: operator.le,
}

_SYMBOLS = {
    ConstraintKind.EQUAL: "==",
    ConstraintKind.NOT_EQUAL: "!=",
    ConstraintKind.GREATER: ">",
    ConstraintKind.GREATER_OR_EQUAL: ">=",
    ConstraintKind.LESS: "<",
    ConstraintKind.LESS_OR_EQUAL: "<=",
}


def as_int(value: Any) -> int:
    """Return ``value`` as a plain int; bools and non-integers raise TypeError.

    numpy integer scalars are accepted so grids built from arrays/frames work.
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("bool is not a valid matrix value")
    if isinstance(value, (int, np.integer)):
        return int(value)
    raise TypeError(f"matrix values must be integers, got {type(value).__name__}")


@dataclass(frozen=True)
class Constraint:
    kind: ConstraintKind
    operand: int

    def __post_init__(self):
        object.__setattr__(self, "kind", ConstraintKind(self.kind))
        object.__setattr__(self, "operand", as_int(self.operand))

    def check(self, candidate: int) -> bool:
        return bool(_PREDICATES[self.kind](candidate, self.operand))

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self.kind]

    def describe(self) -> str:
        return f"value {self.symbol} {self.operand}"

    @classmethod
    def from_dict(cls, rule: Dict[str, Any]) -> "Constraint":
        """Build a constraint from a rule dict.

        Raises pydantic.ValidationError for unknown kinds, non-integer
        operands or extra keys.
        """
        parsed = ConstraintRule.model_validate(rule)
        return cls(kind=ConstraintKind(parsed.kind), operand=parsed.operand)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "operand": self.operand}


def parse_constraints(rules: Iterable[Any]) -> Tuple[Constraint, ...]:
    """Normalize a mixed list of Constraint objects and rule dicts, keeping order."""
    out: List[Constraint] = []
    for rule in rules or ():
        if isinstance(rule, Constraint):
            out.append(rule)
        elif isinstance(rule, dict):
            out.append(Constraint.from_dict(rule))
        else:
            raise TypeError(f"constraint must be a Constraint or dict, got {type(rule).__name__}")
    return tuple(out)


def first_violation(value: int, constraints: Iterable[Constraint]):
    """Return the first constraint ``value`` fails, or None if all hold."""
    for constraint in constraints:
        if not constraint.check(value):
            return constraint
    return None
