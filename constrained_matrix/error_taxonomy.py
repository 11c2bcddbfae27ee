"""
Matrix Error Taxonomy

Every failure of the matrix API is a MatrixError carrying one of three kinds.
Each kind maps to a fixed, human-readable message:

- constraint_violation: a value entering the grid fails a registered constraint
- invalid_size: a row/column/grid length disagrees with the matrix dimensions
- out_of_range: a row or column index is outside the valid index space
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Optional


class MatrixErrorKind(str, Enum):
    CONSTRAINT_VIOLATION = "constraint_violation"
    INVALID_SIZE = "invalid_size"
    OUT_OF_RANGE = "out_of_range"


ERROR_MESSAGES = MappingProxyType({
    MatrixErrorKind.CONSTRAINT_VIOLATION: "One or more elements of matrix violate constraints.",
    MatrixErrorKind.INVALID_SIZE: "All rows in matrix must have the same size.",
    MatrixErrorKind.OUT_OF_RANGE: "Index is out of range when requested raw/column data.",
})


class MatrixError(ValueError):
    """Raised when a matrix operation is rejected.

    ``str(err)`` is always the fixed message for ``err.kind``; ``detail`` holds
    optional context (offending index or value) for callers and logs.
    """

    def __init__(self, kind: MatrixErrorKind, detail: Optional[str] = None):
        self.kind = MatrixErrorKind(kind)
        self.detail = detail
        super().__init__(self.kind, detail)

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self.kind]

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"MatrixError(kind={self.kind.value!r}, detail={self.detail!r})"


class MatrixErrorTaxonomy:
    """Map error kinds to caller-facing categories."""

    CATEGORIES = {
        MatrixErrorKind.CONSTRAINT_VIOLATION.value: {
            'severity': 'high',
            'message': ERROR_MESSAGES[MatrixErrorKind.CONSTRAINT_VIOLATION],
            'raised_by': ('Matrix', 'Matrix.from_rows', 'set_row', 'set_column'),
            'cause': 'Fill value or written element fails at least one constraint',
        },
        MatrixErrorKind.INVALID_SIZE.value: {
            'severity': 'high',
            'message': ERROR_MESSAGES[MatrixErrorKind.INVALID_SIZE],
            'raised_by': ('Matrix', 'Matrix.from_rows', 'set_row', 'set_column'),
            'cause': 'Ragged grid, negative dimension, or replacement of the wrong length',
        },
        MatrixErrorKind.OUT_OF_RANGE.value: {
            'severity': 'medium',
            'message': ERROR_MESSAGES[MatrixErrorKind.OUT_OF_RANGE],
            'raised_by': ('get_row', 'set_row', 'get_column', 'set_column'),
            'cause': 'Row or column index is negative or >= the dimension',
        },
    }

    @classmethod
    def classify(cls, error_kind: Any) -> dict:
        """
        Retrieve category info for an error kind.

        Args:
            error_kind: A MatrixErrorKind, its value, or a MatrixError

        Returns:
            Dict with severity, message, raised_by, cause
        """
        if isinstance(error_kind, MatrixError):
            error_kind = error_kind.kind
        if isinstance(error_kind, MatrixErrorKind):
            error_kind = error_kind.value
        if error_kind in cls.CATEGORIES:
            return cls.CATEGORIES[error_kind]
        return {
            'severity': 'unknown',
            'message': 'Unknown error kind',
            'raised_by': (),
            'cause': 'See logs for details',
        }

    @classmethod
    def all_categories(cls) -> list:
        """Return list of all error kind names."""
        return list(cls.CATEGORIES.keys())

    @classmethod
    def severity_level(cls, error_kind: Any) -> str:
        return cls.classify(error_kind).get('severity', 'unknown')
