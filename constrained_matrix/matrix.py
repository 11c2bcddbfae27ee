"""
Constrained Matrix

A rectangular, row-major grid of integers whose every element satisfies an
immutable, ordered list of constraints.

Guarantees:
- All rows have exactly ``columns`` elements for the lifetime of the object
- Every stored value satisfies every constraint
- Rejected writes leave the grid untouched (checks run before any mutation)
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .constraints import Constraint, as_int, first_violation, parse_constraints
from .error_taxonomy import MatrixError, MatrixErrorKind
from .settings import settings


logger = logging.getLogger(__name__)


def _as_index(index: Any) -> int:
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"matrix indices must be integers, got {type(index).__name__}")
    return int(index)


class Matrix:
    """Fixed-size integer grid with per-element constraints."""

    def __init__(
        self,
        num_rows: int = 0,
        num_columns: int = 0,
        fill_with: int = 0,
        constraints: Iterable[Any] = (),
    ):
        num_rows = _as_index(num_rows)
        num_columns = _as_index(num_columns)
        if num_rows < 0 or num_columns < 0:
            raise MatrixError(
                MatrixErrorKind.INVALID_SIZE, f"negative dimensions {num_rows}x{num_columns}"
            )

        self._constraints: Tuple[Constraint, ...] = parse_constraints(constraints)
        fill_with = as_int(fill_with)
        self._check_value(fill_with)

        self._rows = num_rows
        self._columns = num_columns
        self._data: List[List[int]] = [[fill_with] * num_columns for _ in range(num_rows)]
        logger.debug(
            "Created %dx%d matrix filled with %d (%d constraints)",
            num_rows, num_columns, fill_with, len(self._constraints),
        )

    @classmethod
    def from_rows(
        cls,
        data: Sequence[Sequence[Any]],
        fill_with: int = 0,
        constraints: Iterable[Any] = (),
        validate: Optional[bool] = None,
    ) -> "Matrix":
        """
        Build a matrix from a pre-built rectangular grid.

        Args:
            data: Sequence of rows; every row must match the first row's length
            fill_with: Checked against the constraints, never used for filling
            constraints: Constraint objects or rule dicts
            validate: Check every supplied element against the constraints.
                Defaults to settings.validate_supplied_data.

        Raises:
            MatrixError: INVALID_SIZE for ragged input, CONSTRAINT_VIOLATION
                when fill_with (or, when validating, any element) fails.
        """
        rows = [[as_int(value) for value in row] for row in data]
        num_columns = len(rows[0]) if rows else 0
        for index, row in enumerate(rows):
            if len(row) != num_columns:
                raise MatrixError(
                    MatrixErrorKind.INVALID_SIZE,
                    f"row {index} has {len(row)} elements, expected {num_columns}",
                )

        matrix = cls(0, 0, fill_with=fill_with, constraints=constraints)
        matrix._rows = len(rows)
        matrix._columns = num_columns
        matrix._data = rows

        if validate is None:
            validate = settings.validate_supplied_data
        if validate:
            matrix.check_all()
        logger.debug(
            "Loaded %dx%d matrix from rows (validated=%s)", matrix._rows, matrix._columns, validate
        )
        return matrix

    @classmethod
    def from_frame(
        cls,
        frame: pd.DataFrame,
        constraints: Iterable[Any] = (),
        validate: Optional[bool] = None,
    ) -> "Matrix":
        """Build a matrix from a DataFrame whose columns are all integer-typed."""
        if not isinstance(frame, pd.DataFrame):
            raise TypeError(f"expected a pandas DataFrame, got {type(frame).__name__}")
        non_integer = [
            str(name) for name, dtype in frame.dtypes.items()
            if not pd.api.types.is_integer_dtype(dtype) or pd.api.types.is_bool_dtype(dtype)
        ]
        if non_integer:
            raise TypeError(f"non-integer columns: {', '.join(non_integer)}")
        return cls.from_rows(frame.to_numpy().tolist(), constraints=constraints, validate=validate)

    # Dimensions / constraints

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._columns

    @property
    def constraints(self) -> Tuple[Constraint, ...]:
        return self._constraints

    # Data access

    def get_row(self, row: int) -> List[int]:
        row = self._check_index(row, self._rows)
        return list(self._data[row])

    def set_row(self, row: int, data: Sequence[Any]) -> None:
        row = self._check_index(row, self._rows)
        values = [as_int(value) for value in self._check_length(list(data), self._columns)]
        self._check_values(values)
        self._data[row] = values
        logger.debug("Replaced row %d", row)

    def get_column(self, col: int) -> List[int]:
        col = self._check_index(col, self._columns)
        return [row[col] for row in self._data]

    def set_column(self, col: int, data: Sequence[Any]) -> None:
        col = self._check_index(col, self._columns)
        values = [as_int(value) for value in self._check_length(list(data), self._rows)]
        self._check_values(values)
        for row, value in zip(self._data, values):
            row[col] = value
        logger.debug("Replaced column %d", col)

    def to_rows(self) -> List[List[int]]:
        return [list(row) for row in self._data]

    # Constraint checking

    def check_all(self) -> None:
        """Re-validate every stored element; raises on the first violation."""
        for row in self._data:
            self._check_values(row)

    def _check_value(self, value: int) -> None:
        failed = first_violation(value, self._constraints)
        if failed is not None:
            logger.debug("Rejected value %d: fails %s", value, failed.describe())
            raise MatrixError(
                MatrixErrorKind.CONSTRAINT_VIOLATION, f"{value} fails {failed.describe()}"
            )

    def _check_values(self, values: Iterable[int]) -> None:
        for value in values:
            self._check_value(value)

    @staticmethod
    def _check_index(index: Any, bound: int) -> int:
        index = _as_index(index)
        if index < 0 or index >= bound:
            logger.debug("Rejected index %d (bound %d)", index, bound)
            raise MatrixError(MatrixErrorKind.OUT_OF_RANGE, f"index {index} not in [0, {bound})")
        return index

    @staticmethod
    def _check_length(values: List[Any], expected: int) -> List[Any]:
        if len(values) != expected:
            logger.debug("Rejected %d values (expected %d)", len(values), expected)
            raise MatrixError(
                MatrixErrorKind.INVALID_SIZE, f"got {len(values)} values, expected {expected}"
            )
        return values

    # Value semantics

    def copy(self) -> "Matrix":
        clone = self.__class__.__new__(self.__class__)
        clone._rows = self._rows
        clone._columns = self._columns
        clone._constraints = self._constraints
        clone._data = self.to_rows()
        return clone

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo) -> "Matrix":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.shape == other.shape
            and self._data == other._data
            and self._constraints == other._constraints
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self._rows}, columns={self._columns}, "
            f"constraints={[c.describe() for c in self._constraints]})"
        )
