# Constrained Matrix Kit
# Fixed-size integer grids whose elements are validated against
# equality/ordering constraints on construction and on every write

from .constraints import Constraint, ConstraintKind, parse_constraints
from .error_taxonomy import MatrixError, MatrixErrorKind, MatrixErrorTaxonomy
from .matrix import Matrix
from .settings import MatrixSettings, configure_logging

__all__ = [
    'Matrix',
    'Constraint',
    'ConstraintKind',
    'parse_constraints',
    'MatrixError',
    'MatrixErrorKind',
    'MatrixErrorTaxonomy',
    'MatrixSettings',
    'configure_logging',
]
__version__ = '1.0.0'
