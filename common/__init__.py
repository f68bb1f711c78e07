"""Common pieces shared across fixtable modules."""
from .cells import Cell, CellRow, CellTable, Grid, TableCell, TableRow, row_values, values
from .errors import (
    ArityError,
    BoundsError,
    DataTableError,
    MalformedTableError,
    MissingFieldError,
    SerializationError,
    UnknownFieldError,
)

__all__ = [
    'Cell', 'CellRow', 'CellTable', 'Grid', 'TableCell', 'TableRow',
    'row_values', 'values',
    'ArityError', 'BoundsError', 'DataTableError', 'MalformedTableError',
    'MissingFieldError', 'SerializationError', 'UnknownFieldError',
]
