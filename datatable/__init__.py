"""
Fixtable DataTable - validated tables of string fixture data.

Build tables from field names and rows, or from a step-table cell grid, then
look up, append, remove, copy and export rows.
"""
from .table import (
    NOT_FOUND,
    DataTable,
    from_cells,
    from_cells_with_schema,
    new,
    new_with_schema,
)

__all__ = [
    'NOT_FOUND', 'DataTable', 'from_cells', 'from_cells_with_schema',
    'new', 'new_with_schema',
]
