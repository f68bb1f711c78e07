"""
Adapter boundary for external cell grids.

Step-table parsers (Gherkin and friends) hand over a grid of rows, each row a
list of cells exposing a string ``value``. This module describes that shape
structurally and flattens it into plain lists of strings.
"""
from dataclasses import dataclass, field
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class Cell(Protocol):
    """A single table cell."""

    value: str


@runtime_checkable
class CellRow(Protocol):
    """An ordered row of cells."""

    cells: Sequence[Cell]


@runtime_checkable
class CellTable(Protocol):
    """
    A grid of cell rows as produced by a step-table parser.

    The first row is expected to carry the column names.
    """

    rows: Sequence[CellRow]


@dataclass
class TableCell:
    """Plain cell implementation."""
    value: str


@dataclass
class TableRow:
    """Plain row implementation."""
    cells: list[TableCell] = field(default_factory=list)


@dataclass
class Grid:
    """
    Minimal concrete cell grid.

    Example:
        >>> grid = Grid.from_values([["name", "value"], ["foo", "bar"]])
        >>> row_values(grid.rows)
        [['name', 'value'], ['foo', 'bar']]
    """
    rows: list[TableRow] = field(default_factory=list)

    @classmethod
    def from_values(cls, values: Sequence[Sequence[str]]) -> "Grid":
        """Build a grid from nested lists of strings."""
        return cls(rows=[
            TableRow(cells=[TableCell(value=v) for v in row])
            for row in values
        ])


def values(row: CellRow) -> list[str]:
    """Return the string values of a row's cells, in order."""
    return [cell.value for cell in row.cells]


def row_values(rows: Sequence[CellRow]) -> list[list[str]]:
    """Return the string values of every row, in order."""
    return [values(row) for row in rows]
