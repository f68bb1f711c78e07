"""
Error types raised by fixture tables.

Every error is a ValueError so callers that already guard table input with
``except ValueError`` keep working.
"""
from typing import Iterable


class DataTableError(ValueError):
    """Base class for all data table validation failures."""


class ArityError(DataTableError):
    """A row's cell count does not match the table's field count."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected row length of {expected}, got {actual}")


class MalformedTableError(DataTableError):
    """An external cell grid is too small to hold a header and data."""

    def __init__(self, row_count: int):
        self.row_count = row_count
        super().__init__(
            f"data table must have at least two rows, got {row_count}"
        )


class MissingFieldError(DataTableError):
    """A required field is absent from the table's fields."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"data table is missing required field '{field}'")


class UnknownFieldError(DataTableError):
    """A field is not part of a closed schema's allowed fields."""

    def __init__(self, field: str, allowed: Iterable[str]):
        self.field = field
        self.allowed = list(allowed)
        joined = "', '".join(self.allowed)
        super().__init__(
            f"data table contains additional field '{field}', "
            f"allowed fields are '{joined}'"
        )


class BoundsError(DataTableError, IndexError):
    """A row index is outside the table."""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(
            f"row index {index} out of range for table with {length} rows"
        )


class SerializationError(DataTableError):
    """The table could not be rendered to its text form."""
