"""
In-memory data table for row-oriented fixture data.

A DataTable is a list of field names plus rows of string cells. Every row has
exactly one cell per field; this is checked whenever rows enter the table.
Values are opaque strings and are never converted.
"""
import json
import logging
import operator
from typing import Any, Iterator, Optional, Sequence

import pandas as pd

from common.cells import CellTable, row_values, values
from common.errors import ArityError, BoundsError, MalformedTableError, SerializationError
from validation import Schema, SchemaValidator, duplicate_fields

logger = logging.getLogger(__name__)

NOT_FOUND = -1


class DataTable:
    """
    Table of string rows keyed by an ordered list of fields.

    Accessors hand out copies; mutating what they return never changes the
    table.

    Example:
        >>> table = DataTable.new(["name", "value"], ["foo", "bar"])
        >>> table.rows()
        [{'name': 'foo', 'value': 'bar'}]
        >>> table.find_row(["foo", "bar"])
        0
    """

    def __init__(
        self,
        fields: Sequence[str],
        rows: Sequence[Sequence[str]] = (),
        schema: Optional[Schema] = None,
    ):
        """
        Build and validate a table.

        Args:
            fields: Column names, in cell order.
            rows: Initial rows; each must have one cell per field.
            schema: Optional schema the fields must satisfy.

        Raises:
            ArityError: A row's length differs from the number of fields.
            MissingFieldError: A required schema field is missing.
            UnknownFieldError: A field is not allowed by a closed schema.
        """
        fields = list(fields)
        rows = [list(row) for row in rows]
        for row in rows:
            if len(row) != len(fields):
                logger.debug(f"Row {row} does not match fields {fields}")
                raise ArityError(len(fields), len(row))

        SchemaValidator(schema).validate(fields)

        duplicates = duplicate_fields(fields)
        if duplicates:
            logger.warning(
                f"Duplicate fields {duplicates}: row views keep the last value"
            )

        self._fields = fields
        self._rows = rows
        self._schema = schema

    @classmethod
    def new(cls, fields: Sequence[str], *rows: Sequence[str]) -> "DataTable":
        """Create a table with the given fields and optional initial rows."""
        return cls(fields, rows)

    @classmethod
    def new_with_schema(
        cls, schema: Optional[Schema], fields: Sequence[str], *rows: Sequence[str]
    ) -> "DataTable":
        """Create a table whose fields are validated against ``schema``."""
        return cls(fields, rows, schema=schema)

    @classmethod
    def from_cells(cls, table: CellTable) -> "DataTable":
        """Create a table from an external cell grid whose first row is the header."""
        return cls.from_cells_with_schema(None, table)

    @classmethod
    def from_cells_with_schema(
        cls, schema: Optional[Schema], table: CellTable
    ) -> "DataTable":
        """
        Create a table from an external cell grid, validated against ``schema``.

        Raises:
            MalformedTableError: The grid has fewer than two rows.
        """
        if len(table.rows) < 2:
            raise MalformedTableError(len(table.rows))

        return cls(values(table.rows[0]), row_values(table.rows[1:]), schema=schema)

    @classmethod
    def from_dataframe(
        cls, df: pd.DataFrame, schema: Optional[Schema] = None
    ) -> "DataTable":
        """
        Create a table from a DataFrame.

        Column labels and values are turned into strings; missing values
        become empty strings.
        """
        fields = [str(column) for column in df.columns]
        rows = [
            [
                '' if pd.api.types.is_scalar(value) and pd.isna(value) else str(value)
                for value in record
            ]
            for record in df.itertuples(index=False, name=None)
        ]
        return cls(fields, rows, schema=schema)

    @property
    def schema(self) -> Optional[Schema]:
        return self._schema

    def fields(self) -> list[str]:
        """Copy of the field names."""
        return list(self._fields)

    def row_values(self) -> list[list[str]]:
        """Copy of the raw rows."""
        return [list(row) for row in self._rows]

    def rows(self) -> list[dict[str, str]]:
        """
        Rows as field-to-value mappings.

        With duplicate field names the last cell for a name wins.
        """
        return [dict(zip(self._fields, row)) for row in self._rows]

    def find_row(self, row: Sequence[str]) -> int:
        """
        Index of the first row equal to ``row``, or NOT_FOUND (-1).

        Rows match only when they have the same length and equal cells.
        """
        candidate = list(row)
        for i, existing in enumerate(self._rows):
            if existing == candidate:
                return i
        return NOT_FOUND

    def remove_row(self, index: int) -> None:
        """
        Remove the row at ``index``; later rows shift down by one.

        Raises:
            BoundsError: ``index`` is not in ``[0, len(table))``.
            TypeError: ``index`` is not an integer.
        """
        if isinstance(index, bool):
            raise TypeError("row index must be an integer, not bool")
        index = operator.index(index)
        if not 0 <= index < len(self._rows):
            raise BoundsError(index, len(self._rows))
        removed = self._rows.pop(index)
        logger.debug(f"Removed row {index}: {removed}")

    def append_row(self, row: Sequence[str]) -> None:
        """
        Append a row to the end of the table.

        Raises:
            ArityError: The row's length differs from the number of fields.
        """
        if len(row) != len(self._fields):
            logger.debug(f"Row {list(row)} does not match fields {self._fields}")
            raise ArityError(len(self._fields), len(row))
        self._rows.append(list(row))
        logger.debug(f"Appended row {len(self._rows) - 1}: {list(row)}")

    def copy(self) -> "DataTable":
        """Independent copy of the table; the schema is shared."""
        clone = DataTable.__new__(DataTable)
        clone._fields = self.fields()
        clone._rows = self.row_values()
        clone._schema = self._schema
        return clone

    def to_pretty_json(self, indent: int = 2) -> bytes:
        """
        Pretty-printed JSON of the row views, UTF-8 encoded.

        Raises:
            SerializationError: The rows could not be serialized.
        """
        try:
            text = json.dumps(self.rows(), indent=indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error(f"Error serializing data table: {e}")
            raise SerializationError(f"could not serialize data table: {e}") from e
        return (text + '\n').encode('utf-8')

    def to_dataframe(self) -> pd.DataFrame:
        """DataFrame with one column per field and one record per row."""
        return pd.DataFrame(self.row_values(), columns=self.fields(), dtype=object)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[dict[str, str]]:
        return iter(self.rows())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DataTable):
            return NotImplemented
        return (
            self._fields == other._fields
            and self._rows == other._rows
            and self._schema == other._schema
        )

    __hash__ = None

    def __copy__(self) -> "DataTable":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "DataTable":
        return self.copy()

    def __repr__(self) -> str:
        return f"DataTable(fields={self._fields!r}, rows={len(self._rows)})"


def new(fields: Sequence[str], *rows: Sequence[str]) -> DataTable:
    """Create a table with the given fields and optional initial rows."""
    return DataTable.new(fields, *rows)


def new_with_schema(
    schema: Optional[Schema], fields: Sequence[str], *rows: Sequence[str]
) -> DataTable:
    """Create a table validated against ``schema``."""
    return DataTable.new_with_schema(schema, fields, *rows)


def from_cells(table: CellTable) -> DataTable:
    """Create a table from an external cell grid."""
    return DataTable.from_cells(table)


def from_cells_with_schema(schema: Optional[Schema], table: CellTable) -> DataTable:
    """Create a table from an external cell grid validated against ``schema``."""
    return DataTable.from_cells_with_schema(schema, table)
