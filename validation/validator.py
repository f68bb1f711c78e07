"""
Field-name validation for fixture tables.

A Schema names the fields a table must carry and, optionally, the only other
fields it may carry. Cell values are never inspected.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from common.errors import MissingFieldError, UnknownFieldError

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of checking a field list against a schema."""
    success: bool
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        self.warnings.append(msg)

    def add_error(self, msg: str) -> None:
        self.errors.append(msg)
        self.success = False


@dataclass(frozen=True)
class Schema:
    """
    Required and optional field names for a data table.

    With no optional fields the schema is open: any extra column is accepted
    as long as the required ones are present. Listing optional fields closes
    the schema to ``required_fields + optional_fields``.

    Example:
        >>> schema = Schema(required_fields=("name",), optional_fields=("tag",))
        >>> schema.allowed_fields()
        ['tag', 'name']
    """
    required_fields: tuple[str, ...] = ()
    optional_fields: tuple[str, ...] = ()

    CONFIG_KEYS = ('required_fields', 'optional_fields')

    def __post_init__(self):
        for name in self.CONFIG_KEYS:
            if isinstance(getattr(self, name), str):
                raise ValueError(
                    f"Schema {name} must be a list of field names, not a string"
                )
        # Store tuples so the schema stays hashable
        object.__setattr__(self, 'required_fields', tuple(self.required_fields))
        object.__setattr__(self, 'optional_fields', tuple(self.optional_fields))

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "Schema":
        """
        Build a schema from a plain config dict.

        Args:
            config: Dict with optional 'required_fields' and 'optional_fields'
                    lists.

        Returns:
            Schema instance.

        Raises:
            ValueError: If the dict contains keys other than the two above.
                        Also raised when a field list is a bare string.
        """
        unknown = [key for key in config if key not in cls.CONFIG_KEYS]
        if unknown:
            raise ValueError(
                f"Unknown schema config keys: {', '.join(sorted(unknown))}"
            )
        return cls(
            required_fields=config.get('required_fields') or (),
            optional_fields=config.get('optional_fields') or (),
        )

    @property
    def is_closed(self) -> bool:
        """True if fields outside the allowed set are rejected."""
        return bool(self.optional_fields)

    def allowed_fields(self) -> list[str]:
        """Optional fields followed by required fields."""
        return list(self.optional_fields) + list(self.required_fields)


class SchemaValidator:
    """
    Checks a table's field names against an optional Schema.

    ``validate`` raises on the first problem and is what table construction
    uses. ``check`` collects every problem into a ValidationResult, which is
    handier when reporting on a fixture file as a whole.
    """

    def __init__(self, schema: Optional[Schema] = None):
        self.schema = schema

    def validate(self, fields: Sequence[str]) -> None:
        """
        Validate field names, stopping at the first failure.

        Required fields are checked before the closed-schema check.

        Raises:
            MissingFieldError: A required field is not in ``fields``.
            UnknownFieldError: The schema is closed and a field is not allowed.
        """
        if self.schema is None:
            return

        for name in self.schema.required_fields:
            if name not in fields:
                logger.debug(f"Required field '{name}' missing from {list(fields)}")
                raise MissingFieldError(name)

        if not self.schema.is_closed:
            return

        allowed = self.schema.allowed_fields()
        for name in fields:
            if name not in allowed:
                logger.debug(f"Field '{name}' not in allowed fields {allowed}")
                raise UnknownFieldError(name, allowed)

    def check(self, fields: Sequence[str]) -> ValidationResult:
        """
        Report every schema problem with ``fields`` without raising.

        Duplicate field names are reported as warnings since they make row
        views ambiguous.
        """
        result = ValidationResult(success=True)

        for name in duplicate_fields(fields):
            result.add_warning(f"Field '{name}' appears more than once")

        if self.schema is None:
            return result

        for name in self.schema.required_fields:
            if name not in fields:
                result.add_error(str(MissingFieldError(name)))

        if self.schema.is_closed:
            allowed = self.schema.allowed_fields()
            for name in fields:
                if name not in allowed:
                    result.add_error(str(UnknownFieldError(name, allowed)))

        return result


def duplicate_fields(fields: Sequence[str]) -> list[str]:
    """Field names that occur more than once, in order of first repeat."""
    seen = set()
    duplicates = []
    for name in fields:
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    return duplicates
