"""
Fixtable - validated in-memory tables for row-oriented fixture data.

Subpackages:
    - fixtable.datatable: The DataTable entity and its construction entry points
    - fixtable.validation: Schema configuration and field-name validation
    - fixtable.common: Cell-grid adapter and the error taxonomy

Example:
    >>> from datatable import DataTable
    >>> from validation import Schema
    >>> table = DataTable.new_with_schema(
    ...     Schema(required_fields=["name"]), ["name", "value"], ["foo", "bar"]
    ... )
"""
__version__ = "0.1.0"
