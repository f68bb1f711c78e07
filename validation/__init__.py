"""
Fixtable Validation - field-name checks for fixture tables.

Provides the Schema configuration and the validator that enforces it when a
DataTable is built.
"""
from .validator import Schema, SchemaValidator, ValidationResult, duplicate_fields

__all__ = ['Schema', 'SchemaValidator', 'ValidationResult', 'duplicate_fields']
