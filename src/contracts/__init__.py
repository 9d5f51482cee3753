"""Validation of exported puzzle bundles."""

from __future__ import annotations

from .schema_validator import SchemaValidationError, load_schema, validate_bundle

__all__ = ["SchemaValidationError", "load_schema", "validate_bundle"]
