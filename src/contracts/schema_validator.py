"""JSON Schema validation for exported puzzle bundles."""

from __future__ import annotations

import json
import string
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema

from multicrypto.bundle import compute_bundle_id


class SchemaValidationError(RuntimeError):
    """Exception raised when a bundle fails validation."""

    def __init__(self, code: str, detail: Optional[str] = None) -> None:
        self.code = code
        self.detail = detail
        message = code if detail is None else f"{code}:{detail}"
        super().__init__(message)


_SCHEMA_ROOT = Path(__file__).resolve().parent / "schemas"
BUNDLE_SCHEMA = "multicrypto_bundle.schema.json"

_schema_cache: Dict[str, Dict[str, Any]] = {}


def load_schema(schema_name: str = BUNDLE_SCHEMA) -> Dict[str, Any]:
    """Load a schema from the bundled ``schemas`` directory."""

    if schema_name in _schema_cache:
        return _schema_cache[schema_name]

    path = _SCHEMA_ROOT / schema_name
    try:
        schema = json.loads(path.read_text("utf-8"))
    except FileNotFoundError as exc:
        raise SchemaValidationError("schema-not-found", schema_name) from exc

    _schema_cache[schema_name] = schema
    return schema


def _invariant(detail: str) -> None:
    raise SchemaValidationError("invariant-violation", detail)


def _validate_invariants(obj: Dict[str, Any]) -> None:
    if obj["bundle_id"] != compute_bundle_id(obj):
        _invariant("bundle_id does not match bundle contents")

    low = obj["digit_range"]["min"]
    high = obj["digit_range"]["max"]
    if low > high:
        _invariant("digit_range.min must not exceed digit_range.max")

    def check_operands(operands: list, where: str) -> int:
        if any(not low <= x <= high for x in operands):
            _invariant(f"{where} operands must lie within the digit range")
        a, b, c, d = operands
        return a * b - c * d

    letters = [entry["letter"] for entry in obj["decoder_key"]]
    if letters != list(string.ascii_uppercase):
        _invariant("decoder_key letters must run from A to Z in order")

    decoder = obj["solution"]["decoder"]
    for entry in obj["decoder_key"]:
        value = check_operands(entry["operands"], f"decoder_key[{entry['letter']}]")
        if not 1 <= value <= len(decoder) or decoder[value - 1] != entry["letter"].lower():
            _invariant(f"decoder_key clue for {entry['letter']} does not decode to its letter")

    phrase = obj["solution"]["phrase"]
    if len(phrase) != len(obj["puzzle"]):
        _invariant("puzzle must hold one entry per phrase character")
    for index, (entry, ch) in enumerate(zip(obj["puzzle"], phrase)):
        if entry["kind"] == "literal":
            if entry["text"] != ch:
                _invariant(f"puzzle[{index}] literal does not match the phrase")
            continue
        value = check_operands(entry["operands"], f"puzzle[{index}]")
        if value != entry["value"] or decoder[value - 1] != ch:
            _invariant(f"puzzle[{index}] does not decode to {ch!r}")


def validate_bundle(obj: Dict[str, Any]) -> None:
    """Validate a puzzle bundle against its schema and decoding invariants."""

    if not isinstance(obj, dict):
        raise SchemaValidationError("invalid-bundle", "bundle must be an object")

    schema = load_schema()
    Validator = jsonschema.validators.validator_for(schema)
    Validator.check_schema(schema)
    validator = Validator(schema)
    try:
        validator.validate(obj)
    except jsonschema.ValidationError as exc:
        raise SchemaValidationError("invariant-violation", exc.message) from exc

    _validate_invariants(obj)


__all__ = [
    "BUNDLE_SCHEMA",
    "SchemaValidationError",
    "load_schema",
    "validate_bundle",
]
