"""
Console Kernel: Draft Validation

Checks a draft against its entity schema before it reaches the store.
The store itself never validates; creation forms and edit sessions call
this and raise ValidationFailed on a non-empty result.
"""

from __future__ import annotations

import math
from typing import Any

from console.kernel.types import NUMERIC_KINDS, TEXT_KINDS, EntitySchema, FieldSpec

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_fields(schema: EntitySchema, fields: dict[str, Any]) -> list[str]:
    """
    Validate a draft's fields against the schema.
    Returns a list of error strings. Empty list = valid.

    - Required text fields must be non-empty after trimming whitespace.
    - Numeric fields must be present and numeric; flagged ones non-negative.
    - Choice fields must hold one of the declared choices.

    Keys that are not in the schema are reported too.
    """
    errors: list[str] = []

    for key in fields:
        if schema.get_field(key) is None:
            errors.append(f"Unknown field: {key}")

    for spec in schema.fields:
        validator = _VALIDATORS[spec.kind]
        error = validator(spec, fields.get(spec.name))
        if error:
            errors.append(error)

    return errors


def has_missing_required(errors: list[str]) -> bool:
    return any(e.endswith(" is required") for e in errors)


def has_negative_number(errors: list[str]) -> bool:
    return any(e.endswith(" must be non-negative") for e in errors)


# ---------------------------------------------------------------------------
# Per-kind validators
# ---------------------------------------------------------------------------


def _validate_text(spec: FieldSpec, value: Any) -> str | None:
    if value is None:
        return f"{spec.title} is required" if spec.required else None
    if not isinstance(value, str):
        return f"{spec.title} must be text"
    if spec.required and not value.strip():
        return f"{spec.title} is required"
    return None


def _validate_number(spec: FieldSpec, value: Any) -> str | None:
    if value is None:
        return f"{spec.title} is required"
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return f"{spec.title} must be a number"
    # NaN and infinities are rejected like non-numbers
    if isinstance(value, float) and not math.isfinite(value):
        return f"{spec.title} must be a number"
    if spec.kind == "integer" and isinstance(value, float) and not value.is_integer():
        return f"{spec.title} must be a whole number"
    if spec.non_negative and value < 0:
        return f"{spec.title} must be non-negative"
    return None


def _validate_boolean(spec: FieldSpec, value: Any) -> str | None:
    if not isinstance(value, bool):
        return f"{spec.title} must be true or false"
    return None


def _validate_choice(spec: FieldSpec, value: Any) -> str | None:
    if value not in spec.choices:
        return f"{spec.title} must be one of: {', '.join(spec.choices)}"
    return None


_VALIDATORS = {
    **{kind: _validate_text for kind in TEXT_KINDS},
    **{kind: _validate_number for kind in NUMERIC_KINDS},
    "boolean": _validate_boolean,
    "choice": _validate_choice,
}
