"""User-facing messages for pydantic validation errors.

Belongs to the Application layer. Turns pydantic's machine errors into
single-line messages suitable for the terminal.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

# Maps (field, error_type) → message
_ERROR_MAP: dict[tuple[str, str], str] = {
    ("api_key", "string_type"): "API key must be a string.",
    ("base_url", "string_type"): "Base URL must be a string.",
    ("max_file_size", "int_type"): "Maximum file size must be a whole number of bytes.",
    ("max_file_size", "int_parsing"): "Maximum file size must be a whole number of bytes.",
    ("max_file_size", "int_from_float"): "Maximum file size must be a whole number of bytes.",
}


def friendly_error(error: dict[str, Any]) -> str:
    """Return a single-line message for one pydantic error dict.

    Errors raised from our own validators carry their message in
    ``ctx["error"]`` and are passed through unchanged.
    """
    field = ".".join(str(loc) for loc in error.get("loc", []))
    error_type = error.get("type", "")

    if error_type == "value_error":
        original = error.get("ctx", {}).get("error")
        if original is not None:
            return str(original)

    message = _ERROR_MAP.get((field, error_type))
    if message:
        return message
    return f"Invalid value for '{field}': {error.get('msg', 'validation error')}"


def format_validation_errors(errors: list[dict[str, Any]]) -> list[str]:
    """Convert the output of ``ValidationError.errors()`` to messages."""
    return [friendly_error(err) for err in errors]


def first_error_message(exc: ValidationError) -> str:
    """Message for the first failing field, in model field order."""
    messages = format_validation_errors(exc.errors())
    return messages[0] if messages else str(exc)
