# sparc_scaffolder/processing/validator.py
"""Input validation for feature descriptions.

All checks are evaluated (no short-circuiting) so every problem is reported
in one pass. The only early exit is the empty-input path, which also skips
sanitization.
"""

from __future__ import annotations

from sparc_scaffolder.processing.sanitizer import sanitize
from sparc_scaffolder.processing.types import ValidationResult

MIN_LENGTH = 10
MAX_LENGTH = 10_000

REPLACEMENT_CHAR = "\ufffd"


def has_invalid_encoding(text: str) -> bool:
    """True if text carries decode damage or cannot be encoded as UTF-8."""
    if REPLACEMENT_CHAR in text:
        return True
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        # Lone surrogates, e.g. from surrogateescape decoding
        return True
    return False


def validate_input(
    text: str | None,
    min_length: int = MIN_LENGTH,
    max_length: int = MAX_LENGTH,
) -> ValidationResult:
    """Validate a raw description and return a ValidationResult. Never raises."""
    if not text or not text.strip():
        return ValidationResult(is_valid=False, errors=["Input is required"])

    errors: list[str] = []

    if len(text) < min_length:
        errors.append(f"Input must be at least {min_length} characters")

    if len(text) > max_length:
        errors.append(f"Input exceeds maximum length of {max_length} characters")

    if has_invalid_encoding(text):
        errors.append("Invalid character encoding detected")

    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        sanitized_input=sanitize(text),
    )
