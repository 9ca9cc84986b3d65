"""Validation helpers for conversion options."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hanzi_pinyin.models import ConversionOptions

VALID_TONE_TYPES = {"symbol", "num", "none"}
VALID_PATTERNS = {
    "pinyin",
    "initial",
    "final",
    "num",
    "first",
    "finalHead",
    "finalBody",
    "finalTail",
}
VALID_MODES = {"normal", "surname"}
VALID_NON_ZH = {"spaced", "consecutive", "removed"}
VALID_TYPES = {"string", "array", "all"}


def validate_options(options: ConversionOptions) -> None:
    """Validate every enumerated and boolean field of ``options``.

    Args:
        options: Options record to validate.

    Raises:
        ValueError: If any field holds a value outside its allowed set. All
            problems are reported together.
    """

    errors: list[str] = []
    choices = [
        ("tone_type", options.tone_type, VALID_TONE_TYPES),
        ("pattern", options.pattern, VALID_PATTERNS),
        ("mode", options.mode, VALID_MODES),
        ("non_zh", options.non_zh, VALID_NON_ZH),
        ("type", options.type, VALID_TYPES),
    ]
    for name, value, allowed in choices:
        if value not in allowed:
            errors.append(
                f"{name}: invalid value {value!r} (expected one of {', '.join(sorted(allowed))})"
            )

    for name in ("multiple", "remove_non_zh", "v"):
        value = getattr(options, name)
        if not isinstance(value, bool):
            errors.append(f"{name}: expected bool, got {type(value).__name__}")

    if errors:
        preview = "\n".join(f"- {item}" for item in errors)
        raise ValueError(f"Option validation failed with {len(errors)} errors:\n{preview}")
