from nestcss.validation.rules import ALL_RULES, Entry, iter_entries
from nestcss.validation.validator import ValidationError, validate, validate_or_raise

__all__ = [
    "ALL_RULES",
    "Entry",
    "iter_entries",
    "ValidationError",
    "validate",
    "validate_or_raise",
]
