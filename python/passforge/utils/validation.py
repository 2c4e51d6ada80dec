"""
Input validation utilities for Passforge.
"""

MIN_LENGTH = 1
MAX_LENGTH = 1024
MIN_COUNT = 1
MAX_COUNT = 500


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_length(length: object) -> bool:
    """
    Validate a password length.

    Args:
        length: Requested number of characters per password

    Returns:
        True if length is valid, False otherwise
    """
    return _is_int(length) and MIN_LENGTH <= length <= MAX_LENGTH  # type: ignore[operator]


def validate_count(count: object) -> bool:
    """
    Validate the number of passwords requested in one batch.

    Args:
        count: Requested batch size

    Returns:
        True if count is valid, False otherwise
    """
    return _is_int(count) and MIN_COUNT <= count <= MAX_COUNT  # type: ignore[operator]


def get_validation_error_message(field: str, value: object) -> str:
    """
    Get a descriptive error message for an invalid length or count.

    Args:
        field: Either "length" or "count"
        value: The invalid value

    Returns:
        Error message describing why the value is invalid
    """
    if field == "length":
        low, high = MIN_LENGTH, MAX_LENGTH
    elif field == "count":
        low, high = MIN_COUNT, MAX_COUNT
    else:
        return f"Unknown option: {field}"

    if not _is_int(value):
        return f"{field.capitalize()} must be an integer"

    if value < low:  # type: ignore[operator]
        return f"{field.capitalize()} must be at least {low}"

    if value > high:  # type: ignore[operator]
        return f"{field.capitalize()} cannot be greater than {high}"

    return f"{field.capitalize()} is invalid"
