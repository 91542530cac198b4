"""String comparison helpers."""


def equals_ignoring_case(value: str, other: str) -> bool:
    """Return True when both strings are equal after lower-casing."""
    return value.lower() == other.lower()
