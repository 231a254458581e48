"""Ordered candidate evaluation for optional metadata fields."""

from typing import Any


def first_non_empty(*candidates: Any) -> str | None:
    """Return the first usable candidate, in priority order.

    A candidate is usable when it is not None and, for strings, not blank.
    Non-string values are converted with str().

    Example:
        first_non_empty(None, "", "Rick Astley")  # -> "Rick Astley"
    """
    for candidate in candidates:
        if candidate is None:
            continue
        if isinstance(candidate, str):
            if candidate.strip():
                return candidate
            continue
        return str(candidate)
    return None


def dig(data: Any, *path: str | int) -> Any:
    """Walk nested dicts/lists, returning None as soon as a step is missing.

    Example:
        dig(entity, "visualIdentity", "backgroundBase", "backgroundImageUrl")
        dig(entity, "artists", 0, "name")
    """
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return None
            current = current[key]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(key)
        if current is None:
            return None
    return current
