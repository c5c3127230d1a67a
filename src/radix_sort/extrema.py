from __future__ import annotations

from typing import Callable, Iterable, Optional, Tuple, TypeVar

from .errors import EmptyInputError

T = TypeVar("T")


def _identity(x):
    return x


def find_min_max(
    objects: Iterable[T], key: Optional[Callable[[T], int]] = None
) -> Tuple[int, int]:
    """Return (min_key, max_key) over `objects` in a single scan."""
    key = key or _identity

    it = iter(objects)
    try:
        first = next(it)
    except StopIteration:
        raise EmptyInputError("cannot find min/max of an empty collection") from None

    min_value = max_value = _checked_key(key, first)
    for obj in it:
        value = _checked_key(key, obj)
        if value < min_value:
            min_value = value
        elif value > max_value:
            max_value = value
    return min_value, max_value


def _checked_key(key: Callable[[T], int], obj: T) -> int:
    value = key(obj)
    # bool is an int subclass but never a meaningful sort key here
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"key must return an int, got {type(value).__name__}")
    return value
