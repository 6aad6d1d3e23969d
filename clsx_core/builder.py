"""
Conditional class list construction

    clsx("base", dynamic, ("active", is_active), when("disabled", is_disabled))

Bare values are always included, (value, condition) pairs only when the
condition is truthy. Empty strings are dropped and the rest joined by a
single space, in input order.
"""

from typing import Any, Iterable, NamedTuple

from clsx_core.constants import SEPARATOR
from clsx_core.exceptions import InvalidClassItemError


class Conditional(NamedTuple):
    """A class value paired with its inclusion condition."""
    value: Any
    condition: Any


ClassItem = str | Conditional | tuple[Any, Any]

_UNSUPPORTED_TYPES = (list, dict, set, frozenset, bytes, bytearray)


def when(value: Any, condition: Any) -> Conditional:
    """Pair a class value with a condition."""
    return Conditional(value, condition)


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    # None is "no class" and is dropped like an empty string
    if value is None:
        return ""
    if isinstance(value, _UNSUPPORTED_TYPES) or isinstance(value, tuple):
        raise InvalidClassItemError(
            f"Collections and bytes are not supported as class values: {value!r}",
            item=value,
        )
    return str(value)


def _candidate(item: Any) -> tuple[str, bool]:
    """Resolve one argument to its candidate string and inclusion flag."""
    if isinstance(item, str):
        return item, True
    if isinstance(item, tuple):
        if len(item) != 2:
            raise InvalidClassItemError(
                f"Conditional class items must be (value, condition) pairs, got {len(item)} items",
                item=item,
            )
        value, condition = item
        return _to_text(value), bool(condition)
    return _to_text(item), True


def _join(candidates: Iterable[str]) -> str:
    return SEPARATOR.join(c for c in candidates if c != "")


def clsx(*args: ClassItem) -> str:
    """
    Build a space-separated class list.

    Args:
        *args: Bare values, or (value, condition) pairs

    Returns:
        The included, non-empty values joined by single spaces

    Raises:
        InvalidClassItemError: If an argument is a collection, bytes, or a
            tuple that is not a pair
    """
    if not args:
        return ""

    if len(args) == 1 and isinstance(args[0], str):
        return args[0]

    classes = []
    for item in args:
        text, included = _candidate(item)
        if included:
            classes.append(text)

    return _join(classes)


def build_classes(items: Iterable[Any]) -> str:
    """
    Build a class list from an iterable of items.

    Each item is a bare value or a (value, condition) pair. A condition of
    None means the value is included unconditionally.
    """
    normalized = []
    for item in items:
        if isinstance(item, tuple) and len(item) == 2 and item[1] is None:
            normalized.append(_to_text(item[0]))
        else:
            normalized.append(item)
    return clsx(*normalized)


class ClassListBuilder:
    """
    Fluent builder over the working sequence of class names.

    Example:
        builder = ClassListBuilder("btn")
        builder.add_if("btn-primary", primary).add_if("disabled", not enabled)
        html_class = builder.build()
    """

    def __init__(self, *items: ClassItem):
        self._classes: list[str] = []
        self.extend(items)

    def add(self, *values: Any) -> "ClassListBuilder":
        """Append values unconditionally."""
        for value in values:
            self._classes.append(_to_text(value))
        return self

    def add_if(self, value: Any, condition: Any) -> "ClassListBuilder":
        """Append value only when condition is truthy."""
        text = _to_text(value)
        if condition:
            self._classes.append(text)
        return self

    def extend(self, items: Iterable[ClassItem]) -> "ClassListBuilder":
        """Append a sequence of bare values and (value, condition) pairs."""
        for item in items:
            text, included = _candidate(item)
            if included:
                self._classes.append(text)
        return self

    def clear(self) -> "ClassListBuilder":
        self._classes = []
        return self

    def build(self) -> str:
        return _join(self._classes)

    def __len__(self) -> int:
        return len(self._classes)

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"ClassListBuilder({self._classes!r})"
