from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Mapping
from typing import Any

_SEQUENCE_TYPES: tuple[type[Any], ...] = (list, tuple, set, frozenset, deque)
_MISSING = object()


def iter_children(value: object) -> Iterator[tuple[str, object]]:
    """Yield ``(label, child)`` pairs for the immediate children of ``value``.

    Children are mapping values, sequence and set items, instance ``__dict__``
    entries and ``__slots__`` attributes. Labels are only used for logging.

    Args:
        value: Object whose children are enumerated. Leaf filtering is the
            caller's job.

    """
    if isinstance(value, Mapping):
        for key, child in list(value.items()):
            yield f"[{key!r}]", child
        return

    if isinstance(value, _SEQUENCE_TYPES):
        for index, child in enumerate(list(value)):
            yield f"[{index}]", child
        return

    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        for name, child in list(instance_dict.items()):
            yield name, child

    for name in _iter_slot_names(type(value)):
        child = getattr(value, name, _MISSING)
        if child is not _MISSING:
            yield name, child


def _iter_slot_names(cls: type[Any]) -> Iterator[str]:
    seen: set[str] = set()
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in {"__dict__", "__weakref__"} or name in seen:
                continue
            seen.add(name)
            yield _mangle(klass, name)


def _mangle(cls: type[Any], name: str) -> str:
    if name.startswith("__") and not name.endswith("__"):
        return f"_{cls.__name__.lstrip('_')}{name}"
    return name


__all__ = ["iter_children"]
