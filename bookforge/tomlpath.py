"""Dotted-key access into nested TOML tables held as dictionaries."""

from __future__ import annotations

from typing import Any


def _split(key: str) -> tuple[str, str] | None:
    head, dot, tail = key.partition(".")
    return (head, tail) if dot else None


def read(table: Any, key: str) -> Any:
    """Return the value at the dotted ``key``, or ``None`` when it is absent."""
    if not isinstance(table, dict):
        return None
    parts = _split(key)
    if parts is None:
        return table.get(key)
    head, tail = parts
    if head not in table:
        return None
    return read(table[head], tail)


def insert(table: dict, key: str, value: Any) -> None:
    """Set the dotted ``key`` to ``value``, creating intermediate tables.

    Intermediate values that are not tables are replaced by empty tables.
    """
    if not isinstance(table, dict):
        raise TypeError("can only insert into a table")
    parts = _split(key)
    if parts is None:
        table[key] = value
        return
    head, tail = parts
    child = table.get(head)
    if not isinstance(child, dict):
        child = {}
        table[head] = child
    insert(child, tail, value)


def delete(table: Any, key: str) -> Any:
    """Remove the dotted ``key`` and return its value, or ``None`` if absent."""
    if not isinstance(table, dict):
        return None
    parts = _split(key)
    if parts is None:
        return table.pop(key, None)
    head, tail = parts
    if head not in table:
        return None
    return delete(table[head], tail)