"""Shared helpers for the notekeeper package."""

from __future__ import annotations

from typing import Hashable, Iterable, TypeVar

T = TypeVar("T", bound=Hashable)


def unique_in_order(values: Iterable[T]) -> list[T]:
    """Return unique values preserving the original order."""
    seen: set[T] = set()
    output: list[T] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        output.append(value)
    return output
