"""Types for notes and the note filter query."""

from __future__ import annotations

from typing import TypedDict
from typing_extensions import ReadOnly

from .tags_types import Tag


class Note(TypedDict):
    """Stored note. ``tag_ids`` may hold ids of tags that were since deleted."""
    id: ReadOnly[str]
    title: ReadOnly[str]
    content: ReadOnly[str]
    tag_ids: ReadOnly[list[str]]


class SimplifiedNote(TypedDict):
    """Note projected for list display, with tag ids resolved to tags."""
    id: ReadOnly[str]
    title: ReadOnly[str]
    tags: ReadOnly[list[Tag]]


class FilterQuery(TypedDict):
    """Transient title/tag query held by the UI."""
    title: ReadOnly[str]
    selected_tags: ReadOnly[list[Tag]]


def empty_query() -> FilterQuery:
    """Return a query that matches every note."""
    return {"title": "", "selected_tags": []}


def _copy_note(note: Note) -> Note:
    """Return a copy of ``note`` that shares no mutable state with it."""
    return {**note, "tag_ids": list(note["tag_ids"])}  # type: ignore[typeddict-item]

__all__ = ["FilterQuery", "Note", "SimplifiedNote", "empty_query"]
