"""Note resolution and filtering helpers."""

from __future__ import annotations

from typing import Sequence

from notekeeper.resources.notes_types import FilterQuery, Note, SimplifiedNote
from notekeeper.resources.tags_types import Tag, _copy_tag


def find_note(notes: Sequence[Note], note_id: str) -> Note | None:
    """Return the note with ``note_id``, or None so the caller can fall back."""
    for note in notes:
        if note["id"] == note_id:
            return note
    return None


def resolve_note(note: Note, registry: Sequence[Tag]) -> SimplifiedNote:
    """Project ``note`` for display, resolving tag ids against ``registry``.

    Ids missing from the registry (deleted tags) are silently dropped.
    """
    tags_by_id = {tag["id"]: tag for tag in registry}
    return {
        "id": note["id"],
        "title": note["title"],
        "tags": [_copy_tag(tags_by_id[tag_id]) for tag_id in note["tag_ids"] if tag_id in tags_by_id],
    }


def resolve_notes(notes: Sequence[Note], registry: Sequence[Tag]) -> list[SimplifiedNote]:
    """Resolve every note against the same registry snapshot."""
    return [resolve_note(note, registry) for note in notes]


def matches_query(note: SimplifiedNote, query: FilterQuery) -> bool:
    """Return True when ``note`` satisfies both the title and the tag predicate.

    The title matches on case-insensitive substring containment; an empty title
    matches everything. Every selected tag must be present on the note.
    """
    title = query["title"]
    if title != "" and title.lower() not in note["title"].lower():
        return False

    selected_tags = query["selected_tags"]
    if not selected_tags:
        return True
    note_tag_ids = {tag["id"] for tag in note["tags"]}
    return all(tag["id"] in note_tag_ids for tag in selected_tags)


def filter_notes(notes: Sequence[SimplifiedNote], query: FilterQuery) -> list[SimplifiedNote]:
    """Return the notes matching ``query`` in their original order."""
    return [note for note in notes if matches_query(note, query)]
