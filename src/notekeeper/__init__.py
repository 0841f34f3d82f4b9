"""Public package surface for the notekeeper note filtering core."""

from .notebook import DEFAULT_VALIDATION, Notebook
from .resources.notes_types import FilterQuery, Note, SimplifiedNote
from .resources.tags_types import Tag, TagOption
from .tools.notes import filter_notes, find_note, matches_query, resolve_note, resolve_notes
from .tools.tags import delete_tag, find_tag, rename_tag, tag_options, tags_from_options

__all__ = [
    "DEFAULT_VALIDATION",
    "FilterQuery",
    "Note",
    "Notebook",
    "SimplifiedNote",
    "Tag",
    "TagOption",
    "delete_tag",
    "filter_notes",
    "find_note",
    "find_tag",
    "matches_query",
    "rename_tag",
    "resolve_note",
    "resolve_notes",
    "tag_options",
    "tags_from_options",
]
