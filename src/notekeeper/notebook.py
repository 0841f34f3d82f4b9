"""Stateful notebook that a UI drives with intent signals."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

from .resources._common_types import ValidationMode, _normalize_selected_tags, _normalize_validation, _reject
from .resources.notes import Notes
from .resources.notes_types import FilterQuery, Note, _copy_note, empty_query
from .resources.tags import Tags
from .resources.tags_types import Tag, _copy_tag

DEFAULT_VALIDATION: ValidationMode = _normalize_validation(os.environ.get("NOTEKEEPER_VALIDATION"))


class Notebook:
    """Resource-grouped owner of notes, the tag registry and the filter query."""

    notes: Notes
    tags: Tags

    def __init__(
        self,
        notes: Optional[Iterable[Note]] = None,
        tags: Optional[Iterable[Tag]] = None,
        *,
        validation: Optional[ValidationMode] = None,
    ) -> None:
        """Create a notebook over already loaded notes and tags.

        Parameters
        ----------
        notes
            Notes in display order.
        tags
            Tag registry in display order.
        validation
            Default validation mode for every resource call. Falls back to
            ``NOTEKEEPER_VALIDATION`` and then ``"warn"``.
        """
        self.validation: ValidationMode = _normalize_validation(validation, DEFAULT_VALIDATION)
        self._logger = logging.getLogger(__name__)

        self._notes: list[Note] = [_copy_note(note) for note in notes or []]
        self._tags: list[Tag] = [_copy_tag(tag) for tag in tags or []]
        self._retired_tag_ids: set[str] = set()
        self._query: FilterQuery = empty_query()

        self.notes: Notes = Notes(self)
        self.tags: Tags = Tags(self)

    @property
    def query(self) -> FilterQuery:
        """Current filter query."""
        return {
            "title": self._query["title"],
            "selected_tags": [_copy_tag(tag) for tag in self._query["selected_tags"]],
        }

    def set_title(self, title: str, *, validation: Optional[ValidationMode] = None) -> bool:
        """Replace the title part of the filter query.

        The title is used verbatim; whitespace is not trimmed.

        Returns
        -------
        bool
            ``True`` when the query was updated.
        """
        validation = validation or self.validation
        if validation != "off" and not isinstance(title, str):
            _reject(self._logger, validation, "Invalid title for filter", title)
            return False
        self._query = {"title": title, "selected_tags": self._query["selected_tags"]}
        return True

    def set_selected_tags(
        self,
        tags: Iterable[Tag],
        *,
        validation: Optional[ValidationMode] = None,
    ) -> bool:
        """Replace the selected-tag part of the filter query.

        Tags that are not in the registry are accepted; they simply match no
        note.

        Returns
        -------
        bool
            ``True`` when the query was updated.
        """
        validation = validation or self.validation
        if validation == "off":
            selected = list(tags)
        else:
            normalized = _normalize_selected_tags(tags)
            if normalized is None:
                _reject(self._logger, validation, "Invalid selected tags for filter", tags)
                return False
            selected = normalized
        self._query = {"title": self._query["title"], "selected_tags": selected}
        return True

    def clear_filters(self) -> None:
        """Reset the filter query so every note is visible."""
        self._query = empty_query()
