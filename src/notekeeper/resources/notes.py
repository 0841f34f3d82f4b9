"""Note resource wrapper."""

from __future__ import annotations

import uuid
from typing import Optional, Sequence

from .base import Resource
from .notes_types import Note, SimplifiedNote, _copy_note
from ._common_types import ValidationMode, _is_id
from ..tools.notes import filter_notes, find_note, resolve_notes


class Notes(Resource):
    """Note listing, lookup and filtering."""

    def list(self) -> list[Note]:
        """Return the stored notes in their original order."""
        return [_copy_note(note) for note in self._notebook._notes]

    def get(
        self,
        note_id: str,
        *,
        validation: Optional[ValidationMode] = None,
    ) -> Note | None:
        """Return a single note by id.

        Parameters
        ----------
        note_id
            Note identifier.
        validation
            Validation mode: ``"off"`` accepts inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.

        Returns
        -------
        Note or None
            The note, or ``None`` when no note has that id.
        """
        validation = self._validation(validation)
        if validation != "off" and not _is_id(note_id):
            self._invalid(validation, "Invalid note_id for get", note_id)
            return None
        note = find_note(self._notebook._notes, note_id)
        return _copy_note(note) if note is not None else None

    def add(
        self,
        title: str,
        *,
        content: str = "",
        tag_ids: Sequence[str] = (),
        note_id: Optional[str] = None,
        validation: Optional[ValidationMode] = None,
    ) -> Note | None:
        """Store a note handed over by the editor or the persistence layer.

        Parameters
        ----------
        title
            Note title.
        content
            Free-text note body.
        tag_ids
            Ids of the tags on the note. Ids that are not registered are kept and
            simply never resolve.
        note_id
            Identifier to use. A random UUID is generated when omitted.
        validation
            Validation mode: ``"off"`` accepts inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.

        Returns
        -------
        Note or None
            Stored note dict, or ``None`` on invalid input.
        """
        validation = self._validation(validation)
        if validation != "off":
            if not isinstance(title, str):
                self._invalid(validation, "Invalid title for add", title)
                return None
            if not isinstance(content, str):
                self._invalid(validation, "Invalid content for add", content)
                return None
            if note_id is not None and not _is_id(note_id):
                self._invalid(validation, "Invalid note_id for add", note_id)
                return None
            if (
                isinstance(tag_ids, (str, bytes))
                or not isinstance(tag_ids, Sequence)
                or not all(_is_id(tag_id) for tag_id in tag_ids)
            ):
                self._invalid(validation, "Invalid tag_ids for add", tag_ids)
                return None

        ids = list(tag_ids)
        if note_id is None:
            note_id = str(uuid.uuid4())
        if find_note(self._notebook._notes, note_id) is not None:
            if validation == "strict":
                raise ValueError(f"Note id already used: {note_id!r}")
            self._logger.warning("Note id already used: %r", note_id)
            return None

        note: Note = {"id": note_id, "title": title, "content": content, "tag_ids": ids}
        self._notebook._notes.append(note)
        return _copy_note(note)

    def resolved(self) -> list[SimplifiedNote]:
        """Return every note with its tags resolved against the current registry."""
        return resolve_notes(self._notebook._notes, self._notebook._tags)

    def visible(self) -> list[SimplifiedNote]:
        """Return the resolved notes matching the current filter query."""
        return filter_notes(self.resolved(), self._notebook.query)
