"""Tag registry resource wrapper."""

from __future__ import annotations

import uuid
from typing import Optional, Sequence

from .base import Resource
from .tags_types import Tag, TagOption, _copy_tag
from ._common_types import ValidationMode, _is_id, _normalize_id_sequence
from ..tools.tags import choose_tags, delete_tag, find_tag, rename_tag, tag_options


class Tags(Resource):
    """Tag registry operations."""

    def list(self) -> list[Tag]:
        """Return a snapshot of the registry in registry order."""
        return [_copy_tag(tag) for tag in self._notebook._tags]

    def get(self, tag_id: str) -> Tag | None:
        """Return the tag with ``tag_id``, or ``None`` when it is not registered."""
        tag = find_tag(self._notebook._tags, tag_id)
        return _copy_tag(tag) if tag is not None else None

    def options(self) -> list[TagOption]:
        """Return the registry as ``{value, label}`` options."""
        return tag_options(self._notebook._tags)

    def add(
        self,
        label: str,
        *,
        tag_id: Optional[str] = None,
        validation: Optional[ValidationMode] = None,
    ) -> Tag | None:
        """Register a new tag.

        Parameters
        ----------
        label
            Tag label.
        tag_id
            Identifier to use. A random UUID is generated when omitted.
        validation
            Validation mode: ``"off"`` accepts inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.

        Returns
        -------
        Tag or None
            Created tag dict, or ``None`` on invalid input.
        """
        validation = self._validation(validation)
        if validation != "off":
            if not isinstance(label, str):
                self._invalid(validation, "Invalid label for add", label)
                return None
            if tag_id is not None and not _is_id(tag_id):
                self._invalid(validation, "Invalid tag_id for add", tag_id)
                return None

        if tag_id is None:
            tag_id = str(uuid.uuid4())
        # Ids stay unique for the whole process, deleted ones included.
        if self.get(tag_id) is not None or tag_id in self._notebook._retired_tag_ids:
            if validation == "strict":
                raise ValueError(f"Tag id already used: {tag_id!r}")
            self._logger.warning("Tag id already used: %r", tag_id)
            return None

        tag: Tag = {"id": tag_id, "label": label}
        self._notebook._tags = [*self._notebook._tags, tag]
        self._logger.debug("Added tag %s (%r)", tag_id, label)
        return _copy_tag(tag)

    def update(
        self,
        tag_id: str,
        label: str,
        *,
        validation: Optional[ValidationMode] = None,
    ) -> Tag | None:
        """Rename a tag.

        Every note referencing the tag shows the new label the next time it is
        resolved. Unknown ids are a no-op.

        Parameters
        ----------
        tag_id
            Tag identifier.
        label
            New tag label. The empty string is allowed.
        validation
            Validation mode: ``"off"`` accepts inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.

        Returns
        -------
        Tag or None
            Renamed tag dict, or ``None`` when the id is unknown or the input invalid.
        """
        validation = self._validation(validation)
        if validation != "off":
            if not _is_id(tag_id):
                self._invalid(validation, "Invalid tag_id for update", tag_id)
                return None
            if not isinstance(label, str):
                self._invalid(validation, "Invalid label for update", label)
                return None

        registry = rename_tag(self._notebook._tags, tag_id, label)
        if registry is self._notebook._tags:
            self._logger.debug("Tag %s not found, nothing renamed", tag_id)
            return None
        self._notebook._tags = registry
        return self.get(tag_id)

    def delete(
        self,
        tag_ids: Sequence[str] | str,
        *,
        validation: Optional[ValidationMode] = None,
    ) -> bool:
        """Delete one or more tags by id.

        Notes keep their tag ids; deleted ids are dropped at resolution time.
        Deleting an id that is not registered is a no-op.

        Parameters
        ----------
        tag_ids
            Tag id or sequence of tag ids.
        validation
            Validation mode: ``"off"`` accepts inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.

        Returns
        -------
        bool
            ``True`` when the input was accepted.
        """
        validation = self._validation(validation)
        # When validation is off, pass input directly without transformation
        if validation == "off":
            ids = [tag_ids] if isinstance(tag_ids, str) else tag_ids
        else:
            ids = _normalize_id_sequence(tag_ids)
            if ids is None:
                self._invalid(validation, "Invalid tag_ids for delete", tag_ids)
                return False

        for tag_id in ids:
            registry = delete_tag(self._notebook._tags, tag_id)
            if registry is self._notebook._tags:
                self._logger.debug("Tag %s not found, nothing deleted", tag_id)
                continue
            self._notebook._tags = registry
            self._notebook._retired_tag_ids.add(tag_id)
        return True

    def choose(self, selected: Optional[Sequence[Tag]] = None) -> list[Tag] | None:
        """Interactively pick tags from the registry.

        ``selected`` defaults to the tags currently selected in the filter query.
        Returns ``None`` when the user cancels.
        """
        if selected is None:
            selected = self._notebook.query["selected_tags"]
        return choose_tags(self.list(), selected)
