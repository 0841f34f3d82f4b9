"""Shared types and validation helpers for resources.

This module contains:
- Validation mode type (shared across all resources)
- Common validation normalizers (id sequences, selected tags)
"""

from __future__ import annotations

import logging
from typing import Iterable, Literal, Sequence, get_args

from ..utils import unique_in_order
from .tags_types import Tag, _is_tag

_logger = logging.getLogger(__name__)

# --- Shared Validation Mode --- #
ValidationMode = Literal["off", "warn", "strict"]
VALIDATION_MODES: tuple[ValidationMode, ...] = get_args(ValidationMode)


def _normalize_validation(value: object, default: ValidationMode = "warn") -> ValidationMode:
    """Return ``value`` as a validation mode, or ``default`` when unrecognized."""
    if isinstance(value, str) and value.strip().lower() in VALIDATION_MODES:
        return value.strip().lower()  # type: ignore[return-value]
    if value is not None:
        _logger.warning("Unknown validation mode %r, using %r", value, default)
    return default


def _reject(logger: logging.Logger, validation: ValidationMode, message: str, value: object) -> None:
    """Raise or log an invalid input according to ``validation``."""
    if validation == "strict":
        raise ValueError(f"{message}: {value!r}")
    if validation == "warn":
        logger.warning("%s: %r", message, value)


# --- ID Sequence Normalization --- #
def _is_id(value: object) -> bool:
    return isinstance(value, str) and bool(value)


def _normalize_id_sequence(ids: str | Sequence[str] | object) -> list[str] | None:
    """Normalize a single id or a sequence of ids to a deduplicated list.

    Parameters
    ----------
    ids
        Single string id or sequence of string ids.

    Returns
    -------
    list[str] | None
        Deduplicated list of valid ids (non-empty strings), or None if:
        - Input is not a string or a sequence
        - No valid ids found

    Notes
    -----
    Used for normalizing tag ids passed to deletes and note intake.
    """
    if isinstance(ids, str):
        id_list: list[object] = [ids]
    elif isinstance(ids, Sequence) and not isinstance(ids, bytes):
        id_list = list(ids)
    else:
        return None

    valid_ids = [id_val for id_val in id_list if _is_id(id_val)]
    if not valid_ids:
        return None

    return unique_in_order(valid_ids)  # type: ignore[arg-type]


# --- Selected Tags Normalization --- #
def _normalize_selected_tags(tags: object) -> list[Tag] | None:
    """Normalize a selection of tags to a list of ``{id, label}`` dicts.

    Any iterable is accepted and read once. Returns ``None`` when ``tags`` is not
    iterable or contains anything that is not a tag dict. An empty iterable is a
    valid (empty) selection.
    """
    if isinstance(tags, (str, bytes, dict)) or not isinstance(tags, Iterable):
        return None
    tags = list(tags)
    if not all(_is_tag(tag) for tag in tags):
        return None
    selected: list[Tag] = []
    seen: set[str] = set()
    for tag in tags:
        if tag["id"] in seen:
            continue
        seen.add(tag["id"])
        selected.append({"id": tag["id"], "label": tag["label"]})
    return selected
