"""Types for the tag registry.

Tags are referenced by notes through their id only, so the label can change
without touching any note.
"""

from __future__ import annotations

from typing import TypedDict
from typing_extensions import ReadOnly


class Tag(TypedDict):
    """Readonly tag record held by the registry."""
    id: ReadOnly[str]
    label: ReadOnly[str]


class TagOption(TypedDict):
    """Value/label pair used by multi-select widgets."""
    value: ReadOnly[str]
    label: ReadOnly[str]


def _is_tag(value: object) -> bool:
    """Return True when ``value`` looks like a tag dict."""
    return (
        isinstance(value, dict)
        and isinstance(value.get("id"), str)
        and isinstance(value.get("label"), str)
    )


def _copy_tag(tag: Tag) -> Tag:
    return {"id": tag["id"], "label": tag["label"]}

__all__ = ["Tag", "TagOption"]
