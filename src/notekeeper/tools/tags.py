"""Tag registry helpers.

The registry is a plain list of tags. Operations never mutate the list they are
given: they return a new list, or the same list when nothing changed.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from notekeeper.resources.tags_types import Tag, TagOption


def find_tag(registry: Sequence[Tag], tag_id: str) -> Tag | None:
    """Return the tag with ``tag_id``, or None when it is not registered."""
    for tag in registry:
        if tag["id"] == tag_id:
            return tag
    return None


def rename_tag(registry: Sequence[Tag], tag_id: str, label: str) -> Sequence[Tag]:
    """Return a registry where the tag with ``tag_id`` carries ``label``.

    Unknown ids leave the registry unchanged and the same object is returned.
    Any string is accepted as a label, including the empty string.
    """
    if find_tag(registry, tag_id) is None:
        return registry
    return [
        {"id": tag["id"], "label": label} if tag["id"] == tag_id else tag
        for tag in registry
    ]


def delete_tag(registry: Sequence[Tag], tag_id: str) -> Sequence[Tag]:
    """Return a registry without the tag with ``tag_id``.

    Notes referencing the tag are left alone; their dangling id is dropped when
    the note is resolved. Deleting an unknown id returns the registry unchanged.
    """
    if find_tag(registry, tag_id) is None:
        return registry
    return [tag for tag in registry if tag["id"] != tag_id]


def tag_options(tags: Sequence[Tag]) -> list[TagOption]:
    """Map tags to ``{value, label}`` options for a multi-select widget."""
    return [{"value": tag["id"], "label": tag["label"]} for tag in tags]


def tags_from_options(options: Sequence[TagOption]) -> list[Tag]:
    """Map selected ``{value, label}`` options back to tags."""
    return [{"id": option["value"], "label": option["label"]} for option in options]


def choose_tags(
    available_tags: Sequence[Tag],
    selected: Optional[Sequence[Tag]] = None,
) -> list[Tag] | None:
    """Interactively pick tags using an InquirerPy fuzzy multi-select.

    Parameters
    ----------
    available_tags
        Tags offered to the user, in display order.
    selected
        Tags that start out ticked.

    Returns
    -------
    list[Tag] | None
        The chosen tags in registry order, or None if the user cancels.
    """
    if not available_tags:
        return []

    try:
        from InquirerPy.resolver import prompt
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError("InquirerPy is required for choose_tags.") from exc

    selected_ids = {tag["id"] for tag in selected or ()}
    choices: list[dict[str, Any]] = [
        {
            "name": tag["label"] or "(unnamed)",
            "value": tag["id"],
            "enabled": tag["id"] in selected_ids,
        }
        for tag in available_tags
    ]

    result = prompt(
        [
            {
                "type": "fuzzy",
                "name": "tags",
                "message": "Select tags",
                "choices": choices,
                "multiselect": True,
                "mandatory": False,
            }
        ],
    )
    if not isinstance(result, dict):
        return None
    chosen = result.get("tags")
    if not isinstance(chosen, list):
        return None

    chosen_ids = set(chosen)
    return [tag for tag in available_tags if tag["id"] in chosen_ids]
