"""Resource module exports."""

from .notes import Notes
from .tags import Tags

__all__ = [
    "Notes",
    "Tags",
]
