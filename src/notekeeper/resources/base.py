"""Base resource helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ._common_types import ValidationMode, _reject

if TYPE_CHECKING:  # pragma: no cover
    from ..notebook import Notebook


class Resource:
    """Shared helpers for resource classes."""

    def __init__(self, notebook: "Notebook") -> None:
        self._notebook = notebook

    @property
    def _logger(self):
        return self._notebook._logger

    def _validation(self, validation: Optional[ValidationMode]) -> ValidationMode:
        return validation or self._notebook.validation

    def _invalid(self, validation: ValidationMode, message: str, value: object) -> None:
        """Raise or log an invalid input according to ``validation``."""
        _reject(self._logger, validation, message, value)
