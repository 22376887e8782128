"""Centralised exception hierarchy for lcoview."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class LcoviewError(Exception):
    """Base class for all custom lcoview exceptions."""


class LcovFileNotFoundError(LcoviewError):
    """LCOV data file could not be located on disk."""


class TemplateNotFoundError(LcoviewError):
    """A page template was not found in any of the searched directories."""

    def __init__(self, name: str, searched: Sequence[Path]) -> None:
        self.name = name
        self.searched = tuple(searched)
        joined = ", ".join(str(p) for p in self.searched)
        super().__init__(f"Template not found: {name} (searched: {joined})")


__all__ = [
    "LcovFileNotFoundError",
    "LcoviewError",
    "TemplateNotFoundError",
]
