from __future__ import annotations

from typing import Sequence


class ZoneError(Exception):
    """Base exception for all zone-related errors."""


class ZoneParseError(ZoneError, ValueError):
    """A packed zone string that could not be parsed or failed validation."""

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors: list[str] = list(errors)
        super().__init__("; ".join(self.errors))
