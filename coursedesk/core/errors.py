"""Error types raised by the record client and the dashboard actions."""

from __future__ import annotations

from typing import Optional


class CourseDeskError(Exception):
    """Base class for all application errors."""


class TransportError(CourseDeskError):
    """The record store answered with a non-success status or was unreachable.

    ``text`` holds the raw response body (or the network error message) so it
    can be shown to the operator as-is.
    """

    def __init__(self, text: str, status_code: Optional[int] = None) -> None:
        super().__init__(text)
        self.text = text
        self.status_code = status_code


class DecodeError(CourseDeskError):
    """A response body that should be JSON could not be decoded."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid JSON from record store: {text[:200]}")
        self.text = text


class ValidationError(CourseDeskError):
    """A required form field is missing; raised before any network call."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__("Missing required fields: " + ", ".join(missing))
        self.missing = missing


class BusyError(CourseDeskError):
    """Another mutation is still in flight."""


class RecordNotFoundError(CourseDeskError):
    """The record store has no record with the requested id."""


__all__ = [
    "BusyError",
    "CourseDeskError",
    "DecodeError",
    "RecordNotFoundError",
    "TransportError",
    "ValidationError",
]
