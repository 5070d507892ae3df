"""Domain errors raised by the closet planner core."""

from __future__ import annotations


class ClosetError(Exception):
    """Base class for closet planner failures."""


class InvalidColorFormat(ClosetError, ValueError):
    """Raised when a color is not a ``#RRGGBB`` hex string."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid hex color {value!r}; expected '#RRGGBB'")
        self.value = value


class InsufficientInventory(ClosetError):
    """Raised when there is not at least one top and one bottom to pair."""

    def __init__(self, tops: int, bottoms: int) -> None:
        super().__init__(
            f"Need at least 1 top and 1 bottom to generate an outfit (tops={tops}, bottoms={bottoms})"
        )
        self.tops = tops
        self.bottoms = bottoms


class NoCandidateFound(ClosetError, RuntimeError):
    """Raised when selection over a non-empty inventory produced no outfit."""


class ItemNotFound(ClosetError, LookupError):
    """Raised when a mutation targets an unknown item or history entry."""

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(f"Unknown {kind} '{identifier}'")
        self.kind = kind
        self.identifier = identifier


__all__ = [
    "ClosetError",
    "InvalidColorFormat",
    "InsufficientInventory",
    "NoCandidateFound",
    "ItemNotFound",
]
