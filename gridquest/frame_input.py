"""Snapshot of the input state seen during a single frame."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass


@dataclass(frozen=True)
class FrameInput:
    """Input polled once per frame and handed to screens for update and draw.

    ``keys_down`` holds every key currently held; ``keys_pressed`` holds the
    keys that went down during this frame only. The mouse flags follow the
    same split for the left button.
    """

    cursor: tuple[int, int] = (0, 0)
    keys_down: frozenset = frozenset()
    keys_pressed: frozenset = frozenset()
    mouse_down: bool = False
    mouse_pressed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "cursor", (int(self.cursor[0]), int(self.cursor[1])))
        object.__setattr__(self, "keys_down", frozenset(self.keys_down))
        object.__setattr__(self, "keys_pressed", frozenset(self.keys_pressed))

    def key_down(self, key: Hashable) -> bool:
        """Return True while ``key`` is held."""
        return key in self.keys_down

    def key_just_pressed(self, key: Hashable) -> bool:
        """Return True only in the frame where ``key`` went down."""
        return key in self.keys_pressed

    def cursor_in(self, x: int, y: int, width: int, height: int) -> bool:
        """Return True if the cursor lies in the rectangle, edges included."""
        cx, cy = self.cursor
        return x <= cx <= x + width and y <= cy <= y + height