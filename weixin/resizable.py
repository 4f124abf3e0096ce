"""State of a draggable splitter whose left pane has a fixed pixel width."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from weixin.constants import SESSION_LIST_MAX_WIDTH, SESSION_LIST_MIN_WIDTH

HANDLE_WIDTH = 6.0


class ResizeEvent(Enum):
    """Events announced by a splitter; ``RESIZED`` fires once when a drag ends."""

    RESIZED = "resized"


@dataclass
class FixedResizableState:
    """Left pane width and drag progress of a horizontal splitter.

    Coordinates are window x positions in pixels. While dragging, the width
    follows the pointer and is clamped to ``[min_width, max_width]``.
    """

    left_width: float = SESSION_LIST_MIN_WIDTH
    min_width: float = SESSION_LIST_MIN_WIDTH
    max_width: float = SESSION_LIST_MAX_WIDTH
    dragging: bool = False
    drag_start_x: float = 0.0
    drag_start_width: float = SESSION_LIST_MIN_WIDTH
    _listeners: list[Callable[[ResizeEvent], None]] = field(
        default_factory=list, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.min_width > self.max_width:
            raise ValueError(
                f"min_width {self.min_width} is larger than max_width {self.max_width}"
            )

    def subscribe(self, callback: Callable[[ResizeEvent], None]) -> None:
        """Register ``callback`` to receive the splitter's events."""
        self._listeners.append(callback)

    def begin_drag(self, x: float) -> None:
        """Start dragging with the pointer at window position ``x``."""
        self.dragging = True
        self.drag_start_x = x
        self.drag_start_width = self.left_width

    def drag_to(self, x: float) -> float:
        """Move the pointer to ``x``; while dragging, update and return the width."""
        if self.dragging:
            dx = x - self.drag_start_x
            self.left_width = min(max(self.drag_start_width + dx, self.min_width), self.max_width)
        return self.left_width

    def end_drag(self) -> None:
        """Release the pointer and announce that the width may have changed."""
        self.dragging = False
        for callback in list(self._listeners):
            callback(ResizeEvent.RESIZED)