"""Composite interface pieces: session rows, message bubbles, toolbars and setting cards."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from weixin.avatar import avatar_for_key
from weixin.constants import (
    HAIRLINE,
    HEADER_ACTION_PADDING,
    HEADER_NARROW_BUTTON_HEIGHT,
    HEADER_NARROW_BUTTON_WIDTH,
    ICON_SM,
    RADIUS_LG,
    RADIUS_MD,
)
from weixin.models import Contact, Message
from weixin.theme import ThemeMode, weixin_colors
from weixin.timefmt import format_time_friendly, format_time_hhmm
from weixin.widgets import Avatar, IconButton

NO_MESSAGE_TEXT = "暂无消息"

# Left inset of a setting divider, in pixels.
DIVIDER_INSET = 12.0
# Horizontal padding of a setting row, in pixels.
SETTING_ROW_PADDING_X = 16.0


def _first_line(text: str) -> str:
    return text.split("\n", 1)[0].removesuffix("\r")


@dataclass
class SessionRow:
    """One entry of the session list."""

    contact: Contact

    def title(self) -> str:
        """Contact name; groups with a known size append ``(count)``."""
        if self.contact.is_group and self.contact.member_count is not None:
            return f"{self.contact.name} ({self.contact.member_count})"
        return self.contact.name

    def preview(self) -> str:
        """First line of the last message, prefixed with the sender for groups."""
        last = self.contact.last_message
        message = _first_line(last) if last is not None else NO_MESSAGE_TEXT
        if self.contact.is_group and self.contact.last_sender_name is not None:
            return f"{self.contact.last_sender_name}: {message}"
        return message

    def time_text(self, now: datetime | None = None) -> str:
        """Friendly time of the last message, or an empty string."""
        if self.contact.last_message_time is None:
            return ""
        return format_time_friendly(self.contact.last_message_time, now)

    def avatar(self) -> Avatar:
        """Avatar of the row, carrying the unread count as its badge."""
        if self.contact.is_group:
            result = Avatar.group(self.contact.avatar_members)
        else:
            result = Avatar(src=avatar_for_key(self.contact.id))
        result.unread_count = self.contact.unread_count
        return result


@dataclass
class MessageBubble:
    """A chat message drawn as a bubble next to the sender's avatar."""

    message: Message
    is_group: bool = False

    @property
    def shows_sender(self) -> bool:
        """Whether the sender's name is shown above the bubble."""
        return self.is_group and not self.message.is_self

    def colors(self, mode: ThemeMode) -> tuple[int, int]:
        """Bubble background and text colour for ``mode``."""
        palette = weixin_colors(mode)
        if self.message.is_self:
            return palette.message_bubble_self, palette.message_text_self
        return palette.message_bubble_other, palette.message_text_other

    def header(self) -> list[str]:
        """Texts above the bubble: the sender's name in groups, then the time."""
        parts = [self.message.sender_name] if self.shows_sender else []
        parts.append(format_time_hhmm(self.message.timestamp))
        return parts

    def arrow_rotation(self) -> float:
        """Rotation of the arrow icon in radians; other people's bubbles point left."""
        return 0.0 if self.message.is_self else math.pi

    def avatar_path(self) -> str:
        """Avatar asset of the sender."""
        return avatar_for_key(self.message.sender_id)


def _narrow_down_button() -> IconButton:
    return IconButton(
        "down.svg",
        padding=HEADER_ACTION_PADDING,
        rounded=RADIUS_MD,
        width=HEADER_NARROW_BUTTON_WIDTH,
        height=HEADER_NARROW_BUTTON_HEIGHT,
    )


@dataclass
class ChatToolbar:
    """The row of tools above the message input."""

    is_group: bool = False

    def left_icons(self) -> list[IconButton]:
        """Editing tools on the left."""
        return [
            IconButton("emoji.svg"),
            IconButton("favorite.svg"),
            IconButton("file.svg"),
            IconButton("scissors.svg"),
            _narrow_down_button(),
        ]

    def right_icons(self) -> list[IconButton]:
        """Call tools on the right, which differ for groups."""
        if self.is_group:
            return [IconButton("circle.svg"), IconButton("video-call.svg")]
        return [IconButton("phone-call.svg"), IconButton("video.svg")]


@dataclass
class ChatHeaderActions:
    """Action buttons at the right of the chat header."""

    def icons(self) -> list[IconButton]:
        """Buttons from left to right."""
        return [
            IconButton("chat.svg", icon_size=ICON_SM, padding=HEADER_ACTION_PADDING, rounded=RADIUS_MD),
            _narrow_down_button(),
            IconButton("ellipses.svg", icon_size=ICON_SM, padding=HEADER_ACTION_PADDING, rounded=RADIUS_MD),
        ]


@dataclass(frozen=True)
class CardStyle:
    """Look of a setting card."""

    background: int
    radius: float
    border_width: float


@dataclass
class SettingCard:
    """A rounded, bordered panel wrapping settings content."""

    content: Any = None

    def style(self, mode: ThemeMode) -> CardStyle:
        """Background, corner radius and border width for ``mode``."""
        return CardStyle(
            background=weixin_colors(mode).session_list_bg,
            radius=RADIUS_LG,
            border_width=1.0,
        )


@dataclass(frozen=True)
class DividerSegment:
    """Part of a divider; ``width`` of ``None`` takes the remaining space."""

    width: float | None
    height: float
    filled: bool


@dataclass
class SettingDivider:
    """A hairline between rows of a setting card, inset on the left."""

    def segments(self) -> list[DividerSegment]:
        """An empty inset followed by the visible line."""
        return [
            DividerSegment(width=DIVIDER_INSET, height=HAIRLINE, filled=False),
            DividerSegment(width=None, height=HAIRLINE, filled=True),
        ]


@dataclass(frozen=True)
class RowLayout:
    """Layout of a setting row: full width, items centred, spread apart."""

    padding_x: float = SETTING_ROW_PADDING_X
    align: str = "center"
    justify: str = "space-between"
    full_width: bool = True


def setting_row() -> RowLayout:
    """Layout used by a row inside a setting card."""
    return RowLayout()