"""Core chat data: contacts, messages, sessions and toolbar entries."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable

MAX_AVATAR_MEMBERS = 4


def local_now() -> datetime:
    """Return the current time as a timezone-aware local datetime."""
    return datetime.now().astimezone()


@dataclass
class Contact:
    """A person or group that appears in the session list."""

    id: str
    name: str
    avatar_url: str | None = None
    last_message: str | None = None
    last_message_time: datetime | None = None
    unread_count: int = 0
    is_group: bool = False
    member_count: int | None = None
    avatar_members: list[str] = field(default_factory=list)
    last_sender_name: str | None = None

    def with_avatar(self, url: str) -> Contact:
        """Return a copy of this contact with the given avatar URL."""
        return dataclasses.replace(self, avatar_url=url)

    def as_group(self, member_count: int, members: Iterable[str]) -> Contact:
        """Return a copy marked as a group, keeping at most four avatar members."""
        return dataclasses.replace(
            self,
            is_group=True,
            member_count=member_count,
            avatar_members=list(members)[:MAX_AVATAR_MEMBERS],
        )

    def display_title(self) -> str:
        """Title shown in the interface; groups append their member count."""
        if self.is_group and self.member_count is not None:
            return f"{self.name} ~ ({self.member_count})"
        return self.name


@dataclass(frozen=True)
class Message:
    """A single chat message."""

    id: str
    sender_id: str
    sender_name: str
    content: str
    is_self: bool
    timestamp: datetime = field(default_factory=local_now)


@dataclass
class ChatSession:
    """A conversation with one contact."""

    contact: Contact
    messages: list[Message] = field(default_factory=list)

    def add_message(self, message: Message) -> None:
        """Append a message to the session."""
        self.messages.append(message)


class ToolbarItem(Enum):
    """Entries of the left-hand toolbar."""

    CHAT = "chat"
    CONTACTS = "contacts"
    FAVORITES = "favorites"
    MOMENTS = "moments"
    CHANNELS = "channels"
    SEARCH = "search"
    MINI_PROGRAM = "mini_program"
    MENU = "menu"
    PHONE = "phone"

    def icon_path(self) -> str:
        """Outline icon asset for this entry."""
        return _ICON_PATHS[self]

    def icon_path_fill(self) -> str | None:
        """Filled icon asset shown when selected, if there is one."""
        return _FILL_ICON_PATHS.get(self)

    def has_fill(self) -> bool:
        """Whether the entry has a filled icon variant."""
        return self.icon_path_fill() is not None


_ICON_PATHS = {
    ToolbarItem.CHAT: "chat-round.svg",
    ToolbarItem.CONTACTS: "user-list.svg",
    ToolbarItem.FAVORITES: "favorite.svg",
    ToolbarItem.MOMENTS: "moments.svg",
    ToolbarItem.CHANNELS: "channels.svg",
    ToolbarItem.SEARCH: "search.svg",
    ToolbarItem.MINI_PROGRAM: "mini-program.svg",
    ToolbarItem.MENU: "menu.svg",
    ToolbarItem.PHONE: "phone.svg",
}

_FILL_ICON_PATHS = {
    ToolbarItem.CHAT: "chat-round-fill.svg",
    ToolbarItem.CONTACTS: "user-list-fill.svg",
    ToolbarItem.FAVORITES: "favorite-fill.svg",
}