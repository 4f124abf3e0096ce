"""Basic interface widgets described by their content, colours and behaviour."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from weixin.avatar import avatar_for_key
from weixin.constants import (
    AVATAR_LARGE,
    AVATAR_SMALL_RADIUS,
    ICON_BUTTON_PADDING,
    ICON_SM,
    RADIUS_SM,
    WINDOW_BUTTON_WIDTH,
)
from weixin.theme import ThemeMode, weixin_colors

GROUP_TILE_COUNT = 4
BADGE_MAX = 99
MENU_HOVER_BG = 0x07C160
CLOSE_HOVER_BG = 0xE81123
SEARCH_ICON = "search2.svg"

# Vertical padding of menu items, in pixels.
_MENU_PADDING_COMPACT = 4.0
_MENU_PADDING_NORMAL = 8.0

ClickHandler = Callable[[Any], None]


@dataclass
class Avatar:
    """A single picture or a 2x2 grid of member pictures, with an unread badge."""

    src: str | None = None
    is_group: bool = False
    group_members: list[str] = field(default_factory=list)
    unread_count: int = 0
    size: float = AVATAR_LARGE
    rounded: float = AVATAR_SMALL_RADIUS

    @classmethod
    def group(cls, members: Iterable[str]) -> Avatar:
        """A group avatar showing at most four members."""
        return cls(is_group=True, group_members=list(members)[:GROUP_TILE_COUNT])

    @property
    def tile_size(self) -> float:
        """Edge length of one tile of a group avatar."""
        return self.size / 2.0

    def badge_label(self) -> str | None:
        """Text of the unread badge, or ``None`` when there is nothing unread."""
        if self.unread_count <= 0:
            return None
        if self.unread_count > BADGE_MAX:
            return f"{BADGE_MAX}+"
        return str(self.unread_count)

    def tiles(self) -> list[str]:
        """Picture assets shown, four for a group (empty slots padded)."""
        if not self.is_group:
            return [self.src or ""]
        members = self.group_members + [""] * (GROUP_TILE_COUNT - len(self.group_members))
        return [avatar_for_key(member) for member in members]


@dataclass
class IconButton:
    """A clickable icon with optional tooltip and fixed size."""

    icon_path: str
    tooltip: str | None = None
    on_click: ClickHandler | None = None
    icon_size: float = ICON_SM
    padding: float = ICON_BUTTON_PADDING
    rounded: float = RADIUS_SM
    width: float | None = None
    height: float | None = None
    selected: bool = False

    def element_id(self) -> str:
        """Identifier of the button, derived from its icon."""
        return f"btn-{self.icon_path}"

    def click(self, event: Any = None) -> bool:
        """Deliver a click; return whether a handler took it."""
        if self.on_click is None:
            return False
        self.on_click(event)
        return True


@dataclass
class MenuItem:
    """A row of a popup menu, highlighted while hovered."""

    id: str
    label: str
    hovered: bool = False
    compact: bool = False
    on_hover: Callable[[bool], None] | None = None
    on_click: ClickHandler | None = None

    def background(self) -> int | None:
        """Background colour, or ``None`` for none."""
        return MENU_HOVER_BG if self.hovered else None

    def padding_y(self) -> float:
        """Vertical padding in pixels."""
        return _MENU_PADDING_COMPACT if self.compact else _MENU_PADDING_NORMAL

    def hover(self, hovering: bool) -> None:
        """Report a change of hover state to the handler."""
        if self.on_hover is not None:
            self.on_hover(hovering)

    def click(self, event: Any = None) -> bool:
        """Deliver a press; return whether a handler took it."""
        if self.on_click is None:
            return False
        self.on_click(event)
        return True


@dataclass
class SearchInput:
    """The search field above the session list."""

    icon: str = SEARCH_ICON
    cleanable: bool = True
    mode: ThemeMode = ThemeMode.LIGHT

    @property
    def background(self) -> int:
        """Field background for the current mode."""
        return weixin_colors(self.mode).search_bar_bg

    def border_color(self, focused: bool, primary: int) -> int | None:
        """Border colour: ``primary`` when focused, otherwise ``None`` (transparent)."""
        return primary if focused else None


@dataclass
class SettingsButton:
    """A small labelled button used on the settings pages."""

    id: str
    label: str | None = None
    on_click: ClickHandler | None = None

    def colors(self, mode: ThemeMode) -> tuple[int, int, int]:
        """Normal, hover and active backgrounds for ``mode``."""
        palette = weixin_colors(mode)
        return (
            palette.settings_button_bg,
            palette.settings_button_hover,
            palette.settings_button_active,
        )

    def click(self, event: Any = None) -> bool:
        """Deliver a click; return whether a handler took it."""
        if self.on_click is None:
            return False
        self.on_click(event)
        return True


@dataclass(frozen=True)
class WindowButton:
    """One caption button; ``control`` is ``"min"``, ``"max"`` or ``"close"``."""

    id: str
    icon: str
    control: str
    hover_bg: int
    width: float = WINDOW_BUTTON_WIDTH


@dataclass
class WindowControls:
    """The caption buttons at the top right of a window."""

    is_maximized: bool = False
    show_pin: bool = False
    mode: ThemeMode = ThemeMode.LIGHT

    @property
    def icon_muted(self) -> bool:
        """Icons use the muted foreground in dark mode."""
        return self.mode.is_dark

    def buttons(self) -> list[WindowButton]:
        """Buttons from left to right."""
        hover_bg = weixin_colors(self.mode).window_button_hover
        result = []
        if self.show_pin:
            result.append(WindowButton("win-btn-pin", "nail.svg", "min", hover_bg))
        result.append(WindowButton("win-btn-min", "window-minimize.svg", "min", hover_bg))
        max_icon = "window-restore.svg" if self.is_maximized else "window-maximize.svg"
        result.append(WindowButton("win-btn-max", max_icon, "max", hover_bg))
        result.append(WindowButton("win-btn-close", "window-close.svg", "close", CLOSE_HOVER_BG))
        return result