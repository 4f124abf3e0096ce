"""Light and dark colour palettes of the interface, as 0xRRGGBB integers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ThemeMode(Enum):
    """Appearance mode of the interface."""

    LIGHT = "light"
    DARK = "dark"

    @property
    def is_dark(self) -> bool:
        """Whether this is the dark mode."""
        return self is ThemeMode.DARK


@dataclass(frozen=True)
class WeixinThemeColors:
    """Named colours used by the interface components."""

    toolbar_bg: int
    toolbar_button_hover: int
    session_list_bg: int
    chat_area_bg: int
    search_bar_bg: int
    item_hover: int
    item_selected: int
    settings_button_bg: int
    settings_button_hover: int
    settings_button_active: int
    message_bubble_self: int
    message_bubble_other: int
    message_text_self: int
    message_text_other: int
    weixin_green: int
    unread_badge: int
    caret: int
    storage_path_text: int
    input_field_bg: int
    input_field_focus: int
    send_button_disabled_bg: int
    send_button_disabled_text: int
    window_button_hover: int
    popover_bg: int
    chat_button_hover: int


_LIGHT = WeixinThemeColors(
    toolbar_bg=0xE6E6E6,
    toolbar_button_hover=0xDADADA,
    session_list_bg=0xF7F7F7,
    chat_area_bg=0xEDEDED,
    search_bar_bg=0xEDEDED,
    item_hover=0xEAEAEA,
    item_selected=0xDEDEDE,
    settings_button_bg=0xEAEAEA,
    settings_button_hover=0xE4E4E4,
    settings_button_active=0xE4E4E4,
    message_bubble_self=0x95EC69,
    message_bubble_other=0xFFFFFF,
    message_text_self=0x000000,
    message_text_other=0x333333,
    weixin_green=0x07C160,
    unread_badge=0xFA5151,
    caret=0x07C160,
    storage_path_text=0x576B95,
    input_field_bg=0xFFFFFF,
    input_field_focus=0x44D087,
    send_button_disabled_bg=0xE1E1E1,
    send_button_disabled_text=0x9D9D9D,
    window_button_hover=0xE0E0E0,
    popover_bg=0xFFFFFF,
    chat_button_hover=0xE0E0E0,
)

_DARK = WeixinThemeColors(
    toolbar_bg=0x2C2C2C,
    toolbar_button_hover=0x363636,
    session_list_bg=0x242424,
    chat_area_bg=0x191919,
    search_bar_bg=0x2F2F2F,
    item_hover=0x2F2F2F,
    item_selected=0x3A3A3A,
    settings_button_bg=0x2F2F2F,
    settings_button_hover=0x353535,
    settings_button_active=0x353535,
    message_bubble_self=0x95EC69,
    message_bubble_other=0x3A3A3A,
    message_text_self=0x000000,
    message_text_other=0xE6E6E6,
    weixin_green=0x07C160,
    unread_badge=0xFA5151,
    caret=0x07C160,
    storage_path_text=0x7D90A9,
    input_field_bg=0x2E2E2E,
    input_field_focus=0x0E9A51,
    send_button_disabled_bg=0x252525,
    send_button_disabled_text=0x575757,
    window_button_hover=0x242424,
    popover_bg=0x242424,
    chat_button_hover=0x242424,
)


def light_colors() -> WeixinThemeColors:
    """Palette for the light mode."""
    return _LIGHT


def dark_colors() -> WeixinThemeColors:
    """Palette for the dark mode."""
    return _DARK


def weixin_colors(mode: ThemeMode) -> WeixinThemeColors:
    """Palette for the given mode."""
    return _DARK if mode.is_dark else _LIGHT


def select_button_colors(mode: ThemeMode) -> tuple[int, int, int, int]:
    """Background, hover, active and selected colours of a select button."""
    if mode.is_dark:
        colors = dark_colors()
        return (
            colors.search_bar_bg,
            colors.item_hover,
            colors.item_hover,
            colors.item_selected,
        )
    return (0xFFFFFF, 0xF2F2F2, 0xF2F2F2, 0xEBEBEB)