"""Layout tokens for the interface, in logical pixels unless noted."""

from __future__ import annotations

TOOLBAR_WIDTH = 60.0
TITLE_BAR_HEIGHT = 67.0

SETTINGS_SIDEBAR_WIDTH = 160.0
# Same height as half the main title bar, so the settings close button
# matches the main window close button.
SETTINGS_TITLE_HEIGHT = 67.0 / 2.0

WINDOW_BUTTON_WIDTH = 45.0
SETTINGS_CLOSE_BUTTON_WIDTH = 48.0

ICON_XS = 16.0
ICON_SM = 20.0
ICON_MD = 21.0

SESSION_LIST_MIN_WIDTH = 200.0
SESSION_LIST_MAX_WIDTH = 400.0

TOOLBAR_TRIGGER_SIZE = 41.0

CHAT_INPUT_DEFAULT_HEIGHT = 200.0
CHAT_INPUT_MIN_HEIGHT = 120.0
CHAT_INPUT_MAX_HEIGHT = 420.0

AVATAR_LARGE = 46.0
AVATAR_SMALL = 35.0

SEARCH_PLUS_BUTTON_SIZE = 28.0

TOOLBAR_POPOVER_WIDTH = 130.0
TOOLBAR_MENU_PADDING_Y = 4.0

RADIUS_SM = 4.0
RADIUS_MD = 6.0
RADIUS_LG = 8.0

HEADER_ACTION_PADDING = 5.0
HEADER_NARROW_BUTTON_WIDTH = 15.0
HEADER_NARROW_BUTTON_HEIGHT = 33.0

BUBBLE_MAX_WIDTH = 300.0
BUBBLE_RADIUS = 4.0

AVATAR_SMALL_RADIUS = 5.0

ICON_BUTTON_PADDING = 6.0

TITLE_AVATAR_SIZE = 40.0
DRAG_HANDLE_HEIGHT = 4.0
HAIRLINE = 0.7

ICON_BADGE_PADDING_XS = 1.5

POPOVER_WIDTH_SM = 100.0
POPOVER_WIDTH_MD = 120.0

SETTINGS_WINDOW_WIDTH = 550.0
SETTINGS_WINDOW_HEIGHT = 680.0

SETTINGS_SMALL_INPUT_WIDTH = 35.0
SETTINGS_SHORTCUT_INPUT_MIN_WIDTH = 80.0
SETTINGS_SHORTCUT_INPUT_MAX_WIDTH = 200.0

APP_WINDOW_WIDTH = 900.0
APP_WINDOW_HEIGHT = 650.0
APP_WINDOW_MIN_WIDTH = 800.0
APP_WINDOW_MIN_HEIGHT = 600.0

TOOLBAR_BUTTON_PADDING_Y = 3.0
TOOLBAR_ITEM_PADDING = 10.0

MESSAGE_BUBBLE_ARROW_WIDTH = 6.0
MESSAGE_BUBBLE_ARROW_HEIGHT = 10.0
MESSAGE_BUBBLE_INNER_PADDING_X = 12.0
MESSAGE_BUBBLE_INNER_PADDING_Y = 8.0
# Offset of the arrow from the bubble's inner top, centring it on the first line.
MESSAGE_BUBBLE_ARROW_OFFSET_Y = 14.0
MESSAGE_BUBBLE_OUTER_PADDING_X = 20.0
MESSAGE_BUBBLE_OUTER_PADDING_Y = 8.0
MESSAGE_BUBBLE_GAP_AVATAR_CONTENT = 12.0
MESSAGE_BUBBLE_GAP_HEADER_BUBBLE = 6.0
MESSAGE_BUBBLE_ARROW_ICON_SIZE = 10.0
MESSAGE_BUBBLE_ARROW_PATH = "bubble_arrow_left.svg"
# Relative line height (a multiplier, not pixels).
MESSAGE_BUBBLE_LINE_HEIGHT = 1.6


def settings_window_content_height() -> float:
    """Height of the settings window below its title area."""
    return SETTINGS_WINDOW_HEIGHT - SETTINGS_TITLE_HEIGHT


def chat_window_width() -> float:
    """Width of a detached chat window, about the main window's chat area."""
    return APP_WINDOW_WIDTH - TOOLBAR_WIDTH - SESSION_LIST_MIN_WIDTH