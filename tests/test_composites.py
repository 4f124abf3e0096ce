import math
from datetime import datetime, timedelta, timezone

import pytest

from weixin.avatar import AVATAR_SVGS, avatar_for_key
from weixin.composites import (
    ChatHeaderActions,
    ChatToolbar,
    MessageBubble,
    SessionRow,
    SettingCard,
    SettingDivider,
    setting_row,
)
from weixin.constants import (
    HAIRLINE,
    HEADER_NARROW_BUTTON_HEIGHT,
    HEADER_NARROW_BUTTON_WIDTH,
    RADIUS_LG,
)
from weixin.models import Contact, Message
from weixin.theme import ThemeMode, dark_colors, light_colors
from weixin.timefmt import format_time_hhmm


def _group() -> Contact:
    return Contact("g", "组").as_group(3, ["a", "b", "c"])


def test_title_plain_contact_is_name():
    assert SessionRow(Contact("1", "张三")).title() == "张三"


def test_title_group_appends_count():
    assert SessionRow(_group()).title() == "组 (3)"


def test_title_group_without_count_is_name():
    contact = Contact("g", "组", is_group=True)
    assert SessionRow(contact).title() == "组"


def test_preview_without_message():
    assert SessionRow(Contact("1", "x")).preview() == "暂无消息"


def test_preview_takes_first_line():
    contact = Contact("1", "x", last_message="first\nsecond")
    assert SessionRow(contact).preview() == "first"


def test_preview_empty_message_stays_empty():
    contact = Contact("1", "x", last_message="")
    assert SessionRow(contact).preview() == ""


def test_preview_group_prefixes_sender():
    contact = _group()
    contact.last_message = "hi"
    contact.last_sender_name = "a"
    assert SessionRow(contact).preview() == "a: hi"


def test_preview_group_without_sender():
    contact = _group()
    contact.last_message = "hi"
    assert SessionRow(contact).preview() == "hi"


def test_time_text_empty_without_time():
    assert SessionRow(Contact("1", "x")).time_text() == ""


def test_time_text_recent_is_hhmm():
    now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    when = now - timedelta(minutes=30)
    contact = Contact("1", "x", last_message_time=when)
    assert SessionRow(contact).time_text(now) == format_time_hhmm(when)


def test_avatar_for_single_contact():
    contact = Contact("42", "x", unread_count=7)
    avatar = SessionRow(contact).avatar()
    assert avatar.src == avatar_for_key("42")
    assert avatar.unread_count == 7
    assert not avatar.is_group


def test_avatar_for_group():
    contact = _group()
    contact.unread_count = 2
    avatar = SessionRow(contact).avatar()
    assert avatar.is_group
    assert avatar.group_members == ["a", "b", "c"]
    assert avatar.unread_count == 2


def _message(is_self: bool) -> Message:
    return Message(
        id="1",
        sender_id="self" if is_self else "u1",
        sender_name="我" if is_self else "张三",
        content="你好！",
        is_self=is_self,
        timestamp=datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc),
    )


@pytest.mark.parametrize("mode,palette", [(ThemeMode.LIGHT, light_colors()), (ThemeMode.DARK, dark_colors())])
def test_bubble_colors(mode, palette):
    assert MessageBubble(_message(True)).colors(mode) == (
        palette.message_bubble_self,
        palette.message_text_self,
    )
    assert MessageBubble(_message(False)).colors(mode) == (
        palette.message_bubble_other,
        palette.message_text_other,
    )


def test_header_group_other_shows_sender():
    msg = _message(False)
    assert MessageBubble(msg, is_group=True).header() == [
        "张三",
        format_time_hhmm(msg.timestamp),
    ]


def test_header_self_in_group_only_time():
    msg = _message(True)
    assert MessageBubble(msg, is_group=True).header() == [format_time_hhmm(msg.timestamp)]


def test_header_private_only_time():
    msg = _message(False)
    assert MessageBubble(msg).header() == [format_time_hhmm(msg.timestamp)]


def test_arrow_rotation():
    assert MessageBubble(_message(True)).arrow_rotation() == 0.0
    assert MessageBubble(_message(False)).arrow_rotation() == math.pi


def test_avatar_path_follows_sender():
    path = MessageBubble(_message(False)).avatar_path()
    assert path == avatar_for_key("u1")
    assert path in AVATAR_SVGS


def test_toolbar_left_icons():
    icons = ChatToolbar().left_icons()
    assert [b.icon_path for b in icons] == [
        "emoji.svg",
        "favorite.svg",
        "file.svg",
        "scissors.svg",
        "down.svg",
    ]
    assert icons[-1].width == HEADER_NARROW_BUTTON_WIDTH
    assert icons[-1].height == HEADER_NARROW_BUTTON_HEIGHT


def test_toolbar_right_icons_private():
    assert [b.icon_path for b in ChatToolbar().right_icons()] == ["phone-call.svg", "video.svg"]


def test_toolbar_right_icons_group():
    icons = ChatToolbar(is_group=True).right_icons()
    assert [b.icon_path for b in icons] == ["circle.svg", "video-call.svg"]


def test_header_actions_icons():
    icons = ChatHeaderActions().icons()
    assert [b.icon_path for b in icons] == ["chat.svg", "down.svg", "ellipses.svg"]
    assert icons[1].width == HEADER_NARROW_BUTTON_WIDTH


@pytest.mark.parametrize("mode,palette", [(ThemeMode.LIGHT, light_colors()), (ThemeMode.DARK, dark_colors())])
def test_setting_card_style(mode, palette):
    style = SettingCard("content").style(mode)
    assert style.background == palette.session_list_bg
    assert style.radius == RADIUS_LG


def test_divider_segments():
    inset, line = SettingDivider().segments()
    assert not inset.filled and line.filled
    assert line.width is None
    assert inset.height == line.height == HAIRLINE


def test_setting_row_layout():
    row = setting_row()
    assert row.justify == "space-between"
    assert row.align == "center"
    assert row.full_width
    assert row == setting_row()