import dataclasses

import pytest

from weixin.theme import (
    ThemeMode,
    WeixinThemeColors,
    dark_colors,
    light_colors,
    select_button_colors,
    weixin_colors,
)


@pytest.mark.parametrize(
    "mode, expected",
    [(ThemeMode.LIGHT, light_colors), (ThemeMode.DARK, dark_colors)],
)
def test_weixin_colors_follow_mode(mode, expected):
    assert weixin_colors(mode) == expected()


def test_brand_colours_shared_between_modes():
    light, dark = light_colors(), dark_colors()
    assert light.weixin_green == dark.weixin_green == 0x07C160
    assert light.unread_badge == dark.unread_badge == 0xFA5151
    assert light.message_bubble_self == dark.message_bubble_self == 0x95EC69


def test_caret_is_green():
    for colors in (light_colors(), dark_colors()):
        assert colors.caret == colors.weixin_green


def test_light_and_dark_differ_in_backgrounds():
    assert light_colors().chat_area_bg == 0xEDEDED
    assert dark_colors().chat_area_bg == 0x191919


def test_all_colours_are_24_bit():
    for colors in (light_colors(), dark_colors()):
        for f in dataclasses.fields(WeixinThemeColors):
            value = getattr(colors, f.name)
            assert 0 <= value <= 0xFFFFFF


def test_palette_is_immutable():
    colors = light_colors()
    with pytest.raises(dataclasses.FrozenInstanceError):
        colors.caret = 0  # type: ignore[misc]
    assert colors.caret == 0x07C160


def test_select_button_colors_light():
    assert select_button_colors(ThemeMode.LIGHT) == (0xFFFFFF, 0xF2F2F2, 0xF2F2F2, 0xEBEBEB)


def test_select_button_colors_dark_come_from_palette():
    dark = dark_colors()
    assert select_button_colors(ThemeMode.DARK) == (
        dark.search_bar_bg,
        dark.item_hover,
        dark.item_hover,
        dark.item_selected,
    )