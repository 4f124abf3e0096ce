import pytest

from weixin.avatar import AVATAR_SVGS, avatar_for_key


@pytest.mark.parametrize("key", ["", "self", "group1", "张三", "auto19"])
def test_result_is_a_known_avatar(key):
    assert avatar_for_key(key) in AVATAR_SVGS


def test_result_is_an_svg_under_ava():
    path = avatar_for_key("group1")
    assert path.startswith("ava/")
    assert path.endswith(".svg")


def test_keys_spread_over_avatars():
    chosen = {avatar_for_key(f"auto{i}") for i in range(200)}
    assert len(chosen) > len(AVATAR_SVGS) // 2