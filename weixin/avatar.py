"""Choice of a built-in avatar picture for a key such as a contact id."""

from __future__ import annotations

import hashlib

_AVATAR_STEMS = (
    "afro angry- angry-_1 angry-_2 arrogant baby- baby bully businessman "
    "cheeky- confused- crying- dazed dead- dead-_1 desperate- desperate "
    "dissapointment drunk evil gangster geek gentleman-"
).split()

AVATAR_SVGS: tuple[str, ...] = tuple(f"ava/{stem}.svg" for stem in _AVATAR_STEMS)


def avatar_for_key(key: str) -> str:
    """Return the avatar asset for ``key``; the same key always gets the same one."""
    digest = hashlib.blake2b(key.encode("utf-8"), digest_size=8).digest()
    return AVATAR_SVGS[int.from_bytes(digest, "big") % len(AVATAR_SVGS)]