# weixin

The model and presentation logic of a desktop chat client, as plain Python
with no third-party dependencies. It covers contacts, messages and chat
sessions, in-memory sample data, time formatting, and layout and colour tokens
for light and dark themes. It also picks avatars deterministically, tracks a
draggable fixed-width splitter, and holds the state behind the client's
widgets and composite views.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `weixin.models` holds `Contact`, `Message`, `ChatSession` and the `ToolbarItem`
  enum.
  - `Contact.as_group(member_count, members)` returns a copy marked as a group
    and keeps at most four avatar members.
  - `Contact.display_title()` shows a group with a known size as
    `name ~ (count)`.
  - `Contact.with_avatar(url)` returns a copy with an avatar URL.
  - `ChatSession.add_message(message)` appends a message.
  - `ToolbarItem.icon_path()`, `icon_path_fill()` and `has_fill()` name the
    toolbar icon assets.
- `weixin.timefmt` formats times.
  - `format_time_friendly(time, now=None)` gives `MM/DD` for anything a day or
    more older than `now`, and `HH:MM` otherwise.
  - `format_time_hhmm(time)` always gives `HH:MM`.

  Both use the local time zone.
- `weixin.sample_data` builds demo data.
  - `create_sample_contacts(now=None)` returns 28 contacts: three groups, five
    people and twenty generated entries. Each has a last message, a time and
    an unread count.
  - `create_sample_messages(contact, now=None)` returns a 45-message
    conversation with that contact.
  - `MemoryContactsRepo.get_all()` and `MemorySessionsRepo.get_messages(contact)`
    serve this data.
- `weixin.constants` holds pixel sizes for windows, bubbles, avatars and icons
  as module constants. It also has the derived `settings_window_content_height()`
  and `chat_window_width()`.
- `weixin.theme` provides `ThemeMode` (`LIGHT`, `DARK`) and the
  `WeixinThemeColors` palette, with colours as `0xRRGGBB` integers. It also has
  `light_colors()`, `dark_colors()`, `weixin_colors(mode)` and
  `select_button_colors(mode)`.
- `weixin.avatar`: `avatar_for_key(key)` maps any string to one of the entries
  of `AVATAR_SVGS`. The same key always maps to the same entry.
- `weixin.resizable`: `FixedResizableState` tracks the width of the left pane
  while it is dragged.
  - Use `begin_drag(x)`, `drag_to(x)` and `end_drag()` to drive it.
  - The width is clamped to `[min_width, max_width]`.
  - Every callback registered with `subscribe(callback)` receives
    `ResizeEvent.RESIZED` when a drag ends.
  - A `min_width` larger than `max_width` raises `ValueError`.
- `weixin.widgets` holds `Avatar`, `IconButton`, `MenuItem`, `SearchInput`,
  `SettingsButton`, `WindowButton` and `WindowControls`.
  - Each describes its content, colours and sizes.
  - Each delivers clicks or hovers to the handler it was given.
  - `Avatar.badge_label()` caps the count at `99+`.
  - `Avatar.tiles()` pads a group avatar to four pictures.
- `weixin.composites` holds `SessionRow`, `MessageBubble`, `ChatToolbar`,
  `ChatHeaderActions`, `SettingCard`, `SettingDivider` and `setting_row()`.
  - A session row supplies its title, preview line, time text and avatar.
  - A message bubble supplies its colours, header texts, arrow rotation and
    avatar asset.

## Example

```python
from datetime import datetime

from weixin.models import Contact
from weixin.sample_data import MemoryContactsRepo, MemorySessionsRepo
from weixin.composites import SessionRow
from weixin.resizable import FixedResizableState

now = datetime.now().astimezone()

contacts = MemoryContactsRepo().get_all()
for contact in contacts[:3]:
    row = SessionRow(contact)
    print(row.title(), row.time_text(now), row.preview())

group = Contact("g1", "Study group").as_group(12, ["Ann", "Ben", "Cy", "Di", "Ed"])
print(group.display_title())          # Study group ~ (12)
print(group.avatar_members)           # ['Ann', 'Ben', 'Cy', 'Di']

history = MemorySessionsRepo().get_messages(group)
print(len(history))                   # 45

splitter = FixedResizableState()
splitter.subscribe(lambda event: print("resized to", splitter.left_width))
splitter.begin_drag(100.0)
splitter.drag_to(900.0)               # clamped to the maximum width, 400.0
splitter.end_drag()
```

## What this package does not do

- It draws nothing. It has no window, no graphical interface and no command to
  start one. The widgets and composites only describe what a renderer would
  show.
- It sends and receives no messages and connects to no network.
- Its only data is the generated sample data, kept in memory. Nothing is
  stored or loaded from disk.
- It holds no image or icon files. Asset names such as `chat-round.svg` or
  `ava/afro.svg` are only names.