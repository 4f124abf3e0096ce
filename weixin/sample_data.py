"""Sample contacts and messages, and in-memory repositories serving them."""

from __future__ import annotations

from datetime import datetime, timedelta

from weixin.models import Contact, Message, local_now

SELF_ID = "self"
SELF_NAME = "我"


def create_sample_contacts(now: datetime | None = None) -> list[Contact]:
    """Build the demo contact list, groups first, with previews and unread counts."""
    current = now if now is not None else local_now()
    contacts = [
        Contact("group1", "Rust学习小组").as_group(156, ["张三", "李四", "王五", "赵六"]),
        Contact("group2", "项目讨论组").as_group(68, ["Alice", "Bob", "Charlie", "David"]),
        Contact("group3", "技术交流群").as_group(234, ["前端", "后端", "测试", "运维"]),
        Contact("1", "张三"),
        Contact("2", "李四"),
        Contact("3", "王五"),
        Contact("4", "赵六"),
        Contact("5", "钱七"),
    ]
    # Extra contacts so the session list needs scrolling.
    contacts.extend(Contact(f"auto{i}", f"自动联系人 {i + 1}") for i in range(20))

    for i, contact in enumerate(contacts):
        if contact.is_group:
            contact.last_sender_name = (
                contact.avatar_members[0] if contact.avatar_members else "某人"
            )
            contact.last_message = "大家好，今天讨论一下项目进度"
        else:
            contact.last_message = f"这是来自{contact.name}的最后一条消息"
        contact.last_message_time = current - timedelta(minutes=i * 10)
        contact.unread_count = i % 5 + 1 if i % 3 == 0 else 0

    return contacts


def create_sample_messages(contact: Contact, now: datetime | None = None) -> list[Message]:
    """Build a demo conversation with the given contact."""
    current = now if now is not None else local_now()
    base_time = current - timedelta(hours=2)

    def from_contact(msg_id: str, content: str, minutes: int) -> Message:
        return Message(
            id=msg_id,
            sender_id=contact.id,
            sender_name=contact.name,
            content=content,
            is_self=False,
            timestamp=base_time + timedelta(minutes=minutes),
        )

    def from_self(msg_id: str, content: str, minutes: int) -> Message:
        return Message(
            id=msg_id,
            sender_id=SELF_ID,
            sender_name=SELF_NAME,
            content=content,
            is_self=True,
            timestamp=base_time + timedelta(minutes=minutes),
        )

    messages = [
        from_contact("1", "你好！", 0),
        from_self("2", "你好，有什么事吗？", 1),
        from_contact("3", "想问一下你那个项目进度如何了？", 2),
        from_self("4", "项目进展很顺利，预计下周就能完成了。", 3),
        from_contact("5", "太好了！到时候记得通知我一声。", 5),
    ]

    # More messages so the chat area needs scrolling.
    for i in range(40):
        make = from_self if i % 2 == 0 else from_contact
        messages.append(
            make(
                str(i + 6),
                f"测试消息 {i + 1}：这是一个较长的示例消息内容，用来测试滚动条效果。",
                10 + i,
            )
        )

    return messages


class MemoryContactsRepo:
    """Contact repository backed by the sample data."""

    def get_all(self) -> list[Contact]:
        """Return every contact."""
        return create_sample_contacts()


class MemorySessionsRepo:
    """Message repository backed by the sample data."""

    def get_messages(self, contact: Contact) -> list[Message]:
        """Return the conversation with ``contact``."""
        return create_sample_messages(contact)