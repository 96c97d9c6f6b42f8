from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from aiogram import types


class ModerationAction(Enum):
    KICK = "kick"
    BAN = "ban"
    UNBAN = "unban"


class MemberStatus(Enum):
    ADMINISTRATOR = "administrator"
    CREATOR = "creator"
    MEMBER = "member"
    RESTRICTED = "restricted"
    LEFT = "left"
    BANNED = "banned"

    @classmethod
    def from_telegram(cls, status: str) -> "MemberStatus":
        # Bot API reports banned members as "kicked"
        value = getattr(status, "value", status)
        if value == "kicked":
            return cls.BANNED
        return cls(value)


@dataclass(frozen=True, slots=True)
class ChatMembership:
    status: MemberStatus
    can_restrict_members: bool = False

    @property
    def is_admin(self) -> bool:
        return self.status in (MemberStatus.ADMINISTRATOR, MemberStatus.CREATOR)

    @classmethod
    def from_aiogram(cls, member: types.ChatMember) -> "ChatMembership":
        return cls(
            status=MemberStatus.from_telegram(member.status),
            can_restrict_members=bool(getattr(member, "can_restrict_members", False)),
        )


@dataclass(frozen=True, slots=True)
class ChatUser:
    id: int
    username: Optional[str] = None
    full_name: str = ""
    is_bot: bool = False

    @property
    def display_name(self) -> str:
        if self.username:
            return f"@{self.username}"
        return self.full_name or str(self.id)

    @classmethod
    def from_aiogram(cls, user: types.User) -> "ChatUser":
        return cls(
            id=user.id,
            username=user.username,
            full_name=user.full_name,
            is_bot=user.is_bot,
        )


@dataclass(frozen=True, slots=True)
class IncomingMessage:
    """Immutable snapshot of an inbound Telegram message."""

    message_id: int
    chat_id: int
    chat_type: str
    text: Optional[str] = None
    sender: Optional[ChatUser] = None
    reply_to: Optional[IncomingMessage] = None

    @property
    def is_private(self) -> bool:
        return self.chat_type == "private"

    @classmethod
    def from_aiogram(cls, message: types.Message) -> "IncomingMessage":
        reply = message.reply_to_message
        # Topic messages implicitly reply to the topic creation service message
        if reply is not None and reply.forum_topic_created is not None:
            reply = None
        return cls(
            message_id=message.message_id,
            chat_id=message.chat.id,
            chat_type=message.chat.type,
            text=message.text,
            sender=ChatUser.from_aiogram(message.from_user)
            if message.from_user
            else None,
            reply_to=cls.from_aiogram(reply) if reply else None,
        )


@dataclass(frozen=True, slots=True)
class ModerationRequest:
    action: ModerationAction
    target_id: int
    invoker_id: int
    chat_id: int


@dataclass(frozen=True, slots=True)
class NormalizedLink:
    url: str
    source_username: Optional[str] = None
    kind: str = ""
