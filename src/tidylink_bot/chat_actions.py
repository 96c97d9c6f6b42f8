"""
Chat capabilities available to handlers.

Handlers receive an ``IncomingMessage`` value plus an object implementing
``ChatActions``; only the latter talks to Telegram.
"""

import logging
from typing import Protocol

from aiogram import Bot, types
from aiogram.types import ReplyParameters

from .types import ChatMembership

logger = logging.getLogger(__name__)


class ChatActions(Protocol):
    bot_id: int

    async def reply(self, text: str) -> None: ...

    async def get_membership(self, user_id: int) -> ChatMembership: ...

    async def ban(self, user_id: int) -> None: ...

    async def unban(self, user_id: int) -> None: ...


class TelegramChatActions:
    """ChatActions bound to one chat and the message being answered."""

    def __init__(self, bot: Bot, chat_id: int, message_id: int):
        self._bot = bot
        self.chat_id = chat_id
        self.message_id = message_id

    @classmethod
    def for_message(cls, message: types.Message, bot: Bot) -> "TelegramChatActions":
        return cls(bot, message.chat.id, message.message_id)

    @property
    def bot_id(self) -> int:
        return self._bot.id

    async def reply(self, text: str) -> None:
        await self._bot.send_message(
            self.chat_id,
            text,
            reply_parameters=ReplyParameters(
                message_id=self.message_id, allow_sending_without_reply=True
            ),
        )

    async def get_membership(self, user_id: int) -> ChatMembership:
        member = await self._bot.get_chat_member(self.chat_id, user_id)
        return ChatMembership.from_aiogram(member)

    async def ban(self, user_id: int) -> None:
        await self._bot.ban_chat_member(self.chat_id, user_id)
        logger.info(f"Banned user {user_id} in chat {self.chat_id}")

    async def unban(self, user_id: int) -> None:
        # Without only_if_banned the Bot API removes a member who is not banned
        await self._bot.unban_chat_member(self.chat_id, user_id, only_if_banned=True)
        logger.info(f"Unbanned user {user_id} in chat {self.chat_id}")
