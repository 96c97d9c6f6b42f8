import logging

from aiogram import Bot, types

from ..chat_actions import TelegramChatActions
from ..common.mp import track
from ..moderation import restrict_user
from ..types import IncomingMessage, ModerationAction

logger = logging.getLogger(__name__)


async def _handle_moderation_command(
    message: types.Message, bot: Bot, action: ModerationAction
) -> str:
    event = IncomingMessage.from_aiogram(message)
    chat = TelegramChatActions.for_message(message, bot)
    result = await restrict_user(event, action, chat)
    if event.sender:
        track(
            event.sender.id,
            f"command_{action.value}",
            {"chat_id": event.chat_id, "result": result},
        )
    return result


async def handle_kick_command(message: types.Message, bot: Bot) -> str:
    return await _handle_moderation_command(message, bot, ModerationAction.KICK)


async def handle_ban_command(message: types.Message, bot: Bot) -> str:
    return await _handle_moderation_command(message, bot, ModerationAction.BAN)


async def handle_unban_command(message: types.Message, bot: Bot) -> str:
    return await _handle_moderation_command(message, bot, ModerationAction.UNBAN)
