import logging

from aiogram import Bot, types

from ..chat_actions import TelegramChatActions
from ..common.utils import get_text
from ..links import normalize_each
from ..types import IncomingMessage

logger = logging.getLogger(__name__)


async def handle_link_message(message: types.Message, bot: Bot) -> str:
    """Reply with a clean copy of every supported link family in the message."""
    event = IncomingMessage.from_aiogram(message)
    links = normalize_each(event.text)
    if not links:
        return "link_not_found"

    sender = event.sender.display_name if event.sender else "unknown"
    chat = TelegramChatActions.for_message(message, bot)
    for link in links:
        logger.debug(f"Rewrote {link.kind} link from {sender} to {link.url}")
        await chat.reply(get_text("link_reply", sender=sender, url=link.url))
    return "link_rewritten"


async def handle_greeting_message(message: types.Message, bot: Bot) -> str:
    chat = TelegramChatActions.for_message(message, bot)
    await chat.reply(get_text("greeting_reply"))
    return "greeting_sent"
