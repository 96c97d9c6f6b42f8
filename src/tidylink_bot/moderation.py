"""
Reply-based moderation: /kick, /ban and /unban.

The invoker replies to a message of the member to act on. Each invocation
looks up fresh membership data for both the invoker and the bot, then issues
at most two membership changes. Nothing is cached between invocations.
"""

import logging
from typing import Awaitable, Callable, Dict, List

from .chat_actions import ChatActions
from .common.mp import track
from .common.utils import get_text
from .permissions import bot_can_restrict, is_administrator, is_reply_to_self
from .types import IncomingMessage, ModerationAction, ModerationRequest

logger = logging.getLogger(__name__)

Mutation = Callable[[ChatActions, int], Awaitable[None]]


async def _ban(chat: ChatActions, user_id: int) -> None:
    await chat.ban(user_id)


async def _unban(chat: ChatActions, user_id: int) -> None:
    await chat.unban(user_id)


# Kick is a ban immediately lifted: the member is removed but may rejoin.
ACTION_STEPS: Dict[ModerationAction, List[Mutation]] = {
    ModerationAction.KICK: [_ban, _unban],
    ModerationAction.BAN: [_ban],
    ModerationAction.UNBAN: [_unban],
}


async def restrict_user(
    message: IncomingMessage, action: ModerationAction, chat: ChatActions
) -> str:
    """
    Run a moderation command against the author of the replied-to message.

    Args:
        message: The command message
        action: What to do with the target
        chat: Capabilities bound to the command's chat

    Returns:
        Result identifier string for logging/tracking
    """
    if is_reply_to_self(message, chat.bot_id):
        await chat.reply(get_text("self_target"))
        return "moderation_self_target"

    if message.reply_to is None:
        await chat.reply(get_text("no_reply"))
        return "moderation_no_reply"

    if message.sender is None:
        return "moderation_no_invoker"

    if not await is_administrator(chat, message.sender.id):
        await chat.reply(get_text("not_admin"))
        return "moderation_not_admin"

    if not await bot_can_restrict(chat):
        await chat.reply(get_text("bot_cannot_restrict"))
        return "moderation_bot_cannot_restrict"

    target = message.reply_to.sender
    if target is None or not target.id:
        logger.debug(f"Replied-to message {message.reply_to.message_id} has no author")
        return "moderation_no_target"

    request = ModerationRequest(
        action=action,
        target_id=target.id,
        invoker_id=message.sender.id,
        chat_id=message.chat_id,
    )
    return await apply_action(request, chat)


async def apply_action(request: ModerationRequest, chat: ChatActions) -> str:
    """Issue the membership changes for ``request``; failures are reported, not raised."""
    try:
        for step in ACTION_STEPS[request.action]:
            await step(chat, request.target_id)
    except Exception as e:
        logger.error(
            f"Failed to {request.action.value} user {request.target_id} "
            f"in chat {request.chat_id}: {e}",
            exc_info=True,
        )
        track(
            request.invoker_id,
            "error_moderation",
            {
                "chat_id": request.chat_id,
                "action": request.action.value,
                "target_id": request.target_id,
                "error_type": type(e).__name__,
                "error_message": str(e),
            },
        )
        await chat.reply(get_text("restrict_failed"))
        return "moderation_failed"

    logger.info(
        f"User {request.invoker_id} applied {request.action.value} "
        f"to {request.target_id} in chat {request.chat_id}"
    )
    track(
        request.invoker_id,
        f"moderation_{request.action.value}",
        {"chat_id": request.chat_id, "target_id": request.target_id},
    )
    return f"moderation_{request.action.value}_done"
