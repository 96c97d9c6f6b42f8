from .chat_actions import ChatActions
from .types import IncomingMessage


async def is_administrator(chat: ChatActions, invoker_id: int) -> bool:
    """True if the invoker is an administrator or the creator of the chat."""
    membership = await chat.get_membership(invoker_id)
    return membership.is_admin


async def bot_can_restrict(chat: ChatActions) -> bool:
    """True if the bot itself may ban and unban members of the chat."""
    membership = await chat.get_membership(chat.bot_id)
    return membership.can_restrict_members


def is_reply_to_self(message: IncomingMessage, bot_id: int) -> bool:
    """True if the message replies to something the bot sent."""
    reply = message.reply_to
    return bool(reply and reply.sender and reply.sender.id == bot_id)
