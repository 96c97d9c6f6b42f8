"""
Explicit routing table for the bot.

Routes are registered in list order. aiogram stops at the first handler whose
filters pass, so commands come before the text matchers.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Optional, Tuple

from aiogram import Dispatcher, F, Router
from aiogram.filters import Command

from ..links import contains_link
from .command_handlers import (
    handle_help_command,
    handle_spark_command,
    handle_start_command,
)
from .message_handlers import handle_greeting_message, handle_link_message
from .moderation_handlers import (
    handle_ban_command,
    handle_kick_command,
    handle_unban_command,
)


@dataclass(frozen=True)
class Route:
    name: str
    handler: Callable[..., Awaitable[Any]]
    filters: Tuple[Any, ...] = field(default_factory=tuple)


def build_routes() -> List[Route]:
    return [
        Route("start", handle_start_command, (Command("start"),)),
        Route("help", handle_help_command, (Command("help"),)),
        Route("kick", handle_kick_command, (Command("kick"),)),
        Route("ban", handle_ban_command, (Command("ban"),)),
        Route("unban", handle_unban_command, (Command("unban"),)),
        Route("spark", handle_spark_command, (Command("spark"),)),
        Route("links", handle_link_message, (F.text.func(contains_link),)),
        Route(
            "greeting",
            handle_greeting_message,
            (F.text == "Hola", F.chat.type == "private"),
        ),
    ]


def build_router(routes: Optional[List[Route]] = None) -> Router:
    router = Router(name="tidylink")
    for route in routes if routes is not None else build_routes():
        router.message.register(route.handler, *route.filters)
    return router


def build_dispatcher(routes: Optional[List[Route]] = None) -> Dispatcher:
    dp = Dispatcher()
    dp.include_router(build_router(routes))
    return dp
