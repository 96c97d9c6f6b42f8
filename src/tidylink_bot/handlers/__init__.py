"""
Message handlers and the routing table that binds them to updates.
"""

from .command_handlers import (
    handle_help_command,
    handle_spark_command,
    handle_start_command,
)
from .dp import Route, build_dispatcher, build_router, build_routes
from .message_handlers import handle_greeting_message, handle_link_message
from .moderation_handlers import (
    handle_ban_command,
    handle_kick_command,
    handle_unban_command,
)

__all__ = [
    # Routing
    "Route",
    "build_dispatcher",
    "build_router",
    "build_routes",
    # Commands
    "handle_help_command",
    "handle_spark_command",
    "handle_start_command",
    # Moderation
    "handle_ban_command",
    "handle_kick_command",
    "handle_unban_command",
    # Text
    "handle_greeting_message",
    "handle_link_message",
]
