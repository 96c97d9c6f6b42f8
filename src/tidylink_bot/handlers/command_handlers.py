import logging

from aiogram import Bot, types
from aiogram.filters import CommandObject

from ..chat_actions import TelegramChatActions
from ..common.mp import track
from ..common.utils import get_text, load_config
from ..spark import SPARK_DRAWS, parse_spark_args

logger = logging.getLogger(__name__)


async def handle_start_command(message: types.Message, bot: Bot) -> str:
    """Обработчик команды /start"""
    if message.from_user:
        track(
            message.from_user.id,
            "command_start",
            {"chat_type": message.chat.type},
        )
    await TelegramChatActions.for_message(message, bot).reply(get_text("start"))
    return "command_start_sent"


async def handle_help_command(message: types.Message, bot: Bot) -> str:
    """Lists the available commands in a single message."""
    commands = load_config().get("help_commands") or []
    lines = [get_text("help_header")] + [f"/{command}" for command in commands]
    await TelegramChatActions.for_message(message, bot).reply("\n".join(lines))
    return "command_help_sent"


async def handle_spark_command(
    message: types.Message, bot: Bot, command: CommandObject
) -> str:
    """
    Обработчик команды /spark
    Считает прогресс до спарка по кристаллам и билетам, ничего не сохраняя
    """
    chat = TelegramChatActions.for_message(message, bot)
    args = command.args.split() if command.args else []
    progress = parse_spark_args(args)
    if progress is None:
        await chat.reply(get_text("spark_usage"))
        return "command_spark_usage"

    text = get_text(
        "spark_progress",
        draws=progress.draws,
        goal=SPARK_DRAWS,
        percent=progress.percent,
    )
    if progress.is_complete:
        text += "\n" + get_text("spark_done", extra=progress.draws - SPARK_DRAWS)
    else:
        text += "\n" + get_text(
            "spark_remaining",
            remaining=progress.remaining,
            crystals=progress.remaining_crystals,
        )
    await chat.reply(text)
    return "command_spark_sent"
