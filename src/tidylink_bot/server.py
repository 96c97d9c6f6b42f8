import asyncio
import logging
import os
from typing import Optional

import logfire
from aiogram import Bot, Dispatcher
from aiogram.dispatcher.event.bases import UNHANDLED
from aiohttp import web

from .handlers.dp import build_dispatcher

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()

BOT_KEY = web.AppKey("bot", Bot)
DP_KEY = web.AppKey("dp", Dispatcher)
TASKS_KEY = web.AppKey("background_tasks", list)

RUNNING_PAGE = """<!DOCTYPE html>
<html>
<head><title>tidylink-bot</title></head>
<body><h1>Bot is running</h1></body>
</html>
"""

WEBHOOK_PATH = "/webhook"


@routes.get("/")
async def index(_: web.Request) -> web.Response:
    """Static page confirming the process is up."""
    return web.Response(text=RUNNING_PAGE, content_type="text/html")


@routes.get("/health")
async def healthcheck(_: web.Request) -> web.Response:
    """Return plain OK response for health probes."""
    return web.Response(text="ok")


@routes.post(WEBHOOK_PATH)
async def handle_update(request: web.Request) -> web.Response:
    """Handle incoming Telegram update"""
    if not await request.read():
        return web.Response()

    try:
        json = await request.json()
    except ValueError:
        logger.warning("Received update body that is not valid JSON")
        json = None

    # Validate that this is a proper Telegram update
    if not isinstance(json, dict) or "update_id" not in json:
        logger.warning(f"Received invalid update format: {json}")
        return web.json_response(
            {"error": "Invalid update format", "required_field": "update_id"},
            status=400,
        )

    bot = request.app[BOT_KEY]
    dp = request.app[DP_KEY]

    with logfire.span("Update: handling...", update=json) as span:
        try:
            result = await dp.feed_raw_update(bot, json)
        except Exception as e:
            span.record_exception(e)
            logger.error(
                f"Unhandled error processing update {json['update_id']}: {e}",
                exc_info=True,
            )
            return web.json_response({"message": "Error processing request"})

        if result is UNHANDLED:
            span.tags = ["unhandled"]
        elif isinstance(result, str):
            span.tags = [result]

    return web.json_response({"message": "Processed successfully"})


async def _on_startup(app: web.Application) -> None:
    """Set up the webhook, or fall back to long polling when no URL is configured."""
    bot = app[BOT_KEY]
    dp = app[DP_KEY]
    webhook_url = os.getenv("WEBHOOK_URL")

    if webhook_url:
        url = webhook_url.rstrip("/") + WEBHOOK_PATH
        logger.info(f"Setting webhook URL to: {url}")
        await bot.set_webhook(url)
        logger.info("Webhook setup completed successfully")
    else:
        logger.info("WEBHOOK_URL not set, starting long polling")
        await bot.delete_webhook()
        app[TASKS_KEY].append(
            asyncio.create_task(
                dp.start_polling(bot, handle_signals=False, close_bot_session=False)
            )
        )

    logging.warning("Server started")


async def _shutdown(app: web.Application) -> None:
    """Gracefully shutdown all resources."""
    logger.warning("Starting graceful shutdown...")

    try:
        for task in app[TASKS_KEY]:
            if not task.done():
                try:
                    await app[DP_KEY].stop_polling()
                except RuntimeError:
                    # Polling has not acquired its lock yet
                    task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
            except Exception as e:
                logger.warning(f"Polling stopped with error: {e}", exc_info=True)
    finally:
        await app[BOT_KEY].session.close()


def create_app(bot: Bot, dp: Optional[Dispatcher] = None) -> web.Application:
    app = web.Application()
    app[BOT_KEY] = bot
    app[DP_KEY] = dp if dp is not None else build_dispatcher()
    app[TASKS_KEY] = []
    app.add_routes(routes)
    app.on_startup.append(_on_startup)
    app.on_shutdown.append(_shutdown)
    return app
