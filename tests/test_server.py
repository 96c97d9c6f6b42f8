import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.dispatcher.event.bases import UNHANDLED
from aiohttp import web
from aiohttp import test_utils

from tidylink_bot.server import (
    BOT_KEY,
    DP_KEY,
    TASKS_KEY,
    _shutdown,
    create_app,
    handle_update,
    healthcheck,
    index,
    routes,
)


def _request(payload, dp_result="link_rewritten", dp_error=None):
    dp = MagicMock()
    dp.feed_raw_update = AsyncMock(return_value=dp_result, side_effect=dp_error)
    request = MagicMock()
    request.read = AsyncMock(return_value=b"{}" if payload is not None else b"")
    request.json = AsyncMock(return_value=payload)
    request.app = {BOT_KEY: MagicMock(), DP_KEY: dp}
    return request, dp


@pytest.mark.asyncio
async def test_index_page():
    response = await index(MagicMock())
    assert response.status == 200
    assert "running" in response.text


@pytest.mark.asyncio
async def test_healthcheck():
    response = await healthcheck(MagicMock())
    assert response.text == "ok"


@pytest.mark.asyncio
async def test_update_is_fed_to_dispatcher():
    update = {"update_id": 1, "message": {"message_id": 5}}
    request, dp = _request(update)

    response = await handle_update(request)

    assert response.status == 200
    dp.feed_raw_update.assert_awaited_once_with(request.app[BOT_KEY], update)


@pytest.mark.asyncio
async def test_unhandled_update():
    request, _ = _request({"update_id": 1}, dp_result=UNHANDLED)

    response = await handle_update(request)

    assert response.status == 200


@pytest.mark.asyncio
async def test_invalid_update_rejected():
    request, dp = _request({"message": {}})

    response = await handle_update(request)

    assert response.status == 400
    dp.feed_raw_update.assert_not_called()


@pytest.mark.asyncio
async def test_empty_body():
    request, dp = _request(None)

    response = await handle_update(request)

    assert response.status == 200
    dp.feed_raw_update.assert_not_called()


@pytest.mark.asyncio
async def test_handler_error_does_not_escape():
    request, _ = _request({"update_id": 7}, dp_error=RuntimeError("boom"))

    response = await handle_update(request)

    assert response.status == 200


def test_create_app_registers_routes():
    app = create_app(MagicMock())

    paths = {resource.canonical for resource in app.router.resources()}
    assert {"/", "/health", "/webhook"} <= paths
    assert app[TASKS_KEY] == []
    assert app[DP_KEY] is not None


@pytest.mark.asyncio
async def test_non_json_body_rejected():
    dp = MagicMock()
    dp.feed_raw_update = AsyncMock()
    app = web.Application()
    app[BOT_KEY] = MagicMock()
    app[DP_KEY] = dp
    app.add_routes(routes)

    async with test_utils.TestClient(test_utils.TestServer(app)) as client:
        response = await client.post("/webhook", data=b"not json")
        body = await response.json()

    assert response.status == 400
    assert body["error"] == "Invalid update format"
    dp.feed_raw_update.assert_not_called()


@pytest.mark.asyncio
async def test_shutdown_before_polling_started_closes_session():
    bot = MagicMock()
    bot.session.close = AsyncMock()
    dp = MagicMock()
    dp.stop_polling = AsyncMock(side_effect=RuntimeError("Polling is not started"))
    app = create_app(bot, dp=dp)
    polling = asyncio.create_task(asyncio.sleep(3600))
    app[TASKS_KEY].append(polling)

    await _shutdown(app)

    assert polling.cancelled()
    bot.session.close.assert_awaited_once()
