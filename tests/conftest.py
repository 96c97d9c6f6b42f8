import pytest
from pytest_asyncio import is_async_test


def pytest_collection_modifyitems(items: list[pytest.Item]):
    for test in items:
        if is_async_test(test):
            # Mark async tests with session scope
            test.add_marker(pytest.mark.asyncio(loop_scope="session"), append=False)


# Load environment variables
from dotenv import load_dotenv

load_dotenv()

# Other imports
from datetime import datetime, timezone
from types import SimpleNamespace

from aiogram import types
from aiohttp import ClientError

# Mute Logfire
from tidylink_bot.logging_setup import mute_logging_for_tests

mute_logging_for_tests()

# Mute mp for tests
from tidylink_bot.common.mp import mute_mp_for_tests

mute_mp_for_tests()

from tidylink_bot.types import ChatMembership, MemberStatus

BOT_ID = 42
ADMIN_ID = 1001
MEMBER_ID = 2002
CHAT_ID = -1001234567890


class FakeChatActions:
    """Records every call; membership lookups answer from a dict."""

    def __init__(self, bot_id=BOT_ID, memberships=None, fail_on=()):
        self.bot_id = bot_id
        self.memberships = memberships or {}
        self.fail_on = set(fail_on)
        self.replies = []
        self.calls = []

    async def reply(self, text):
        self.replies.append(text)

    async def get_membership(self, user_id):
        self.calls.append(("get_membership", user_id))
        return self.memberships.get(user_id, ChatMembership(MemberStatus.MEMBER))

    async def ban(self, user_id):
        self.calls.append(("ban", user_id))
        if "ban" in self.fail_on:
            raise ClientError("connection reset")

    async def unban(self, user_id):
        self.calls.append(("unban", user_id))
        if "unban" in self.fail_on:
            raise ClientError("connection reset")

    @property
    def mutations(self):
        return [call for call in self.calls if call[0] in ("ban", "unban")]


@pytest.fixture
def make_chat():
    return FakeChatActions


@pytest.fixture
def admin_chat():
    """Admin invoker, bot allowed to restrict."""
    return FakeChatActions(
        memberships={
            ADMIN_ID: ChatMembership(MemberStatus.ADMINISTRATOR),
            BOT_ID: ChatMembership(
                MemberStatus.ADMINISTRATOR, can_restrict_members=True
            ),
        }
    )


def make_user(user_id, username=None, first_name="Test", is_bot=False):
    return types.User(
        id=user_id, is_bot=is_bot, first_name=first_name, username=username
    )


def make_message(
    text,
    from_user=None,
    reply_to=None,
    chat_type="supergroup",
    message_id=100,
):
    return types.Message(
        message_id=message_id,
        date=datetime.now(timezone.utc),
        chat=types.Chat(id=CHAT_ID, type=chat_type),
        from_user=from_user,
        text=text,
        reply_to_message=reply_to,
    )


@pytest.fixture
def message_factory():
    return make_message


@pytest.fixture
def user_factory():
    return make_user


@pytest.fixture
def ids():
    return SimpleNamespace(bot=BOT_ID, admin=ADMIN_ID, member=MEMBER_ID, chat=CHAT_ID)
