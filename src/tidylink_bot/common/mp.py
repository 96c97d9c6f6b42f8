import logging
import os

from mixpanel import Mixpanel

logger = logging.getLogger(__name__)


class SilentMixpanel:
    def __init__(self, token: str = ""):
        pass

    def track(self, user_id: int, event: str, properties: dict | None = None):
        pass


_token = os.getenv("MIXPANEL_PROJECT_TOKEN")
mp = Mixpanel(_token) if _token else SilentMixpanel()


def mute_mp_for_tests():
    global mp
    mp = SilentMixpanel()


def track(user_id: int, event: str, properties: dict | None = None) -> None:
    """Send an event to Mixpanel; tracking failures never reach handlers."""
    try:
        mp.track(user_id, event, properties or {})
    except Exception as e:
        logger.warning(f"Failed to track {event}: {e}")
