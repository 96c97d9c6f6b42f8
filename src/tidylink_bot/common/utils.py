import logging
import os
from functools import lru_cache
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

CONFIG_PATH = os.path.join(os.path.dirname(__file__), "..", "config.yaml")

DEFAULT_TEXTS = {
    "start": "Hola, soy un bot de telegram",
    "help_header": "Available commands:",
    "greeting_reply": "UwU",
    "link_reply": "From {sender}:\n{url}",
    "self_target": "I can't restrict myself",
    "no_reply": "Reply to a user's message to use this command",
    "not_admin": "You are not an administrator",
    "bot_cannot_restrict": "I can't restrict members",
    "restrict_failed": "An error occurred while trying to restrict the user",
    "spark_usage": "Usage: /spark <crystals> [single tickets] [10-draw tickets]",
    "spark_progress": "{draws}/{goal} draws ({percent:.1f}%)",
    "spark_remaining": "{remaining} draws left ({crystals} crystals)",
    "spark_done": "Spark reached! {extra} draws to spare",
}


@lru_cache(maxsize=1)
def load_config() -> Dict[str, Any]:
    """
    Загрузка конфигурации
    """
    with open(CONFIG_PATH, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}
    logger.debug("Configuration loaded successfully")
    return config


def get_text(key: str, **kwargs: Any) -> str:
    """Return the user-facing text ``key`` from config, formatted with kwargs."""
    texts = load_config().get("texts") or {}
    template = texts.get(key, DEFAULT_TEXTS[key])
    return template.format(**kwargs) if kwargs else template


def get_env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer in {name}={value!r}, using {default}")
        return default
