"""Telegram bot that cleans social-media links and runs reply-based moderation."""

__version__ = "0.1.0"
