import logging
import os

debug = False


def mute_logging_for_tests():
    """Disable Logfire side effects when running the test suite.

    Tests can alternatively set the ``SKIP_LOGFIRE`` environment variable to one of
    ``{"1", "true", "yes", "on"}`` to achieve the same effect without calling
    this helper explicitly.
    """
    global debug
    debug = True


def _should_skip_logfire() -> bool:
    """Determine whether Logfire initialization should be skipped for this process."""
    if debug:
        return True

    skip_env = os.getenv("SKIP_LOGFIRE", "").strip().lower()
    if skip_env in {"1", "true", "yes", "on"}:
        return True

    if "PYTEST_CURRENT_TEST" in os.environ:
        return True

    return False


def setup_logging():
    if _should_skip_logfire():
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(levelname)s] %(name)s: %(message)s",
        )
        return

    import logfire

    logfire.configure()
    logging.basicConfig(handlers=[logfire.LogfireLoggingHandler()], level=logging.INFO)
    logfire.install_auto_tracing(
        modules=["tidylink_bot.handlers", "tidylink_bot.moderation"],
        min_duration=0.01,
        check_imported_modules="ignore",
    )


# Silence known chatty loggers
CHATTY_LOGGERS = [
    "aiogram.event",
    "aiohttp.access",
    "urllib3.connectionpool",
]
for logger_name in CHATTY_LOGGERS:
    logging.getLogger(logger_name).setLevel(logging.WARNING)
