# autoflake: skip_file

# Initialize environment variables
import dotenv

dotenv.load_dotenv()

# Initialize logging
import logging

from .logging_setup import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

# Start the server
from aiohttp import web

from .common.bot import bot
from .common.utils import get_env_int
from .server import create_app

app = create_app(bot)


def main() -> None:
    web.run_app(app, host="0.0.0.0", port=get_env_int("PORT", 8080))


if __name__ == "__main__":
    main()
