import logging
import os

from dotenv import load_dotenv

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def log_level_from_env(default=logging.INFO):
    """Read LOG_LEVEL from the environment, falling back to INFO on junk like "verbose"."""
    level = logging.getLevelName(os.environ.get('LOG_LEVEL', 'INFO').upper())
    if not isinstance(level, int):
        return default
    return level


def setup_logging():
    # Load environment variables (.env) before reading LOG_LEVEL
    load_dotenv()
    logging.basicConfig(format=LOG_FORMAT, level=log_level_from_env())
