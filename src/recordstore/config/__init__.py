"""Application configuration"""

import logging
from dotenv import load_dotenv

from .loader import load_settings
from .core import Core
from .store import Store

load_dotenv()

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.basicConfig(format=LOG_FORMAT, datefmt=DATE_FORMAT, level=logging.INFO)
logging.getLogger("discord").setLevel(logging.WARNING)
logging.getLogger("aiohttp").setLevel(logging.WARNING)

_SETTINGS = load_settings()

core = Core(_SETTINGS)
store = Store(_SETTINGS)


class Config:
    core = core
    store = store


__all__ = ["core", "store", "Config", "Core", "Store", "load_settings"]
