"""ASGI entry point: ``uvicorn src.main:app``."""

import logging

from src.api import create_app
from src.supplies.config import get_config

logging.basicConfig(level=get_config().logging.level)

app = create_app()
