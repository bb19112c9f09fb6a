from __future__ import annotations

import logging

from dotenv import load_dotenv

from .memory_store import InMemoryDocumentStore
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("docstore").setLevel(level)


def create_store(env_file: str = "local.env") -> InMemoryDocumentStore:
    """
    Build a fresh, independent store. Each call returns a new instance with its own state.
    """
    load_dotenv(env_file)

    settings = get_settings()
    configure_logging(settings)

    store = InMemoryDocumentStore(settings=settings)
    logger.info("DOC STORE: created (debug_log_queries=%s)", settings.debug_log_queries)
    return store
