from catalog.core.config import settings
from catalog.core.database import Base, async_session_maker, engine, get_db
from catalog.core.logging import configure_logging

__all__ = [
    "settings",
    "Base",
    "engine",
    "async_session_maker",
    "get_db",
    "configure_logging",
]
