"""Infrastructure: database engine and persistence gateway."""

from .database import bootstrap_database, create_db_engine, create_session_factory, init_database
from .persistence import SQLModelStateGateway, empty_state

__all__ = [
    "SQLModelStateGateway",
    "bootstrap_database",
    "create_db_engine",
    "create_session_factory",
    "empty_state",
    "init_database",
]
