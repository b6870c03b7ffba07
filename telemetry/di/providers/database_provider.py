from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.db.mongo_connection import (
    DEVICES_COLLECTION,
    EVENTS_COLLECTION,
    OWNERSHIPS_COLLECTION,
    USERS_COLLECTION,
    get_database,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database handle and all collections in the container.
        This is the ONLY place where database connections are registered.
        """
        database = get_database(container.get(Settings))
        container.register_singleton("database", database)
        container.register_singleton("user_collection", database[USERS_COLLECTION])
        container.register_singleton("device_collection", database[DEVICES_COLLECTION])
        container.register_singleton("ownership_collection", database[OWNERSHIPS_COLLECTION])
        container.register_singleton("event_collection", database[EVENTS_COLLECTION])
