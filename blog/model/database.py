"""
Database Model - Scoped MongoDB connection, one client per operation
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from pymongo import MongoClient
from pymongo.database import Database

logger = logging.getLogger(__name__)


@contextmanager
def connection(connection_string: str = "mongodb://localhost:27017",
               database_name: str = "my-blog",
               timeout_ms: int = 5000) -> Iterator[Database]:
    """
    Open a MongoDB client, yield the named database and close the client.

    The client is closed on every exit path, including when the body raises.
    No pooling happens across calls: each use opens its own client.

    Args:
        connection_string: MongoDB connection URI
        database_name: Database name
        timeout_ms: Server selection timeout in milliseconds

    Yields:
        Database handle
    """
    client = MongoClient(connection_string, serverSelectionTimeoutMS=timeout_ms)
    logger.debug(f"Opened MongoDB client for database: {database_name}")
    try:
        yield client[database_name]
    finally:
        client.close()
        logger.debug("MongoDB client closed")
