"""MongoDB connection setup for the wine store."""

import logging
from typing import Annotated

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from winecellar.exceptions import StoreConnectionError
from winecellar.store import MongoWineStore, WineStore

logger = logging.getLogger(__name__)


async def connect(
    host: str,
    port: int,
    database: str,
    timeout_ms: int = 5000,
    motor_client: AsyncIOMotorClient | None = None,
) -> MongoWineStore:
    """Open the process-wide MongoDB connection.

    motor connects lazily, so the server is pinged once to surface an
    unreachable instance before the HTTP listener starts.

    Args:
        host: MongoDB host.
        port: MongoDB port.
        database: Default database used for every store operation.
        timeout_ms: Server selection timeout for the startup ping.
        motor_client: Optional pre-configured motor client (for testing).

    Returns:
        A store bound to ``database``.

    Raises:
        StoreConnectionError: If the server does not answer the ping.
    """
    client = motor_client or AsyncIOMotorClient(
        host=host,
        port=port,
        serverSelectionTimeoutMS=timeout_ms,
    )

    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        raise StoreConnectionError(host, port) from e

    logger.info("Connected to MongoDB at %s:%s (db: %s)", host, port, database)
    return MongoWineStore(client, database)


def get_store(request: Request) -> WineStore:
    """Get the store attached to the running application.

    Raises:
        RuntimeError: If the application has no store attached yet.
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store not initialized. Start the application lifespan first.")
    return store


StoreDep = Annotated[WineStore, Depends(get_store)]
