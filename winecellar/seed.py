"""One-time database setup and sample data seeding.

On startup the database and the ``wines`` collection are created. The
sample catalog is inserted only when the collection did not exist before,
so a deployment is seeded at most once.

Seeding is fail-soft by default: any error is logged and the server keeps
serving, possibly with an empty collection. Set ``seed.fail_soft = false``
to abort startup instead.
"""

import logging
from typing import Any

from winecellar.config.schema import WineCellarConfig
from winecellar.exceptions import SeedError
from winecellar.seed_data import SAMPLE_WINES
from winecellar.store import WineStore

logger = logging.getLogger(__name__)


async def _seed(config: WineCellarConfig, store: WineStore, catalog: list[dict[str, Any]]) -> int:
    db_name = config.database.db

    result = await store.create_database()
    if not result.ok:
        logger.debug("create_database '%s': %s", db_name, result.error)

    created = await store.create_collection()
    if not created.ok:
        raise created.error
    if not created.value:
        logger.debug("Table 'wines' already exists in db '%s', skipping sample data", db_name)
        return 0

    inserted = await store.insert_many([dict(wine) for wine in catalog])
    if not inserted.ok:
        raise inserted.error

    count = inserted.value.inserted
    logger.info("Inserted %d sample wines into table 'wines' in db '%s'", count, db_name)
    return count


async def setup(
    config: WineCellarConfig,
    store: WineStore,
    catalog: list[dict[str, Any]] | None = None,
) -> int:
    """Create the database and collection, seeding a new collection.

    Args:
        config: Application configuration.
        store: Store to set up.
        catalog: Documents to seed with. Defaults to SAMPLE_WINES.

    Returns:
        Number of sample documents inserted (0 when skipped or failed).

    Raises:
        SeedError: If seeding fails and ``seed.fail_soft`` is disabled.
    """
    if not config.seed.enabled:
        logger.info("Sample data seeding disabled")
        return 0

    try:
        return await _seed(config, store, SAMPLE_WINES if catalog is None else catalog)
    except Exception as e:
        if config.seed.fail_soft:
            logger.warning("Database setup failed, serving without sample data: %s", e)
            return 0
        raise SeedError(f"Database setup failed for db '{config.database.db}': {e}") from e
