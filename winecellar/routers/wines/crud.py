"""Wine CRUD endpoints (list, get, create, update, delete).

Each handler makes exactly one store call. Store failures are reported
as a 200 response with an ``{"error": message}`` body, except for list,
which answers with an empty array.
"""

import logging
from typing import Any

from fastapi import Request

from winecellar.database import StoreDep

from ._common import read_json_body

logger = logging.getLogger(__name__)


async def list_wines(store: StoreDep) -> list[dict[str, Any]]:
    """List every wine in the collection."""
    result = await store.list_wines()
    if not result.ok:
        logger.debug("[ERROR] list_wines: %s", result.error)
        return []
    return result.value


async def get_wine(wine_id: str, store: StoreDep) -> dict[str, Any]:
    """Get a wine by id."""
    logger.debug("get_wine: %s", wine_id)

    result = await store.get_wine(wine_id)
    if not result.ok:
        logger.debug("[ERROR] get_wine: %s => %s", wine_id, result.error)
        return {"error": str(result.error)}
    return result.value


async def add_wine(request: Request, store: StoreDep) -> dict[str, Any]:
    """Add a wine. The store assigns an id unless the body carries one."""
    wine = await read_json_body(request)
    wine.pop("_id", None)
    logger.debug("Adding wine: %s", wine)

    result = await store.insert_wine(wine)
    if result.ok and result.value.inserted == 1:
        if result.value.generated_keys:
            wine["id"] = result.value.generated_keys[0]
        return wine

    first_error = result.error if not result.ok else result.value.first_error
    return {"error": f"An error occurred when adding the new wine ({first_error})"}


async def update_wine(wine_id: str, request: Request, store: StoreDep) -> dict[str, Any]:
    """Merge the submitted fields into an existing wine."""
    wine = await read_json_body(request)
    wine.pop("_id", None)
    wine["id"] = wine_id
    logger.debug("Updating wine: %s", wine)

    result = await store.update_wine(wine_id, wine)
    if result.ok and result.value.updated == 1:
        return wine
    return {"error": f"An error occurred when updating the wine with id: {wine_id}"}


async def delete_wine(wine_id: str, request: Request, store: StoreDep) -> dict[str, Any]:
    """Delete a wine, echoing the request body on success."""
    logger.debug("Deleting wine: %s", wine_id)
    body = await read_json_body(request)

    result = await store.delete_wine(wine_id)
    if result.ok and result.value.deleted == 1:
        return body
    return {"error": f"An error occurred when deleting the wine with id: {wine_id}"}
