"""Common utilities for wine endpoints."""

import json
from typing import Any

from fastapi import HTTPException, Request, status

from winecellar.schemas import Wine

# Documents the raw JSON body accepted by create and update
WINE_BODY_OPENAPI = {
    "requestBody": {
        "content": {"application/json": {"schema": Wine.model_json_schema()}},
        "required": False,
    }
}


async def read_json_body(request: Request) -> dict[str, Any]:
    """Parse the request body as a JSON object.

    An empty body parses as ``{}``.

    Raises:
        HTTPException: If the body is not valid JSON or not a JSON object.
    """
    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        body = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Request body is not valid JSON: {e}",
        ) from e

    if not isinstance(body, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be a JSON object",
        )
    return body
