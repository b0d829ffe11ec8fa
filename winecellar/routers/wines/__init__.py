"""Wine router package."""

from fastapi import APIRouter

from ._common import WINE_BODY_OPENAPI
from .crud import add_wine, delete_wine, get_wine, list_wines, update_wine

router = APIRouter()

router.add_api_route("", list_wines, methods=["GET"])
router.add_api_route("", add_wine, methods=["POST"], openapi_extra=WINE_BODY_OPENAPI)
router.add_api_route("/{wine_id}", get_wine, methods=["GET"])
router.add_api_route("/{wine_id}", update_wine, methods=["PUT"], openapi_extra=WINE_BODY_OPENAPI)
router.add_api_route("/{wine_id}", delete_wine, methods=["DELETE"])

__all__ = ["router"]
