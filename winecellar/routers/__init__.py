"""API routers for the wine cellar."""

from winecellar.routers import wines

__all__ = ["wines"]
