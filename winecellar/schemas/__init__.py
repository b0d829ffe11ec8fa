"""Pydantic schemas for the wine cellar API."""

from winecellar.schemas.wine import Wine

__all__ = ["Wine"]
