"""Pydantic schemas describing wine documents.

The API does not validate request bodies against these schemas. They
document the document shape in the OpenAPI schema.
"""

from pydantic import BaseModel, ConfigDict, Field


class Wine(BaseModel):
    """A wine document. Every field is an unvalidated string."""

    model_config = ConfigDict(extra="allow")

    id: str | None = Field(None, description="Primary key, assigned by the store when omitted")
    name: str | None = None
    year: str | None = None
    grapes: str | None = None
    country: str | None = None
    region: str | None = None
    description: str | None = None
    picture: str | None = Field(None, description="Label image filename")
