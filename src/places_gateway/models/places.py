from pydantic import Field

from .base import BaseGatewayModel


class PlaceSearchRequest(BaseGatewayModel):
    """Body of a place text search."""

    text_query: str | None = Field(default=None, alias="textQuery")


class PlacePhoto(BaseGatewayModel):
    """Binary photo relayed from the Places media endpoint."""

    content: bytes
    content_type: str = Field(default="image/jpeg")
