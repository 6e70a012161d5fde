"""
Base model for the gateway's request and response payloads.
"""

from pydantic import BaseModel, ConfigDict


class BaseGatewayModel(BaseModel):
    """
    Base model for all gateway data structures.

    Upstream payloads are relayed untouched, so these models only describe
    what the gateway itself reads or produces.
    """

    model_config = ConfigDict(
        # Accept both the camelCase wire names and the Python field names
        populate_by_name=True,
        # Ignore unknown fields sent by the front-end
        extra="ignore",
    )
