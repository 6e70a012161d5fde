from typing import Any

from pydantic import Field

from .base import BaseGatewayModel


class RoleChangeRequest(BaseGatewayModel):
    """Body of a role change request."""

    role: Any = Field(default=None, description="Role to store on the user")


class DeleteUserResponse(BaseGatewayModel):
    success: bool = True
    message: str = "User deleted successfully"


class ActiveUsersResponse(BaseGatewayModel):
    count: int = Field(ge=0, description="Users signed in within the active window")
