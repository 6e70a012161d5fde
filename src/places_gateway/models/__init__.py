from .base import BaseGatewayModel
from .places import PlacePhoto, PlaceSearchRequest
from .users import ActiveUsersResponse, DeleteUserResponse, RoleChangeRequest

__all__ = [
    "ActiveUsersResponse",
    "BaseGatewayModel",
    "DeleteUserResponse",
    "PlacePhoto",
    "PlaceSearchRequest",
    "RoleChangeRequest",
]
