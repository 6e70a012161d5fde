"""
FastAPI router for Clerk user management endpoints.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ...concurrency import cancel_on_disconnect
from ...exceptions import GatewayError, MissingParameterError
from ...models import ActiveUsersResponse, DeleteUserResponse, RoleChangeRequest
from ...settings import Settings, get_app_settings
from .client import ClerkClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"])


def get_clerk_client(settings: Settings = Depends(get_app_settings)) -> ClerkClient:
    """Dependency to get a Clerk client."""
    return ClerkClient(
        secret_key=settings.clerk_secret_key,
        base_url=settings.clerk_api_url,
        timeout=settings.upstream_timeout,
    )


def internal_error() -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


@router.get("/getUsers")
async def get_users(
    request: Request,
    client: ClerkClient = Depends(get_clerk_client),
):
    """List all users."""
    try:
        users = await cancel_on_disconnect(request, client.list_users())
        return JSONResponse(content=users)
    except GatewayError:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch users: {e}")
        return internal_error()


@router.delete("/deleteUser/{user_id}", response_model=DeleteUserResponse)
async def delete_user(
    user_id: str,
    request: Request,
    client: ClerkClient = Depends(get_clerk_client),
):
    """Delete a user."""
    logger.info(f"Received delete request for user {user_id}")
    try:
        await cancel_on_disconnect(request, client.delete_user(user_id))
        return DeleteUserResponse()
    except GatewayError:
        raise
    except Exception as e:
        logger.error(f"Error deleting user {user_id}: {e}")
        return internal_error()


@router.patch("/changeUserRole/{user_id}")
async def change_user_role(
    user_id: str,
    request: Request,
    body: RoleChangeRequest | None = None,
    client: ClerkClient = Depends(get_clerk_client),
):
    """Set the user's role in their public metadata."""
    role = body.role if body else None
    if not role:
        raise MissingParameterError("Role is required")

    try:
        user = await cancel_on_disconnect(
            request, client.update_user_role(user_id, role)
        )
        return JSONResponse(content=user)
    except GatewayError:
        raise
    except Exception as e:
        logger.error(f"Error changing role of user {user_id}: {e}")
        return internal_error()


@router.get("/getActiveUsers", response_model=ActiveUsersResponse)
async def get_active_users(
    request: Request,
    client: ClerkClient = Depends(get_clerk_client),
):
    """Count users who signed in within the last 30 days."""
    try:
        count = await cancel_on_disconnect(request, client.count_active_users())
        return ActiveUsersResponse(count=count)
    except GatewayError:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch active users: {e}")
        return internal_error()
