import logging
from typing import Any

import httpx

from ...exceptions import ConfigMissingError, TransportError, UpstreamError
from .activity import count_active_users

logger = logging.getLogger(__name__)


class ClerkClient:
    """Minimal client for the Clerk Backend API."""

    BASE_URL = "https://api.clerk.dev/v1"

    def __init__(
        self,
        secret_key: str | None,
        base_url: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.secret_key = secret_key
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        if not self.secret_key:
            raise ConfigMissingError("Clerk Secret Key is missing")
        return {
            "Authorization": f"Bearer {self.secret_key}",
            "Content-Type": "application/json",
        }

    async def _send(
        self, method: str, path: str, json: dict[str, Any] | None = None
    ) -> httpx.Response:
        headers = self._headers()
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                if method == "GET":
                    return await client.get(url, headers=headers)
                if method == "DELETE":
                    return await client.delete(url, headers=headers)
                return await client.patch(url, headers=headers, json=json)
        except httpx.HTTPError as e:
            logger.error(f"Clerk {method} {path} failed: {e}")
            raise TransportError() from e

    @staticmethod
    def _json(resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"Clerk returned an unreadable body: {e}")
            raise TransportError() from e

    async def list_users(self) -> list[dict[str, Any]]:
        resp = await self._send("GET", "/users")
        if not resp.is_success:
            logger.error(f"Clerk list users failed with status {resp.status_code}")
            raise UpstreamError(
                resp.status_code, f"Error fetching users: {resp.reason_phrase}"
            )
        return self._json(resp)

    async def delete_user(self, user_id: str) -> None:
        resp = await self._send("DELETE", f"/users/{user_id}")
        if not resp.is_success:
            detail = self._error_detail(resp)
            logger.error(f"Clerk delete of user {user_id} failed: {detail}")
            raise UpstreamError(resp.status_code, f"Failed to delete user: {detail}")

    async def update_user_role(self, user_id: str, role: Any) -> dict[str, Any]:
        """Store ``role`` in the user's public metadata and return the user."""
        resp = await self._send(
            "PATCH", f"/users/{user_id}", json={"public_metadata": {"role": role}}
        )
        if not resp.is_success:
            logger.error(
                f"Clerk role update of user {user_id} failed with status "
                f"{resp.status_code}"
            )
            raise UpstreamError(
                resp.status_code, f"Failed to update role: {resp.reason_phrase}"
            )
        return self._json(resp)

    async def count_active_users(self) -> int:
        users = await self.list_users()
        return count_active_users(users)

    @staticmethod
    def _error_detail(resp: httpx.Response) -> str:
        """Pull a message out of a Clerk error body, else the reason phrase."""
        try:
            body = resp.json()
        except ValueError:
            return resp.reason_phrase
        if isinstance(body, dict):
            if body.get("error"):
                return str(body["error"])
            errors = body.get("errors")
            if isinstance(errors, list) and errors and isinstance(errors[0], dict):
                if errors[0].get("message"):
                    return str(errors[0]["message"])
        return resp.reason_phrase
