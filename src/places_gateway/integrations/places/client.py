import logging
from typing import Any

import httpx

from ...exceptions import ConfigMissingError, TransportError, UpstreamError
from ...models import PlacePhoto

logger = logging.getLogger(__name__)


class PlacesClient:
    """Minimal client for the Google Places API (v1)."""

    BASE_URL = "https://places.googleapis.com/v1"
    FIELD_MASK = "places.photos,places.displayName,places.id"
    PHOTO_MAX_HEIGHT_PX = 1000
    PHOTO_MAX_WIDTH_PX = 1000
    DEFAULT_PHOTO_CONTENT_TYPE = "image/jpeg"

    def __init__(
        self,
        api_key: str | None,
        base_url: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.api_key = api_key
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.timeout = timeout

    def _require_key(self) -> str:
        if not self.api_key:
            raise ConfigMissingError("Google API Key is missing")
        return self.api_key

    async def fetch_photo(self, photo_ref: str) -> PlacePhoto:
        """Download a place photo.

        Args:
            photo_ref: Photo resource name, e.g. ``places/<id>/photos/<ref>``

        Returns:
            The photo bytes and the content type reported by Google
        """
        params = {
            "maxHeightPx": self.PHOTO_MAX_HEIGHT_PX,
            "maxWidthPx": self.PHOTO_MAX_WIDTH_PX,
            "key": self._require_key(),
        }
        url = f"{self.base_url}/{photo_ref.lstrip('/')}/media"
        try:
            # The media endpoint answers with a redirect to the image itself
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True
            ) as client:
                resp = await client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.error(f"Places photo request for {photo_ref} failed: {e}")
            raise TransportError() from e

        if not resp.is_success:
            logger.error(
                f"Places photo request for {photo_ref} failed with status "
                f"{resp.status_code}"
            )
            raise UpstreamError(
                resp.status_code, f"Failed to fetch photo: {resp.reason_phrase}"
            )

        return PlacePhoto(
            content=resp.content,
            content_type=resp.headers.get("Content-Type")
            or self.DEFAULT_PHOTO_CONTENT_TYPE,
        )

    async def search_text(self, text_query: str | None) -> Any:
        """Run a text search restricted to photos, display name and id."""
        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self._require_key(),
            "X-Goog-FieldMask": self.FIELD_MASK,
        }
        payload = {"textQuery": text_query} if text_query is not None else {}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(
                    f"{self.base_url}/places:searchText",
                    json=payload,
                    headers=headers,
                )
        except httpx.HTTPError as e:
            logger.error(f"Places text search failed: {e}")
            raise TransportError() from e

        if not resp.is_success:
            logger.error(f"Places text search failed with status {resp.status_code}")
            raise UpstreamError(
                resp.status_code, f"Failed to search places: {resp.reason_phrase}"
            )

        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"Places returned an unreadable body: {e}")
            raise TransportError() from e
