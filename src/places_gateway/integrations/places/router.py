"""
FastAPI router for Google Places endpoints.
"""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse, Response

from ...concurrency import cancel_on_disconnect
from ...exceptions import ClientDisconnectedError, GatewayError, MissingParameterError
from ...models import PlaceSearchRequest
from ...settings import Settings, get_app_settings
from .client import PlacesClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["places"])


def get_places_client(settings: Settings = Depends(get_app_settings)) -> PlacesClient:
    """Dependency to get a Google Places client."""
    return PlacesClient(
        api_key=settings.google_places_api_key,
        base_url=settings.places_api_url,
        timeout=settings.upstream_timeout,
    )


@router.get("/place-photo")
async def get_place_photo(
    request: Request,
    photo_ref: str | None = Query(None, alias="photoRef", description="Photo name"),
    client: PlacesClient = Depends(get_places_client),
):
    """
    Proxy a place photo.

    The image is relayed as-is and marked embeddable from other origins.
    """
    if not photo_ref:
        raise MissingParameterError("Missing photoRef parameter")

    try:
        photo = await cancel_on_disconnect(request, client.fetch_photo(photo_ref))
    except GatewayError:
        raise
    except Exception as e:
        logger.error(f"Error fetching place photo: {e}")
        return JSONResponse(status_code=500, content={"error": "Internal Server Error"})

    return Response(
        content=photo.content,
        media_type=photo.content_type,
        headers={"Cross-Origin-Resource-Policy": "cross-origin"},
    )


@router.post("/place-details")
async def search_place_details(
    request: Request,
    body: PlaceSearchRequest | None = None,
    client: PlacesClient = Depends(get_places_client),
):
    """Search places by free text."""
    text_query = body.text_query if body else None
    try:
        result = await cancel_on_disconnect(request, client.search_text(text_query))
        return JSONResponse(content=result)
    except ClientDisconnectedError:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch place details: {e}")
        return JSONResponse(
            status_code=500, content={"message": "Failed to fetch place details"}
        )
