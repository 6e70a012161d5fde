import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .exceptions import GatewayError
from .integrations.clerk.router import router as users_router
from .integrations.places.router import router as places_router
from .middleware import SecurityHeadersMiddleware
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


async def handle_gateway_error(request: Request, exc: GatewayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(f"Rejected malformed request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request"})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the gateway application around a fixed set of settings."""
    settings = settings or get_settings()

    app = FastAPI(title="Places Gateway", version="0.1.0")
    app.state.settings = settings

    # Security headers wrap CORS so preflight responses carry them too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)

    app.add_exception_handler(GatewayError, handle_gateway_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    # Include routers
    app.include_router(users_router)
    app.include_router(places_router)

    return app


app = create_app()


def main():
    """Main entry point for the web server."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if not settings.clerk_secret_key:
        logger.warning("Clerk secret key is not configured, user routes will fail")
    if not settings.google_places_api_key:
        logger.warning("Google Places API key is not configured, place routes will fail")
    logger.info(f"Starting Places Gateway on http://{settings.host}:{settings.port}")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
