"""FastAPI application entry point."""

import logging
import time

from fastapi import Depends, FastAPI, Request, status

from company_api.api import auth, companies
from company_api.api.dependencies import AuthorizationGate
from company_api.api.responses import register_exception_handlers, respond
from company_api.config import Settings, get_settings
from company_api.services.auth import TokenAuthority
from company_api.services.events import create_publisher

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Compose the application: authority, publisher, gate, then routers."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Company API",
        description="Token-protected management of companies",
        version="0.1.0",
    )

    authority = TokenAuthority(settings)
    app.state.settings = settings
    app.state.authority = authority
    app.state.publisher = create_publisher(settings)

    gate = AuthorizationGate(authority, header=settings.token_header)

    register_exception_handlers(app)

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        """Log how long each request took."""
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} in {elapsed_ms:.1f}ms"
        )
        return response

    # Register routers
    app.include_router(auth.router)
    app.include_router(companies.router, dependencies=[Depends(gate)])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return respond(
            status.HTTP_200_OK, {"status": "healthy", "environment": settings.environment}
        )

    return app


app = create_app()
