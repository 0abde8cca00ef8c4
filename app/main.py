from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import admin, agent, chains, health, swap, tokens
from .config import settings
from .logging_config import setup_logging
from .middleware import RequestLoggingMiddleware
from .services.container import ServiceContainer


def create_app(container: Optional[ServiceContainer] = None) -> FastAPI:
    """Build the API. Tests pass a prebuilt ``container``."""

    services = container or ServiceContainer.from_settings(settings)
    setup_logging(services.settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await services.aclose()

    app = FastAPI(
        title="AlphaSwap Agent API",
        description="Chat-driven token swaps on the CoW Protocol order book",
        version=services.settings.service_version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.container = services

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    prefix = services.settings.api_prefix.rstrip("/")
    app.include_router(health.router, tags=["Health"])
    app.include_router(agent.router, prefix=prefix, tags=["Agent"])
    app.include_router(swap.router, prefix=prefix, tags=["Swap"])
    app.include_router(tokens.router, prefix=prefix, tags=["Tokens"])
    app.include_router(chains.router, prefix=prefix, tags=["Chains"])
    app.include_router(admin.router, prefix=prefix, tags=["Admin"])

    @app.get("/")
    async def root():
        """Root endpoint with basic info"""
        return {
            "name": "AlphaSwap Agent API",
            "version": services.settings.service_version,
            "docs": "/docs",
            "health": "/healthz",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
        log_level=settings.log_level.lower()
    )
