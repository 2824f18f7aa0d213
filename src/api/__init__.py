"""FastAPI application setup."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.controller import product_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Mission Supplies API",
        description="Create, read, update, delete, save and load space-mission supply records",
        version="1.0.0",
    )

    # CORS for a browser-based form front end
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production: specify the front end origin
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(product_router)

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
