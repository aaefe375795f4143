"""
Travel admin - FastAPI backend
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from .. import __version__
from .admin import router as admin_router
from .places import router as places_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Travel Admin",
        description="Bulk import and place validation for the travel booking backend",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(admin_router, tags=["Admin"])
    app.include_router(places_router, tags=["Places"])

    @app.get("/health")
    async def health():
        """Health check endpoint"""
        return {"status": "healthy", "version": __version__}

    return app


app = create_app()
