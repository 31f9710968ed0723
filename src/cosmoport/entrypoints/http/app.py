from fastapi import FastAPI

from cosmoport.entrypoints.http.exception_handlers import register_exception_handlers
from cosmoport.entrypoints.http.routes.health import router as health_router
from cosmoport.entrypoints.http.routes.ships import router as ships_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Cosmoport API",
        description="""
        Ship catalog API for registering, searching and rating ships.

        ## Features
        - Search the catalog with filters, ordering and paging
        - Create, update and delete ships
        - Ratings are derived from speed, usage and production year

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(ships_router, prefix="/rest")

    return app


app = build_app()
