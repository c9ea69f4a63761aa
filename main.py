import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from editorial.config import settings
from editorial.database import Base, engine
from editorial.exception_handlers import register_exception_handlers
from editorial.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from editorial.routes import (
    ai,
    articles_router,
    categories_router,
    classifications_router,
    fatawa_router,
    fatwa_classifications_router,
    honorifics,
    i18n,
    images,
    individuals_router,
    media,
    tags_router,
    themes_router,
    timelines_router,
    types_router,
)

setup_structured_logging(log_level=settings.log_level, json_format=settings.log_json)
logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Backend for the multilingual editorial dashboard",
        debug=settings.debug,
        version=settings.app_version,
    )

    app.add_middleware(StructuredLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Content
    app.include_router(articles_router, prefix=f"{API_PREFIX}/articles", tags=["Articles"])
    app.include_router(fatawa_router, prefix=f"{API_PREFIX}/fatawa", tags=["Fatawa"])
    app.include_router(individuals_router, prefix=f"{API_PREFIX}/individuals", tags=["Individuals"])
    app.include_router(themes_router, prefix=f"{API_PREFIX}/themes", tags=["Themes"])
    app.include_router(timelines_router, prefix=f"{API_PREFIX}/timelines", tags=["Timelines"])

    # Reference data
    app.include_router(tags_router, prefix=f"{API_PREFIX}/tags", tags=["Taxonomy"])
    app.include_router(types_router, prefix=f"{API_PREFIX}/types", tags=["Taxonomy"])
    app.include_router(classifications_router, prefix=f"{API_PREFIX}/classifications", tags=["Taxonomy"])
    app.include_router(categories_router, prefix=f"{API_PREFIX}/categories", tags=["Taxonomy"])
    app.include_router(
        fatwa_classifications_router, prefix=f"{API_PREFIX}/fatwa-classifications", tags=["Taxonomy"]
    )

    app.include_router(media.router, prefix=f"{API_PREFIX}/media", tags=["Media"])
    app.include_router(images.router, prefix=f"{API_PREFIX}/images", tags=["Image Generator"])
    app.include_router(i18n.router, prefix=f"{API_PREFIX}/i18n", tags=["i18n"])
    app.include_router(ai.router, prefix="/api/ai", tags=["AI"])
    app.include_router(honorifics.router, prefix="/api/honorifics", tags=["Honorifics"])

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok", "version": settings.app_version}

    if settings.debug:
        logger.info(f"Running in {settings.environment} mode")
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)  # Logs SQL statements

        @app.on_event("startup")
        async def create_tables():
            # Development convenience; migrations own the schema elsewhere
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created (if not existing).")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
