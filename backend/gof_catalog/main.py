import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gof_catalog import config
from gof_catalog.api.routes import router
from gof_catalog.patterns.loader import load_entries
from gof_catalog.patterns.registry import PatternCatalog, build_catalog

logger = logging.getLogger(__name__)


def create_app(catalog: Optional[PatternCatalog] = None) -> FastAPI:
    config.configure_logging()

    if catalog is None:
        if config.PATTERN_CATALOG_PATH:
            logger.info("Using pattern catalog file %s", config.PATTERN_CATALOG_PATH)
            catalog = build_catalog(load_entries(config.PATTERN_CATALOG_PATH))
        else:
            catalog = build_catalog()

    app = FastAPI(
        title="Design Pattern Catalog",
        version="0.1.0",
    )
    app.state.catalog = catalog

    # Middleware first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    return app


app = create_app()
