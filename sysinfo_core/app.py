# -*- coding: utf-8 -*-

# third party imports
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.routing import APIRoute

# app imports
from sysinfo_core.__version__ import __license__, __license_url__, __version__
from sysinfo_core.api.api_v1.api import api_router
from sysinfo_core.core.config import endpoints, settings
from sysinfo_core.core.logging import configure_logging, get_logger
from sysinfo_core.models.source_read_error import SourceReadError
from sysinfo_core.views.api import router as views_router


def create_app(debug: bool = False):
    configure_logging(debug_mode=debug, log_dir=settings.LOG_DIR)
    log = get_logger(__name__)

    if debug:
        log.debug("Starting application in DEBUG mode")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_DESCRIPTION,
        version=__version__,
        license_info={"name": __license__, "url": __license_url__},
        docs_url="/docs",
        redoc_url=None,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        openapi_tags=settings.TAGS_METADATA,
        debug=debug,
    )

    @app.exception_handler(SourceReadError)
    async def source_read_error_handler(request: Request, exc: SourceReadError):
        log.error(f"{exc} ({exc.path})")
        return PlainTextResponse(content=str(exc), status_code=500)

    # setup router
    app.include_router(api_router, prefix=settings.API_V1_STR)
    endpoints.clear()
    for route in app.routes:
        if isinstance(route, APIRoute):
            endpoints.append(
                {
                    "path": route.path,
                    "methods": "".join(list(route.methods)),
                    "description": route.description.split("\n")[0],
                }
            )

    app.include_router(views_router)

    log.info(f"Reading reports from {settings.DATA_DIR.resolve()}")

    return app
