import logging
import logging.config
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from url_details.config import Settings, settings as default_settings
from url_details.errors import ApiError
from url_details.models.response import ErrorData, ErrorResponse
from url_details.routers.url_details import limiter, router as url_details_router
from url_details.services.fetcher import RemoteFetcher
from url_details.services.handler import OptionsHook, UrlDetailsHandler
from url_details.services.permissions import Permission, RoleHeaderPermission


def configure_logging(level: str) -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                },
            },
            "root": {"level": level.upper(), "handlers": ["console"]},
        }
    )


logger = logging.getLogger(__name__)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    body = ErrorResponse(
        code=exc.code,
        message=exc.message,
        data=ErrorData(status=exc.status_code, params=exc.params or None),
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(exclude_none=True))


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


def create_app(
    settings: Optional[Settings] = None,
    permission: Optional[Permission] = None,
    fetcher: Optional[RemoteFetcher] = None,
    options_hook: Optional[OptionsHook] = None,
) -> FastAPI:
    """Build the application with its collaborators wired in.

    Any collaborator left as ``None`` is built from *settings*, and the root
    logger is reconfigured at *settings.log_level*.  The rate limit is the
    exception: it is bound to the route when the router module is imported,
    so it always comes from the ``URL_DETAILS_RATE_LIMIT`` environment
    variable and is shared by every app in the process.
    """
    settings = settings or default_settings
    configure_logging(settings.log_level)
    if permission is None:
        logger.warning(
            "Trusting the %s header for permission checks; it must be stripped "
            "from client requests by the fronting gateway",
            settings.role_header,
        )
        permission = RoleHeaderPermission(settings.role_header, settings.allowed_roles)
    if fetcher is None:
        fetcher = RemoteFetcher(block_private_hosts=settings.block_private_hosts)

    app = FastAPI(
        title="URL Details API",
        description="Fetches a remote URL and returns descriptive metadata such as its title.",
        version="1.0.0",
    )

    app.state.url_details_handler = UrlDetailsHandler(
        settings, permission, fetcher, options_hook=options_hook
    )

    # Rate-limiting state
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(url_details_router)

    @app.get("/", summary="Health check")
    async def root() -> dict:
        return {"message": "Hello from URL Details"}

    return app


app = create_app()
