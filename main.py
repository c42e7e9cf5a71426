"""
Area check backend: application entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.middleware import register_middleware
from api.routes import router as points_router
from auth.jwt import TokenService
from auth.routes import router as auth_router
from config.settings import Settings, config
from core.exceptions import AreaCheckError, ValidationFailed
from database.session import build_engine, build_session_factory, create_tables

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
    stream=sys.stdout,
)
for _noisy in ("sqlalchemy.engine", "aiosqlite", "asyncio"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return ValidationFailed.default_message
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", ValidationFailed.default_message)
    return f"{field}: {message}" if field else message


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or config

    app = FastAPI(
        title="Area Check Backend",
        version="1.0.0",
        description="Checks submitted points against a fixed area and keeps per-user history.",
    )
    app.state.settings = settings
    app.state.token_service = TokenService(settings.jwt_secret)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)

    @app.exception_handler(AreaCheckError)
    async def area_check_error_handler(request: Request, exc: AreaCheckError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc)
        logger.info("Validation failed on %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(
            status_code=ValidationFailed.status_code,
            content={"error": message},
        )

    # Routes
    app.include_router(auth_router, prefix=f"{settings.api_prefix}/auth")
    app.include_router(points_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def on_startup():
        engine = build_engine(settings.database_url, echo=settings.debug)
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        if settings.create_tables:
            logger.info("Creating missing tables…")
            await create_tables(engine)
        logger.info("Application ready to accept requests.")

    @app.on_event("shutdown")
    async def on_shutdown():
        await app.state.engine.dispose()

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
