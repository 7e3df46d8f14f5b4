from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from nadapi.domain.amplifier import Amplifier
from nadapi.domain.factory import create_serial_amplifier
from nadapi.server_app.bridge import ApiError, NotFoundError, StateBridge, resolve_resource
from nadapi.server_app.config import ServerSettings, get_settings
from nadapi.server_app.logging import create_logger
from nadapi.server_app.models import AmpValue, ErrorResponse

STATE_METHODS = ["GET", "PATCH"]
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
OTHER_METHODS = [m for m in ALL_METHODS if m not in STATE_METHODS]


def create_app(settings: Optional[ServerSettings] = None, amplifier: Optional[Amplifier] = None) -> FastAPI:
    settings = settings or get_settings()
    logger = create_logger("nadapi", settings.log_level)
    if amplifier is None:
        if not settings.device:
            raise ValueError("Serial device not configured (set NAD_DEVICE)")
        amplifier = create_serial_amplifier(settings.device, enable_volume=settings.enable_volume)
    bridge = StateBridge(amplifier, logger)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("server_started", extra={"details": {"enable_volume": amplifier.enable_volume}})
        yield
        amplifier.close()

    app = FastAPI(title="nadapi", lifespan=lifespan)
    app.state.settings = settings
    app.state.bridge = bridge

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        if exc.__cause__ is not None:
            logger.error(
                "request_failed",
                extra={"details": {"method": request.method, "path": request.url.path, "error": repr(exc.__cause__)}},
            )
        body = ErrorResponse(status=exc.status, message=exc.message)
        return JSONResponse(status_code=exc.status, content=body.model_dump())

    @app.get("/api/v1/state/{variable}")
    @app.get("/api/v1/state/{variable}/")
    async def get_state(variable: str) -> JSONResponse:
        resource = resolve_resource(variable)
        state = await run_in_threadpool(bridge.query_state, resource)
        return JSONResponse(content=state.to_json())

    @app.patch("/api/v1/state/{variable}")
    @app.patch("/api/v1/state/{variable}/")
    async def patch_state(variable: str, request: Request) -> JSONResponse:
        resource = resolve_resource(variable)
        try:
            value = AmpValue.model_validate_json(await request.body())
        except ValidationError:
            raise ApiError(400, "Malformed JSON") from None
        state = await run_in_threadpool(bridge.modify_state, resource, value)
        return JSONResponse(content=state.to_json())

    @app.api_route("/api/v1/state/{variable}", methods=OTHER_METHODS)
    @app.api_route("/api/v1/state/{variable}/", methods=OTHER_METHODS)
    async def unsupported_state_method(variable: str, request: Request) -> JSONResponse:
        resolve_resource(variable)
        raise ApiError(400, f"Invalid request method {request.method}, must be GET or PATCH")

    # JSON 404 for everything else under /api/
    @app.api_route("/api/{path:path}", methods=ALL_METHODS)
    async def not_found(path: str) -> JSONResponse:
        raise NotFoundError()

    if settings.static_dir:
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app
