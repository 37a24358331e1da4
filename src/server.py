"""Main FastAPI server for the Gemini Live relay."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Load environment variables early so settings resolve from .env as well.
load_dotenv(".env")

import uvicorn  # noqa: E402
from fastapi import FastAPI, WebSocket  # noqa: E402
from fastapi.responses import ORJSONResponse  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from src.state.settings import AppSettings  # noqa: E402
from src.runtime.settings import load_settings  # noqa: E402
from src.runtime.logging import configure_logging  # noqa: E402
from src.upstream.session import ConnectFn  # noqa: E402
from src.runtime.dependencies import build_runtime_deps  # noqa: E402
from src.handlers.websocket.manager import handle_websocket_connection  # noqa: E402

logger = logging.getLogger(__name__)

configure_logging()


def create_app(settings: AppSettings | None = None, *, connect_fn: ConnectFn | None = None) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        runtime_deps = build_runtime_deps(settings, connect_fn=connect_fn)
        app.state.runtime_deps = runtime_deps
        logger.info("runtime: ready ws_path=%s model=%s", settings.server.ws_endpoint_path, settings.upstream.model)
        try:
            yield
        finally:
            deps = getattr(app.state, "runtime_deps", None)
            if deps is not None:
                await deps.shutdown()

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.server.cors_allow_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.websocket(settings.server.ws_endpoint_path)
    async def websocket_endpoint(websocket: WebSocket) -> None:
        runtime_deps = getattr(app.state, "runtime_deps", None)
        if runtime_deps is None:
            raise RuntimeError("Runtime dependencies are not initialized")
        await handle_websocket_connection(websocket, runtime_deps)

    return app


app = create_app()


def main() -> None:
    settings = load_settings()
    logger.info("Server running on http://%s:%s", settings.server.host, settings.server.port)
    uvicorn.run(app, host=settings.server.host, port=settings.server.port)


if __name__ == "__main__":
    main()
