from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from .config import Settings, load_settings
from .routes.system import router as system_router
from .todos import TodoResolvers, TodoStore, build_router, build_schema, seed_store

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request with its status and latency."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.exception(f"{request.method} {request.url.path} -> 500 ({elapsed_ms:.1f}ms)")
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    store = TodoStore()
    resolvers = TodoResolvers(store)
    schema = build_schema(resolvers)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.seed_sample_todos:
            await seed_store(store)
        logger.info(f"Todo GraphQL endpoint ready at {settings.graphql_path}")
        yield

    app = FastAPI(
        title="Todo GraphQL API",
        description="In-memory todo records behind a GraphQL endpoint",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.resolvers = resolvers
    app.state.schema = schema

    app.include_router(build_router(schema, settings.graphql_path))
    app.include_router(system_router)
    app.add_middleware(LoggingMiddleware)
    return app
