import time
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from databases.mongo.orm import close_db, init_db
from routers import ROUTERS, VERSIONED_ROUTERS
from utils.constants import API_PREFIX, CORS_ORIGINS, ENVIRONMENT, IS_DEVELOPMENT
from utils.errors import register_exception_handlers
from utils.logging import logger


@asynccontextmanager
async def lifespan(_) -> AsyncGenerator[None, Any]:
    """Lifespan event handler"""
    logger.info(f"Starting Restaurant Finder API in {ENVIRONMENT} mode")
    await init_db()
    yield
    close_db()
    logger.info("Shutting down the application.")


app = FastAPI(title="Restaurant Finder API", version="1.0.0", lifespan=lifespan)
app.add_middleware(CORSMiddleware, allow_origins=CORS_ORIGINS, allow_methods=["*"], allow_headers=["*"])
app.add_middleware(GZipMiddleware, minimum_size=1000)
register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Access log: short in development, with the client address otherwise"""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    if IS_DEVELOPMENT:
        logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f} ms")
    else:
        client = request.client.host if request.client else "-"
        logger.info(f'{client} "{request.method} {request.url} HTTP/{request.scope.get("http_version", "1.1")}" '
                    f"{response.status_code} {elapsed_ms:.1f} ms")
    return response


for router in ROUTERS:
    app.include_router(router)
for router in VERSIONED_ROUTERS:
    app.include_router(router, prefix=API_PREFIX)
    # also served unversioned, without cluttering the OpenAPI schema
    app.include_router(router, include_in_schema=False)


if __name__ == "__main__":
    import uvicorn

    from utils.constants import PORT

    uvicorn.run("app:app", host="0.0.0.0", port=PORT, reload=IS_DEVELOPMENT)
