"""
Main FastAPI application
"""
from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn

from translate_relay.config import settings
from translate_relay.api.routes import translate

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.DEBUG else logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

# Only show uvicorn errors; access logging stays at warnings and above
uvicorn_logger = logging.getLogger("uvicorn")
uvicorn_logger.setLevel(logging.ERROR)
uvicorn_access_logger = logging.getLogger("uvicorn.access")
uvicorn_access_logger.setLevel(logging.WARNING)

CORS_PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

# The public surface is POST /translate only; no docs or schema routes
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
    ## Translate Relay

    Relays batches of texts to an upstream LibreTranslate-compatible backend.
    Items are translated concurrently and returned in input order; items that
    fail upstream come back as empty strings.
    """,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
)


@app.middleware("http")
async def ensure_cors_headers(request: Request, call_next):
    """Answer CORS preflight for any path and mark translate responses cross-origin."""
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_204_NO_CONTENT, headers=CORS_PREFLIGHT_HEADERS)
    response = await call_next(request)
    if request.method == "POST" and request.url.path == "/translate":
        response.headers["Access-Control-Allow-Origin"] = "*"
    return response


app.include_router(translate.router, tags=["translate"])


@app.on_event("startup")
async def startup_event():
    """Log service information on startup"""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Upstream: {settings.TRANSLATE_URL} (timeout {settings.REQUEST_TIMEOUT}s, max batch {settings.MAX_BATCH_SIZE})")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down")


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Unknown paths and unsupported methods are plain-text 404s"""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return PlainTextResponse("Not Found", status_code=status.HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, exc)


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.error(f"Server error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"}
    )


if __name__ == "__main__":
    uvicorn.run(
        "translate_relay.main:app",
        host=settings.HOST,
        port=settings.PORT,
        workers=settings.UVICORN_WORKERS,
    )
