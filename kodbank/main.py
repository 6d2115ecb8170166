"""FastAPI application entrypoint. No business logic; only wiring, middleware and error translation."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from kodbank.api import router as api_router
from kodbank.core.config import settings
from kodbank.core.errors import AppError, InternalError, UpstreamError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Kodbank API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    """Pass the provider's own error body through when there is one."""
    content = exc.body if exc.body is not None else {"error": exc.message}
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Missing or malformed body fields are a 400, not FastAPI's default 422."""
    fields = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        name = ".".join(loc) or "body"
        if name not in fields:
            fields.append(name)
    return JSONResponse(
        status_code=400,
        content={"error": f"Missing or invalid fields: {', '.join(fields)}"},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=InternalError.status_code,
        content={"error": "Internal server error"},
    )


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Kodbank API"}
