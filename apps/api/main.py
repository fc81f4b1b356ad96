"""FastAPI application main entry point."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from apps.api.v1.endpoints import customers, delivery_notes
from core.domain.exceptions import DomainException
from core.infrastructure.database.lifecycle import close_database, init_database
from core.infrastructure.logging import configure_logging
from core.settings import get_app_settings


logger = logging.getLogger(__name__)

settings = get_app_settings()

# Domain error code -> HTTP status. Unlisted codes fall back to 400.
ERROR_STATUS = {
    "DELIVERY_NOTE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CUSTOMER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PRICING_PROFILE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ITEM_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "NOT_EDITABLE": status.HTTP_409_CONFLICT,
    "INVALID_STATUS": status.HTTP_409_CONFLICT,
    "ALREADY_FINALIZED": status.HTTP_409_CONFLICT,
    "WITHOUT_ITEMS": status.HTTP_409_CONFLICT,
    "ITEMS_WITHOUT_PRICE": status.HTTP_409_CONFLICT,
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_ID": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_NUMBER": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_NAME": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_QUANTITY": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "NEGATIVE_PRICE": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_COLOR_CODE": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_MEASUREMENT": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "WITHOUT_CUSTOMER": status.HTTP_422_UNPROCESSABLE_ENTITY,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    if settings.api.storage == "database":
        await init_database(settings.database)
    logger.info(f"{settings.api.title} started (storage: {settings.api.storage})")
    yield
    await close_database()


app = FastAPI(
    title=settings.api.title,
    description="Delivery notes and customer pricing for the coating workshop",
    version=settings.api.version,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(delivery_notes.router, prefix="/api/v1")
app.include_router(customers.router, prefix="/api/v1")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response


@app.exception_handler(DomainException)
async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Translate a domain error into its HTTP status.

    Returns:
        JSONResponse with {"code", "detail"}
    """
    status_code = ERROR_STATUS.get(exc.code, status.HTTP_400_BAD_REQUEST)
    logger.info(f"{request.method} {request.url.path} rejected: {exc.code} ({exc.message})")
    return JSONResponse(status_code=status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.

    Returns:
        JSONResponse with error details
    """
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"code": "INTERNAL_ERROR", "detail": "Internal server error"},
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
