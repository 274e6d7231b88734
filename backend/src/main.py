"""Main FastAPI Application

Wires middleware, global exception handlers and the API routers from
`presentation`.

Run locally for development with:

    uvicorn main:app --reload

Keep application logic in `application`, `domain` and `infrastructure`;
this module only assembles them.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from slowapi.errors import RateLimitExceeded

from core.config import settings
from core.database import init_db, close_db, health_check as db_health_check
from core.logging_config import configure_logging
from core.exceptions import (
    DomainException,
    AuthenticationException,
    AuthorizationException,
    ValidationException,
    ResourceNotFoundException,
    DuplicateResourceException,
    InvalidStateTransitionException,
    RepositoryException,
)
from presentation.api.v1.dependencies import limiter
from presentation.api.v1.endpoints import (
    applications_router,
    jobs_router,
    partners_router,
    admin_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"🚀 Starting {settings.APP_NAME} ({settings.ENVIRONMENT})...")

    await init_db()
    logger.info("✅ Database initialized")

    yield

    logger.info("👋 Shutting down gracefully...")
    await close_db()
    logger.info("✅ Database connections closed")


app = FastAPI(
    title=settings.APP_NAME,
    description="Job board API with applicant match scoring and ranked review queues",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.limiter = limiter


_STATUS_BY_EXCEPTION = (
    (AuthenticationException, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationException, status.HTTP_403_FORBIDDEN),
    (ValidationException, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (ResourceNotFoundException, status.HTTP_404_NOT_FOUND),
    (DuplicateResourceException, status.HTTP_409_CONFLICT),
    (InvalidStateTransitionException, status.HTTP_409_CONFLICT),
    (RepositoryException, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


@app.exception_handler(DomainException)
async def domain_exception_handler(request: Request, exc: DomainException):
    """Handle domain-level exceptions"""
    status_code = status.HTTP_400_BAD_REQUEST
    for exc_type, code in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            status_code = code
            break

    if status_code >= 500:
        logger.error(f"Domain exception on {request.url.path}: {str(exc)}")
        return JSONResponse(status_code=status_code, content={"detail": "Internal server error"})

    logger.warning(f"Domain exception on {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc)}
    )


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"detail": "Rate limit exceeded. Please try again later."}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all exception handler"""
    logger.opt(exception=exc).error(f"Unhandled exception: {str(exc)}")

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )


app.include_router(
    applications_router,
    prefix="/api/v1",
    tags=["Applications"]
)

app.include_router(
    jobs_router,
    prefix="/api/v1",
    tags=["Jobs"]
)

app.include_router(
    partners_router,
    prefix="/api/v1",
    tags=["Partners"]
)

app.include_router(
    admin_router,
    prefix="/api/v1/admin",
    tags=["Admin"]
)


@app.get("/health")
@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    database_ok = await db_health_check()
    return {
        "status": "healthy" if database_ok else "degraded",
        "database": database_ok,
        "version": "1.0.0"
    }


if __name__ == "__main__":
    import uvicorn
    configure_logging()
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
