"""
Auth backend - signup, login and health check over a relational user table
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

import uvicorn

from .config import settings
from .db import dispose_engine, init_db
from .errors import AuthError, ValidationError
from .routes import auth, health

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Initialize database on startup, close the pool on shutdown"""
    init_db()
    if settings.JWT_EXPIRE_MINUTES is None:
        logger.warning("JWT_EXPIRE_MINUTES is not set; issued tokens never expire")
    yield
    logger.info("Shutting down, closing database pool")
    dispose_engine()


app = FastAPI(
    title="Auth Backend",
    description="Signup and login with bcrypt password hashes and signed tokens",
    version="1.0.0",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)


@app.exception_handler(AuthError)
async def auth_error_handler(request: Request, exc: AuthError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Integer loc parts are list indexes or, for malformed JSON, character offsets
    fields = [
        ".".join(part for part in err["loc"] if isinstance(part, str) and part != "body")
        for err in exc.errors()
    ]
    logger.info("Rejected %s %s: invalid fields %s", request.method, request.url.path, fields)
    error = ValidationError(fields=[f for f in fields if f])
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Something went wrong!",
            "message": str(exc) if settings.is_development else "Internal Server Error",
        },
    )


def run() -> None:
    logger.info("Server running on port %s", settings.PORT)
    uvicorn.run(
        "auth_backend.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
