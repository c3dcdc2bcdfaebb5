"""Main application entry point"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.core.exceptions import InvalidAmountError, RateLookupError, UnsupportedCurrencyError
from app.core.logging import setup_logging
from app.api.v1 import api_router
from app.web import web_router
from app.services.exchange_rate_service import exchange_rate_service

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info("Starting up %s", settings.APP_NAME)
    yield
    # Shutdown
    logger.info("Shutting down...")
    await exchange_rate_service.aclose()


setup_logging()

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Live currency conversion",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount static files
app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")


@app.exception_handler(InvalidAmountError)
@app.exception_handler(UnsupportedCurrencyError)
async def invalid_conversion_handler(request: Request, exc: Exception):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc)},
    )


@app.exception_handler(RateLookupError)
async def rate_lookup_error_handler(request: Request, exc: RateLookupError):
    return JSONResponse(
        status_code=502,
        content={"detail": str(exc)},
    )


# Include API routes
app.include_router(api_router, prefix=settings.API_V1_PREFIX)

# Include web routes
app.include_router(web_router)


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}
