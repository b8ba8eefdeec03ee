# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the FileAI API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.auth import routes as auth_routes
from app.config import settings
from app.exceptions import FileAIException, fileai_exception_handler
from app.routers import functions, health, pages

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs startup configuration and warns about settings that silently
    degrade signups.
    """
    logger.info(f"Starting FileAI API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    if not settings.PINECONE_API_KEY:
        logger.warning("PINECONE_API_KEY is not set; new accounts will have no vector index")
    if not settings.SUPABASE_JWT_SECRET:
        logger.warning("SUPABASE_JWT_SECRET is not set; HS256 tokens are rejected and only JWKS-signed tokens verify")

    yield

    logger.info("Shutting down FileAI API")


# Create FastAPI application
app = FastAPI(
    title="FileAI API",
    description="""
## AI Smart File Assistant

Backend for the FileAI landing site and dashboard.

### Signup Flow

1. **Validate** the form fields
2. **Create the account** with Supabase Auth
3. **Upload the avatar** (optional, best-effort)
4. **Provision a vector index** for the user (best-effort)
5. **Write the profile** row (best-effort)

Steps 3-5 never block account creation; their outcomes are reported in the
signup response.
""",
    version=health.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Pages",
            "description": "Landing page, auth form and dashboard",
        },
        {
            "name": "Auth",
            "description": "Login, signup, logout and session lookup",
        },
        {
            "name": "Functions",
            "description": "Remote functions (index provisioning)",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(FileAIException)
async def handle_fileai_exception(request: Request, exc: FileAIException):
    """Handle custom FileAI exceptions."""
    return await fileai_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Page routes (/, /auth, /dashboard)
app.include_router(
    pages.router,
    tags=["Pages"]
)

# Authentication endpoints
app.include_router(
    auth_routes.router,
    prefix="/api/v1/auth",
    tags=["Auth"]
)

# Remote functions
app.include_router(
    functions.router,
    prefix="/api/v1/functions",
    tags=["Functions"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)


# =============================================================================
# API Info
# =============================================================================

@app.get("/api/v1", tags=["Health"])
async def api_info():
    """
    Returns API info.
    """
    return {
        "name": "FileAI API",
        "version": health.VERSION,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
