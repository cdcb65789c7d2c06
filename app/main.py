"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import api_router
from app.api.deps import get_database
from app.core.config import settings
from app.core.exceptions import TeamsAPIError
from app.database import Database


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    print("🚀 Starting Teams API...")

    app.state.database = Database()
    await app.state.database.test_connection()

    print("✅ Application started successfully!")

    yield

    # Shutdown
    print("🛑 Shutting down...")
    await app.state.database.close()
    print("👋 Application stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    docs_url=settings.DOCS_URL,
    redoc_url=None,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.exception_handler(TeamsAPIError)
async def teams_api_error_handler(request: Request, exc: TeamsAPIError) -> JSONResponse:
    """Render domain errors as {error, details} envelopes."""
    if exc.status_code >= 500:
        print(f"❌ Server error on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for anything the routes did not anticipate."""
    print(f"❌ Server error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "details": str(exc)},
    )


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Root endpoint - Health check."""
    return {
        "message": "Welcome to Teams API",
        "status": "running",
        "version": settings.VERSION,
        "docs": settings.DOCS_URL,
    }


@app.get("/health", tags=["Health"])
async def health_check(database: Database = Depends(get_database)) -> dict[str, str]:
    """Health check endpoint."""
    connected = await database.test_connection()
    return {"status": "healthy", "database": "connected" if connected else "unreachable"}
