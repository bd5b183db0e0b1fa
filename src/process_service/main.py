"""Main FastAPI application for the flora and fauna process service."""

import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from process_service import __version__
from process_service.api.errors import register_exception_handlers
from process_service.api.routes.catalog import router as catalog_router
from process_service.api.routes.processes import router as processes_router
from process_service.config import settings
from process_service.infrastructure.database import get_db_client
from process_service.models import HealthResponse

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Flora & Fauna Process Service",
    description="Enforcement case management for seized or surrendered flora and fauna",
    version=__version__,
)

# Identity comes from X-User-* headers set by the API Gateway
if settings.demo_mode:
    logger.info("Demo mode: requests without X-User-ID act as the demo user")
else:
    logger.info("Live mode: X-User-ID header required on mutating requests")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(processes_router)
app.include_router(catalog_router)


@app.on_event("startup")
async def startup():
    """Initialize database on startup when SQL storage is selected."""
    logger.info(f"Starting {settings.service_name} on port {settings.port}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Storage: {settings.storage_type}")

    if settings.storage_type != "sql":
        return

    db_client = get_db_client()
    try:
        # Verify connection with retry logic
        await db_client.verify_connection()

        # Alembic is the schema source of truth; create_tables covers fresh SQLite files
        await db_client.create_tables()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


@app.on_event("shutdown")
async def shutdown():
    """Clean up resources on shutdown."""
    logger.info("Shutting down service")
    if settings.storage_type == "sql":
        await get_db_client().close()


@app.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="""
Returns the health status of the Process Service.

**Response Example**:
```json
{
  "status": "healthy",
  "service": "flora-fauna-process-service",
  "version": "0.1.0",
  "storage": "inmemory",
  "mode": "demo"
}
```

**Storage**: No store query (reports configuration only)
**Authorization**: None required (public endpoint)
    """,
)
async def health_check():
    """Health check endpoint."""
    storage = settings.storage_type
    if storage == "sql":
        storage = f"sql ({settings.database_url.split('://')[0]})"
    return HealthResponse(
        status="healthy",
        service=settings.service_name,
        version=__version__,
        storage=storage,
        mode="demo" if settings.demo_mode else "live",
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "process_service.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.environment == "development",
    )
