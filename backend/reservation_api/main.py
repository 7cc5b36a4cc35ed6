"""
REST API main application.
Entry point for the FastAPI REST server.
"""

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text

from reservation_api.core import (
    configure_cors,
    lifespan,
    register_exception_handlers,
    register_middlewares,
)
from reservation_api.routers import ALL_ROUTERS
from reservation_shared.config.settings import settings
from reservation_shared.infrastructure.db import get_db_context
from reservation_shared.security.rate_limit import limiter, rate_limit_exceeded_handler

SERVICE_NAME = "reservation-api"


app = FastAPI(
    title="Restaurant Reservation API",
    description="Customers, restaurants, tables, staff, menus, orders and reservations",
    version="0.1.0",
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

register_exception_handlers(app)
register_middlewares(app)
# CORS is registered last so it wraps everything, including error responses
configure_cors(app)


# =============================================================================
# Health Check
# =============================================================================


@app.get("/api/health")
def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": SERVICE_NAME}


@app.get("/api/health/detailed")
def detailed_health_check():
    """
    Health check that verifies database connectivity.
    Returns 503 if the database is unreachable.
    """
    checks = {
        "service": SERVICE_NAME,
        "environment": settings.environment,
        "dependencies": {},
    }

    try:
        with get_db_context() as db:
            db.execute(text("SELECT 1"))
        checks["dependencies"]["database"] = {"status": "healthy"}
        checks["status"] = "healthy"
    except Exception as e:
        checks["dependencies"]["database"] = {"status": "unhealthy", "error": str(e)}
        checks["status"] = "degraded"
        return JSONResponse(content=checks, status_code=503)

    return checks


# =============================================================================
# Include Routers
# =============================================================================

for router in ALL_ROUTERS:
    app.include_router(router)


# =============================================================================
# Development entry point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "reservation_api.main:app",
        host="0.0.0.0",
        port=settings.rest_api_port,
        reload=settings.debug,
    )
