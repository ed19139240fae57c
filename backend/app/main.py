"""FastAPI application."""

from fastapi import FastAPI

from backend.app.api.routes.catalog import router as catalog_router
from backend.app.api.routes.health import router as health_router
from backend.app.api.routes.metrics import router as metrics_router
from backend.app.api.routes.recommendations import router as recommendations_router

app = FastAPI(title="Boardwalk Assist API", version="0.1.0")

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(catalog_router, tags=["catalog"])
app.include_router(recommendations_router, tags=["recommendations"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Boardwalk Assist API", "version": "0.1.0"}
