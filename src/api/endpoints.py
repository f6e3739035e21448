"""
REST API endpoints for the Pfam MSA frequency connector.
Exposes the host contract (config, schema, data, admin check) over HTTP.
"""

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from datetime import datetime
from typing import Optional

from api.connector import (
    AlignmentSource, DataRequest, SchemaRequest, get_config, get_data, get_schema, is_admin_user,
)
from performance.timing import TIMINGS
from utils.config import load_config
from utils.errors import UserError
from utils.logging_config import configure_logging
from utils.pfam_handler import PfamHandler
from utils.settings import get_settings

settings = get_settings()
configure_logging(json_logs=settings.json_logging, level=settings.log_level)

config = load_config()

# Initialize app
app = FastAPI(
    title=config.app_name,
    description="Per-position residue frequencies of Pfam seed alignments",
    version=config.version,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Optional GZip compression (env driven)
if settings.api_enable_gzip:
    app.add_middleware(GZipMiddleware, minimum_size=settings.api_gzip_min_size)


def get_alignment_source() -> AlignmentSource:
    return PfamHandler(config)


# API Endpoints

@app.get("/", tags=["General"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": config.app_name,
        "version": config.version,
        "endpoints": {
            "config": "/config",
            "schema": "/schema",
            "data": "/data",
            "admin": "/admin",
        }
    }


@app.get("/health", tags=["General"])
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
    }


@app.get("/config", tags=["Connector"])
def connector_config():
    """Configuration form shown to the user."""
    return get_config(config)


@app.post("/schema", tags=["Connector"])
def connector_schema(request: Optional[SchemaRequest] = None):
    """Schema of all fields the connector can return."""
    return get_schema(request)


@app.post("/data", tags=["Connector"])
def connector_data(request: DataRequest, source: AlignmentSource = Depends(get_alignment_source)):
    """Residue frequency rows for the requested fields."""
    return get_data(request, source=source, config=config)


@app.get("/admin", tags=["Connector"])
async def connector_admin():
    return {"isAdminUser": is_admin_user()}


@app.get("/metrics/timings", tags=["System"])
async def timing_metrics():
    """Accumulated fetch/tabulate timings."""
    if not get_settings().enable_metrics_endpoint:
        raise HTTPException(status_code=404, detail="Metrics endpoint disabled")
    return TIMINGS.snapshot()


# Exception handlers
@app.exception_handler(UserError)
async def user_error_handler(request: Request, exc: UserError):
    return JSONResponse(
        status_code=400,
        content=exc.to_dict(include_debug=get_settings().debug),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.api_host, port=config.api_port)
