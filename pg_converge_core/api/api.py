"""
Main FastAPI application for pg-converge.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pg_converge_core import __version__
from pg_converge_core.lib.errors import DiffError, PatchValidationError
from .health import router as health_router
from .diff import router as diff_router
from .errors import (
    not_found_handler,
    internal_error_handler,
    diff_error_handler,
    patch_validation_error_handler,
)

app = FastAPI(
    title="pg-converge API",
    description="Generate the DDL patch between two PostgreSQL schema dumps",
    version=__version__
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router, tags=["system"])
app.include_router(diff_router, tags=["schema"])

# Add error handlers
app.add_exception_handler(404, not_found_handler)
app.add_exception_handler(500, internal_error_handler)
app.add_exception_handler(DiffError, diff_error_handler)
app.add_exception_handler(PatchValidationError, patch_validation_error_handler)

# To run: uvicorn pg_converge_core.api:app --reload --host 0.0.0.0 --port 8000
