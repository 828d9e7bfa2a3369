"""
Custom error handlers for the API.
"""

from fastapi import Request
from fastapi.responses import JSONResponse

from pg_converge_core.api.models import DiffErrorResponse, ParseErrorDetail
from pg_converge_core.lib.errors import DiffError, PatchValidationError


async def not_found_handler(request: Request, exc):
    """Handle 404 errors"""
    return JSONResponse(
        status_code=404,
        content={"error": "Endpoint not found", "path": str(request.url.path)}
    )


async def internal_error_handler(request: Request, exc):
    """Handle 500 errors"""
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "detail": str(exc)}
    )


async def diff_error_handler(request: Request, exc: DiffError):
    """Report syntax errors of either input as 400 with every message"""
    body = DiffErrorResponse(
        summary=exc.summary(),
        errors=[ParseErrorDetail(**error.to_dict()) for error in exc.errors],
    )
    return JSONResponse(status_code=400, content=body.model_dump())


async def patch_validation_error_handler(request: Request, exc: PatchValidationError):
    """The generated patch was rejected by PostgreSQL's parser"""
    return JSONResponse(
        status_code=400,
        content={
            "error": "Patch validation failed",
            "detail": exc.message,
            "cursor_position": exc.cursor_position,
        }
    )
