"""
Schema diff endpoint.
"""

import logging

from fastapi import APIRouter, HTTPException, Form
from fastapi.responses import JSONResponse, PlainTextResponse

from pg_converge_core.api.models import DiffResponse
from pg_converge_core.lib.compare import SchemaSource, process
from pg_converge_core.lib.errors import DiffError, PatchValidationError
from pg_converge_core.lib.validate import validate_patch

router = APIRouter()


@router.post("/diff", responses={
    200: {
        "description": "Patch turning the source schema into the desired schema",
        "content": {
            "text/plain": {
                "example": """-- Table: "public"."users"
ALTER TABLE "public"."users" ADD COLUMN "email" text;
"""
            },
            "application/json": {
                "example": {
                    "status": "success",
                    "patch": "-- Table: \"public\".\"users\"\nALTER TABLE \"public\".\"users\" ADD COLUMN \"email\" text;\n\n",
                    "statements": 1
                }
            }
        }
    },
    400: {
        "description": "Syntax errors in either input, or an invalid patch",
        "content": {
            "application/json": {
                "example": {
                    "status": "error",
                    "summary": "desired has 1 errors",
                    "errors": [
                        {"file": "desired", "line": 1, "message": "unknown token: DROP"}
                    ]
                }
            }
        }
    }
})
async def diff(
    source: str = Form("", description="Current schema as DDL (pg_dump --schema-only output)"),
    desired: str = Form("", description="Desired schema as DDL"),
    source_name: str = Form("source", description="Name used for the source in error messages"),
    desired_name: str = Form("desired", description="Name used for the desired schema in error messages"),
    output_format: str = Form("sql", description="Output format: sql or json"),
    check: bool = Form(False, description="Validate the patch with the PostgreSQL parser")
):
    """
    Compute the DDL patch from the source schema to the desired schema.

    Tables, columns, indexes, UNIQUE / PRIMARY KEY constraints, column
    defaults and owned sequences are compared. Unsupported statements in
    the inputs are skipped.
    """
    if output_format not in ["sql", "json"]:
        raise HTTPException(status_code=400, detail="output_format must be 'sql' or 'json'")

    try:
        patch = process(
            SchemaSource.from_text(source, source_name),
            SchemaSource.from_text(desired, desired_name),
        )
        statements = validate_patch(patch) if check else None
    except (DiffError, PatchValidationError):
        raise
    except Exception as e:
        logging.exception("diff failed")
        raise HTTPException(status_code=500, detail=str(e))

    if output_format == "sql":
        return PlainTextResponse(patch)
    return JSONResponse(DiffResponse(status="success", patch=patch, statements=statements).model_dump())
