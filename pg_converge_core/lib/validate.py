"""
Validation of generated patches with the PostgreSQL parser shipped by pglast.
"""

import logging

from pglast import parse_sql
from pglast.parser import ParseError as PgParseError

from pg_converge_core.lib.errors import PatchValidationError


def validate_patch(sql: str) -> int:
    """
    Check that a patch is syntactically valid PostgreSQL.

    Args:
        sql: Patch text as returned by ``process``

    Returns:
        Number of statements in the patch

    Raises:
        PatchValidationError: When PostgreSQL's parser rejects the patch
    """
    if not sql.strip():
        return 0
    try:
        statements = parse_sql(sql)
    except PgParseError as e:
        location = e.args[1] if len(e.args) > 1 and e.args[1] is not None else 0
        raise PatchValidationError(str(e), cursor_position=location) from e
    logging.info(f"patch has {len(statements)} valid statements")
    return len(statements)
