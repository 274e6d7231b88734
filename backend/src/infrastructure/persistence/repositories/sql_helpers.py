"""
Repository Helpers
LIKE pattern escaping and IntegrityError constraint lookup
"""
from sqlalchemy.exc import IntegrityError


LIKE_ESCAPE = "\\"


def like_pattern(term: str) -> str:
    """Contains-pattern for ILIKE with wildcards in the term taken literally"""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def violates_constraint(error: IntegrityError, constraint: str) -> bool:
    """Check whether an IntegrityError comes from the named constraint"""
    # asyncpg exposes constraint_name on the driver error chained behind the DBAPI adapter
    for candidate in (error.orig, getattr(error.orig, "__cause__", None)):
        if getattr(candidate, "constraint_name", None) == constraint:
            return True
    return constraint in str(error.orig)
