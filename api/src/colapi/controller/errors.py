from fastapi import HTTPException

from colstore.errors import (
    DraftCommittedError,
    DuplicateStandardFieldError,
    InvalidColumnTypeChangeError,
    ProjectNotFoundError,
    ProtectedColumnError,
    SchemaError,
)

_CONFLICTS = (DuplicateStandardFieldError, ProtectedColumnError, InvalidColumnTypeChangeError, DraftCommittedError)


def to_http(error: SchemaError) -> HTTPException:
    if isinstance(error, ProjectNotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, _CONFLICTS):
        return HTTPException(status_code=409, detail=str(error))
    return HTTPException(status_code=400, detail=str(error))


def not_found(what: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"{what} not found")
