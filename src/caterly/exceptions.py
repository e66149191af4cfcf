"""Marketplace-specific exceptions and their HTTP translation.

Validation and missing-record failures reuse Protean's own exceptions
(``ValidationError`` and ``ObjectNotFoundError``). The types below cover the
cases Protean has no vocabulary for: ownership/role mismatches, commands that
matched nothing, and bearer-token problems.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError
from protean.integrations.fastapi import register_exception_handlers as register_protean_handlers


class CaterlyError(Exception):
    """Base class for marketplace errors that carry a user-facing message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PermissionDenied(CaterlyError):
    """The caller's identity does not own the resource or lacks the role."""


class NothingToUpdate(CaterlyError):
    """A mutation matched no records."""


class AuthenticationRequired(CaterlyError):
    """No bearer token, or the token is malformed, forged or expired."""


class AuthenticationFailed(CaterlyError):
    """Login with an unknown phone number or a wrong password."""


_STATUS_CODES = {
    PermissionDenied: 403,
    NothingToUpdate: 409,
    AuthenticationRequired: 401,
    AuthenticationFailed: 400,
}


def _handler(status_code: int):
    async def handle(request: Request, exc: CaterlyError) -> JSONResponse:  # noqa: ARG001
        return JSONResponse(status_code=status_code, content={"error": exc.message})

    return handle


async def _not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(status_code=404, content={"error": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """Install Protean's handlers plus the marketplace-specific mappings."""
    register_protean_handlers(app)
    app.add_exception_handler(ObjectNotFoundError, _not_found)
    for exc_class, status_code in _STATUS_CODES.items():
        app.add_exception_handler(exc_class, _handler(status_code))
