"""FastAPI dependencies that resolve the bearer token to an ``Identity``."""

from fastapi import Depends, Header

from caterly.exceptions import AuthenticationRequired, PermissionDenied
from caterly.identity.authentication import Identity, resolve_token


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


def current_identity(authorization: str | None = Header(default=None)) -> Identity:
    token = _bearer_token(authorization)
    if token is None:
        raise AuthenticationRequired("Authentication required")
    return resolve_token(token)


def optional_identity(authorization: str | None = Header(default=None)) -> Identity | None:
    token = _bearer_token(authorization)
    return resolve_token(token) if token else None


def require_role(role: str):
    """Dependency factory: the caller must hold ``role``."""

    def dependency(identity: Identity = Depends(current_identity)) -> Identity:
        if identity.role != role:
            raise PermissionDenied(f"Only {role}s can perform this action")
        return identity

    return dependency
