"""Password hashing, bearer tokens and login.

Tokens are opaque to clients: ``<payload>.<signature>`` where the payload is
URL-safe base64 JSON ``{"sub", "role", "exp"}`` and the signature is an
HMAC-SHA256 over the encoded payload. The signing secret comes from
``CATERLY_SECRET_KEY`` or the domain's ``secret_key`` setting.
"""

import base64
import hashlib
import hmac
import json
import os
import secrets
import time
from dataclasses import dataclass

import structlog
from protean.utils.globals import current_domain

from caterly.exceptions import AuthenticationFailed, AuthenticationRequired
from caterly.identity.account import Account

logger = structlog.get_logger(__name__)

_HASH_ALGORITHM = "pbkdf2_sha256"
_ITERATIONS = 120_000
_DEFAULT_TOKEN_TTL_SECONDS = 3600


@dataclass(frozen=True)
class Identity:
    """The resolved caller of an authenticated request."""

    identity_id: str
    role: str


# ---------------------------------------------------------------------------
# Passwords
# ---------------------------------------------------------------------------
def hash_password(password: str) -> str:
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), bytes.fromhex(salt), _ITERATIONS)
    return f"{_HASH_ALGORITHM}${_ITERATIONS}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, iterations, salt, expected = encoded.split("$")
    except ValueError:
        return False
    if algorithm != _HASH_ALGORITHM:
        return False

    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), bytes.fromhex(salt), int(iterations))
    return hmac.compare_digest(digest.hex(), expected)


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------
def _secret() -> bytes:
    secret = os.environ.get("CATERLY_SECRET_KEY") or current_domain.config["secret_key"]
    return secret.encode("utf-8")


def _token_ttl() -> int:
    custom = current_domain.config.get("custom") or {}
    return int(custom.get("TOKEN_TTL_SECONDS", _DEFAULT_TOKEN_TTL_SECONDS))


def _sign(payload: bytes) -> str:
    return hmac.new(_secret(), payload, hashlib.sha256).hexdigest()


def issue_token(account: Account, now: float | None = None) -> str:
    issued_at = time.time() if now is None else now
    claims = {"sub": str(account.id), "role": account.role, "exp": int(issued_at) + _token_ttl()}
    payload = base64.urlsafe_b64encode(json.dumps(claims, separators=(",", ":")).encode("utf-8"))
    return f"{payload.decode('ascii')}.{_sign(payload)}"


def resolve_token(token: str, now: float | None = None) -> Identity:
    """Return the identity a token was issued to, or raise ``AuthenticationRequired``."""
    try:
        payload, signature = token.split(".")
    except ValueError:
        raise AuthenticationRequired("Malformed token") from None

    try:
        encoded = payload.encode("ascii")
        signed = hmac.compare_digest(_sign(encoded).encode("ascii"), signature.encode("ascii"))
    except UnicodeError:
        raise AuthenticationRequired("Malformed token") from None
    if not signed:
        raise AuthenticationRequired("Invalid token")

    try:
        claims = json.loads(base64.urlsafe_b64decode(encoded))
        expires_at = claims["exp"]
        identity = Identity(identity_id=claims["sub"], role=claims["role"])
    except (ValueError, TypeError, KeyError):
        raise AuthenticationRequired("Malformed token") from None

    current = time.time() if now is None else now
    if expires_at < current:
        raise AuthenticationRequired("Token expired")

    return identity


# ---------------------------------------------------------------------------
# Login
# ---------------------------------------------------------------------------
def find_account_by_phone(phone: str) -> Account | None:
    matches = current_domain.repository_for(Account)._dao.query.filter(phone=phone).all().items
    return matches[0] if matches else None


def authenticate(phone: str, password: str) -> tuple[str, Account]:
    """Check credentials and return a fresh bearer token with the account."""
    account = find_account_by_phone(phone)
    if account is None or not verify_password(password, account.password_hash):
        logger.info("Login rejected", phone=phone)
        raise AuthenticationFailed("Invalid phone or password")

    logger.info("Login succeeded", account_id=str(account.id), role=account.role)
    return issue_token(account), account
