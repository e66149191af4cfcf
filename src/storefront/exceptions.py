"""Errors raised by the storefront client."""


class StorefrontError(Exception):
    """Base class for failures talking to the marketplace API."""


class UpstreamError(StorefrontError):
    """The API could not be reached, timed out, or failed with a 5xx."""


class RequestRejected(StorefrontError):
    """The API answered with a 4xx; ``status_code`` and ``message`` say why."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class EmptyCartError(StorefrontError):
    """Checkout was attempted with nothing in the cart."""
