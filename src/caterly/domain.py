"""Caterly marketplace: the domain composition root.

A single Protean domain hosts every bounded context of the marketplace:
identity (accounts, tokens, favorites), catalogue (recipes), ordering
(server carts and multi-caterer orders) and messaging.
"""

from protean.domain import Domain

from caterly.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

caterly = Domain(name="caterly")
