"""Schema management for caterly's SQL-backed databases.

The default configuration keeps accounts, recipes, carts, orders, messages
and the ``CatererOrders`` projection in Protean's memory provider, where both
functions below do nothing. When a database under
``[tool.protean.databases]`` points at sqlite or postgresql, they create or
drop the tables of every element persisted there.
"""

from protean.domain import Domain
from sqlalchemy import create_engine

SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    return [provider for _, provider in domain.providers.items() if provider.conn_info["provider"] in SQL_PROVIDERS]


def _persisted_elements(domain: Domain, provider_name: str):
    for registry in (domain.registry.aggregates, domain.registry.entities, domain.registry.projections):
        for _, record in registry.items():
            if record.cls.meta_.provider == provider_name:
                yield record.cls


def setup_db(domain: Domain) -> list[str]:
    """Create tables on every SQL database. Returns the provider names touched."""
    touched = []
    with domain.domain_context():
        for provider in _sql_providers(domain):
            # Building the DAO maps the element onto the provider's metadata
            for element in _persisted_elements(domain, provider.name):
                domain.repository_for(element)._dao  # noqa: B018
            provider._metadata.create_all(create_engine(provider.conn_info["database_uri"]))
            touched.append(provider.name)
    return touched


def drop_db(domain: Domain) -> list[str]:
    """Drop tables on every SQL database. Returns the provider names touched."""
    touched = []
    with domain.domain_context():
        for provider in _sql_providers(domain):
            provider._metadata.drop_all(create_engine(provider.conn_info["database_uri"]))
            touched.append(provider.name)
    return touched
