"""Schema management for RDBMS-backed providers (sqlite, postgresql).

The in-memory provider needs no schema; these helpers skip it.
"""

from protean.domain import Domain
from sqlalchemy import create_engine

_RDBMS_PROVIDERS = ("sqlite", "postgresql")


def _rdbms_providers(domain: Domain):
    for _, provider in domain.providers.items():
        if provider.conn_info["provider"] in _RDBMS_PROVIDERS:
            yield provider


def _register_models(domain: Domain, provider) -> None:
    """Touch each repository's DAO so its SQLAlchemy model joins the metadata."""
    registries = (
        domain.registry.aggregates,
        domain.registry.entities,
        domain.registry.projections,
    )
    for registry in registries:
        for _, record in registry.items():
            if record.cls.meta_.provider == provider.name:
                domain.repository_for(record.cls)._dao  # noqa: B018


def setup_db(domain: Domain) -> None:
    """Create tables for the Review aggregate and its read models."""
    with domain.domain_context():
        for provider in _rdbms_providers(domain):
            _register_models(domain, provider)
            provider._metadata.create_all(create_engine(provider.conn_info["database_uri"]))


def drop_db(domain: Domain) -> None:
    with domain.domain_context():
        for provider in _rdbms_providers(domain):
            provider._metadata.drop_all(create_engine(provider.conn_info["database_uri"]))
