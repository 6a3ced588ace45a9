"""Schema management for relational persistence providers."""

from protean.domain import Domain
from sqlalchemy import create_engine

_RELATIONAL_PROVIDERS = ("sqlite", "postgresql")


def _relational_providers(domain: Domain):
    for _, provider in domain.providers.items():
        if provider.conn_info["provider"] in _RELATIONAL_PROVIDERS:
            yield provider


def _persisted_classes(domain: Domain):
    """Product and its Review entity, plus anything else registered for persistence."""
    records = list(domain.registry.aggregates.values()) + list(domain.registry.entities.values())
    return [record.cls for record in records]


def setup_db(domain: Domain):
    """Create tables on every relational provider.

    Table metadata is only registered once a DAO exists, so each persisted
    class is touched through its repository before ``create_all``.
    """
    with domain.domain_context():
        for provider in _relational_providers(domain):
            for cls in _persisted_classes(domain):
                if cls.meta_.provider == provider.name:
                    domain.repository_for(cls)._dao  # noqa: B018

            provider._metadata.create_all(create_engine(provider.conn_info["database_uri"]))


def drop_db(domain: Domain):
    """Drop all tables registered on relational providers"""
    with domain.domain_context():
        for provider in _relational_providers(domain):
            provider._metadata.drop_all(create_engine(provider.conn_info["database_uri"]))
