import pytest
import structlog


@pytest.fixture(scope="session")
def storefront_domain():
    """The storefront domain, initialized once for the session.

    PROTEAN_ENV is already set by ``pytest_sessionstart``, so the overlay from
    domain.toml is in effect by the time the domain is imported.
    """
    from storefront.domain import storefront

    storefront.init()
    return storefront


@pytest.fixture(scope="session", autouse=True)
def database(storefront_domain):
    from storefront.utils.db import drop_db, setup_db

    setup_db(storefront_domain)
    yield
    drop_db(storefront_domain)


@pytest.fixture(autouse=True)
def run_around_tests(storefront_domain):
    """Run each test inside the domain context and leave no data behind."""
    with storefront_domain.domain_context():
        yield

        for _, provider in storefront_domain.providers.items():
            provider._data_reset()
        storefront_domain.event_store.store._data_reset()

    structlog.contextvars.clear_contextvars()
