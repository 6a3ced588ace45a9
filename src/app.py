"""Storefront FastAPI application.

Web server that processes catalogue and review commands synchronously via HTTP.
Requests under ``/api`` run inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from storefront.api.application import create_app
from storefront.domain import storefront

# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml.
storefront.init()

app = create_app()
