"""Storefront API package."""

from storefront.api.application import create_app
from storefront.api.routes import product_router

__all__ = ["create_app", "product_router"]
