"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared across users.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks a simulated shopper and the products they have reviewed."""

    token: str | None = None
    seen_product_ids: list[str] = field(default_factory=list)
    reviewed_product_ids: list[str] = field(default_factory=list)


@dataclass
class AdminState:
    """Tracks the products a simulated admin has created."""

    token: str | None = None
    product_ids: list[str] = field(default_factory=list)
