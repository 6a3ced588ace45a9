"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's Pydantic request schemas
(positive prices, star ratings from 1 to 5, comments of at least ten
characters) and the query-string forms the listing understands.
"""

import os
import random
import uuid

import jwt
from faker import Faker

fake = Faker()

API_KEY = os.getenv("API_KEY", "loadtest-api-key")
JWT_SECRET = os.getenv("JWT_SECRET", "loadtest-jwt-secret")


# ---------- Credentials ----------


def access_token(account_type: str | None = None) -> str:
    """Mint a token the API accepts, signed with the shared JWT_SECRET."""
    payload = {"id": str(uuid.uuid4()), "email": fake.unique.email(), "accountType": account_type}
    return jwt.encode(payload, JWT_SECRET, algorithm="HS256")


def headers(token: str | None = None) -> dict:
    result = {"apikey": API_KEY}
    if token:
        result["Authorization"] = f"Bearer {token}"
    return result


# ---------- Catalogue ----------


def product_data() -> dict:
    """Generate CreateProductRequest payload matching schema aliases."""
    dish = fake.word().capitalize()
    return {
        "name": f"{dish} {random.choice(['rice', 'stew', 'soup', 'cake', 'platter'])}"[:255],
        "price": random.choice([1500, 2000, 2500, 4000, 4500, 6000]),
        "countInStock": random.randint(0, 50),
        "description": fake.sentence(nb_words=8),
        "image": fake.image_url(),
        "public_id": f"products/{uuid.uuid4().hex[:12]}",
        "isActive": random.random() > 0.1,
    }


def product_update() -> dict:
    return random.choice(
        [
            {"price": random.choice([1800, 2200, 3900])},
            {"countInStock": random.randint(0, 50)},
            {"isActive": random.choice([True, False])},
        ]
    )


# ---------- Reviews ----------


def review_data() -> dict:
    """Generate ReviewRequest payload; the comment always clears the minimum length."""
    return {
        "rating": random.randint(1, 5),
        "comment": fake.sentence(nb_words=10),
    }


# ---------- Listing filters ----------


def price_ranges() -> str:
    low = random.choice([0, 1000, 2000, 3000])
    if random.random() < 0.3:
        return f"{low}-*"
    ranges = [f"{low}-{low + random.choice([500, 1000, 2000])}"]
    if random.random() < 0.3:
        ranges.append(f"{low + 3000}-*")
    return ",".join(ranges)


def listing_params() -> dict:
    """Generate a random mix of listing filters, sometimes none at all."""
    candidates = {
        "search": random.choice(["rice", "like", "stew", "soup"]),
        "price": price_ranges(),
        "active": random.choice(["true", "false"]),
        "rating": str(random.randint(0, 5)),
        "reviews": random.choice(["1-3", "1-*", "0-0"]),
    }
    keys = random.sample(list(candidates), k=random.randint(0, 3))
    return {key: candidates[key] for key in keys}
