"""Faker-based data generators for Locust load test scenarios.

Each generator produces a camelCase payload that passes the API's request
schemas and the Review aggregate's invariants.
"""

import random

from faker import Faker

from reviews.review.review import ProductType, Quality

fake = Faker()


def product_name() -> str:
    return f"{fake.company()} {fake.word().title()}"[:200]


def stars() -> int:
    # Skewed towards positive reviews, as real traffic is
    return random.choices([1, 2, 3, 4, 5], weights=[1, 1, 2, 4, 5])[0]


def product_review_data() -> dict:
    """SubmitReviewRequest payload."""
    payload = {
        "productName": product_name(),
        "stars": stars(),
        "description": fake.paragraph(nb_sentences=3),
        "boughtFromUrl": fake.url(),
    }
    if random.random() < 0.3:
        payload["imageUrl"] = fake.image_url()
    return payload


def mobile_number() -> str:
    """Matches the aggregate's phone format: digits, spaces, dashes, parens."""
    return f"+1-{random.randint(200, 999)}-{random.randint(200, 999)}-{random.randint(1000, 9999)}"


def mobile_review_data() -> dict:
    """SubmitMobileReviewRequest payload."""
    return {
        "productName": product_name(),
        "stars": stars(),
        "productType": random.choice(list(ProductType)).value,
        "productQuality": random.choice(list(Quality)).value,
        "serviceQuality": random.choice(list(Quality)).value,
        "wouldRecommend": random.random() < 0.75,
        "description": fake.sentence(),
        "customerName": fake.name()[:100],
        "mobileNumber": mobile_number(),
    }
