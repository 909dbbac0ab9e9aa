"""Shared payload fixtures for regform tests."""

import pytest

DESCRIPTION = (
    "Seasonal wedding florals, arches and table pieces designed around "
    "each couple's palette and venue."
)


def user_payload() -> dict:
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "password": "supersecret",
        "confirmPassword": "supersecret",
    }


def vendor_payload() -> dict:
    return {
        **user_payload(),
        "businessName": "Bloom & Petal",
        "category": "florist",
        "servicesOffered": ["design_consultation"],
        "description": DESCRIPTION,
        "experience": 3,
        "pricing": {"currency": "USD", "basePrice": 1500, "pricingModel": "hourly"},
        "contact": {"phone": "+1 555 0100", "website": "https://bloomandpetal.example"},
    }


def planner_payload() -> dict:
    return {
        **user_payload(),
        "companyName": "Ever After Events",
        "experienceYears": 5,
        "specialties": ["luxury_weddings", "destination_weddings"],
        "description": DESCRIPTION,
        "certifications": ["certified_wedding_planner"],
        "pricing": {"consultationFee": 150, "packagePricing": "fixed"},
        "contact": {"phone": "+1 555 0199"},
    }


PAYLOADS = {
    "user": user_payload,
    "vendor": vendor_payload,
    "wedding_planner": planner_payload,
}


@pytest.fixture
def valid_user_data() -> dict:
    return user_payload()


@pytest.fixture
def valid_vendor_data() -> dict:
    return vendor_payload()


@pytest.fixture
def valid_planner_data() -> dict:
    return planner_payload()


@pytest.fixture
def payload_for():
    """Return a fresh valid payload for a role."""
    def build(role: str) -> dict:
        return PAYLOADS[role]()

    return build
