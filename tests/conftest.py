"""Pytest configuration and fixtures."""

from datetime import datetime
from decimal import Decimal

import pytest

from customer_prototype.models import Customer, CustomerType, VipCustomer


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def customer() -> Customer:
    """Regular customer prototype."""
    return Customer(
        customer_id="C001",
        first_name="Ratana",
        last_name="Toch",
        email="ratana@mail.com",
        phone="0123456",
        gender="Male",
        age=22,
        address="Phnom Penh",
        city="Phnom Penh",
        country="Cambodia",
        postal_code="12000",
        customer_type=CustomerType.REGULAR,
        credit_limit=Decimal("1000"),
        active=True,
        created_at=datetime(2026, 1, 1),
        updated_at=datetime(2026, 1, 1),
        username="ratana",
        password="123",
        preferred_language="EN",
        preferred_currency="USD",
    )


@pytest.fixture
def vip_customer() -> VipCustomer:
    """VIP customer prototype."""
    return VipCustomer(
        customer_id="VIP001",
        first_name="Sokha",
        last_name="Chan",
        email="vip@mail.com",
        phone="0987654",
        gender="Female",
        age=25,
        address="Phnom Penh",
        city="Phnom Penh",
        country="Cambodia",
        postal_code="12000",
        credit_limit=Decimal("5000"),
        active=True,
        created_at=datetime(2026, 1, 1),
        updated_at=datetime(2026, 1, 1),
        username="vipuser",
        password="vip123",
        preferred_language="EN",
        preferred_currency="USD",
        vip_level="Gold",
        discount_rate=Decimal("0.15"),
    )
