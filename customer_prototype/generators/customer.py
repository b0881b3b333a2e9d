"""Customer prototype generators."""

from __future__ import annotations

import random
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Any, Iterator

from customer_prototype.generators.base import BaseGenerator
from customer_prototype.models import Customer, CustomerType, VipCustomer, VipLevel

# Preferred currency by Faker locale; anything else falls back to USD
LOCALE_CURRENCIES = {
    "en_US": "USD",
    "en_GB": "GBP",
    "pt_BR": "BRL",
    "de_DE": "EUR",
    "fr_FR": "EUR",
    "es_ES": "EUR",
    "ja_JP": "JPY",
}


class CustomerGenerator(BaseGenerator):
    """Generate synthetic regular customers."""

    GENDERS = ["Male", "Female"]
    CREDIT_LIMIT_RANGE = (500, 5000)
    AGE_RANGE = (18, 80)

    def generate(self) -> Customer:
        """Generate a single customer.

        Returns
        -------
        Customer
            Generated customer.
        """
        return Customer(
            customer_type=CustomerType.REGULAR,
            credit_limit=self._credit_limit(self.CREDIT_LIMIT_RANGE),
            **self._shared_fields(),
        )

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate multiple customers.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        Customer
            Generated customers.
        """
        for _ in range(count):
            yield self.generate()

    def _shared_fields(self) -> dict[str, Any]:
        """Fields common to every customer variant, except type and credit limit."""
        gender = random.choice(self.GENDERS)
        if gender == "Male":
            first_name = self.fake.first_name_male()
        else:
            first_name = self.fake.first_name_female()
        last_name = self.fake.last_name()

        # Created within the last 5 years, updated some time after
        days_ago = random.randint(0, 5 * 365)
        created_at = datetime.now().replace(microsecond=0) - timedelta(days=days_ago)
        updated_at = created_at + timedelta(days=random.randint(0, days_ago))

        return {
            "customer_id": self.fake.uuid4(),
            "first_name": first_name,
            "last_name": last_name,
            "email": self.fake.email(),
            "phone": self.fake.phone_number(),
            "gender": gender,
            "age": random.randint(*self.AGE_RANGE),
            "address": self.fake.street_address(),
            "city": self.fake.city(),
            "country": self.fake.current_country_code(),
            "postal_code": self.fake.postcode(),
            "active": random.random() < 0.9,
            "created_at": created_at,
            "updated_at": updated_at,
            "username": self.fake.user_name(),
            "password": self.fake.password(length=12),
            "preferred_language": self.locale.split("_")[0].upper(),
            "preferred_currency": LOCALE_CURRENCIES.get(self.locale, "USD"),
        }

    @staticmethod
    def _credit_limit(bounds: tuple[int, int]) -> Decimal:
        # Whole hundreds, like limits issued by a card desk
        return Decimal(random.randint(bounds[0] // 100, bounds[1] // 100) * 100)


class VipCustomerGenerator(CustomerGenerator):
    """Generate synthetic VIP customers."""

    VIP_LEVELS = list(VipLevel)
    VIP_WEIGHTS = [0.60, 0.30, 0.10]

    # Credit limit and discount range by tier
    CREDIT_LIMIT_RANGES = {
        VipLevel.SILVER: (5000, 10000),
        VipLevel.GOLD: (10000, 25000),
        VipLevel.PLATINUM: (25000, 100000),
    }
    DISCOUNT_RANGES = {
        VipLevel.SILVER: (Decimal("0.05"), Decimal("0.10")),
        VipLevel.GOLD: (Decimal("0.10"), Decimal("0.20")),
        VipLevel.PLATINUM: (Decimal("0.20"), Decimal("0.30")),
    }

    def generate(self) -> VipCustomer:
        """Generate a single VIP customer.

        Returns
        -------
        VipCustomer
            Generated VIP customer.
        """
        level = random.choices(self.VIP_LEVELS, weights=self.VIP_WEIGHTS, k=1)[0]
        low, high = self.DISCOUNT_RANGES[level]
        # Discount in whole percentage points
        discount = Decimal(random.randint(int(low * 100), int(high * 100))) / 100

        return VipCustomer(
            credit_limit=self._credit_limit(self.CREDIT_LIMIT_RANGES[level]),
            vip_level=level.value,
            discount_rate=discount,
            **self._shared_fields(),
        )

    def generate_batch(self, count: int) -> Iterator[VipCustomer]:
        """Generate multiple VIP customers."""
        for _ in range(count):
            yield self.generate()
