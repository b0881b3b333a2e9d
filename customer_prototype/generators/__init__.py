"""Faker-driven generators for customer prototypes."""

from customer_prototype.generators.customer import CustomerGenerator, VipCustomerGenerator

__all__ = ["CustomerGenerator", "VipCustomerGenerator"]
