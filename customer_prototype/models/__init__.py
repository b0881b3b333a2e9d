"""Customer record models."""

from customer_prototype.models.base import Prototype
from customer_prototype.models.customer import Customer, VipCustomer
from customer_prototype.models.enums import CustomerType, VipLevel

__all__ = ["Customer", "CustomerType", "Prototype", "VipCustomer", "VipLevel"]
