"""Prototype-based customer records."""

from customer_prototype.exceptions import (
    ConfigurationError,
    DuplicatePrototypeError,
    InvalidPrototypeStateError,
    PrototypeError,
    PrototypeNotFoundError,
    SinkError,
)
from customer_prototype.models import Customer, CustomerType, Prototype, VipCustomer, VipLevel
from customer_prototype.store import PrototypeRegistry

__all__ = [
    "ConfigurationError",
    "Customer",
    "CustomerType",
    "DuplicatePrototypeError",
    "InvalidPrototypeStateError",
    "Prototype",
    "PrototypeError",
    "PrototypeNotFoundError",
    "PrototypeRegistry",
    "SinkError",
    "VipCustomer",
    "VipLevel",
]
