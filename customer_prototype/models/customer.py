"""Customer record variants."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from decimal import Decimal
from typing import Any

from customer_prototype.exceptions import InvalidPrototypeStateError
from customer_prototype.models.base import Prototype
from customer_prototype.models.enums import CustomerType


@dataclass
class Customer(Prototype):
    """Customer entity used as a prototype for further records."""

    customer_id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    gender: str
    age: int
    address: str
    city: str
    country: str
    postal_code: str
    customer_type: CustomerType
    credit_limit: Decimal
    active: bool
    created_at: datetime
    updated_at: datetime
    username: str
    password: str
    preferred_language: str
    preferred_currency: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def duplicate(self) -> Customer:
        """Return a new ``Customer`` with the same field values.

        Raises
        ------
        InvalidPrototypeStateError
            If called on a subclass that does not override ``duplicate()``.
        """
        if type(self) is not Customer:
            raise InvalidPrototypeStateError(
                f"{type(self).__name__} must override duplicate() to keep its variant"
            )
        return Customer(**self._shared_fields())

    def _shared_fields(self) -> dict[str, Any]:
        """Field block common to every customer variant.

        Every field holds an immutable scalar, so copying the references
        yields a fully independent record.
        """
        return {f.name: getattr(self, f.name) for f in fields(Customer)}


@dataclass
class VipCustomer(Customer):
    """Customer with a VIP tier and discount.

    ``customer_type`` is always ``CustomerType.VIP`` and is not accepted by
    the constructor.
    """

    customer_type: CustomerType = field(default=CustomerType.VIP, init=False)
    vip_level: str
    discount_rate: Decimal  # fraction, e.g. Decimal("0.15")

    def duplicate(self) -> VipCustomer:
        """Return a new ``VipCustomer`` carrying the base and VIP fields.

        Raises
        ------
        InvalidPrototypeStateError
            If ``customer_type`` was changed after construction.
        """
        if self.customer_type != CustomerType.VIP:
            raise InvalidPrototypeStateError(
                f"VIP customer {self.customer_id} has customer_type {self.customer_type!r}"
            )

        shared = self._shared_fields()
        del shared["customer_type"]
        return VipCustomer(
            **shared,
            vip_level=self.vip_level,
            discount_rate=self.discount_rate,
        )
