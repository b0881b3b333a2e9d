"""Driver: build the sample prototypes and clone them."""

import logging
from datetime import datetime
from decimal import Decimal

from customer_prototype.logging import customer_context
from customer_prototype.models import Customer, CustomerType, VipCustomer, VipLevel

logger = logging.getLogger(__name__)


def build_prototypes() -> tuple[Customer, VipCustomer]:
    """Build the regular and VIP sample prototypes."""
    opened = datetime(2026, 1, 1)

    normal_customer = Customer(
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
        created_at=opened,
        updated_at=opened,
        username="ratana",
        password="123",
        preferred_language="EN",
        preferred_currency="USD",
    )

    vip_prototype = VipCustomer(
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
        created_at=opened,
        updated_at=opened,
        username="vipuser",
        password="vip123",
        preferred_language="EN",
        preferred_currency="USD",
        vip_level=VipLevel.GOLD.value,
        discount_rate=Decimal("0.15"),
    )

    return normal_customer, vip_prototype


def main() -> None:
    """Clone the regular prototype once and the VIP prototype twice."""
    normal_customer, vip_prototype = build_prototypes()

    c1 = normal_customer.duplicate()
    v1 = vip_prototype.duplicate()
    v2 = vip_prototype.duplicate()

    for clone in (c1, v1, v2):
        logger.debug(
            "Cloned %s %s",
            type(clone).__name__,
            clone.customer_id,
            extra=customer_context(clone),
        )


if __name__ == "__main__":
    main()
