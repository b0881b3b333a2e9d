"""Tests for PrototypeRegistry."""

import logging
from dataclasses import replace
from decimal import Decimal

import pytest

from customer_prototype.exceptions import (
    DuplicatePrototypeError,
    InvalidPrototypeStateError,
    PrototypeNotFoundError,
)
from customer_prototype.models import Customer, VipCustomer
from customer_prototype.store import PrototypeRegistry


@pytest.fixture
def registry(customer: Customer, vip_customer: VipCustomer) -> PrototypeRegistry:
    """Registry holding one regular and one VIP prototype."""
    store = PrototypeRegistry()
    store.register("regular", customer)
    store.register("vip", vip_customer)
    return store


class TestRegister:
    """Tests for registering prototypes."""

    def test_register(self, registry: PrototypeRegistry) -> None:
        assert len(registry) == 2
        assert "regular" in registry
        assert "vip" in registry
        assert registry.names() == ["regular", "vip"]

    def test_register_logs_customer_context(
        self, vip_customer: VipCustomer, caplog: pytest.LogCaptureFixture
    ) -> None:
        store = PrototypeRegistry()

        with caplog.at_level(logging.DEBUG, logger="customer_prototype"):
            store.register("vip", vip_customer)

        record = caplog.records[-1]
        assert record.customer_id == "VIP001"
        assert record.variant == "VipCustomer"
        assert record.prototype == "vip"

    def test_duplicate_name_rejected(
        self, registry: PrototypeRegistry, customer: Customer
    ) -> None:
        other = replace(customer, customer_id="C999")

        with pytest.raises(DuplicatePrototypeError, match="regular"):
            registry.register("regular", other)

    def test_replace_existing_name(
        self, registry: PrototypeRegistry, customer: Customer
    ) -> None:
        other = replace(customer, customer_id="C999")
        registry.register("regular", other, replace=True)

        assert registry.get("regular") is other
        # The old customer ID is free again
        registry.register("again", customer)
        assert len(registry) == 3

    def test_replace_same_prototype(
        self, registry: PrototypeRegistry, customer: Customer
    ) -> None:
        registry.register("regular", customer, replace=True)
        assert registry.get("regular") is customer

    def test_duplicate_customer_id_rejected(
        self, registry: PrototypeRegistry, customer: Customer
    ) -> None:
        with pytest.raises(DuplicatePrototypeError, match="C001"):
            registry.register("copy-of-regular", customer.duplicate())

        assert "copy-of-regular" not in registry

    def test_unregister(self, registry: PrototypeRegistry, customer: Customer) -> None:
        removed = registry.unregister("regular")

        assert removed is customer
        assert "regular" not in registry
        registry.register("regular-2", customer)

    def test_unregister_after_customer_id_changed(
        self, registry: PrototypeRegistry, customer: Customer
    ) -> None:
        registry.get("regular").customer_id = "C777"

        removed = registry.unregister("regular")

        assert removed is customer
        assert "regular" not in registry
        registry.register("regular", replace(customer, customer_id="C001"))

    def test_replace_after_customer_id_changed(
        self, registry: PrototypeRegistry, customer: Customer
    ) -> None:
        registry.get("regular").customer_id = "C777"
        other = replace(customer, customer_id="C888")

        registry.register("regular", other, replace=True)

        assert registry.get("regular") is other

    def test_changed_customer_id_still_unique(
        self, registry: PrototypeRegistry, customer: Customer
    ) -> None:
        """Uniqueness follows the registered prototype's current ID."""
        customer.customer_id = "C777"

        with pytest.raises(DuplicatePrototypeError, match="C777"):
            registry.register("other", customer.duplicate())

        # The ID it had at registration time is free again
        registry.register("old-id", replace(customer, customer_id="C001"))
        assert sorted(p.customer_id for p in registry.prototypes.values()) == [
            "C001",
            "C777",
            "VIP001",
        ]

    def test_unregister_unknown(self, registry: PrototypeRegistry) -> None:
        with pytest.raises(PrototypeNotFoundError):
            registry.unregister("missing")

    def test_get_unknown(self, registry: PrototypeRegistry) -> None:
        with pytest.raises(PrototypeNotFoundError, match="missing"):
            registry.get("missing")


class TestClone:
    """Tests for cloning registered prototypes."""

    def test_clone_regular(self, registry: PrototypeRegistry, customer: Customer) -> None:
        clone = registry.clone("regular")

        assert type(clone) is Customer
        assert clone == customer
        assert clone is not customer

    def test_clone_vip(self, registry: PrototypeRegistry) -> None:
        clone = registry.clone("vip")

        assert isinstance(clone, VipCustomer)
        assert clone.customer_type == "VIP"
        assert clone.vip_level == "Gold"

    def test_clone_with_overrides(
        self, registry: PrototypeRegistry, vip_customer: VipCustomer
    ) -> None:
        clone = registry.clone("vip", customer_id="VIP002", discount_rate=Decimal("0.20"))

        assert isinstance(clone, VipCustomer)
        assert clone.customer_id == "VIP002"
        assert clone.discount_rate == Decimal("0.20")
        assert clone.customer_type == "VIP"
        assert vip_customer.customer_id == "VIP001"
        assert vip_customer.discount_rate == Decimal("0.15")

    def test_clone_unknown_field(self, registry: PrototypeRegistry) -> None:
        with pytest.raises(InvalidPrototypeStateError):
            registry.clone("regular", nickname="rat")

    def test_clone_cannot_override_vip_type(self, registry: PrototypeRegistry) -> None:
        with pytest.raises(InvalidPrototypeStateError):
            registry.clone("vip", customer_type="Regular")

    def test_clone_unknown_prototype(self, registry: PrototypeRegistry) -> None:
        with pytest.raises(PrototypeNotFoundError):
            registry.clone("missing")

    def test_clone_batch(self, registry: PrototypeRegistry) -> None:
        clones = list(registry.clone_batch("vip", 3))

        assert len(clones) == 3
        assert len({id(c) for c in clones}) == 3
        assert all(isinstance(c, VipCustomer) for c in clones)

    def test_clone_batch_with_overrides(self, registry: PrototypeRegistry) -> None:
        clones = list(registry.clone_batch("regular", 2, city="Siem Reap"))

        assert [c.city for c in clones] == ["Siem Reap", "Siem Reap"]
        assert registry.get("regular").city == "Phnom Penh"

    def test_mutating_prototype_changes_later_clones(
        self, registry: PrototypeRegistry
    ) -> None:
        before = registry.clone("regular")
        registry.get("regular").credit_limit = Decimal("3000")
        after = registry.clone("regular")

        assert before.credit_limit == Decimal("1000")
        assert after.credit_limit == Decimal("3000")
