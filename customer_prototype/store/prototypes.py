"""Registry of named customer prototypes."""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Iterator

from customer_prototype.exceptions import (
    DuplicatePrototypeError,
    InvalidPrototypeStateError,
    PrototypeNotFoundError,
)
from customer_prototype.logging import customer_context
from customer_prototype.models import Customer

logger = logging.getLogger(__name__)


@dataclass
class PrototypeRegistry:
    """In-memory store of prototypes keyed by name.

    Clones are produced with ``duplicate()`` on the stored prototype, so a
    registered ``VipCustomer`` always yields ``VipCustomer`` clones.
    """

    prototypes: dict[str, Customer] = field(default_factory=dict)

    def register(self, name: str, prototype: Customer, *, replace: bool = False) -> None:
        """Register a prototype under ``name``.

        Uniqueness is checked against the current ``customer_id`` of every
        registered prototype, since ``get()`` hands out the stored objects
        and callers may change them.

        Raises
        ------
        DuplicatePrototypeError
            If ``name`` is taken and ``replace`` is false, or if another
            prototype already uses the same ``customer_id``.
        """
        if name in self.prototypes and not replace:
            raise DuplicatePrototypeError(f"Prototype {name!r} already registered")

        owner = self._owner_of(prototype.customer_id, exclude=name)
        if owner is not None:
            raise DuplicatePrototypeError(
                f"Customer ID {prototype.customer_id} already used by prototype {owner!r}"
            )

        self.prototypes[name] = prototype
        logger.debug(
            "Registered prototype %s",
            name,
            extra=customer_context(prototype, prototype=name),
        )

    def unregister(self, name: str) -> Customer:
        """Remove and return the prototype registered under ``name``."""
        prototype = self.get(name)
        del self.prototypes[name]
        return prototype

    def _owner_of(self, customer_id: str, exclude: str) -> str | None:
        """Name of another prototype using ``customer_id``, if any."""
        return next(
            (
                n
                for n, p in self.prototypes.items()
                if p.customer_id == customer_id and n != exclude
            ),
            None,
        )

    def get(self, name: str) -> Customer:
        """Get the registered prototype itself (not a clone)."""
        try:
            return self.prototypes[name]
        except KeyError:
            raise PrototypeNotFoundError(f"Prototype {name!r} not found") from None

    def clone(self, name: str, **overrides: Any) -> Customer:
        """Duplicate the named prototype and apply field overrides to the clone.

        Parameters
        ----------
        name : str
            Registered prototype name.
        **overrides
            Field values to set on the clone, e.g. ``customer_id="C002"``.

        Returns
        -------
        Customer
            A new record of the same variant as the prototype.

        Raises
        ------
        PrototypeNotFoundError
            If ``name`` is not registered.
        InvalidPrototypeStateError
            If an override names an unknown or fixed field.
        """
        copy = self.get(name).duplicate()
        if not overrides:
            return copy

        try:
            return dataclasses.replace(copy, **overrides)
        except (TypeError, ValueError) as exc:
            raise InvalidPrototypeStateError(
                f"Cannot apply overrides {sorted(overrides)} to prototype {name!r}: {exc}"
            ) from exc

    def clone_batch(self, name: str, count: int, **overrides: Any) -> Iterator[Customer]:
        """Yield ``count`` independent clones of the named prototype."""
        for _ in range(count):
            yield self.clone(name, **overrides)

    def names(self) -> list[str]:
        """Registered prototype names in registration order."""
        return list(self.prototypes)

    def __contains__(self, name: object) -> bool:
        return name in self.prototypes

    def __len__(self) -> int:
        return len(self.prototypes)
