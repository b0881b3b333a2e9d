"""In-memory catalogue of named prototypes."""

from customer_prototype.store.prototypes import PrototypeRegistry

__all__ = ["PrototypeRegistry"]
