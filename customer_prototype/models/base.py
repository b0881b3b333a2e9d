"""Prototype base shared by all record variants."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Prototype(ABC):
    """An object that produces independent copies of itself.

    Subclasses override ``duplicate()`` at their own level so a clone keeps
    the concrete variant of its source. ``copy.copy`` and ``copy.deepcopy``
    are routed through ``duplicate()`` for the same reason.
    """

    @abstractmethod
    def duplicate(self) -> Prototype:
        """Return a new, independent instance equal to this one."""

    def __copy__(self) -> Prototype:
        return self.duplicate()

    def __deepcopy__(self, memo: dict[int, Any]) -> Prototype:
        return self.duplicate()
