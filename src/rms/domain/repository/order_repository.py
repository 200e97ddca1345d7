"""Abstract repository for the Order aggregate.

Saving an order whose ``id`` is None is the commit point: the repository
assigns the next ID, which finalizes the order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from rms.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Return the ID the next committed order will receive."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every committed order, oldest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Commit a new order or store an updated one."""
