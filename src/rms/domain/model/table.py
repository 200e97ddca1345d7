"""Table: the reusable resource handed out by the TablePool.

Tables are created once when the pool starts and live as long as the
pool does. The occupied flag is only flipped through pool operations.
"""

from __future__ import annotations

from dataclasses import dataclass

from rms.domain.exceptions import ValidationError


@dataclass(eq=False)
class Table:
    """A restaurant table with a fixed seating capacity.

    Compared by identity: two tables with the same id from different
    pools are different tables.
    """

    id: int
    capacity: int
    occupied: bool = False

    def __post_init__(self) -> None:
        if self.id <= 0:
            raise ValidationError("Table ID must be positive")
        if self.capacity <= 0:
            raise ValidationError("Table capacity must be positive")

    def occupy(self) -> None:
        self.occupied = True

    def vacate(self) -> None:
        self.occupied = False

    def __str__(self) -> str:
        state = "occupied" if self.occupied else "free"
        return f"Table #{self.id} (seats {self.capacity}, {state})"
