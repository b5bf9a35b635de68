"""Entities exchanged between callers and the allocator."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


def check_units(name: str, value: int) -> None:
    # bool is an int subclass but never a unit count
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


class BatchStatus(str, Enum):
    """Where a batch stands after (or before) an allocation run."""

    UNASSIGNED = "unassigned"
    PARTIAL = "partial"
    ASSIGNED = "assigned"


@dataclass
class Recipient:
    """A place that can absorb food units.

    Attributes:
        id: Recipient identifier
        name: Display name
        capacity: Units it can still absorb (mutated by the allocator)
        urgency: Priority rank, higher is more urgent
        distance: Distance from the donor, lower is nearer
    """
    id: int
    name: str
    capacity: int
    urgency: int
    distance: float

    def __post_init__(self) -> None:
        check_units("capacity", self.capacity)
        if self.capacity < 0:
            raise ValueError(
                f"Recipient {self.id} capacity must be >= 0, got {self.capacity}"
            )
        if not self.distance >= 0:
            raise ValueError(
                f"Recipient {self.id} distance must be >= 0, got {self.distance}"
            )

    @property
    def has_capacity(self) -> bool:
        return self.capacity > 0


@dataclass
class Volunteer:
    """A person who can deliver one batch share per run."""
    id: int
    name: str
    distance: float
    available: bool = True

    def __post_init__(self) -> None:
        if not self.distance >= 0:
            raise ValueError(
                f"Volunteer {self.id} distance must be >= 0, got {self.distance}"
            )


@dataclass
class MealBatch:
    """A donation of food units waiting to be distributed.

    ``quantity`` is decremented in place by the allocator. ``assigned`` only
    becomes True once the whole batch has been handed out.

    Examples:
        batch = MealBatch(id=1001, donor_id=501, quantity=20,
                          donor_location='HostelCanteen')
        allocate(batch, recipients, volunteers)
        batch.status  # BatchStatus.ASSIGNED / PARTIAL / UNASSIGNED
    """
    id: int
    donor_id: int
    quantity: int
    donor_location: str = ''
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    assigned: bool = False
    initial_quantity: int = field(init=False)

    def __post_init__(self) -> None:
        check_units("quantity", self.quantity)
        if self.quantity <= 0:
            raise ValueError(
                f"Batch {self.id} quantity must be > 0, got {self.quantity}"
            )
        self.initial_quantity = self.quantity

    @property
    def allocated(self) -> int:
        """Units handed out so far."""
        return self.initial_quantity - self.quantity

    @property
    def status(self) -> BatchStatus:
        if self.assigned:
            return BatchStatus.ASSIGNED
        if self.quantity == self.initial_quantity:
            return BatchStatus.UNASSIGNED
        return BatchStatus.PARTIAL


@dataclass(frozen=True)
class Assignment:
    """One delivery: ``quantity`` units of a batch, to a recipient, via a volunteer."""
    batch_id: int
    volunteer_id: int
    recipient_id: int
    quantity: int
