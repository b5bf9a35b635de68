"""Greedy batch allocation."""

import logging
from typing import List, Optional

from .data import Assignment, MealBatch, check_units
from .policies import OrderingPolicy, UrgencyPolicy, ProximityPolicy
from .queue import PriorityQueue
from .stores import RecipientStore, VolunteerStore

logger = logging.getLogger(__name__)


class Allocator:
    """Distributes one batch over recipients, one volunteer per delivery.

    Each step takes the top recipient under ``recipient_policy``, gives it
    as many units as it can absorb (bounded by what is left of the batch),
    and sends the top volunteer under ``volunteer_policy``. A recipient that
    still has capacity afterwards goes back into the queue. A volunteer is
    used at most once per run.

    The run stops when the batch is exhausted, when no recipient has
    capacity left, or when no volunteer is left. The last two leave the
    batch partially assigned; that is a normal outcome, not an error.

    The caller owns the batch and both stores and must not touch them
    while ``allocate`` runs.
    """

    def __init__(
        self,
        recipient_policy: Optional[OrderingPolicy] = None,
        volunteer_policy: Optional[OrderingPolicy] = None,
    ):
        """Initialize allocator.

        Args:
            recipient_policy: Recipient order (default: UrgencyPolicy)
            volunteer_policy: Volunteer order (default: ProximityPolicy)
        """
        self.recipient_policy = recipient_policy or UrgencyPolicy()
        self.volunteer_policy = volunteer_policy or ProximityPolicy()

    def allocate(
        self,
        batch: MealBatch,
        recipients: RecipientStore,
        volunteers: VolunteerStore,
    ) -> List[Assignment]:
        """Allocate a batch and mutate batch and stores in place.

        Args:
            batch: Batch to distribute. ``quantity`` is left at the undelivered
                remainder and ``assigned`` is set once it reaches 0.
            recipients: Recipient store. Capacities are decremented.
            volunteers: Volunteer store. Used volunteers become unavailable.

        Returns:
            Assignments in the order they were made

        Raises:
            ValueError: If the batch quantity or a capacity is invalid.
                Nothing is mutated in that case.
        """
        self._validate(batch, recipients, volunteers)

        recipient_queue = PriorityQueue.from_items(
            self.recipient_policy, recipients.with_capacity()
        )
        volunteer_queue = PriorityQueue.from_items(
            self.volunteer_policy, volunteers.available()
        )

        assignments: List[Assignment] = []
        remaining = batch.quantity

        while remaining > 0 and recipient_queue:
            recipient = recipient_queue.pop()
            give = min(remaining, recipient.capacity)

            if not volunteer_queue:
                logger.warning(
                    "No volunteers available; batch %s pending for remaining %d units",
                    batch.id, remaining,
                )
                break

            volunteer = volunteer_queue.pop()
            assignments.append(Assignment(
                batch_id=batch.id,
                volunteer_id=volunteer.id,
                recipient_id=recipient.id,
                quantity=give,
            ))

            remaining -= give
            recipient.capacity -= give
            volunteer.available = False
            logger.debug(
                "Assigned %d units of batch %s to recipient %s via volunteer %s",
                give, batch.id, recipient.id, volunteer.id,
            )

            if recipient.capacity > 0:
                recipient_queue.push(recipient)

        if remaining == 0:
            batch.quantity = 0
            batch.assigned = True
            logger.info("Batch %s fully assigned", batch.id)
        else:
            batch.quantity = remaining
            logger.info("Batch %s partially assigned, remaining: %d", batch.id, remaining)

        return assignments

    def _validate(
        self,
        batch: MealBatch,
        recipients: RecipientStore,
        volunteers: VolunteerStore,
    ) -> None:
        if not isinstance(recipients, RecipientStore):
            raise TypeError("recipients must be a RecipientStore")
        if not isinstance(volunteers, VolunteerStore):
            raise TypeError("volunteers must be a VolunteerStore")

        check_units("batch quantity", batch.quantity)
        if batch.assigned:
            raise ValueError(f"Batch {batch.id} is already fully assigned")
        if batch.quantity <= 0:
            raise ValueError(
                f"Batch {batch.id} quantity must be > 0, got {batch.quantity}"
            )

        # Capacities may have been edited since construction
        for recipient in recipients:
            check_units("capacity", recipient.capacity)
            if recipient.capacity < 0:
                raise ValueError(
                    f"Recipient {recipient.id} capacity must be >= 0, got {recipient.capacity}"
                )

    def __repr__(self) -> str:
        return (
            f"Allocator(recipient_policy={self.recipient_policy!r}, "
            f"volunteer_policy={self.volunteer_policy!r})"
        )


def allocate(
    batch: MealBatch,
    recipients: RecipientStore,
    volunteers: VolunteerStore,
) -> List[Assignment]:
    """Allocate a batch with the default urgency and proximity orders.

    See ``Allocator.allocate``.
    """
    return Allocator().allocate(batch, recipients, volunteers)
