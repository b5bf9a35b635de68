"""Recipient and volunteer selection orders."""

from typing import Tuple

from .base import OrderingPolicy
from ..data import Recipient, Volunteer


class UrgencyPolicy(OrderingPolicy):
    """Most urgent recipient first, nearer recipient on equal urgency.

    Examples:
        policy = UrgencyPolicy()
        policy([r1, r2, r3])  # [most urgent, ..., least urgent]
    """

    def key(self, item: Recipient) -> Tuple[int, float]:
        return (-item.urgency, item.distance)


class ProximityPolicy(OrderingPolicy):
    """Nearest volunteer first."""

    def key(self, item: Volunteer) -> Tuple[float]:
        return (item.distance,)
