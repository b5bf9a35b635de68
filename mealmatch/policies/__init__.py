"""Ordering policies for recipients and volunteers."""

from .base import OrderingPolicy
from .ranking import UrgencyPolicy, ProximityPolicy

__all__ = [
    "OrderingPolicy",
    "UrgencyPolicy",
    "ProximityPolicy",
]
