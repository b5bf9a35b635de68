"""Meal Match - greedy allocation of donated food batches to recipients."""

from .data import Assignment, BatchStatus, MealBatch, Recipient, Volunteer
from .stores import RecipientStore, VolunteerStore
from .policies import OrderingPolicy, UrgencyPolicy, ProximityPolicy
from .queue import PriorityQueue
from .allocator import Allocator, allocate

__all__ = [
    # Core
    "Allocator",
    "allocate",
    # Data
    "Recipient",
    "Volunteer",
    "MealBatch",
    "Assignment",
    "BatchStatus",
    # Stores
    "RecipientStore",
    "VolunteerStore",
    # Policies
    "OrderingPolicy",
    "UrgencyPolicy",
    "ProximityPolicy",
    "PriorityQueue",
]

__version__ = "0.1.0"
