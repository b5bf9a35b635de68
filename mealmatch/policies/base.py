"""Base class for ordering policies."""

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Tuple


class OrderingPolicy(ABC):
    """Base class for ordering policies.

    A policy maps an item to a sort key. Smaller keys are served first, so a
    policy can be used directly as the key of a min-heap.
    """

    @abstractmethod
    def key(self, item: Any) -> Tuple:
        """Compute the sort key of an item.

        Args:
            item: Entity to rank

        Returns:
            Tuple compared lexicographically, smallest first
        """
        pass

    def __call__(self, items: Iterable[Any]) -> List[Any]:
        """Rank items, best first. Equal keys keep their input order."""
        return sorted(items, key=self.key)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
