"""Priority queue ordered by an OrderingPolicy."""

import heapq
import itertools
from typing import Generic, Iterable, List, Tuple, TypeVar

from .policies import OrderingPolicy

T = TypeVar('T')


class PriorityQueue(Generic[T]):
    """Min-heap over ``policy.key``.

    The key is computed when an item is pushed, so later changes to the item
    do not reorder the heap. Push the item again after changing it. Items
    with equal keys pop in push order.
    """

    def __init__(self, policy: OrderingPolicy):
        self.policy = policy
        self._heap: List[Tuple[Tuple, int, T]] = []
        self._counter = itertools.count()

    @classmethod
    def from_items(cls, policy: OrderingPolicy, items: Iterable[T]) -> 'PriorityQueue[T]':
        queue = cls(policy)
        queue._heap = [(policy.key(item), next(queue._counter), item) for item in items]
        heapq.heapify(queue._heap)
        return queue

    def push(self, item: T) -> None:
        heapq.heappush(self._heap, (self.policy.key(item), next(self._counter), item))

    def pop(self) -> T:
        """Remove and return the best item.

        Raises:
            IndexError: If the queue is empty
        """
        if not self._heap:
            raise IndexError("pop from an empty PriorityQueue")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> T:
        if not self._heap:
            raise IndexError("peek at an empty PriorityQueue")
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"PriorityQueue(policy={self.policy!r}, n={len(self)})"
