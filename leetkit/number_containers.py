"""A store of numbers at indices that finds the smallest index holding a number."""

from __future__ import annotations

import heapq


class NumberContainers:
    """Maps indices to numbers and answers the smallest index for a number."""

    def __init__(self) -> None:
        self._number_at: dict[int, int] = {}
        self._indices_of: dict[int, list[int]] = {}

    def change(self, index: int, number: int) -> None:
        """Put ``number`` at ``index``, replacing whatever was there."""
        if self._number_at.get(index) == number:
            return
        self._number_at[index] = number
        heapq.heappush(self._indices_of.setdefault(number, []), index)

    def find(self, number: int) -> int:
        """Smallest index holding ``number``, or -1 if no index holds it."""
        heap = self._indices_of.get(number)
        if heap is None:
            return -1
        while heap:
            index = heap[0]
            if self._number_at[index] == number:
                return index
            heapq.heappop(heap)
        del self._indices_of[number]
        return -1