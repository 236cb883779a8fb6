"""The skyline formed by a set of rectangular buildings."""

from __future__ import annotations

import heapq
from collections import Counter
from typing import Optional, Sequence

_LEFT = 0
_RIGHT = 1


def get_skyline(buildings: Sequence[Sequence[int]]) -> list[list[int]]:
    """Key points ``[x, height]`` of the outline of ``[left, right, height]`` buildings.

    Each key point marks where the outline's height changes. The last point of
    each separate stretch of buildings drops to height 0.
    """
    events: list[tuple[int, int, int]] = []
    for building in buildings:
        if len(building) != 3:
            raise ValueError("each building must be [left, right, height]")
        left, right, height = building
        # Left edges come before right edges at the same x; taller left edges
        # first, lower right edges first.
        events.append((left, _LEFT, -height))
        events.append((right, _RIGHT, height))
    events.sort()

    active: Counter[int] = Counter()
    tallest_heap: list[int] = []

    def tallest() -> Optional[int]:
        while tallest_heap and active[-tallest_heap[0]] == 0:
            heapq.heappop(tallest_heap)
        return -tallest_heap[0] if tallest_heap else None

    skyline: list[list[int]] = []
    for x, side, key in events:
        height = -key if side == _LEFT else key
        before = tallest()

        if side == _LEFT:
            if active[height] == 0:
                heapq.heappush(tallest_heap, -height)
            active[height] += 1
        elif active[height] > 0:
            active[height] -= 1
        after = tallest()

        if before is None or height > before:
            valid = True
        elif height < before:
            valid = False
        else:
            valid = side == _RIGHT and after != height

        if valid:
            if side == _LEFT:
                skyline.append([x, height])
            else:
                skyline.append([x, 0 if after is None else after])
    return skyline