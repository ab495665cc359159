"""Trapped rain water, found by walking from one local peak to the next."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional


def _first_different(index: int, height: Sequence[int], step: int) -> Optional[int]:
    """Height of the nearest bar in direction ``step`` that differs from ``height[index]``."""
    level = height[index]
    position = index + step
    while 0 <= position < len(height):
        if height[position] != level:
            return height[position]
        position += step
    return None


def is_local_maxima(index: int, height: Sequence[int]) -> bool:
    """Whether no bar next to the plateau at ``index`` is taller than it."""
    level = height[index]
    return all(
        neighbour is None or neighbour <= level
        for neighbour in (_first_different(index, height, -1), _first_different(index, height, 1))
    )


def is_local_minima(index: int, height: Sequence[int]) -> bool:
    """Whether no bar next to the plateau at ``index`` is lower than it."""
    level = height[index]
    return all(
        neighbour is None or neighbour >= level
        for neighbour in (_first_different(index, height, -1), _first_different(index, height, 1))
    )


def water_between(index1: int, index2: int, height: Sequence[int]) -> int:
    """Water held from ``index1`` up to, not including, ``index2``.

    The water level is the lower of the two edge bars.
    """
    level = min(height[index1], height[index2])
    return sum(level - bar for bar in height[index1:index2] if bar <= level)


def _find_end_edge(start: int, height: Sequence[int]) -> int:
    """Index of the peak that closes the basin opened at ``start``; 0 if none."""
    past_minimum = False
    best_index = best_height = 0
    for index in range(start, len(height)):
        if not past_minimum:
            past_minimum = is_local_minima(index, height)
        elif is_local_maxima(index, height):
            if height[index] >= height[start]:
                return index
            if height[index] >= best_height:
                best_index, best_height = index, height[index]
    return best_index


def trap(height: Sequence[int]) -> int:
    """Units of rain water held between the bars of an elevation map."""
    heights = list(height)
    if not heights:
        return 0
    start = next(i for i in range(len(heights)) if is_local_maxima(i, heights))
    total = 0
    while (end := _find_end_edge(start, heights)) != 0:
        total += water_between(start, end, heights)
        start = end
    return total