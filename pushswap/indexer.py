"""Ranking numbers by their position in sorted order."""

from __future__ import annotations

from typing import Dict, Iterable, List


def rank_values(values: Iterable[int]) -> List[int]:
    """Return, for each value, its position in the sorted list of all values.

    Equal values share the rank of their first occurrence in sorted order.
    """
    numbers = list(values)
    ranks: Dict[int, int] = {}
    for position, value in enumerate(sorted(numbers)):
        ranks.setdefault(value, position)
    return [ranks[value] for value in numbers]