"""Sorting strategies: fixed sequences for up to five numbers, radix sort beyond."""

from __future__ import annotations

from pushswap.stacks import Stacks


def max_index(stacks: Stacks) -> int:
    """Largest rank on stack ``a``."""
    if not stacks.a:
        raise ValueError("stack a is empty")
    return max(node.index for node in stacks.a)


def radix_pass(stacks: Stacks, bit: int) -> None:
    """Push to ``b`` every element whose rank has ``bit`` clear, then bring them back."""
    for _ in range(len(stacks.a)):
        if (stacks.a[0].index >> bit) & 1:
            stacks.ra()
        else:
            stacks.pb()
    while stacks.b:
        stacks.pa()


def radix_sort(stacks: Stacks) -> int:
    """Sort ``a`` by the bits of its ranks; return the number of passes made."""
    if stacks.is_sorted():
        return 0
    highest = max_index(stacks)
    bit = 0
    while highest >> bit:
        radix_pass(stacks, bit)
        bit += 1
    return bit


def find_min_pos(stacks: Stacks) -> int:
    """Position from the top of ``a`` of the element with the smallest rank."""
    if not stacks.a:
        raise ValueError("stack a is empty")
    min_pos = 0
    min_index = stacks.a[0].index
    for pos, node in enumerate(stacks.a):
        if node.index < min_index:
            min_index = node.index
            min_pos = pos
    return min_pos


def sort_2(stacks: Stacks) -> None:
    """Sort two elements."""
    if stacks.a[0].value > stacks.a[1].value:
        stacks.sa()


def sort_3(stacks: Stacks) -> None:
    """Sort three elements with at most two operations."""
    x, y, z = (node.value for node in list(stacks.a)[:3])
    if x < y > z and z > x:
        stacks.sa()
        stacks.ra()
    elif x > y < z and z > x:
        stacks.sa()
    elif x < y > z and z < x:
        stacks.rra()
    elif x > y < z and z < x:
        stacks.ra()
    elif x > y > z:
        stacks.sa()
        stacks.rra()


def _park_minimum(stacks: Stacks) -> None:
    for _ in range(find_min_pos(stacks)):
        stacks.ra()
    stacks.pb()


def sort_4(stacks: Stacks) -> None:
    """Sort four elements: park the smallest on ``b``, sort three, bring it back."""
    _park_minimum(stacks)
    sort_3(stacks)
    stacks.pa()


def sort_5(stacks: Stacks) -> None:
    """Sort five elements: park the smallest on ``b``, sort four, bring it back."""
    _park_minimum(stacks)
    sort_4(stacks)
    stacks.pa()


def sort_small(stacks: Stacks) -> None:
    """Sort a stack of at most five elements."""
    if stacks.is_sorted():
        return
    strategies = {2: sort_2, 3: sort_3, 4: sort_4, 5: sort_5}
    strategy = strategies.get(len(stacks.a))
    if strategy is not None:
        strategy(stacks)