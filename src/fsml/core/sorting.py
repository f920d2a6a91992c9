"""Canonical FSML ordering.

Numbered entries come first in ascending numeric order, unnumbered
entries follow by name. Paths are compared segment by segment so that
a folder's contents stay grouped directly after the folder itself.
"""

from collections.abc import Iterable
from functools import cmp_to_key

from fsml.core.paths import parse_order
from fsml.core.types import NavNode


# Unnumbered names approximate locale collation rather than raw code-point
# order, so "appendix.md" sorts before "README.md".


def collation_key(text: str) -> tuple[str, str]:
    """Sort key for unnumbered names.

    Case-insensitive first, case breaks ties with lowercase first,
    so "appendix" < "README" and "readme" < "README".
    """
    return text.lower(), text.swapcase()


def _compare_names(a: str, b: str) -> int:
    key_a = collation_key(a)
    key_b = collation_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def _compare_orders(order_a: int | None, order_b: int | None) -> int | None:
    """Compare numeric orders; None when neither side is numbered."""
    if order_a is not None and order_b is not None:
        return order_a - order_b
    if order_a is not None:
        return -1
    if order_b is not None:
        return 1
    return None


def compare_segments(a: str, b: str) -> int:
    """Compare two sibling path segments."""
    if a == b:
        return 0
    by_order = _compare_orders(parse_order(a), parse_order(b))
    if by_order is not None:
        return by_order
    return _compare_names(a, b)


def compare_paths(a: str, b: str) -> int:
    """Compare two relative paths hierarchically.

    The first differing segment decides. When one path is a prefix of
    the other, the shorter (ancestor) path comes first.
    """
    a_parts = a.split("/")
    b_parts = b.split("/")

    for a_part, b_part in zip(a_parts, b_parts):
        if a_part == b_part:
            continue
        return compare_segments(a_part, b_part)

    return len(a_parts) - len(b_parts)


def sort_paths(paths: Iterable[str]) -> list[str]:
    """Sort paths according to FSML rules.

    Stable: paths comparing equal keep their input order.
    """
    return sorted(paths, key=cmp_to_key(compare_paths))


def _compare_nodes(a: NavNode, b: NavNode) -> int:
    by_order = _compare_orders(a.order, b.order)
    if by_order is not None:
        return by_order
    return _compare_names(a.title, b.title)


def sort_nodes(nodes: list[NavNode]) -> None:
    """Sort sibling navigation nodes in place."""
    nodes.sort(key=cmp_to_key(_compare_nodes))
