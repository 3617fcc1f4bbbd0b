from __future__ import annotations
from typing import Iterable, List, Mapping, Optional, Tuple, Union

from huffcodec.errors import BuilderConsumedError
from huffcodec.tree import Leaf, Node, Tree

def _insert_pos(nodes: List[Tuple[Tree, object]], weight) -> int:
    """
    First index whose weight is not greater than `weight` in a list
    sorted by descending weight. A new entry lands ahead of its
    equal-weight peers, so those are merged before it.
    """
    lo, hi = 0, len(nodes)
    while lo < hi:
        mid = (lo + hi) // 2
        if nodes[mid][1] > weight:
            lo = mid + 1
        else:
            hi = mid
    return lo

class HuffBuilder:
    """
    Collects (symbol, weight) pairs, then merges them greedily into a Huffman tree.

    Weights only need `>` and `+`. Symbols are not deduplicated: adding the
    same symbol twice yields two leaves.
    """

    def __init__(self):
        self._pairs: List[Tuple[object, object]] = []
        self._consumed = False

    def _check(self):
        if self._consumed:
            raise BuilderConsumedError("HuffBuilder.build() already called")

    def add(self, symbol, weight) -> "HuffBuilder":
        self._check()
        self._pairs.append((symbol, weight))
        return self

    def add_table(self, table: Union[Mapping, Iterable[Tuple[object, object]]]) -> "HuffBuilder":
        self._check()
        items = table.items() if isinstance(table, Mapping) else table
        for symbol, weight in items:
            self._pairs.append((symbol, weight))
        return self

    def __len__(self):
        return len(self._pairs)

    def build(self) -> Optional[Tree]:
        self._check()
        self._consumed = True
        pairs, self._pairs = self._pairs, []

        # stable: equal weights keep add order
        pairs.sort(key=lambda p: p[1], reverse=True)
        nodes: List[Tuple[Tree, object]] = [(Leaf(s), w) for s, w in pairs]

        while len(nodes) > 1:
            right, w_right = nodes.pop()
            left, w_left = nodes.pop()
            w = w_left + w_right
            nodes.insert(_insert_pos(nodes, w), (Node(left, right), w))

        return nodes[0][0] if nodes else None
