from __future__ import annotations

from typing import List


class DisjointSet:
    """Disjoint Set Union (Union-Find) over the dense index universe [0, n).

    Operations are nearly O(1) amortized with path compression + union by rank.
    """

    def __init__(self, n: int = 0):
        self.parent: List[int] = []
        self.rank: List[int] = []
        self.make_set(n)

    def make_set(self, n: int) -> None:
        """(Re)initialize to n singleton sets, discarding any previous state."""
        if n < 0:
            raise ValueError(f"Set size cannot be negative: {n}")
        self.parent = list(range(n))
        self.rank = [0] * n

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self.parent):
            raise IndexError(f"Index {x} outside disjoint-set universe [0, {len(self.parent)})")

    def find(self, x: int) -> int:
        self._check(x)
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        # compress
        while self.parent[x] != root:
            nxt = self.parent[x]
            self.parent[x] = root
            x = nxt
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of a and b. Returns False if they were already connected."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.rank[ra] < self.rank[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        if self.rank[ra] == self.rank[rb]:
            self.rank[ra] += 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def components(self) -> int:
        return sum(1 for i, p in enumerate(self.parent) if i == p)
