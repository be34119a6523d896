"""Disjoint-set (union-find) over integer ids ``0..n-1``.

Weighted union keeps trees O(log n) tall; path halving in ``root`` shortens
them further on every lookup. Sizes are only kept current at roots: once an
element is absorbed into another tree its recorded size is never touched
again, and ``roots_above`` filters on those recorded values as they stand.
"""

from __future__ import annotations

from numbers import Integral

from shapefinder.errors import InvalidArgumentError, OutOfRangeError


class DisjointSet:
    """Union-find with weighted union and path compression.

    Example:
        >>> ds = DisjointSet(4)
        >>> ds.union(0, 1)
        >>> ds.union(1, 2)
        >>> ds.connected(0, 2)
        True
        >>> ds.connected(0, 3)
        False
    """

    def __init__(self, n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidArgumentError(f"Element count must be an int, got {n!r}")
        if n < 0:
            raise InvalidArgumentError(f"Element count must be >= 0, got {n}")
        self._n = n
        self._parent: list[int] = list(range(n))
        self._size: list[int] = [1] * n

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"DisjointSet(n={self._n})"

    def _check(self, i: int) -> None:
        if isinstance(i, bool) or not isinstance(i, Integral):
            raise OutOfRangeError(f"Element id must be an int, got {i!r}")
        if not 0 <= i < self._n:
            raise OutOfRangeError(f"Element {i} outside [0, {self._n})")

    def root(self, i: int) -> int:
        """Return the representative of the tree containing ``i``."""
        self._check(i)
        parent = self._parent
        while i != parent[i]:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    def union(self, p: int, q: int) -> None:
        """Merge the trees containing ``p`` and ``q``.

        The smaller tree goes under the larger one's root. On a tie ``q``'s
        root is attached under ``p``'s.
        """
        self._check(p)
        self._check(q)
        i = self.root(p)
        j = self.root(q)
        if i == j:
            return
        if self._size[i] < self._size[j]:
            self._parent[i] = j
            self._size[j] += self._size[i]
        else:
            self._parent[j] = i
            self._size[i] += self._size[j]

    def connected(self, p: int, q: int) -> bool:
        self._check(p)
        self._check(q)
        return self.root(p) == self.root(q)

    def size_of(self, i: int) -> int:
        """Size of the whole tree containing ``i`` (read from its root)."""
        return self._size[self.root(i)]

    def roots_above(self, threshold: int) -> set[int]:
        """Roots reached from every index whose recorded size exceeds ``threshold``.

        Recorded sizes of absorbed elements are stale, so this is a filter on
        what each index last held rather than a recount of final tree sizes.
        """
        roots: set[int] = set()
        for i in range(self._n):
            if self._size[i] > threshold:
                roots.add(self.root(i))
        return roots

    def tree_count(self, threshold: int) -> int:
        """Number of distinct trees reported by ``roots_above(threshold)``."""
        return len(self.roots_above(threshold))

    def members(self, node: int) -> list[int]:
        """All ids in ``node``'s tree, in ascending order."""
        root_node = self.root(node)
        if root_node == node and self._size[node] == 1:
            return [root_node]
        return [i for i in range(self._n) if self.root(i) == root_node]
