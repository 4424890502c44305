"""
Disjoint-set (union-find) over dense integer indices.

Kruskal and Borůvka build one of these per call, index vertices 0..n-1 and
throw it away afterwards; it never becomes part of the graph's state.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21 (Data Structures for Disjoint Sets).
"""

import numpy as np


class DisjointSet:
    """
    Union-Find with path compression and union by rank.

    Attributes:
        parent: Integer array, parent[i] is the parent index of element i.
        rank: Integer array of upper bounds on tree heights.

    Complexity: near-constant amortized time per operation
    (inverse Ackermann).
    """

    def __init__(self, n: int):
        """
        Initialize n singleton components.

        Args:
            n: Number of elements.

        Raises:
            ValueError: If n is negative.
        """
        if n < 0:
            raise ValueError(f"Number of elements must be non-negative, got {n}")
        self.parent = np.arange(n, dtype=np.int64)
        self.rank = np.zeros(n, dtype=np.int64)

    def __len__(self) -> int:
        return int(self.parent.shape[0])

    def find(self, x: int) -> int:
        """
        Find the root of x, compressing the path on the way back.

        Args:
            x: Element index.

        Returns:
            Index of the root of x's component.
        """
        root = x
        while self.parent[root] != root:
            root = int(self.parent[root])

        while self.parent[x] != root:
            nxt = int(self.parent[x])
            self.parent[x] = root
            x = nxt

        return root

    def union(self, a: int, b: int) -> bool:
        """
        Merge the components containing a and b using union by rank.

        Args:
            a: First element index.
            b: Second element index.

        Returns:
            True if a merge happened, False if a and b were already
            in the same component.
        """
        a = self.find(a)
        b = self.find(b)
        if a == b:
            return False

        if self.rank[a] < self.rank[b]:
            a, b = b, a
        self.parent[b] = a
        if self.rank[a] == self.rank[b]:
            self.rank[a] += 1
        return True

    def connected(self, a: int, b: int) -> bool:
        """Return True if a and b are in the same component."""
        return self.find(a) == self.find(b)

    def roots(self) -> np.ndarray:
        """
        Return the root of every element at once.

        Follows parent pointers for all elements together until nothing
        moves, then stores the result so every path is fully compressed.

        Returns:
            Integer array, roots[i] is the root index of element i.
        """
        roots = self.parent.copy()
        while True:
            nxt = self.parent[roots]
            if np.array_equal(nxt, roots):
                break
            roots = nxt
        self.parent[:] = roots
        return roots

    def component_count(self) -> int:
        """Return the number of distinct components."""
        return int(np.unique(self.roots()).shape[0])
