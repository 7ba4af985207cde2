"""Union-find style tracking of cluster ids per vertex."""

from __future__ import annotations

import threading

_MAX_ID = 2**32 - 1


class ClusterIndexError(IndexError):
    """A vertex index lay beyond the size of the structure."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"vertex index {index} out of bounds (0..{length})")
        self.index = index
        self.length = length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClusterIndexError):
            return NotImplemented
        return (self.index, self.length) == (other.index, other.length)

    def __hash__(self) -> int:
        return hash((self.index, self.length))


class ClusterIds:
    """Cluster id per vertex, all starting at 0, with find/union operations."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._ids = [0] * size
        self._lock = threading.RLock()

    @property
    def ids(self) -> list[int]:
        """A copy of the current id of every vertex."""
        with self._lock:
            return list(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def get(self, idx: int) -> int:
        """Current cluster id of vertex ``idx``."""
        if not 0 <= idx < len(self._ids):
            raise ClusterIndexError(idx, len(self._ids))
        return self._ids[idx]

    def set(self, idx: int, value: int) -> None:
        """Set the cluster id of vertex ``idx``."""
        if not 0 <= idx < len(self._ids):
            raise ClusterIndexError(idx, len(self._ids))
        if not 0 <= value <= _MAX_ID:
            raise ValueError(f"cluster id {value} does not fit in 32 bits")
        with self._lock:
            self._ids[idx] = value

    def find(self, idx: int) -> int:
        """Root id of the set holding ``idx``, compressing the path on the way."""
        length = len(self._ids)
        if not 0 <= idx < length:
            raise ClusterIndexError(idx, length)
        with self._lock:
            root = self.get(idx)
            while root < length and root != self.get(root):
                root = self.get(root)
            cur = idx
            while cur != root:
                parent = self.get(cur)
                self.set(cur, root)
                cur = parent
            return root

    def union(self, a: int, b: int) -> int:
        """Merge the sets of ``a`` and ``b``; the larger root id wins."""
        with self._lock:
            ra = self.find(a)
            rb = self.find(b)
            if ra == rb:
                return ra
            small, big = (ra, rb) if ra < rb else (rb, ra)
            self.set(small, big)
            return big

    def compress_all(self) -> int:
        """Point every vertex straight at its root; return the vertex count."""
        count = 0
        for u in range(len(self._ids)):
            self.find(u)
            count += 1
        return count

    def __repr__(self) -> str:
        return f"ClusterIds({self._ids!r})"