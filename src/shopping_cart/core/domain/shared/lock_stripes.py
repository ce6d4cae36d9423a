from __future__ import annotations

import threading
from typing import Hashable


class LockStripes:
    """A fixed pool of locks selected by key hash.

    Updates to the same key always serialize on the same lock, while unrelated
    keys usually land on different stripes and do not contend.
    """

    def __init__(self, stripes: int = 16) -> None:
        if stripes < 1:
            raise ValueError("stripes must be >= 1")
        self._locks = tuple(threading.Lock() for _ in range(stripes))

    def __len__(self) -> int:
        return len(self._locks)

    def index_for(self, key: Hashable) -> int:
        return hash(key) % len(self._locks)

    def for_key(self, key: Hashable) -> threading.Lock:
        return self._locks[self.index_for(key)]
