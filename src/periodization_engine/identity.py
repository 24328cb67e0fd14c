"""Identity sources for mesocycles and sessions.

Ids are assigned by the engine before the plan leaves it, so persistence
can store them as-is. Identities are opaque strings.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from collections import defaultdict


class IdentitySource(ABC):
    """Produces unique ids for a given prefix."""

    @abstractmethod
    def next_id(self, prefix: str) -> str:
        ...


class CounterIdentitySource(IdentitySource):
    """Deterministic ``prefix_1``, ``prefix_2``, … counted per prefix.

    Not thread-safe; use one instance per generate() call or per thread.
    """

    def __init__(self) -> None:
        self._counters: defaultdict[str, int] = defaultdict(int)

    def next_id(self, prefix: str) -> str:
        self._counters[prefix] += 1
        return f"{prefix}_{self._counters[prefix]}"


class UuidIdentitySource(IdentitySource):
    """``prefix_<uuid4 hex>``; the default for production use."""

    def next_id(self, prefix: str) -> str:
        return f"{prefix}_{uuid.uuid4().hex}"
