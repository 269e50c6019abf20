"""Randomized, fixed-order pool of interchangeable API hosts."""

import random
from collections.abc import Iterable, Iterator

from .exceptions import AlgoliaConstructionError


class HostPool:
    """Immutable, randomly ordered list of candidate hosts.

    The order is shuffled once at construction from the given random source
    and replayed unchanged by every iteration for the lifetime of the pool.
    Different pools spread load differently; a single pool is stable.

    Usage:
        pool = HostPool(["a.example.com", "b.example.com"])
        for host in pool:
            ...

        # Deterministic order for tests
        pool = HostPool(hosts, rng=random.Random(42))
    """

    __slots__ = ("_hosts",)

    def __init__(self, hosts: Iterable[str] | None, rng: random.Random | None = None):
        """Build the pool.

        Args:
            hosts: Candidate host names (duplicates are collapsed)
            rng: Random source for the shuffle (a fresh Random() if None)

        Raises:
            AlgoliaConstructionError: If hosts is None or empty
        """
        if hosts is None:
            raise AlgoliaConstructionError("hosts", "At least one host is required.")
        if isinstance(hosts, str):
            hosts = [hosts]

        unique = list(dict.fromkeys(hosts))
        if not unique:
            raise AlgoliaConstructionError("hosts", "At least one host is required.")

        (rng or random.Random()).shuffle(unique)
        self._hosts: tuple[str, ...] = tuple(unique)

    @property
    def hosts(self) -> tuple[str, ...]:
        """Hosts in their frozen iteration order."""
        return self._hosts

    def __iter__(self) -> Iterator[str]:
        return iter(self._hosts)

    def __len__(self) -> int:
        return len(self._hosts)

    def __repr__(self) -> str:
        return f"HostPool({list(self._hosts)!r})"
