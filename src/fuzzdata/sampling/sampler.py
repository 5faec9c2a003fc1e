"""Uniform sampling primitives.

Every random draw in the package goes through a :class:`UniformSampler`.  A
process-wide default sampler is created lazily and seeded from
``sampling.seed`` of the active configuration (OS entropy when unset).
Installing a different sampler with :func:`set_sampler` changes every
generator at once, which is how tests obtain deterministic output.

Draws are serialized with a lock so a sampler can be shared between threads.
The randomness is not cryptographic.
"""

from __future__ import annotations

import random
import threading
from collections.abc import Iterable, Sequence
from typing import TypeVar

from fuzzdata.config import get_config
from fuzzdata.utils.errors import InvalidArgumentError
from fuzzdata.utils.logging import get_logger

T = TypeVar("T")

log = get_logger(__name__)


class UniformSampler:
    """Thread-safe wrapper around a :class:`random.Random` instance."""

    def __init__(self, rng: random.Random | None = None, *, seed: int | None = None) -> None:
        if rng is not None and seed is not None:
            raise InvalidArgumentError("pass either rng or seed, not both")
        self._rng = rng if rng is not None else random.Random(seed)
        self._lock = threading.Lock()

    def reseed(self, seed: int | None) -> None:
        """Re-seed the underlying generator in place."""

        with self._lock:
            self._rng.seed(seed)
        log.debug("sampler reseeded (seeded=%s)", seed is not None)

    def index(self, n: int) -> int:
        """Return an integer in ``[0, n)``."""

        if n <= 0:
            raise InvalidArgumentError(f"cannot pick an index below {n}")
        with self._lock:
            return self._rng.randrange(n)

    def in_range(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]`` inclusive."""

        if high < low:
            raise InvalidArgumentError(f"empty range [{low}, {high}]")
        with self._lock:
            return self._rng.randint(low, high)

    def choice(self, symbols: Iterable[T]) -> T:
        """Return one element of ``symbols`` with equal probability."""

        if not isinstance(symbols, Sequence):
            symbols = tuple(symbols)
        if len(symbols) == 0:
            raise InvalidArgumentError("cannot choose from an empty collection")
        if len(symbols) == 1:
            return symbols[0]
        return symbols[self.index(len(symbols))]


_default: UniformSampler | None = None
_default_lock = threading.Lock()


def get_sampler() -> UniformSampler:
    """Return the process-wide sampler, creating it on first use."""

    global _default
    sampler = _default
    if sampler is None:
        with _default_lock:
            if _default is None:
                seed = get_config().sampling.seed
                _default = UniformSampler(seed=seed)
                log.debug("created default sampler (seeded=%s)", seed is not None)
            sampler = _default
    return sampler


def set_sampler(sampler: UniformSampler | None) -> None:
    """Install ``sampler`` as the process default; ``None`` recreates it lazily."""

    global _default
    with _default_lock:
        _default = sampler


def uniform_index(n: int, *, sampler: UniformSampler | None = None) -> int:
    return (sampler or get_sampler()).index(n)


def uniform_in_range(low: int, high: int, *, sampler: UniformSampler | None = None) -> int:
    return (sampler or get_sampler()).in_range(low, high)


def uniform_choice(symbols: Iterable[T], *, sampler: UniformSampler | None = None) -> T:
    return (sampler or get_sampler()).choice(symbols)


__all__ = [
    "UniformSampler",
    "get_sampler",
    "set_sampler",
    "uniform_index",
    "uniform_in_range",
    "uniform_choice",
]
