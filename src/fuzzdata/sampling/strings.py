"""Fixed-length string builders.

:func:`build_string` concatenates draws from an explicit symbol set.
:func:`build_range_string` draws integer codepoints from ``[low, high]``
instead and decodes each one.  Surrogates and any ``exclude`` codepoints are
never emitted; a draw landing on one is simply redrawn.  ``skip_positions``
names output offsets that are left out of the result entirely.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence

from fuzzdata.utils.constants import MAX_CODEPOINT, SURROGATES, is_surrogate
from fuzzdata.utils.errors import InvalidArgumentError

from .sampler import UniformSampler, get_sampler


def _check_length(length: int) -> None:
    if length <= 0:
        raise InvalidArgumentError(f"length must be positive, got {length}")


def build_string(
    symbols: Sequence[str], length: int, *, sampler: UniformSampler | None = None
) -> str:
    """Return ``length`` symbols drawn independently from ``symbols``."""

    _check_length(length)
    if len(symbols) == 0:
        raise InvalidArgumentError("symbol set is empty")
    sampler = sampler or get_sampler()
    return "".join(sampler.choice(symbols) for _ in range(length))


def _emittable(low: int, high: int, exclude: Collection[int]) -> int:
    """Count codepoints in ``[low, high]`` that may appear in output."""

    total = high - low + 1
    s_low, s_high = max(low, SURROGATES[0]), min(high, SURROGATES[1])
    if s_low <= s_high:
        total -= s_high - s_low + 1
    total -= sum(1 for cp in set(exclude) if low <= cp <= high and not is_surrogate(cp))
    return total


def build_range_string(
    low: int,
    high: int,
    length: int,
    *,
    skip_positions: Collection[int] = (),
    exclude: Collection[int] = (),
    sampler: UniformSampler | None = None,
) -> str:
    """Return a string of codepoints drawn uniformly from ``[low, high]``."""

    _check_length(length)
    if high < low:
        raise InvalidArgumentError(f"empty codepoint range [{low:#x}, {high:#x}]")
    if low < 0 or high > MAX_CODEPOINT:
        raise InvalidArgumentError(f"codepoint range [{low:#x}, {high:#x}] outside Unicode")
    if _emittable(low, high, exclude) == 0:
        raise InvalidArgumentError(f"no usable codepoints in [{low:#x}, {high:#x}]")
    positions = [i for i in range(length) if i not in skip_positions]
    if not positions:
        raise InvalidArgumentError("every position is skipped")

    sampler = sampler or get_sampler()
    out: list[str] = []
    for _ in positions:
        cp = sampler.in_range(low, high)
        while is_surrogate(cp) or cp in exclude:
            cp = sampler.in_range(low, high)
        out.append(chr(cp))
    return "".join(out)


__all__ = ["build_string", "build_range_string"]
