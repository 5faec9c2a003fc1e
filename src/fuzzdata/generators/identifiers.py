"""UUID-shaped identifier generator."""

from __future__ import annotations

from fuzzdata.sampling import UniformSampler, build_string, get_sampler
from fuzzdata.utils.constants import HEX_DIGITS_LOWER

__all__ = ["gen_uuid"]

VERSION_NIBBLES = "12345"
VARIANT_NIBBLES = "89ab"


def gen_uuid(valid: bool = True, *, sampler: UniformSampler | None = None) -> str:
    """Return five hyphen-joined lowercase hex groups of length 8-4-4-4-12.

    With ``valid`` the third group starts with a plausible version nibble and
    the fourth with an RFC 4122 variant nibble.  Nothing else is checked, so
    the result is not guaranteed to be a real UUID of that version.
    """

    sampler = sampler or get_sampler()

    def hexs(length: int) -> str:
        return build_string(HEX_DIGITS_LOWER, length, sampler=sampler)

    part1 = hexs(8)
    part2 = hexs(4)
    if valid:
        part3 = sampler.choice(VERSION_NIBBLES) + hexs(3)
        part4 = sampler.choice(VARIANT_NIBBLES) + hexs(3)
    else:
        part3 = hexs(4)
        part4 = hexs(4)
    part5 = hexs(12)
    return "-".join([part1, part2, part3, part4, part5])
