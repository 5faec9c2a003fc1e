"""Network address generators: IPv4/IPv6 addresses, MAC addresses, netmasks."""

from __future__ import annotations

from collections.abc import Sequence

from fuzzdata.config import TableSettings, get_config
from fuzzdata.sampling import UniformSampler, build_string, get_sampler
from fuzzdata.utils.constants import HEX_DIGITS_LOWER
from fuzzdata.utils.errors import DomainConstraintError, InvalidArgumentError

__all__ = ["gen_ipaddr", "gen_ipaddr_from_ints", "gen_mac", "gen_netmask"]

MAC_DELIMITERS = (":", "-")


def gen_ipaddr(
    ip3: bool = False,
    ipv6: bool = False,
    prefix: Sequence[str] | None = None,
    *,
    sampler: UniformSampler | None = None,
) -> str:
    """Return a random IP address, optionally starting with ``prefix`` fields.

    IPv4 addresses have four decimal fields; ``ip3`` produces three random
    fields followed by a literal ``.0``.  IPv6 addresses have eight 4-digit
    lowercase hex fields.  Prefix fields are copied verbatim, so making sure
    they are valid is up to the caller::

        gen_ipaddr()                      # 65.62.237.168
        gen_ipaddr(ipv6=True)             # 076d:5c0d:6ced:2649:b44b:af26:7b06:8db3
        gen_ipaddr(prefix=["this"])       # this.141.204.179

    Raises :class:`DomainConstraintError` when the prefix fills the whole
    address or is longer than it.
    """

    fields = 8 if ipv6 else 3 if ip3 else 4
    pfx = [str(field) for field in prefix or ()]
    remaining = fields - len(pfx)
    if remaining == 0:
        raise DomainConstraintError(f"Prefix {pfx} would lead to no randomness at all")
    if remaining < 0:
        raise DomainConstraintError(f"Prefix {pfx} is too long for this configuration")

    sampler = sampler or get_sampler()
    if ipv6:
        random_fields = [f"{sampler.in_range(0, 0xFFFF):04x}" for _ in range(remaining)]
        return ":".join(pfx + random_fields)

    random_fields = [str(sampler.in_range(0, 255)) for _ in range(remaining)]
    address = ".".join(pfx + random_fields)
    if ip3:
        address += ".0"
    return address


def gen_ipaddr_from_ints(
    prefix: Sequence[int],
    *,
    ip3: bool = False,
    ipv6: bool = False,
    sampler: UniformSampler | None = None,
) -> str:
    """Like :func:`gen_ipaddr` with integer prefix fields rendered in decimal.

    ``gen_ipaddr_from_ints([10, 3])`` gives e.g. ``10.3.251.78``; with
    ``ipv6=True`` the prefix stays decimal: ``10:3:605d:b501:6cb5:4e1b:736c:f1c8``.
    """

    return gen_ipaddr(ip3, ipv6, [str(int(field)) for field in prefix], sampler=sampler)


def gen_mac(delimiter: str = ":", *, sampler: UniformSampler | None = None) -> str:
    """Return six lowercase hex pairs joined by ``:`` or ``-``."""

    if delimiter not in MAC_DELIMITERS:
        raise InvalidArgumentError(f"MAC delimiter must be ':' or '-', got {delimiter!r}")
    return delimiter.join(build_string(HEX_DIGITS_LOWER, 2, sampler=sampler) for _ in range(6))


def gen_netmask(
    min_cidr: int = 1,
    max_cidr: int = 31,
    *,
    tables: TableSettings | None = None,
    sampler: UniformSampler | None = None,
) -> str:
    """Return a dotted-decimal netmask for a prefix length in ``[min_cidr, max_cidr]``."""

    tables = tables or get_config().tables
    if min_cidr < 0:
        raise InvalidArgumentError(f"min_cidr must be 0 or greater, got {min_cidr}")
    if max_cidr >= len(tables.netmasks) - 1:
        raise InvalidArgumentError(
            f"max_cidr must be < {len(tables.netmasks) - 1}, got {max_cidr}"
        )
    index = (sampler or get_sampler()).in_range(min_cidr, max_cidr)
    return tables.netmasks[index]
