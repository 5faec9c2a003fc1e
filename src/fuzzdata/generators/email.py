"""E-mail address and URL generators.

Domains and TLDs are drawn from the configured tables so generated values
stay inside reserved example namespaces such as ``example.com``.
"""

from __future__ import annotations

from fuzzdata.config import TableSettings, get_config
from fuzzdata.sampling import UniformSampler, uniform_choice

from .text import gen_alpha

__all__ = ["gen_email", "gen_url"]

NAME_LENGTH = 8


def gen_email(
    name: str | None = None,
    domain: str | None = None,
    tld: str | None = None,
    *,
    tables: TableSettings | None = None,
    sampler: UniformSampler | None = None,
) -> str:
    """Return ``name@domain.tld`` filling each empty part at random.

    >>> gen_email(domain="qazeso")  # doctest: +SKIP
    'sRISqUvc@qazeso.gov'
    """

    tables = tables or get_config().tables
    if not name:
        name = gen_alpha(NAME_LENGTH, sampler=sampler)
    if not domain:
        domain = uniform_choice(tables.subdomains, sampler=sampler)
    if not tld:
        tld = uniform_choice(tables.tlds, sampler=sampler)
    return f"{name}@{domain}.{tld}"


def gen_url(
    extended: bool = False,
    *,
    tables: TableSettings | None = None,
    sampler: UniformSampler | None = None,
) -> str:
    """Return ``scheme://subdomain.tld``.

    With ``extended`` the scheme comes from the larger ``extended_schemes`` table.
    """

    tables = tables or get_config().tables
    schemes = tables.extended_schemes if extended else tables.schemes
    scheme = uniform_choice(schemes, sampler=sampler)
    subdomain = uniform_choice(tables.subdomains, sampler=sampler)
    tld = uniform_choice(tables.tlds, sampler=sampler)
    return f"{scheme}://{subdomain}.{tld}"
