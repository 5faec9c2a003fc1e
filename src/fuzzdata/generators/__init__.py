"""Format-constrained generators and the name registry used by the CLI."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any

from .email import gen_email, gen_url
from .identifiers import gen_uuid
from .network import gen_ipaddr, gen_ipaddr_from_ints, gen_mac, gen_netmask
from .text import (
    as_bytes,
    gen_alpha,
    gen_alphanumeric,
    gen_bool,
    gen_choice,
    gen_cjk,
    gen_cyrillic,
    gen_html,
    gen_ipsum,
    gen_latin1,
    gen_numeric_string,
    gen_utf8,
)
from .timestamps import TimeRecord, gen_time


@dataclass(slots=True, frozen=True)
class GeneratorEntry:
    """A named generator; ``takes_length`` marks those accepting ``length``."""

    name: str
    func: Callable[..., Any]
    takes_length: bool = False


REGISTRY: dict[str, GeneratorEntry] = {
    entry.name: entry
    for entry in (
        GeneratorEntry("alpha", gen_alpha, takes_length=True),
        GeneratorEntry("alphanumeric", gen_alphanumeric, takes_length=True),
        GeneratorEntry("numeric", gen_numeric_string, takes_length=True),
        GeneratorEntry("cjk", gen_cjk, takes_length=True),
        GeneratorEntry("cyrillic", gen_cyrillic, takes_length=True),
        GeneratorEntry("latin1", gen_latin1, takes_length=True),
        GeneratorEntry("utf8", gen_utf8, takes_length=True),
        GeneratorEntry("html", gen_html, takes_length=True),
        GeneratorEntry("bool", gen_bool),
        GeneratorEntry("email", gen_email),
        GeneratorEntry("url", gen_url),
        GeneratorEntry("ipv4", gen_ipaddr),
        GeneratorEntry("ipv6", partial(gen_ipaddr, ipv6=True)),
        GeneratorEntry("mac", gen_mac),
        GeneratorEntry("netmask", gen_netmask),
        GeneratorEntry("uuid", gen_uuid),
        GeneratorEntry("ipsum", gen_ipsum),
        GeneratorEntry("time", gen_time),
    )
}


__all__ = [
    "GeneratorEntry",
    "REGISTRY",
    "TimeRecord",
    "as_bytes",
    "gen_alpha",
    "gen_alphanumeric",
    "gen_bool",
    "gen_choice",
    "gen_cjk",
    "gen_cyrillic",
    "gen_email",
    "gen_html",
    "gen_ipaddr",
    "gen_ipaddr_from_ints",
    "gen_ipsum",
    "gen_latin1",
    "gen_mac",
    "gen_netmask",
    "gen_numeric_string",
    "gen_time",
    "gen_url",
    "gen_utf8",
    "gen_uuid",
]
