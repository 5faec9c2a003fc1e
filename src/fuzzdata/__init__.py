"""fuzzdata: randomized, format-constrained values for fuzzing input handling.

Every draw goes through one process-wide :class:`~fuzzdata.sampling.UniformSampler`
so a seeded sampler installed with :func:`~fuzzdata.sampling.set_sampler`
makes all generators reproducible within a process.
"""

import logging

from .utils.logging import ROOT_LOGGER

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())

from .generators import (  # noqa: E402
    TimeRecord,
    as_bytes,
    gen_alpha,
    gen_alphanumeric,
    gen_bool,
    gen_choice,
    gen_cjk,
    gen_cyrillic,
    gen_email,
    gen_html,
    gen_ipaddr,
    gen_ipaddr_from_ints,
    gen_ipsum,
    gen_latin1,
    gen_mac,
    gen_netmask,
    gen_numeric_string,
    gen_time,
    gen_url,
    gen_utf8,
    gen_uuid,
)
from .sampling import UniformSampler, get_sampler, set_sampler  # noqa: E402
from .utils.errors import (  # noqa: E402
    DomainConstraintError,
    FuzzDataError,
    InvalidArgumentError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DomainConstraintError",
    "FuzzDataError",
    "InvalidArgumentError",
    "TimeRecord",
    "UniformSampler",
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
    "get_sampler",
    "set_sampler",
]
