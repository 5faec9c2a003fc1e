from __future__ import annotations

from collections.abc import Iterator

import pytest

from fuzzdata.config import set_config
from fuzzdata.sampling import UniformSampler, set_sampler


@pytest.fixture(autouse=True)
def _reset_globals() -> Iterator[None]:
    yield
    set_config(None)
    set_sampler(None)


@pytest.fixture()
def seeded() -> UniformSampler:
    """Install a fixed-seed process sampler for the test."""

    sampler = UniformSampler(seed=20150101)
    set_sampler(sampler)
    return sampler
