"""Random sampling engine: codepoint corpus, uniform draws and string builders."""

from .corpus import UNICODE_LETTERS, UnicodeCorpus, unicode_letters
from .sampler import (
    UniformSampler,
    get_sampler,
    set_sampler,
    uniform_choice,
    uniform_in_range,
    uniform_index,
)
from .strings import build_range_string, build_string

__all__ = [
    "UNICODE_LETTERS",
    "UnicodeCorpus",
    "unicode_letters",
    "UniformSampler",
    "get_sampler",
    "set_sampler",
    "uniform_choice",
    "uniform_in_range",
    "uniform_index",
    "build_range_string",
    "build_string",
]
