"""Plain and Unicode string generators.

Fixed-alphabet strings (letters, digits, alphanumerics), strings drawn from
Unicode blocks (CJK, Cyrillic, Latin-1 supplement) or from the full letter
corpus, small HTML fragments and Lorem Ipsum paragraphs.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from fuzzdata.config import TableSettings, get_config
from fuzzdata.sampling import (
    UniformSampler,
    build_range_string,
    build_string,
    uniform_choice,
    unicode_letters,
)
from fuzzdata.utils.constants import (
    ASCII_LETTERS,
    ASCII_LOWER,
    CJK_RANGE,
    CYRILLIC_RANGE,
    DIGITS,
    LATIN1_EXCLUDED,
    LATIN1_RANGE,
)
from fuzzdata.utils.errors import InvalidArgumentError

T = TypeVar("T")

__all__ = [
    "gen_choice",
    "gen_bool",
    "gen_alpha",
    "gen_alphanumeric",
    "gen_numeric_string",
    "gen_cjk",
    "gen_cyrillic",
    "gen_latin1",
    "gen_utf8",
    "gen_html",
    "gen_ipsum",
    "as_bytes",
]


def gen_choice(choices: Iterable[T], *, sampler: UniformSampler | None = None) -> T:
    """Return a random item from ``choices``."""

    return uniform_choice(choices, sampler=sampler)


def gen_bool(*, sampler: UniformSampler | None = None) -> bool:
    return uniform_choice((True, False), sampler=sampler)


def gen_alpha(length: int = 10, *, sampler: UniformSampler | None = None) -> str:
    """Return ``length`` ASCII letters of mixed case."""

    return build_string(ASCII_LETTERS, length, sampler=sampler)


def gen_alphanumeric(
    length: int = 10, *, lowercase: bool = False, sampler: UniformSampler | None = None
) -> str:
    """Return ``length`` ASCII letters and digits.

    With ``lowercase`` only lowercase letters are drawn alongside the digits.
    """

    letters = ASCII_LOWER if lowercase else ASCII_LETTERS
    return build_string(letters + DIGITS, length, sampler=sampler)


def gen_numeric_string(length: int = 10, *, sampler: UniformSampler | None = None) -> str:
    return build_string(DIGITS, length, sampler=sampler)


def gen_cjk(length: int = 10, *, sampler: UniformSampler | None = None) -> str:
    """Return ``length`` CJK unified ideographs, e.g. ``鍖磎仓鰀襓被澙齪``."""

    return build_range_string(*CJK_RANGE, length, sampler=sampler)


def gen_cyrillic(length: int = 10, *, sampler: UniformSampler | None = None) -> str:
    """Return ``length`` Cyrillic characters, e.g. ``ЋӅДӈҧ``."""

    return build_range_string(*CYRILLIC_RANGE, length, sampler=sampler)


def gen_latin1(length: int = 10, *, sampler: UniformSampler | None = None) -> str:
    """Return ``length`` Latin-1 supplement letters, e.g. ``ãÄñäÒûÿßôü``.

    The multiplication and division signs in the middle of the block are never
    produced.
    """

    return build_range_string(*LATIN1_RANGE, length, exclude=LATIN1_EXCLUDED, sampler=sampler)


def gen_utf8(length: int = 10, *, sampler: UniformSampler | None = None) -> str:
    """Return ``length`` characters drawn from every alphabetic codepoint.

    CJK ideographs dominate the corpus so they dominate the output as well.
    """

    return build_string(unicode_letters(), length, sampler=sampler)


def gen_html(
    length: int = 10,
    *,
    tables: TableSettings | None = None,
    sampler: UniformSampler | None = None,
) -> str:
    """Return ``<tag>payload</tag>`` with a random tag and alphabetic payload."""

    tables = tables or get_config().tables
    tag = uniform_choice(tables.html_tags, sampler=sampler)
    payload = gen_alpha(length, sampler=sampler)
    return f"<{tag}>{payload}</{tag}>"


def _capitalize(fragment: str) -> str:
    # str.capitalize would lowercase the remainder
    return fragment[:1].upper() + fragment[1:]


def gen_ipsum(
    words: int | None = None,
    paragraphs: int = 1,
    *,
    tables: TableSettings | None = None,
) -> str:
    """Return ``paragraphs`` lines of Lorem Ipsum with ``words`` words each.

    The source text is repeated as often as needed and cut into consecutive
    chunks.  A trailing comma and then a trailing period are dropped from each
    chunk, every ``". "``-separated fragment gets an upper-case first letter and
    the fragments are joined back with single spaces.  ``words`` defaults to the
    number of words in the source text.  Each paragraph ends with a newline.
    """

    tables = tables or get_config().tables
    source = tables.lorem_ipsum.split(" ")
    if words is None:
        words = len(source)
    if words <= 0 or paragraphs <= 0:
        raise InvalidArgumentError(
            f"words and paragraphs must be positive, got {words} and {paragraphs}"
        )

    total = words * paragraphs
    copies = -(-total // len(source))
    all_words = source * copies

    out: list[str] = []
    for start in range(0, total, words):
        sentence = " ".join(all_words[start : start + words])
        if sentence.endswith(","):
            sentence = sentence[:-1]
        if sentence.endswith("."):
            sentence = sentence[:-1]
        fragments = [_capitalize(frag) for frag in sentence.split(". ")]
        out.append(" ".join(fragments) + "\n")
    return "".join(out)


def as_bytes(value: str) -> bytes:
    """Return the UTF-8 bytes of a generated string, e.g. for raw-input fuzzing."""

    return value.encode("utf-8")
