"""Unicode letter corpus.

The corpus is the ordered tuple of every codepoint from ``U+0000`` up to
``U+10FFFF`` that Python classifies as alphabetic (``str.isalpha``).  Scanning
the full scalar range takes a noticeable fraction of a second, so the tuple is
built once on first use and shared read-only for the rest of the process.
Code paths that never touch Unicode generators never pay for the scan.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from time import perf_counter

from fuzzdata.utils.constants import MAX_CODEPOINT
from fuzzdata.utils.logging import get_logger

log = get_logger(__name__)


class UnicodeCorpus:
    """Lazily built, immutable sequence of classified codepoints."""

    def __init__(
        self,
        predicate: Callable[[str], bool] = str.isalpha,
        *,
        max_codepoint: int = MAX_CODEPOINT,
    ) -> None:
        self._predicate = predicate
        self._max_codepoint = max_codepoint
        self._letters: tuple[str, ...] | None = None
        self._lock = threading.Lock()

    @property
    def built(self) -> bool:
        return self._letters is not None

    def letters(self) -> tuple[str, ...]:
        """Return the corpus, scanning the codepoint space on the first call."""

        letters = self._letters
        if letters is None:
            with self._lock:
                if self._letters is None:
                    self._letters = self._scan()
                letters = self._letters
        return letters

    def _scan(self) -> tuple[str, ...]:
        start = perf_counter()
        predicate = self._predicate
        chars = (chr(cp) for cp in range(self._max_codepoint + 1))
        letters = tuple(ch for ch in chars if predicate(ch))
        log.debug(
            "built corpus of %d codepoints in %.1f ms",
            len(letters),
            (perf_counter() - start) * 1000.0,
        )
        return letters


UNICODE_LETTERS = UnicodeCorpus()


def unicode_letters() -> tuple[str, ...]:
    """Return the shared corpus of alphabetic codepoints."""

    return UNICODE_LETTERS.letters()


__all__ = ["UnicodeCorpus", "UNICODE_LETTERS", "unicode_letters"]
