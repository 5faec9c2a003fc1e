from __future__ import annotations

import pytest

from fuzzdata.sampling import UniformSampler, build_range_string, build_string
from fuzzdata.utils.errors import InvalidArgumentError


def test_build_string_length_and_alphabet(seeded: UniformSampler) -> None:
    out = build_string("ab", 40)
    assert len(out) == 40
    assert set(out) <= {"a", "b"}


def test_build_string_multichar_symbols(seeded: UniformSampler) -> None:
    out = build_string(["ab", "cd"], 3)
    assert len(out) == 6


@pytest.mark.parametrize("length", [0, -3])
def test_build_string_rejects_non_positive_length(length: int) -> None:
    with pytest.raises(InvalidArgumentError):
        build_string("abc", length)


def test_build_string_rejects_empty_symbols() -> None:
    with pytest.raises(InvalidArgumentError):
        build_string("", 3)


def test_range_string(seeded: UniformSampler) -> None:
    out = build_range_string(0x41, 0x43, 25)
    assert len(out) == 25
    assert set(out) <= {"A", "B", "C"}


def test_range_string_rejects_empty_range() -> None:
    with pytest.raises(InvalidArgumentError):
        build_range_string(0x50, 0x40, 3)


def test_range_string_rejects_out_of_unicode() -> None:
    with pytest.raises(InvalidArgumentError):
        build_range_string(0x10FFFF, 0x110000, 3)
    with pytest.raises(InvalidArgumentError):
        build_range_string(-1, 10, 3)


def test_range_string_skip_positions(seeded: UniformSampler) -> None:
    out = build_range_string(0x61, 0x7A, 6, skip_positions={1, 3, 99})
    assert len(out) == 4


def test_range_string_all_positions_skipped() -> None:
    with pytest.raises(InvalidArgumentError):
        build_range_string(0x61, 0x7A, 2, skip_positions={0, 1})


def test_range_string_exclude(seeded: UniformSampler) -> None:
    out = build_range_string(0x61, 0x63, 200, exclude={0x62})
    assert len(out) == 200
    assert "b" not in out
    assert set(out) == {"a", "c"}


def test_range_string_never_emits_surrogates(seeded: UniformSampler) -> None:
    out = build_range_string(0xD7FF, 0xE000, 60)
    assert set(out) <= {"\ud7ff", "\ue000"}
    out.encode("utf-8")


def test_range_string_without_usable_codepoints() -> None:
    with pytest.raises(InvalidArgumentError):
        build_range_string(0xD800, 0xDFFF, 1)
    with pytest.raises(InvalidArgumentError):
        build_range_string(0xD7, 0xD7, 1, exclude={0xD7})
