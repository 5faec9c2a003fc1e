from __future__ import annotations

import re
import string

import pytest

from fuzzdata import (
    as_bytes,
    gen_alpha,
    gen_alphanumeric,
    gen_bool,
    gen_choice,
    gen_cjk,
    gen_cyrillic,
    gen_html,
    gen_latin1,
    gen_numeric_string,
    gen_utf8,
)
from fuzzdata.config import load_config
from fuzzdata.sampling import UniformSampler
from fuzzdata.utils.errors import InvalidArgumentError


@pytest.mark.parametrize("length", [1, 2, 10, 257])
def test_alpha_length_and_alphabet(seeded: UniformSampler, length: int) -> None:
    out = gen_alpha(length)
    assert len(out) == length
    assert set(out) <= set(string.ascii_letters)


def test_default_lengths(seeded: UniformSampler) -> None:
    for gen in (gen_alpha, gen_alphanumeric, gen_numeric_string, gen_cjk, gen_cyrillic, gen_latin1):
        assert len(gen()) == 10


def test_alphanumeric(seeded: UniformSampler) -> None:
    out = gen_alphanumeric(300)
    assert set(out) <= set(string.ascii_letters + string.digits)
    lower = gen_alphanumeric(300, lowercase=True)
    assert set(lower) <= set(string.ascii_lowercase + string.digits)


def test_numeric_string(seeded: UniformSampler) -> None:
    assert re.fullmatch(r"\d{25}", gen_numeric_string(25))


@pytest.mark.parametrize(
    "gen",
    [gen_alpha, gen_alphanumeric, gen_numeric_string, gen_cjk, gen_cyrillic, gen_latin1, gen_utf8],
)
def test_non_positive_length_rejected(gen: object) -> None:
    with pytest.raises(InvalidArgumentError):
        gen(0)  # type: ignore[operator]


def test_cjk_range(seeded: UniformSampler) -> None:
    out = gen_cjk(50)
    assert len(out) == 50
    assert all(0x4E00 <= ord(ch) <= 0x9FCC for ch in out)


def test_cyrillic_range(seeded: UniformSampler) -> None:
    out = gen_cyrillic(50)
    assert all(0x0400 <= ord(ch) <= 0x04FF for ch in out)


def test_latin1_skips_math_signs(seeded: UniformSampler) -> None:
    out = gen_latin1(400)
    assert len(out) == 400
    assert all(0x00C0 <= ord(ch) <= 0x00FF for ch in out)
    assert "×" not in out and "÷" not in out


def test_utf8_letters(seeded: UniformSampler) -> None:
    out = gen_utf8(20)
    assert len(out) == 20
    assert all(ch.isalpha() for ch in out)


def test_bool(seeded: UniformSampler) -> None:
    assert {gen_bool() for _ in range(100)} == {True, False}


def test_choice(seeded: UniformSampler) -> None:
    assert gen_choice(["solo"]) == "solo"
    assert gen_choice(("a", "b", "c")) in {"a", "b", "c"}
    with pytest.raises(InvalidArgumentError):
        gen_choice([])


def test_html(seeded: UniformSampler) -> None:
    tags = set(load_config().tables.html_tags)
    for _ in range(20):
        m = re.fullmatch(r"<(\w+)>([A-Za-z]{7})</(\w+)>", gen_html(7))
        assert m is not None
        assert m.group(1) == m.group(3)
        assert m.group(1) in tags


def test_html_custom_tags(seeded: UniformSampler) -> None:
    tables = load_config().tables.model_copy(update={"html_tags": ["blink"]})
    assert gen_html(3, tables=tables).startswith("<blink>")


def test_html_rejects_non_positive_length() -> None:
    with pytest.raises(InvalidArgumentError):
        gen_html(0)


def test_as_bytes() -> None:
    assert as_bytes("剑心") == bytes([229, 137, 145, 229, 191, 131])
    assert as_bytes("abc") == b"abc"
