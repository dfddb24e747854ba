# tests/test_poly_hash.py
import pytest

from matchtrace.matcher.poly_hash import (
    DEFAULT_BASE,
    DEFAULT_MODULUS,
    hash_pattern,
    leading_power,
    window_hash,
)
from matchtrace.normalizer import InvalidInput


def test_defaults():
    assert DEFAULT_BASE == 256
    assert DEFAULT_MODULUS == 101


def test_known_hash():
    # 'C'=67, 'D'=68; 256 % 101 = 54
    # (67*54 + 68) % 101 = 50 ; (50*54 + 68) % 101 = 41
    h, _ = hash_pattern("CDD")
    assert h == 41


@pytest.mark.parametrize("pattern, base, modulus", [
    ("GEEK", 256, 101),
    ("AABA", 256, 101),
    ("hello world", 31, 1_000_000_007),
    ("x", 2, 3),
])
def test_matches_polynomial_definition(pattern, base, modulus):
    m = len(pattern)
    expected = sum(ord(c) * base ** (m - 1 - k) for k, c in enumerate(pattern)) % modulus
    h, _ = hash_pattern(pattern, base, modulus)
    assert h == expected
    assert window_hash(pattern, base, modulus) == expected


def test_trace_follows_horner():
    h, steps = hash_pattern("GEEK")
    assert [s.kind for s in steps] == ["hash_init"] + ["hash_step"] * 4 + ["hash_complete"]
    assert steps[0].current_hash == 0
    assert steps[0].base == 256 and steps[0].mod == 101

    running = 0
    for s in steps[1:-1]:
        assert s.old_hash == running
        assert s.new_hash == (running * 256 + s.char_code) % 101
        assert s.char_code == ord(s.character)
        running = s.new_hash
    assert steps[-1].final_hash == running == h


def test_leading_power():
    assert leading_power(1, 256, 101) == 1
    assert leading_power(4, 256, 101) == pow(256, 3, 101)


@pytest.mark.parametrize("base, modulus", [(0, 101), (256, 0), (-1, 101), (256, -7), (True, 101), (2.5, 101)])
def test_bad_parameters_rejected(base, modulus):
    with pytest.raises(InvalidInput):
        hash_pattern("AB", base, modulus)


def test_empty_pattern_rejected():
    with pytest.raises(InvalidInput):
        hash_pattern("")
