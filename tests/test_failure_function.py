# tests/test_failure_function.py
from itertools import product

import pytest

from matchtrace.matcher.failure_function import build_failure_table
from matchtrace.normalizer import InvalidInput


def _naive_lps(pattern):
    out = []
    for i in range(len(pattern)):
        prefix = pattern[:i + 1]
        best = 0
        for k in range(1, i + 1):
            if prefix[:k] == prefix[-k:]:
                best = k
        out.append(best)
    return tuple(out)


@pytest.mark.parametrize("pattern, expected", [
    ("A", (0,)),
    ("AAAA", (0, 1, 2, 3)),
    ("AABA", (0, 1, 0, 1)),
    ("ABABCABAB", (0, 0, 1, 2, 0, 1, 2, 3, 4)),
    ("AABAACAABAA", (0, 1, 0, 1, 2, 0, 1, 2, 3, 4, 5)),
])
def test_known_tables(pattern, expected):
    table, _ = build_failure_table(pattern)
    assert table == expected


def test_table_invariants_exhaustive():
    for length in range(1, 8):
        for chars in product("ab", repeat=length):
            pattern = "".join(chars)
            table, _ = build_failure_table(pattern)
            assert table[0] == 0
            assert all(v <= i for i, v in enumerate(table))
            assert table == _naive_lps(pattern)


def test_trace_is_bracketed():
    table, steps = build_failure_table("ABABCABAB")
    assert steps[0].kind == "lps_init"
    assert steps[0].lps_array == (0,) * 9
    assert steps[-1].kind == "lps_complete"
    assert steps[-1].lps_array == table


def test_snapshots_are_taken_at_emission_time():
    # 'AAAA' only ever matches: one lps_match per position after the first
    _, steps = build_failure_table("AAAA")
    kinds = [s.kind for s in steps]
    assert kinds == ["lps_init", "lps_match", "lps_match", "lps_match", "lps_complete"]
    assert steps[1].lps_array == (0, 1, 0, 0)
    assert steps[2].lps_array == (0, 1, 2, 0)
    assert steps[3].lps_array == (0, 1, 2, 3)


def test_fallback_does_not_advance_position():
    _, steps = build_failure_table("AAB")
    kinds = [s.kind for s in steps]
    assert kinds == ["lps_init", "lps_match", "lps_fallback", "lps_zero", "lps_complete"]

    fallback, zero = steps[2], steps[3]
    assert fallback.current_index == 2
    assert fallback.old_prefix_length == 1
    assert fallback.prefix_length == 0
    # same position is re-tested against the shorter prefix
    assert zero.current_index == 2


def test_step_dict_uses_camel_case():
    _, steps = build_failure_table("ABAB")
    d = steps[3].to_dict()
    assert d["type"] == "lps_match"
    assert d["lpsArray"] == [0, 0, 1, 2]
    assert d["compareIndexPrefix"] == 1
    assert "explanation" in d and "description" in d


def test_empty_pattern_rejected():
    with pytest.raises(InvalidInput):
        build_failure_table("")
