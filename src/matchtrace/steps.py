# src/matchtrace/steps.py
"""
Trace step records emitted by the matching engines.

Every step kind is its own frozen dataclass with a ``kind`` tag, so a trace is
a closed, ordered sequence of typed records instead of loose dicts:

    KMP preprocessing:   lps_init, lps_match, lps_fallback, lps_zero, lps_complete
    KMP search:          search_init, match, pattern_found, mismatch_shift,
                         mismatch_advance, search_complete
    Rabin-Karp hashing:  hash_init, hash_step, hash_complete
    Rabin-Karp search:   search_init, hash_match, hash_mismatch, pattern_found,
                         spurious_hit, rolling_hash, search_complete

Working values (table snapshots, match lists) are tuples captured at the
moment the step is emitted, so a step never changes after the fact.

``to_dict()`` produces the JSON-ready form consumed by the dashboard, with
camelCase keys and the kind under ``"type"``.
"""

from dataclasses import dataclass, fields, is_dataclass
from typing import Any, ClassVar, Dict, Tuple, Union


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _plain(value: Any) -> Any:
    if is_dataclass(value):
        return _record_dict(value)
    if isinstance(value, (tuple, list)):
        return [_plain(v) for v in value]
    return value


def _record_dict(record) -> Dict[str, Any]:
    return {_camel(f.name): _plain(getattr(record, f.name)) for f in fields(record)}


class _Step:
    kind: ClassVar[str] = ""

    def to_dict(self) -> Dict[str, Any]:
        data = {"type": self.kind}
        data.update(_record_dict(self))
        return data


# ---------------------------------------------------------------------------
# Failure function (LPS table) construction
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LpsInit(_Step):
    kind: ClassVar[str] = "lps_init"
    pattern: str
    lps_array: Tuple[int, ...]
    current_index: int
    prefix_length: int
    description: str
    explanation: str


@dataclass(frozen=True)
class LpsMatch(_Step):
    kind: ClassVar[str] = "lps_match"
    pattern: str
    lps_array: Tuple[int, ...]
    current_index: int
    prefix_length: int
    compare_index_pattern: int
    compare_index_prefix: int
    description: str
    explanation: str


@dataclass(frozen=True)
class LpsFallback(_Step):
    kind: ClassVar[str] = "lps_fallback"
    pattern: str
    lps_array: Tuple[int, ...]
    current_index: int
    prefix_length: int
    old_prefix_length: int
    description: str
    explanation: str


@dataclass(frozen=True)
class LpsZero(_Step):
    kind: ClassVar[str] = "lps_zero"
    pattern: str
    lps_array: Tuple[int, ...]
    current_index: int
    prefix_length: int
    description: str
    explanation: str


@dataclass(frozen=True)
class LpsComplete(_Step):
    kind: ClassVar[str] = "lps_complete"
    pattern: str
    lps_array: Tuple[int, ...]
    description: str
    explanation: str


# ---------------------------------------------------------------------------
# KMP search
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Comparison:
    """One text/pattern character comparison: result is "match" or "mismatch"."""
    text_index: int
    pattern_index: int
    result: str


@dataclass(frozen=True)
class SearchInit(_Step):
    kind: ClassVar[str] = "search_init"
    text_index: int
    pattern_index: int
    pattern_offset: int
    matches: Tuple[int, ...]
    comparisons: int
    description: str
    explanation: str


@dataclass(frozen=True)
class CharMatch(_Step):
    kind: ClassVar[str] = "match"
    text_index: int
    pattern_index: int
    pattern_offset: int
    matches: Tuple[int, ...]
    comparisons: int
    current_comparison: Comparison
    description: str
    explanation: str


@dataclass(frozen=True)
class PatternFound(_Step):
    kind: ClassVar[str] = "pattern_found"
    text_index: int
    pattern_index: int
    pattern_offset: int
    matches: Tuple[int, ...]
    comparisons: int
    found_at: int
    description: str
    explanation: str


@dataclass(frozen=True)
class MismatchShift(_Step):
    kind: ClassVar[str] = "mismatch_shift"
    text_index: int
    pattern_index: int
    pattern_offset: int
    matches: Tuple[int, ...]
    comparisons: int
    current_comparison: Comparison
    lps_value: int
    shift_amount: int
    description: str
    explanation: str


@dataclass(frozen=True)
class MismatchAdvance(_Step):
    kind: ClassVar[str] = "mismatch_advance"
    text_index: int
    pattern_index: int
    pattern_offset: int
    matches: Tuple[int, ...]
    comparisons: int
    current_comparison: Comparison
    description: str
    explanation: str


@dataclass(frozen=True)
class SearchComplete(_Step):
    kind: ClassVar[str] = "search_complete"
    matches: Tuple[int, ...]
    comparisons: int
    total_matches: int
    description: str
    explanation: str


# ---------------------------------------------------------------------------
# Pattern hash (Horner)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HashInit(_Step):
    kind: ClassVar[str] = "hash_init"
    pattern: str
    base: int
    mod: int
    current_hash: int
    description: str
    explanation: str


@dataclass(frozen=True)
class HashCharStep(_Step):
    kind: ClassVar[str] = "hash_step"
    pattern: str
    current_index: int
    character: str
    char_code: int
    old_hash: int
    new_hash: int
    computation: str
    description: str
    explanation: str


@dataclass(frozen=True)
class HashComplete(_Step):
    kind: ClassVar[str] = "hash_complete"
    pattern: str
    final_hash: int
    description: str
    explanation: str


# ---------------------------------------------------------------------------
# Rabin-Karp search
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CharCheck:
    """One character of a hash-match verification."""
    text_index: int
    pattern_index: int
    text_char: str
    pattern_char: str
    match: bool


@dataclass(frozen=True)
class HashSearchInit(_Step):
    kind: ClassVar[str] = "search_init"
    pattern_hash: int
    initial_text_hash: int
    h_value: int
    window_start: int
    window_end: int
    description: str
    explanation: str


@dataclass(frozen=True)
class HashMatch(_Step):
    kind: ClassVar[str] = "hash_match"
    window_start: int
    window_end: int
    pattern_hash: int
    text_hash: int
    hash_comparisons: int
    char_comparisons: int
    description: str
    explanation: str


@dataclass(frozen=True)
class HashMismatch(_Step):
    kind: ClassVar[str] = "hash_mismatch"
    window_start: int
    window_end: int
    pattern_hash: int
    text_hash: int
    hash_comparisons: int
    char_comparisons: int
    description: str
    explanation: str


@dataclass(frozen=True)
class VerifiedMatch(_Step):
    kind: ClassVar[str] = "pattern_found"
    window_start: int
    window_end: int
    pattern_hash: int
    text_hash: int
    matches: Tuple[int, ...]
    hash_comparisons: int
    char_comparisons: int
    verification: Tuple[CharCheck, ...]
    description: str
    explanation: str


@dataclass(frozen=True)
class SpuriousHit(_Step):
    kind: ClassVar[str] = "spurious_hit"
    window_start: int
    window_end: int
    pattern_hash: int
    text_hash: int
    hash_comparisons: int
    char_comparisons: int
    verification: Tuple[CharCheck, ...]
    description: str
    explanation: str


@dataclass(frozen=True)
class RollingHash(_Step):
    kind: ClassVar[str] = "rolling_hash"
    old_window_start: int
    new_window_start: int
    removed_char: str
    removed_char_code: int
    added_char: str
    added_char_code: int
    old_hash: int
    new_hash: int
    h_value: int
    computation: str
    description: str
    explanation: str


@dataclass(frozen=True)
class HashSearchComplete(_Step):
    kind: ClassVar[str] = "search_complete"
    matches: Tuple[int, ...]
    hash_comparisons: int
    char_comparisons: int
    total_matches: int
    description: str
    explanation: str


LpsTraceStep = Union[LpsInit, LpsMatch, LpsFallback, LpsZero, LpsComplete]
KmpTraceStep = Union[SearchInit, CharMatch, PatternFound, MismatchShift,
                     MismatchAdvance, SearchComplete]
HashTraceStep = Union[HashInit, HashCharStep, HashComplete]
RollingTraceStep = Union[HashSearchInit, HashMatch, HashMismatch, VerifiedMatch,
                         SpuriousHit, RollingHash, HashSearchComplete]
Step = Union[LpsTraceStep, KmpTraceStep, HashTraceStep, RollingTraceStep]
