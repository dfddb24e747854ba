# src/matchtrace/result.py
"""
Result assembly: bundles the preprocessing trace, the matching trace, the
auxiliary table or hash parameters and summary counters of one run into an
immutable AlgorithmResult.

API:
    assemble_exact_match(text, pattern, table, lps_steps, matches, search_steps, comparisons)
    assemble_rolling_hash(text, pattern, base, modulus, pattern_hash, hash_steps,
                          matches, search_steps, hash_comparisons, char_comparisons)
    AlgorithmResult.to_dict() -> JSON-ready response body
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

from matchtrace.steps import SpuriousHit, Step

KMP_NAME = "KMP"
RABIN_KARP_NAME = "Rabin-Karp"


@dataclass(frozen=True)
class Phase:
    description: str
    steps: Tuple[Step, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "steps": [dict(index=idx, **step.to_dict()) for idx, step in enumerate(self.steps)],
        }


@dataclass(frozen=True)
class HashParameters:
    base: int
    modulo: int
    pattern_hash: int

    def to_dict(self) -> Dict[str, int]:
        return {"base": self.base, "modulo": self.modulo, "patternHash": self.pattern_hash}


@dataclass(frozen=True)
class ResultSummary:
    matches: Tuple[int, ...]
    total_comparisons: int
    time_complexity: str
    space_complexity: str
    # Rabin-Karp only
    hash_comparisons: Optional[int] = None
    char_comparisons: Optional[int] = None
    spurious_hits: Optional[int] = None

    @property
    def match_count(self) -> int:
        return len(self.matches)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"matches": list(self.matches), "matchCount": self.match_count}
        if self.hash_comparisons is not None:
            out["hashComparisons"] = self.hash_comparisons
            out["charComparisons"] = self.char_comparisons
            out["spuriousHits"] = self.spurious_hits
        out["totalComparisons"] = self.total_comparisons
        out["timeComplexity"] = self.time_complexity
        out["spaceComplexity"] = self.space_complexity
        return out


@dataclass(frozen=True)
class AlgorithmResult:
    algorithm: str
    text: str
    pattern: str
    preprocessing: Phase
    matching: Phase
    summary: ResultSummary
    failure_table: Optional[Tuple[int, ...]] = None
    hash_parameters: Optional[HashParameters] = None

    @property
    def matches(self) -> Tuple[int, ...]:
        return self.summary.matches

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "algorithm": self.algorithm,
            "text": self.text,
            "pattern": self.pattern,
        }
        if self.failure_table is not None:
            out["lpsArray"] = list(self.failure_table)
        if self.hash_parameters is not None:
            out["parameters"] = self.hash_parameters.to_dict()
        out["preprocessing"] = self.preprocessing.to_dict()
        out["matching"] = self.matching.to_dict()
        out["result"] = self.summary.to_dict()
        return out


def assemble_exact_match(text: str, pattern: str, table: Sequence[int], lps_steps: Sequence[Step],
                         matches: Sequence[int], search_steps: Sequence[Step],
                         comparisons: int) -> AlgorithmResult:
    return AlgorithmResult(
        algorithm=KMP_NAME,
        text=text,
        pattern=pattern,
        failure_table=tuple(table),
        preprocessing=Phase("LPS (Longest Prefix Suffix) Array Computation", tuple(lps_steps)),
        matching=Phase("Pattern Matching Phase", tuple(search_steps)),
        summary=ResultSummary(
            matches=tuple(matches),
            total_comparisons=comparisons,
            time_complexity="O(n + m)",
            space_complexity="O(m)",
        ),
    )


def assemble_rolling_hash(text: str, pattern: str, base: int, modulus: int, pattern_hash: int,
                          hash_steps: Sequence[Step], matches: Sequence[int],
                          search_steps: Sequence[Step], hash_comparisons: int,
                          char_comparisons: int) -> AlgorithmResult:
    spurious = sum(1 for s in search_steps if isinstance(s, SpuriousHit))
    return AlgorithmResult(
        algorithm=RABIN_KARP_NAME,
        text=text,
        pattern=pattern,
        hash_parameters=HashParameters(base, modulus, pattern_hash),
        preprocessing=Phase("Pattern Hash Computation", tuple(hash_steps)),
        matching=Phase("Rolling Hash Pattern Matching", tuple(search_steps)),
        summary=ResultSummary(
            matches=tuple(matches),
            total_comparisons=hash_comparisons + char_comparisons,
            time_complexity="O(n + m) average, O(nm) worst case",
            space_complexity="O(1)",
            hash_comparisons=hash_comparisons,
            char_comparisons=char_comparisons,
            spurious_hits=spurious,
        ),
    )
