# src/matchtrace/matcher/kmp_scanner.py
"""
KMP exact-match scanner with a full step trace.

API:
    kmp_scan(text: str, pattern: str, table) -> (matches, steps, comparisons)

The text index i never moves backwards; on a mismatch only the pattern index
j falls back through the failure table. After a full match j falls back to
table[m - 1] so overlapping occurrences are still found.
"""

from typing import List, Sequence, Tuple

from matchtrace.normalizer import InvalidInput
from matchtrace.steps import (
    CharMatch,
    Comparison,
    KmpTraceStep,
    MismatchAdvance,
    MismatchShift,
    PatternFound,
    SearchComplete,
    SearchInit,
)


def kmp_scan(text: str, pattern: str, table: Sequence[int]) -> Tuple[Tuple[int, ...], Tuple[KmpTraceStep, ...], int]:
    if not pattern:
        raise InvalidInput("Pattern cannot be empty")
    if len(table) != len(pattern):
        raise InvalidInput("Failure table length must equal pattern length")

    n = len(text)
    m = len(pattern)
    matches: List[int] = []
    steps: List[KmpTraceStep] = []
    comparisons = 0

    i = 0  # text
    j = 0  # pattern

    steps.append(SearchInit(
        text_index=0,
        pattern_index=0,
        pattern_offset=0,
        matches=(),
        comparisons=0,
        description="Starting KMP pattern matching",
        explanation="Compare pattern characters against the text; on a mismatch "
                    "the LPS array decides how far the pattern shifts.",
    ))

    while i < n:
        offset = i - j
        comparisons += 1

        if pattern[j] == text[i]:
            steps.append(CharMatch(
                text_index=i,
                pattern_index=j,
                pattern_offset=offset,
                matches=tuple(matches),
                comparisons=comparisons,
                current_comparison=Comparison(i, j, "match"),
                description=f"Match: text[{i}]='{text[i]}' equals pattern[{j}]='{pattern[j]}'",
                explanation=f"Text position {i} matches pattern position {j}; advance both.",
            ))
            i += 1
            j += 1

            if j == m:
                found = i - j
                matches.append(found)
                steps.append(PatternFound(
                    text_index=i,
                    pattern_index=j,
                    pattern_offset=found,
                    matches=tuple(matches),
                    comparisons=comparisons,
                    found_at=found,
                    description=f"Pattern found at index {found}!",
                    explanation=f"Full match starting at text index {found}. Continue from "
                                f"LPS[{j - 1}] = {table[j - 1]} to catch overlapping occurrences.",
                ))
                j = table[j - 1]
        elif j != 0:
            lps_value = table[j - 1]
            shift = j - lps_value
            steps.append(MismatchShift(
                text_index=i,
                pattern_index=j,
                pattern_offset=offset,
                matches=tuple(matches),
                comparisons=comparisons,
                current_comparison=Comparison(i, j, "mismatch"),
                lps_value=lps_value,
                shift_amount=shift,
                description=f"Mismatch: text[{i}]='{text[i]}' != pattern[{j}]='{pattern[j]}'. "
                            f"Using LPS to shift pattern.",
                explanation=f"LPS[{j - 1}] = {lps_value}: the first {lps_value} pattern "
                            f"characters already match, so the pattern shifts by {shift} "
                            f"and text index {i} is compared again.",
            ))
            j = lps_value
        else:
            steps.append(MismatchAdvance(
                text_index=i,
                pattern_index=j,
                pattern_offset=offset,
                matches=tuple(matches),
                comparisons=comparisons,
                current_comparison=Comparison(i, j, "mismatch"),
                description=f"Mismatch at pattern start: text[{i}]='{text[i]}' != "
                            f"pattern[0]='{pattern[0]}'. Moving to next text position.",
                explanation="Nothing of the pattern matched yet; advance the text index.",
            ))
            i += 1

    steps.append(SearchComplete(
        matches=tuple(matches),
        comparisons=comparisons,
        total_matches=len(matches),
        description="KMP search complete",
        explanation=f"Found {len(matches)} occurrence(s) of the pattern using "
                    f"{comparisons} character comparisons.",
    ))

    return tuple(matches), tuple(steps), comparisons
