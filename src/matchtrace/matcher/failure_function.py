# src/matchtrace/matcher/failure_function.py
"""
Failure function (LPS table) builder for KMP, with a full step trace.

API:
    build_failure_table(pattern: str) -> (table, steps)

table[i] is the length of the longest proper prefix of pattern[:i + 1] that
is also a suffix of it. Every step carries its own snapshot of the table.
"""

from typing import List, Tuple

from matchtrace.normalizer import InvalidInput
from matchtrace.steps import LpsComplete, LpsFallback, LpsInit, LpsMatch, LpsTraceStep, LpsZero


def build_failure_table(pattern: str) -> Tuple[Tuple[int, ...], Tuple[LpsTraceStep, ...]]:
    if not pattern:
        raise InvalidInput("Pattern cannot be empty")

    m = len(pattern)
    lps = [0] * m
    steps: List[LpsTraceStep] = []

    steps.append(LpsInit(
        pattern=pattern,
        lps_array=tuple(lps),
        current_index=0,
        prefix_length=0,
        description="Initializing LPS array with zeros",
        explanation="LPS[i] holds the length of the longest proper prefix of "
                    "pattern[0..i] that is also a suffix of it. LPS[0] is always 0.",
    ))

    length = 0  # length of the previous longest prefix-suffix
    i = 1
    while i < m:
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            steps.append(LpsMatch(
                pattern=pattern,
                lps_array=tuple(lps),
                current_index=i,
                prefix_length=length,
                compare_index_pattern=i,
                compare_index_prefix=length - 1,
                description=f"Match: pattern[{i}]='{pattern[i]}' equals "
                            f"pattern[{length - 1}]='{pattern[length - 1]}'",
                explanation=f"The prefix of length {length - 1} extends by "
                            f"'{pattern[i]}', so LPS[{i}] = {length}.",
            ))
            i += 1
        elif length != 0:
            # re-test the same i against a shorter prefix
            old_length = length
            length = lps[length - 1]
            steps.append(LpsFallback(
                pattern=pattern,
                lps_array=tuple(lps),
                current_index=i,
                prefix_length=length,
                old_prefix_length=old_length,
                description=f"Mismatch: pattern[{i}]='{pattern[i]}' != "
                            f"pattern[{old_length}]='{pattern[old_length]}'. Falling back.",
                explanation=f"Fall back to LPS[{old_length - 1}] = {length} and compare "
                            f"position {i} against that shorter prefix.",
            ))
        else:
            lps[i] = 0
            steps.append(LpsZero(
                pattern=pattern,
                lps_array=tuple(lps),
                current_index=i,
                prefix_length=0,
                description=f"No matching prefix found for position {i}",
                explanation=f"No proper prefix is also a suffix ending at position {i}. "
                            f"LPS[{i}] = 0",
            ))
            i += 1

    steps.append(LpsComplete(
        pattern=pattern,
        lps_array=tuple(lps),
        description="LPS array computation complete",
        explanation="On a mismatch the search resumes from LPS[j - 1] instead of "
                    "re-reading text characters.",
    ))

    return tuple(lps), tuple(steps)
