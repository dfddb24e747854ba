# src/matchtrace/matcher/rolling_scanner.py
"""
Rabin-Karp scanner: slide an m-wide window over the text, filter candidate
positions by hash and verify every hash hit character by character.

API:
    rolling_scan(text, pattern, pattern_hash, base, modulus)
        -> (matches, steps, hash_comparisons, char_comparisons)

The window hash is never recomputed from scratch after the first window:

    new = ((base * (old - code(removed) * h) + code(added)) % modulus + modulus) % modulus

with h = base^(m-1) % modulus. A hash hit whose characters differ is reported
as a spurious_hit step and is not a match.
"""

from typing import List, Tuple

from matchtrace.matcher.poly_hash import leading_power, window_hash
from matchtrace.normalizer import InvalidInput, check_hash_parameters
from matchtrace.steps import (
    CharCheck,
    HashMatch,
    HashMismatch,
    HashSearchComplete,
    HashSearchInit,
    RollingHash,
    RollingTraceStep,
    SpuriousHit,
    VerifiedMatch,
)


def roll_hash(old_hash: int, removed: str, added: str, h: int, base: int, modulus: int) -> int:
    """O(1) window update. Adding modulus before the final reduction keeps the result in [0, modulus)."""
    return ((base * (old_hash - ord(removed) * h) + ord(added)) % modulus + modulus) % modulus


def rolling_scan(text: str, pattern: str, pattern_hash: int, base: int,
                 modulus: int) -> Tuple[Tuple[int, ...], Tuple[RollingTraceStep, ...], int, int]:
    base, modulus = check_hash_parameters(base, modulus)
    if not pattern:
        raise InvalidInput("Pattern cannot be empty")
    if len(pattern) > len(text):
        raise InvalidInput("Pattern length cannot exceed text length")

    n = len(text)
    m = len(pattern)
    matches: List[int] = []
    steps: List[RollingTraceStep] = []
    hash_comparisons = 0
    char_comparisons = 0

    h = leading_power(m, base, modulus)
    text_hash = window_hash(text[:m], base, modulus)

    steps.append(HashSearchInit(
        pattern_hash=pattern_hash,
        initial_text_hash=text_hash,
        h_value=h,
        window_start=0,
        window_end=m - 1,
        description="Starting Rabin-Karp pattern matching",
        explanation=f"Window [0..{m - 1}] hashes to {text_hash}, the pattern to {pattern_hash}. "
                    f"h = {base}^{m - 1} mod {modulus} = {h} weights the leading character.",
    ))

    for i in range(n - m + 1):
        hash_comparisons += 1
        window_end = i + m - 1

        if text_hash == pattern_hash:
            steps.append(HashMatch(
                window_start=i,
                window_end=window_end,
                pattern_hash=pattern_hash,
                text_hash=text_hash,
                hash_comparisons=hash_comparisons,
                char_comparisons=char_comparisons,
                description=f"Hash match at position {i}! Pattern hash ({pattern_hash}) = "
                            f"text window hash ({text_hash})",
                explanation="Equal hashes may still be a collision; verify character by character.",
            ))

            verification: List[CharCheck] = []
            verified = True
            for j in range(m):
                char_comparisons += 1
                same = text[i + j] == pattern[j]
                verification.append(CharCheck(i + j, j, text[i + j], pattern[j], same))
                if not same:
                    verified = False
                    break

            if verified:
                matches.append(i)
                steps.append(VerifiedMatch(
                    window_start=i,
                    window_end=window_end,
                    pattern_hash=pattern_hash,
                    text_hash=text_hash,
                    matches=tuple(matches),
                    hash_comparisons=hash_comparisons,
                    char_comparisons=char_comparisons,
                    verification=tuple(verification),
                    description=f"Pattern found at index {i}!",
                    explanation=f"All {m} characters agree: a true match at position {i}.",
                ))
            else:
                bad = verification[-1]
                steps.append(SpuriousHit(
                    window_start=i,
                    window_end=window_end,
                    pattern_hash=pattern_hash,
                    text_hash=text_hash,
                    hash_comparisons=hash_comparisons,
                    char_comparisons=char_comparisons,
                    verification=tuple(verification),
                    description=f"Spurious hit at position {i}! Hash matched but characters differ.",
                    explanation=f"Hash collision: text[{bad.text_index}]='{bad.text_char}' != "
                                f"pattern[{bad.pattern_index}]='{bad.pattern_char}'.",
                ))
        else:
            steps.append(HashMismatch(
                window_start=i,
                window_end=window_end,
                pattern_hash=pattern_hash,
                text_hash=text_hash,
                hash_comparisons=hash_comparisons,
                char_comparisons=char_comparisons,
                description=f"Hash mismatch at position {i}: pattern hash ({pattern_hash}) != "
                            f"text hash ({text_hash})",
                explanation="Different hashes rule this window out without comparing characters.",
            ))

        if i < n - m:
            removed = text[i]
            added = text[i + m]
            old_hash = text_hash
            text_hash = roll_hash(old_hash, removed, added, h, base, modulus)
            steps.append(RollingHash(
                old_window_start=i,
                new_window_start=i + 1,
                removed_char=removed,
                removed_char_code=ord(removed),
                added_char=added,
                added_char_code=ord(added),
                old_hash=old_hash,
                new_hash=text_hash,
                h_value=h,
                computation=f"({base} × ({old_hash} - {ord(removed)} × {h}) + {ord(added)}) "
                            f"mod {modulus} = {text_hash}",
                description=f"Computing rolling hash for window [{i + 1}..{i + m}]",
                explanation=f"Drop leading '{removed}', append trailing '{added}'. "
                            f"One O(1) update instead of rehashing the window.",
            ))

    steps.append(HashSearchComplete(
        matches=tuple(matches),
        hash_comparisons=hash_comparisons,
        char_comparisons=char_comparisons,
        total_matches=len(matches),
        description="Rabin-Karp search complete",
        explanation=f"Found {len(matches)} occurrence(s) using {hash_comparisons} hash "
                    f"comparisons and {char_comparisons} character comparisons.",
    ))

    return tuple(matches), tuple(steps), hash_comparisons, char_comparisons
