# src/matchtrace/matcher/poly_hash.py
"""
Polynomial hash of a pattern (Horner's scheme), with a step trace.

    hash = (c0 * base^(m-1) + c1 * base^(m-2) + ... + c(m-1)) mod modulus

computed one character at a time as hash = (hash * base + code(c)) % modulus.
Character codes are ord(c); bytes input arrives here latin1-decoded, so the
code of a byte is the byte value.

The default modulus is deliberately small so that spurious hits show up in
ordinary demo inputs.
"""

from typing import List, Tuple

from matchtrace.normalizer import InvalidInput, check_hash_parameters
from matchtrace.steps import HashCharStep, HashComplete, HashInit, HashTraceStep

DEFAULT_BASE = 256      # alphabet radix
DEFAULT_MODULUS = 101


def window_hash(s: str, base: int, modulus: int) -> int:
    """Hash of s from scratch, no trace."""
    h = 0
    for ch in s:
        h = (h * base + ord(ch)) % modulus
    return h


def leading_power(m: int, base: int, modulus: int) -> int:
    """base^(m-1) % modulus: weight of the leading character of an m-wide window."""
    h = 1
    for _ in range(m - 1):
        h = (h * base) % modulus
    return h


def hash_pattern(pattern: str, base: int = DEFAULT_BASE, modulus: int = DEFAULT_MODULUS) -> Tuple[int, Tuple[HashTraceStep, ...]]:
    base, modulus = check_hash_parameters(base, modulus)
    if not pattern:
        raise InvalidInput("Pattern cannot be empty")

    steps: List[HashTraceStep] = []
    h = 0

    steps.append(HashInit(
        pattern=pattern,
        base=base,
        mod=modulus,
        current_hash=0,
        description="Initializing pattern hash computation",
        explanation=f"h = (c0*d^(m-1) + c1*d^(m-2) + ... + c(m-1)) mod q with "
                    f"d={base} (base) and q={modulus} (modulo).",
    ))

    for i, ch in enumerate(pattern):
        code = ord(ch)
        old = h
        h = (h * base + code) % modulus
        steps.append(HashCharStep(
            pattern=pattern,
            current_index=i,
            character=ch,
            char_code=code,
            old_hash=old,
            new_hash=h,
            computation=f"({old} × {base} + {code}) mod {modulus} = {h}",
            description=f"Adding character '{ch}' (code {code}) to hash",
            explanation=f"Multiply the running hash by {base}, add the code of '{ch}' "
                        f"and reduce modulo {modulus}.",
        ))

    steps.append(HashComplete(
        pattern=pattern,
        final_hash=h,
        description=f"Pattern hash computed: {h}",
        explanation=f"Text windows whose rolling hash equals {h} are candidate matches.",
    ))

    return h, tuple(steps)
