# src/matchtrace/main.py

"""
Full pipeline runner:
    python -m matchtrace.main --algorithm kmp --text <text> --pattern <pattern>

Steps:
1. Normalize and validate text/pattern (and hash parameters).
2. Preprocess: LPS table (KMP) or pattern hash (Rabin-Karp), with trace.
3. Scan the text, with trace.
4. Assemble the AlgorithmResult.
5. Print it as JSON (or a match summary).
"""

import argparse
import json
import sys

from matchtrace.matcher.failure_function import build_failure_table
from matchtrace.matcher.kmp_scanner import kmp_scan
from matchtrace.matcher.poly_hash import DEFAULT_BASE, DEFAULT_MODULUS, hash_pattern
from matchtrace.matcher.rolling_scanner import rolling_scan
from matchtrace.normalizer import InvalidInput, check_hash_parameters, normalize_pair
from matchtrace.result import AlgorithmResult, assemble_exact_match, assemble_rolling_hash

KMP = "kmp"
RABIN_KARP = "rabin-karp"
ALGORITHMS = (KMP, RABIN_KARP)


def run_exact_match(text, pattern, *, to_lower=False) -> AlgorithmResult:
    text, pattern = normalize_pair(text, pattern, to_lower=to_lower)

    table, lps_steps = build_failure_table(pattern)
    matches, search_steps, comparisons = kmp_scan(text, pattern, table)

    return assemble_exact_match(text, pattern, table, lps_steps, matches, search_steps, comparisons)


def run_rolling_hash(text, pattern, base: int = DEFAULT_BASE, modulus: int = DEFAULT_MODULUS,
                     *, to_lower=False) -> AlgorithmResult:
    text, pattern = normalize_pair(text, pattern, to_lower=to_lower)
    base, modulus = check_hash_parameters(base, modulus)

    pattern_hash, hash_steps = hash_pattern(pattern, base, modulus)
    matches, search_steps, hash_cmp, char_cmp = rolling_scan(text, pattern, pattern_hash, base, modulus)

    return assemble_rolling_hash(text, pattern, base, modulus, pattern_hash, hash_steps,
                                 matches, search_steps, hash_cmp, char_cmp)


def run_algorithm(algorithm: str, text, pattern, base=None, modulus=None, *, to_lower=False) -> AlgorithmResult:
    """Dispatch by algorithm name; base/modulus of None mean the defaults."""
    if algorithm == KMP:
        return run_exact_match(text, pattern, to_lower=to_lower)
    if algorithm == RABIN_KARP:
        return run_rolling_hash(
            text,
            pattern,
            DEFAULT_BASE if base is None else base,
            DEFAULT_MODULUS if modulus is None else modulus,
            to_lower=to_lower,
        )
    raise InvalidInput(f"Unknown algorithm {algorithm!r}; expected one of {', '.join(ALGORITHMS)}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Traced KMP / Rabin-Karp string matching")
    parser.add_argument("--algorithm", choices=ALGORITHMS, default=KMP)
    parser.add_argument("--text", required=True, help="Text to search in")
    parser.add_argument("--pattern", required=True, help="Pattern to search for")
    parser.add_argument("--base", type=int, default=None, help=f"Hash base (default {DEFAULT_BASE})")
    parser.add_argument("--modulo", type=int, default=None, help=f"Hash modulus (default {DEFAULT_MODULUS})")
    parser.add_argument("--nocase", action="store_true", help="Lowercase text and pattern first")
    parser.add_argument("--summary", action="store_true", help="Print matches only, not the trace")
    args = parser.parse_args(argv)

    try:
        result = run_algorithm(args.algorithm, args.text, args.pattern, args.base, args.modulo,
                               to_lower=args.nocase)
    except InvalidInput as e:
        parser.error(str(e))

    if args.summary:
        if not result.matches:
            print("[-] No matches")
        for offset in result.matches:
            print(f"[MATCH] {result.algorithm} | offset {offset} | pattern={result.pattern}")
    else:
        json.dump(result.to_dict(), sys.stdout, indent=2, ensure_ascii=False)
        print()

    return result


if __name__ == "__main__":
    main()
