# src/cli/run_demo.py

"""
Convenience script for demonstration:

python src/cli/run_demo.py

Runs both algorithms on the example inputs advertised by the /info endpoints.
"""

from matchtrace.dashboard.info import KMP_INFO, RABIN_KARP_INFO
from matchtrace.main import run_exact_match, run_rolling_hash


def main():
    print("[+] Running KMP on sample inputs.")
    for example in KMP_INFO["examples"]:
        result = run_exact_match(example["text"], example["pattern"])
        print(f"    {example['pattern']!r} in {example['text']!r}: {list(result.matches)} "
              f"({result.summary.total_comparisons} comparisons)")

    print("[+] Running Rabin-Karp on sample inputs.")
    for example in RABIN_KARP_INFO["examples"]:
        result = run_rolling_hash(example["text"], example["pattern"])
        s = result.summary
        print(f"    {example['pattern']!r} in {example['text']!r}: {list(result.matches)} "
              f"({s.hash_comparisons} hash / {s.char_comparisons} char comparisons, "
              f"{s.spurious_hits} spurious hits)")


if __name__ == "__main__":
    main()
