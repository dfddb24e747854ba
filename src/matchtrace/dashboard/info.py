# src/matchtrace/dashboard/info.py
"""Static algorithm descriptions served by the /info endpoints."""

from matchtrace.matcher.poly_hash import DEFAULT_BASE, DEFAULT_MODULUS

KMP_INFO = {
    "name": "Knuth-Morris-Pratt (KMP) Algorithm",
    "description": "A linear-time string matching algorithm. A preprocessing phase builds the "
                   "failure function (LPS array), which lets the search shift the pattern "
                   "without ever moving backwards in the text.",
    "properties": {
        "timeComplexity": {
            "preprocessing": "O(m)",
            "matching": "O(n)",
            "total": "O(n + m)",
        },
        "spaceComplexity": "O(m)",
        "keyFeatures": [
            "Uses the Longest Prefix Suffix (LPS) array",
            "Text pointer never moves backwards",
            "Linear time in the worst case",
            "Pays off on patterns with repetitive structure",
        ],
    },
    "keyConcepts": [
        {
            "name": "LPS Array",
            "description": "For each pattern position, the length of the longest proper prefix "
                           "that is also a suffix of the pattern up to that position.",
        },
        {
            "name": "No Backtracking",
            "description": "On a mismatch only the pattern index changes, using the LPS array.",
        },
        {
            "name": "Overlapping Matches",
            "description": "After a full match the pattern index falls back to LPS[m - 1], so "
                           "occurrences that overlap are still reported.",
        },
    ],
    "examples": [
        {"text": "ABABDABACDABABCABAB", "pattern": "ABABCABAB"},
        {"text": "AAAAABAAABA", "pattern": "AAAA"},
        {"text": "AABAACAADAABAABA", "pattern": "AABA"},
    ],
}

RABIN_KARP_INFO = {
    "name": "Rabin-Karp Algorithm",
    "description": "Hashes the pattern and every text window of the same width, updating the "
                   "window hash in constant time as it slides. Only windows whose hash equals "
                   "the pattern hash are compared character by character.",
    "properties": {
        "timeComplexity": {
            "preprocessing": "O(m)",
            "matching": {"average": "O(n + m)", "worst": "O(nm)"},
            "explanation": "Hash filtering keeps the average case linear; many collisions "
                           "push it towards O(nm).",
        },
        "spaceComplexity": "O(1)",
        "keyFeatures": [
            "Polynomial rolling hash",
            "Fast average case",
            "Hash hits are always verified",
        ],
    },
    "keyConcepts": [
        {
            "name": "Polynomial Hashing",
            "description": "Characters are digits in base d: "
                           "hash = (c0*d^(m-1) + c1*d^(m-2) + ... + c(m-1)) mod q",
        },
        {
            "name": "Rolling Hash",
            "description": "Sliding the window by one removes the leading character's "
                           "contribution and adds the new trailing character in O(1).",
        },
        {
            "name": "Spurious Hits",
            "description": "Equal hashes for different strings. Character verification "
                           "filters them out.",
        },
    ],
    "parameters": {
        "base": {
            "description": "Radix of the polynomial hash (typically the alphabet size)",
            "default": DEFAULT_BASE,
        },
        "modulo": {
            "description": "Modulus bounding the hash value; small values make collisions "
                           "easy to observe",
            "default": DEFAULT_MODULUS,
        },
    },
    "examples": [
        {"text": "ABCCDDAEFG", "pattern": "CDD"},
        {"text": "AABAACAADAABAABA", "pattern": "AABA"},
        {"text": "GEEKSFORGEEKS", "pattern": "GEEK"},
    ],
}
