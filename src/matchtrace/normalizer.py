"""
normalizer.py
--------------
Turns caller input into the str form the matching engines scan, and rejects
input they cannot work with.

Steps:
1. Convert bytes to str using latin1 (lossless, one character per byte)
2. Lowercase if requested
3. Check text/pattern lengths and hash parameters

Everything here raises InvalidInput before any algorithmic work starts.
"""

from typing import Tuple, Union

Symbols = Union[str, bytes, bytearray]


class InvalidInput(ValueError):
    """Raised for empty or mismatched text/pattern and bad hash parameters."""


def bytes_to_str_latin1(payload: bytes) -> str:
    """Safe lossless conversion from raw bytes to Python str."""
    return bytes(payload).decode("latin1")


def normalize_input(value: Symbols, name: str = "Text", *, to_lower=False) -> str:
    if isinstance(value, (bytes, bytearray)):
        value = bytes_to_str_latin1(value)
    if not isinstance(value, str):
        raise InvalidInput(f"{name} is required and must be a string")
    if not value:
        raise InvalidInput(f"{name} cannot be empty")
    if to_lower:
        value = value.lower()
    return value


def normalize_pair(text: Symbols, pattern: Symbols, *, to_lower=False) -> Tuple[str, str]:
    """Normalize text and pattern together and enforce len(pattern) <= len(text)."""
    text = normalize_input(text, "Text", to_lower=to_lower)
    pattern = normalize_input(pattern, "Pattern", to_lower=to_lower)
    if len(pattern) > len(text):
        raise InvalidInput("Pattern length cannot exceed text length")
    return text, pattern


def check_positive_int(value, name: str) -> int:
    # bool is an int subclass; True is not a usable radix
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidInput(f"{name} must be a positive integer")
    return value


def check_hash_parameters(base, modulus) -> Tuple[int, int]:
    return check_positive_int(base, "Base"), check_positive_int(modulus, "Modulo")
