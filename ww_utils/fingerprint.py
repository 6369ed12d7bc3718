# ww_utils/fingerprint.py
# Purpose: stable name hash for palette assignment.

from __future__ import annotations

FNV32_OFFSET_BASIS = 2166136261
FNV32_PRIME = 16777619
_MASK32 = 0xFFFFFFFF


def canonicalize_name(s: str) -> str:
    """
    Names hash the same regardless of case.
    Whitespace is kept as-is: keyword matching does not trim either.
    """
    if not isinstance(s, str):
        s = str(s or "")
    return s.lower()


def fnv1a_32(data: bytes) -> int:
    """
    32-bit FNV-1a. Unlike the builtin hash(), which is salted per process,
    this is identical across runs, interpreters and languages.
    """
    h = FNV32_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV32_PRIME) & _MASK32
    return h


def stable_name_hash(name: str) -> int:
    """Non-negative hash of the canonical (lowercased) name, UTF-8 encoded."""
    return fnv1a_32(canonicalize_name(name).encode("utf-8"))
