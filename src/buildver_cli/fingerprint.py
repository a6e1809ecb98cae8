"""Deterministic build identifier derived from emitted artifact names.

Bundlers already put a content hash into every script and stylesheet file
name, so hashing the sorted names is enough to detect a changed build
without reading any file content.
"""
from __future__ import annotations

import hashlib
from typing import Iterable, Tuple

DEFAULT_ID_LENGTH = 16
FINGERPRINT_SUFFIXES: Tuple[str, ...] = (".js", ".css")


def is_fingerprinted(name: str, suffixes: Tuple[str, ...] = FINGERPRINT_SUFFIXES) -> bool:
    """Return True if an artifact name takes part in the build identifier."""
    return name.endswith(suffixes)


def _utf16_key(name: str) -> bytes:
    return name.encode("utf-16-be", "surrogatepass")


def derive_build_id(
    artifact_names: Iterable[str],
    length: int = DEFAULT_ID_LENGTH,
    suffixes: Tuple[str, ...] = FINGERPRINT_SUFFIXES,
) -> str:
    """Derive the build identifier for a set of artifact names.

    Args:
        artifact_names: Output file names of one build, in any order.
        length: Number of hex characters to keep (1..64).
        suffixes: Suffixes of the artifacts that feed the digest.

    Returns:
        str: Lowercase hex prefix of the SHA256 over the sorted names.
    """
    if not 1 <= length <= 64:
        raise ValueError(f"Build id length must be between 1 and 64, got {length}")

    sha = hashlib.sha256()
    # set() collapses duplicates; UTF-16 code unit order matches a JS sort()
    for name in sorted(set(artifact_names), key=_utf16_key):
        if is_fingerprinted(name, suffixes):
            sha.update(name.encode("utf-8"))
    return sha.hexdigest()[:length]
