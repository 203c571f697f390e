"""The mercha digest: ChaCha20 encryption followed by a merkle-tree reduction."""

from __future__ import annotations

from .chacha import chacha20_encrypt
from .merkle import merkle_tree


def mercha(key: bytes, nonce: bytes, data: bytes) -> bytes:
    """Encrypt ``data`` with ChaCha20 from counter 0 and return its 64-byte tree root."""
    return merkle_tree(chacha20_encrypt(key, nonce, 0, data))