"""Merkle-tree style reduction of a buffer to a 64-byte digest."""

from __future__ import annotations

import struct

_MASK32 = 0xFFFFFFFF
BLOCK_SIZE = 64


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK32


def _add_rotl(xs: list[int], ys: list[int], shift: int) -> list[int]:
    return [_rotl((x + y) & _MASK32, shift) for x, y in zip(xs, ys)]


def merge_hash(block1: bytes, block2: bytes) -> bytes:
    """Combine two 64-byte blocks into one; only the first 32 bytes of each are used."""
    if len(block1) != BLOCK_SIZE or len(block2) != BLOCK_SIZE:
        raise ValueError(f"blocks must be {BLOCK_SIZE} bytes each")
    w1 = struct.unpack_from("<8I", block1)
    w2 = struct.unpack_from("<8I", block2)

    low = [a ^ b for a, b in zip(w1, reversed(w2))]
    high = [a ^ b for a, b in zip(w2, reversed(w1))]
    s0, s1, s2, s3 = low[:4], low[4:], high[:4], high[4:]

    for _ in range(10):
        s0 = _add_rotl(s0, s1, 7)
        s2 = _add_rotl(s2, s3, 7)
        s0 = _add_rotl(s0, s2, 9)
        s1 = _add_rotl(s1, s3, 9)

    low = s0 + s1
    high = s2 + s3
    folded = [(a + b) & _MASK32 for a, b in zip(low, reversed(high))]
    return struct.pack("<16I", *folded, *high)


def merkle_tree(data: bytes) -> bytes:
    """Reduce ``data`` pairwise with :func:`merge_hash` and return the 64-byte root."""
    level = bytes(data)
    if len(level) < BLOCK_SIZE:
        raise ValueError(f"data must be at least {BLOCK_SIZE} bytes")
    length = len(level) // 2
    while length >= BLOCK_SIZE:
        level = b"".join(
            merge_hash(
                level[2 * j * BLOCK_SIZE:(2 * j + 1) * BLOCK_SIZE],
                level[(2 * j + 1) * BLOCK_SIZE:(2 * j + 2) * BLOCK_SIZE],
            )
            for j in range(length // BLOCK_SIZE)
        )
        length //= 2
    return level[:BLOCK_SIZE]