"""ChaCha20 stream cipher: 20 rounds, 32-bit block counter, 96-bit nonce."""

from __future__ import annotations

import struct

_CONSTANTS = (0x61707865, 0x3320646E, 0x79622D32, 0x6B206574)
_MASK32 = 0xFFFFFFFF
BLOCK_SIZE = 64
KEY_SIZE = 32
NONCE_SIZE = 12

_COLUMN_ROUNDS = ((0, 4, 8, 12), (1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15))
_DIAGONAL_ROUNDS = ((0, 5, 10, 15), (1, 6, 11, 12), (2, 7, 8, 13), (3, 4, 9, 14))


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK32


def _quarter_round(x: list[int], a: int, b: int, c: int, d: int) -> None:
    x[a] = (x[a] + x[b]) & _MASK32
    x[d] = _rotl(x[d] ^ x[a], 16)
    x[c] = (x[c] + x[d]) & _MASK32
    x[b] = _rotl(x[b] ^ x[c], 12)
    x[a] = (x[a] + x[b]) & _MASK32
    x[d] = _rotl(x[d] ^ x[a], 8)
    x[c] = (x[c] + x[d]) & _MASK32
    x[b] = _rotl(x[b] ^ x[c], 7)


def _check_key_nonce(key: bytes, nonce: bytes) -> None:
    if len(key) != KEY_SIZE:
        raise ValueError(f"key must be {KEY_SIZE} bytes, got {len(key)}")
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")


def _initial_state(key: bytes, nonce: bytes, counter: int) -> list[int]:
    return [
        *_CONSTANTS,
        *struct.unpack("<8I", key),
        counter & _MASK32,
        *struct.unpack("<3I", nonce),
    ]


def chacha20_block(key: bytes, nonce: bytes, counter: int) -> bytes:
    """Return the 64-byte keystream block for the given counter."""
    key, nonce = bytes(key), bytes(nonce)
    _check_key_nonce(key, nonce)
    state = _initial_state(key, nonce, counter)
    working = list(state)
    for _ in range(10):
        for indices in _COLUMN_ROUNDS:
            _quarter_round(working, *indices)
        for indices in _DIAGONAL_ROUNDS:
            _quarter_round(working, *indices)
    return struct.pack(
        "<16I", *((w + s) & _MASK32 for w, s in zip(working, state))
    )


def chacha20_keystream(
    key: bytes, nonce: bytes, initial_counter: int, length: int
) -> bytes:
    """Return ``length`` bytes of keystream starting at ``initial_counter``."""
    if length < 0:
        raise ValueError("length must not be negative")
    key, nonce = bytes(key), bytes(nonce)
    _check_key_nonce(key, nonce)
    num_blocks = -(-length // BLOCK_SIZE)
    stream = b"".join(
        chacha20_block(key, nonce, (initial_counter + index) & _MASK32)
        for index in range(num_blocks)
    )
    return stream[:length]


def chacha20_encrypt(
    key: bytes, nonce: bytes, initial_counter: int, data: bytes
) -> bytes:
    """XOR ``data`` with the ChaCha20 keystream; encryption and decryption alike."""
    data = bytes(data)
    stream = chacha20_keystream(key, nonce, initial_counter, len(data))
    if not data:
        return b""
    mixed = int.from_bytes(data, "little") ^ int.from_bytes(stream, "little")
    return mixed.to_bytes(len(data), "little")