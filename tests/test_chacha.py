import pytest

from mercha.chacha import chacha20_block, chacha20_encrypt, chacha20_keystream

ZERO_KEY = bytes(32)
ZERO_NONCE = bytes(12)
SEQ_KEY = bytes(range(32))


def test_zero_key_block_matches_known_vector():
    expected = bytes.fromhex(
        "76b8e0ada0f13d90405d6ae55386bd28"
        "bdd219b8a08ded1aa836efcc8b770dc7"
        "da41597c5157488d7724e03fb8d84a37"
        "6a43b8f41518a11cc387b669b2ee6586"
    )
    assert chacha20_block(ZERO_KEY, ZERO_NONCE, 0) == expected


def test_block_is_64_bytes_and_counter_dependent():
    first = chacha20_block(SEQ_KEY, ZERO_NONCE, 0)
    second = chacha20_block(SEQ_KEY, ZERO_NONCE, 1)
    assert len(first) == 64
    assert first != second


def test_keystream_concatenates_blocks():
    stream = chacha20_keystream(SEQ_KEY, ZERO_NONCE, 5, 150)
    expected = (
        chacha20_block(SEQ_KEY, ZERO_NONCE, 5)
        + chacha20_block(SEQ_KEY, ZERO_NONCE, 6)
        + chacha20_block(SEQ_KEY, ZERO_NONCE, 7)[:22]
    )
    assert stream == expected


def test_keystream_counter_wraps_at_32_bits():
    stream = chacha20_keystream(SEQ_KEY, ZERO_NONCE, 0xFFFFFFFF, 128)
    assert stream[64:] == chacha20_block(SEQ_KEY, ZERO_NONCE, 0)


def test_keystream_zero_length():
    assert chacha20_keystream(SEQ_KEY, ZERO_NONCE, 0, 0) == b""


def test_encrypting_zeros_yields_keystream():
    assert chacha20_encrypt(SEQ_KEY, ZERO_NONCE, 3, bytes(200)) == chacha20_keystream(
        SEQ_KEY, ZERO_NONCE, 3, 200
    )


@pytest.mark.parametrize("length", [0, 1, 63, 64, 65, 255, 256, 257, 1000])
def test_encrypt_round_trip(length):
    nonce = bytes(range(12))
    plaintext = bytes((i * 7) % 256 for i in range(length))
    ciphertext = chacha20_encrypt(SEQ_KEY, nonce, 1, plaintext)
    assert len(ciphertext) == length
    assert chacha20_encrypt(SEQ_KEY, nonce, 1, ciphertext) == plaintext


def test_encrypt_prefix_consistency():
    data = bytes(range(256)) * 2
    full = chacha20_encrypt(SEQ_KEY, ZERO_NONCE, 0, data)
    assert chacha20_encrypt(SEQ_KEY, ZERO_NONCE, 0, data[:100]) == full[:100]


def test_bad_key_length_raises():
    with pytest.raises(ValueError):
        chacha20_block(bytes(31), ZERO_NONCE, 0)


def test_bad_nonce_length_raises():
    with pytest.raises(ValueError):
        chacha20_encrypt(ZERO_KEY, bytes(8), 0, b"abc")


def test_negative_length_raises():
    with pytest.raises(ValueError):
        chacha20_keystream(ZERO_KEY, ZERO_NONCE, 0, -1)