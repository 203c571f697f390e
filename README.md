# mercha

`mercha` computes a 64-byte digest of a byte string in two steps:

1. The data is encrypted with ChaCha20 (20 rounds, 32-byte key, 12-byte
   nonce, 32-bit block counter starting at 0).
2. The ciphertext is reduced pairwise, 64-byte block by 64-byte block, with a
   ChaCha-style merge function until a single 64-byte block remains.

The package also ships two commands that work on a small "meta" file
describing a test case: one generates the input data, the other computes the
digest and checks it against the expected result.

It is written in pure Python with no dependencies beyond the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from mercha.core import mercha
from mercha.chacha import chacha20_encrypt
from mercha.merkle import merkle_tree
from mercha.generator import generate_data

key = bytes(range(32))
nonce = bytes(12)

data = generate_data(1, 4096)          # deterministic pseudo-random bytes
digest = mercha(key, nonce, data)      # 64-byte digest

ciphertext = chacha20_encrypt(key, nonce, 0, data)
assert merkle_tree(ciphertext) == digest
```

`mercha.chacha`:

- `chacha20_block(key, nonce, counter)` returns one 64-byte keystream block.
- `chacha20_keystream(key, nonce, initial_counter, length)` returns `length`
  bytes of keystream; the counter wraps at 2**32.
- `chacha20_encrypt(key, nonce, initial_counter, data)` returns `data` XORed
  with the keystream as new bytes. Applying it twice with the same arguments
  gives back the input.

A key that is not 32 bytes, a nonce that is not 12 bytes, or a negative
length raises `ValueError`.

`mercha.merkle`:

- `merge_hash(block1, block2)` combines two 64-byte blocks into one. Only the
  first 32 bytes of each block affect the result.
- `merkle_tree(data)` folds the data down to its 64-byte root. Data shorter
  than 64 bytes raises `ValueError`. At each level only whole pairs of blocks
  within the first half-length are merged, so the data is best sized as a
  power-of-two multiple of 64 bytes, as the files written by
  `mercha-generate` usually are.

`mercha.core`:

- `mercha(key, nonce, data)` encrypts from counter 0 and then folds.

`mercha.generator`:

- `generate_data(seed, length)` returns `length` bytes from a linear
  congruential generator (a = 1103515245, c = 12345, m = 2**31); each byte is
  the next state modulo 255.

## Meta files

A meta file describes one test case. Each field name sits on its own line and
its value on the next line, indented:

```
File name:
   data.bin
Length:
   4096
Key:
   0x000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f
Nonce:
   0x000000000000000000000000
Result:
   0x<128 hex digits of the expected digest>
Generate info:
   1
```

Hex values carry a two-character prefix (`0x`) that is skipped. `Generate
info` is the seed passed to `generate_data`. All six fields are required; a
missing field, a negative length or malformed hex raises `ValueError`.

From Python, `read_meta(path)` and `parse_meta(lines)` in `mercha.meta` return
a `MetaInfo` dataclass with the fields `file_name`, `length`, `key`, `nonce`,
`result` and `generate_info`. Its `describe()` method returns the summary the
commands print.

`run_check(meta, output_path)` in `mercha.runner` reads up to `meta.length`
bytes of the data file (zero-padding a short file), prints the digest,
writes the 64 digest bytes to `output_path` (default `output.tmp`) and
returns `True` when the digest equals `meta.result`.

## Commands

Create the input file named in a meta file:

```
mercha-generate case.meta
```

Compute the digest of that file and compare it with the expected result:

```
mercha-check case.meta
```

`mercha-check` prints the meta information, the computed digest and either
`Pass this test!` or `Fail this test!`, and writes the digest bytes to
`output.tmp` in the current directory. Both commands exit with status 1 when
the meta file or the data file cannot be read or parsed; a failed comparison
still exits with status 0.

Both can also be run as modules: `python -m mercha.generator case.meta` and
`python -m mercha.runner case.meta`.

## Limits

Everything runs in a single thread in pure Python, so digesting large inputs
is slow.