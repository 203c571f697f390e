"""Generate the data file named in a meta file from its linear-congruential seed."""

from __future__ import annotations

import sys
from typing import Sequence

from .meta import read_meta

LCG_A = 1103515245
LCG_C = 12345
LCG_M = 2147483648
_MASK64 = 0xFFFFFFFFFFFFFFFF


def generate_data(seed: int, length: int) -> bytes:
    """Return ``length`` pseudo-random bytes, each the next LCG state modulo 255."""
    if length < 0:
        raise ValueError("length must not be negative")
    state = seed & _MASK64
    out = bytearray()
    for _ in range(length):
        state = (LCG_A * state + LCG_C) % LCG_M
        out.append(state % 255)
    return bytes(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Create the data file described by the meta file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Please input a meta file address", file=sys.stderr)
        return 1
    try:
        meta = read_meta(args[0])
    except FileNotFoundError:
        print(f"Please make sure {args[0]} exists!")
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(meta.describe())
    print("===GENERATING===")
    try:
        handle = open(meta.file_name, "wb")
    except OSError:
        print(f"Fail to create file {meta.file_name}!")
        return 1
    print(f"Success create file {meta.file_name}.")
    with handle:
        written = handle.write(generate_data(meta.generate_info, meta.length))
    print(f"Write {written} bytes to file {meta.file_name}.")
    print("===FINISH===")
    return 0


if __name__ == "__main__":
    sys.exit(main())