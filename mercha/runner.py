"""Check a data file's mercha digest against the result recorded in its meta file."""

from __future__ import annotations

import os
import sys
from typing import Sequence

from .core import mercha
from .meta import MetaInfo, read_meta

DEFAULT_OUTPUT = "output.tmp"


def run_check(
    meta: MetaInfo, output_path: str | os.PathLike[str] = DEFAULT_OUTPUT
) -> bool:
    """Digest the meta's data file, report it, write it to ``output_path``; True if it matches."""
    print("===LOADING===")
    with open(meta.file_name, "rb") as handle:
        data = handle.read(meta.length)
    print(f"Read {len(data)} bytes from file {meta.file_name}.")
    data = data.ljust(meta.length, b"\0")

    print("===RUNING===")
    digest = mercha(meta.key, meta.nonce, data)
    print("Output:")
    print(f"   0x{digest.hex()}")
    passed = digest == meta.result
    print("Pass this test!" if passed else "Fail this test!")

    print("===OUTPUT===")
    with open(output_path, "wb") as handle:
        written = handle.write(digest)
    print(f"Output {written} bytes.")
    print("===FINISH===")
    return passed


def main(argv: Sequence[str] | None = None) -> int:
    """Run the check described by the meta file named on the command line."""
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
    try:
        run_check(meta)
    except FileNotFoundError:
        print(f"Please make sure {meta.file_name} exists!")
        return 1
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())