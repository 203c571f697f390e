"""Meta files describing a mercha test case: data file, key, nonce and expected digest."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Callable, Iterable

KEY_SIZE = 32
NONCE_SIZE = 12
RESULT_SIZE = 64

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _parse_name(text: str) -> str:
    return text.lstrip(" ").rstrip("\n")


def _parse_length(text: str) -> int:
    value = _atoi(text)
    if value < 0:
        raise ValueError(f"length must not be negative, got {value}")
    return value


def _hex_parser(label: str, size: int) -> Callable[[str], bytes]:
    def parse(text: str) -> bytes:
        # The value is written as "0x" followed by the hex digits; the prefix is skipped.
        digits = text.lstrip(" ")[2:2 + 2 * size]
        if len(digits) != 2 * size:
            raise ValueError(f"{label} must hold {size} bytes of hex digits")
        try:
            return bytes.fromhex(digits)
        except ValueError as exc:
            raise ValueError(f"{label} holds invalid hex digits") from exc

    return parse


_FIELDS: tuple[tuple[str, str, Callable[[str], object]], ...] = (
    ("File name:", "file_name", _parse_name),
    ("Length:", "length", _parse_length),
    ("Key:", "key", _hex_parser("Key", KEY_SIZE)),
    ("Nonce:", "nonce", _hex_parser("Nonce", NONCE_SIZE)),
    ("Result:", "result", _hex_parser("Result", RESULT_SIZE)),
    ("Generate info:", "generate_info", _atoi),
)


@dataclass
class MetaInfo:
    """Everything a meta file says about one test case."""

    file_name: str
    length: int
    key: bytes
    nonce: bytes
    result: bytes
    generate_info: int

    def describe(self) -> str:
        """Return the human-readable summary block, in the meta file's own layout."""
        return "\n".join(
            [
                "===META INFO===",
                "File name: ",
                f"   {self.file_name}",
                "Length:",
                f"   {self.length}",
                "Key:",
                f"   0x{self.key.hex()}",
                "Nonce:",
                f"   0x{self.nonce.hex()}",
                "Result:",
                f"   0x{self.result.hex()}",
                "Generate info:",
                f"   {self.generate_info}",
            ]
        )


def parse_meta(lines: Iterable[str]) -> MetaInfo:
    """Build a :class:`MetaInfo` from meta-file lines; each header's value is on the next line."""
    values: dict[str, object] = {}
    it = iter(lines)
    for line in it:
        for prefix, field, parser in _FIELDS:
            if line.startswith(prefix):
                value = next(it, None)
                if value is None:
                    raise ValueError(f"missing value after {prefix!r}")
                values[field] = parser(value)
                break
    missing = [prefix for prefix, field, _ in _FIELDS if field not in values]
    if missing:
        raise ValueError(f"meta file lacks: {', '.join(missing)}")
    return MetaInfo(**values)  # type: ignore[arg-type]


def read_meta(path: str | os.PathLike[str]) -> MetaInfo:
    """Read and parse the meta file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_meta(handle)