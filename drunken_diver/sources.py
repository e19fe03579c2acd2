from __future__ import annotations
import hashlib
from typing import Iterator

HEX_SEPARATORS = ":- \t\r\n"


def bytes_from_hex(text: str) -> bytes:
    """Parses hex like 'f4bf9f', '0xf4bf9f' or an 'f4:bf:9f' fingerprint."""
    s = text.strip()
    if s[:2].lower() == "0x":
        s = s[2:]
    for sep in HEX_SEPARATORS:
        s = s.replace(sep, "")
    if len(s) % 2 != 0:
        raise ValueError(f"odd number of hex digits in {text!r}")
    try:
        return bytes.fromhex(s)
    except ValueError:
        raise ValueError(f"not a hex string: {text!r}") from None


def bytes_from_text(text: str) -> bytes:
    return text.encode("utf-8")


def iter_file_bytes(path: str, chunk_size: int = 65536) -> Iterator[int]:
    """Yields the bytes of a file lazily, reading it chunk by chunk."""
    with open(path, "rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            yield from chunk


def sha256_digest(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()
