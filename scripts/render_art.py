from __future__ import annotations
import argparse
from typing import Iterable

from drunken_diver.route import DEFAULT_WIDTH, draw
from drunken_diver.sources import bytes_from_hex, bytes_from_text, iter_file_bytes, sha256_digest

DIGESTS = ("none", "sha256")


def load_source(args: argparse.Namespace) -> Iterable[int]:
    if args.hex is not None:
        data: Iterable[int] = bytes_from_hex(args.hex)
    elif args.file is not None:
        data = iter_file_bytes(args.file)
    else:
        data = bytes_from_text(args.text)
    if args.digest == "sha256":
        data = sha256_digest(bytes(data))
    return data


def main(argv=None):
    p = argparse.ArgumentParser(description="Draw the drunken diver art of some bytes")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--hex", type=str, help="hex bytes, e.g. 'f4bf9f' or 'f4:bf:9f'")
    src.add_argument("--text", type=str, help="use the UTF-8 bytes of this text")
    src.add_argument("--file", type=str, help="path to a file to draw")
    p.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="canvas width in columns")
    p.add_argument("--digest", default="none", choices=DIGESTS, help="hash the input before drawing")
    args = p.parse_args(argv)

    if args.width <= 0:
        p.error("--width must be positive")
    try:
        art = draw(load_source(args), args.width)
    except ValueError as e:
        p.error(str(e))
    print(art)


if __name__ == "__main__":
    main()
