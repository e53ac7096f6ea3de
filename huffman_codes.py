"""
Encodes and decodes files using Huffman's technique

How to run:
  python huffman_codes.py --encode --show-frequency --show-codes notes.txt notes.huf
  python huffman_codes.py --decode --show-codes notes.huf notes.out
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Mapping, Optional

import huffman_codec as codec
from huffman import HuffmanError

ESCAPED_LITERALS = {
    ord('\n'): "'\\n'",
    ord('\r'): "'\\r'",
    ord('\\'): "'\\\\'",
    ord("'"): "'\\''",
}


def render_symbol(symbol: int) -> str:
    if symbol in ESCAPED_LITERALS:
        return ESCAPED_LITERALS[symbol]
    if 0x20 <= symbol < 0x7F:
        return f"'{chr(symbol)}'"
    return f"'\\x{symbol:02x}'"


def print_frequencies(frequencies: Mapping[int, int]) -> None:
    print("FREQUENCY TABLE")
    for symbol, count in sorted(frequencies.items(), key=lambda item: (item[1], item[0])):
        print(f"{render_symbol(symbol)}: {count}")


def print_codes(codes: Mapping[int, str]) -> None:
    print("CODES")
    for symbol, code in sorted(codes.items(), key=lambda item: (len(item[1]), item[1])):
        print(f'"{code}" -> {render_symbol(symbol)}')


def print_binary(bits: str) -> None:
    print("ENCODED SEQUENCE")
    print(bits)


def print_size_report(result: codec.Encoding) -> None:
    input_bytes = len(result.data)
    ratio = result.output_bytes / max(1, input_bytes) * 100
    print(f" input: {input_bytes} bytes [{input_bytes * 8} bits]")
    print(f"output: {result.output_bytes} bytes "
          f"[header: {result.header_bits} bits; encoding: {result.payload_bits} bits]")
    print(f"output/input size: {ratio:.4f}%")


def run_encode(args: argparse.Namespace) -> None:
    data = Path(args.input).read_bytes()
    result = codec.compress(data)

    if args.show_frequency:
        print_frequencies(result.frequencies)
    if args.show_codes:
        print_codes(result.codes)
    if args.show_binary:
        print_binary(result.encoded_bits())

    Path(args.output).write_bytes(result.payload)
    print_size_report(result)


def run_decode(args: argparse.Namespace) -> None:
    payload = Path(args.input).read_bytes()
    result = codec.decompress(payload)

    if args.show_codes:
        print_codes(result.codes)

    Path(args.output).write_bytes(result.data)
    print(f"original size: {len(result.data)}")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="huffman-codes",
        description="Encodes and decodes files using Huffman's technique",
    )
    mode = ap.add_mutually_exclusive_group(required=True)
    mode.add_argument("-e", "--encode", action="store_true", help="Encodes IN to OUT")
    mode.add_argument("-d", "--decode", action="store_true", help="Decodes IN to OUT")

    ap.add_argument("--show-frequency", action="store_true", help="Output byte frequencies (encode only)")
    ap.add_argument("--show-codes", action="store_true", help="Output the code for each byte")
    ap.add_argument("--show-binary", action="store_true",
                    help="Output a base-two representation of the encoded sequence (encode only)")

    ap.add_argument("input", metavar="IN", help="File to read")
    ap.add_argument("output", metavar="OUT", help="File to write")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.decode and (args.show_frequency or args.show_binary):
        ap.error("--show-frequency and --show-binary require --encode")

    try:
        if args.encode:
            run_encode(args)
        else:
            run_decode(args)
    except (HuffmanError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
