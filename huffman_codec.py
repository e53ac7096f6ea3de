"""
Compressed file layout (MSB-first bit packing, final byte zero-padded):

  bits 0-31   original length N, unsigned big-endian
  bits 32..   tree in preorder: 0 = internal node (left, then right),
              1 followed by 8 bits = leaf symbol; absent when N == 0
  after tree  the code of every input byte, in input order
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Set

import huffman as huff
from bitstream import BitReader, BitWriter
from huffman import Internal, Leaf, MalformedStreamError, Node

HEADER_BITS = 32
MAX_TREE_DEPTH = 255 # deepest possible tree over 256 symbols


def write_tree(node: Node, writer: BitWriter) -> None:
    if isinstance(node, Leaf):
        writer.write_bit(1)
        writer.write_byte(node.symbol)
    else:
        writer.write_bit(0)
        write_tree(node.left, writer)
        write_tree(node.right, writer)


def read_tree(reader: BitReader) -> Node:
    """
    Rebuilds a tree written by write_tree; leaf frequencies are not stored
    Raises MalformedStreamError on truncation, impossible depth or a repeated symbol
    """
    seen: Set[int] = set()

    def read_node(depth: int) -> Node:
        if depth > MAX_TREE_DEPTH:
            raise MalformedStreamError(f"tree deeper than {MAX_TREE_DEPTH} levels")
        if reader.read_bit() == 1:
            symbol = reader.read_byte()
            if symbol in seen:
                raise MalformedStreamError(f"symbol {symbol} appears twice in the tree")
            seen.add(symbol)
            return Leaf(symbol)
        left = read_node(depth + 1)
        right = read_node(depth + 1)
        return Internal(left, right)

    try:
        return read_node(0)
    except EOFError as e:
        raise MalformedStreamError(f"stream ends inside the code tree: {e}") from e


@dataclass
class Encoding:
    data: bytes
    payload: bytes
    frequencies: Mapping[int, int]
    codes: Mapping[int, str]
    header_bits: int # length field + tree
    payload_bits: int

    @property
    def output_bytes(self) -> int:
        return len(self.payload)

    def encoded_bits(self) -> str:
        """The packed code sequence as a '0'/'1' string, without header or padding"""
        return ''.join(self.codes[b] for b in self.data)


@dataclass
class Decoding:
    data: bytes
    codes: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))


def compress(data: bytes) -> Encoding:
    data = bytes(data)
    frequencies = huff.count_frequencies(data)
    root = huff.build_huffman_tree(frequencies)
    codes = huff.generate_huffman_codes(root)
    if __debug__:
        huff.check_tree(root)
        huff.check_prefix_free(codes)

    writer = BitWriter()
    writer.write_uint32(len(data))
    if root is not None:
        write_tree(root, writer)
    header_bits = writer.bit_count

    for b in data:
        writer.write_code(codes[b])

    return Encoding(
        data=data,
        payload=writer.getvalue(),
        frequencies=frequencies,
        codes=codes,
        header_bits=header_bits,
        payload_bits=writer.bit_count - header_bits,
    )


def encode(data: bytes) -> bytes:
    return compress(data).payload


def _decode_symbols(reader: BitReader, root: Node, count: int) -> bytes:
    decoded = bytearray()
    if isinstance(root, Leaf):
        # one '0' bit per occurrence
        for _ in range(count):
            if reader.read_bit() != 0:
                raise MalformedStreamError("unexpected 1 bit for a single-symbol tree")
            decoded.append(root.symbol)
        return bytes(decoded)

    for _ in range(count):
        node = root
        while isinstance(node, Internal):
            node = node.right if reader.read_bit() else node.left
        decoded.append(node.symbol)
    return bytes(decoded)


def decompress(payload: bytes) -> Decoding:
    reader = BitReader(payload)
    try:
        count = reader.read_uint32()
    except EOFError as e:
        raise MalformedStreamError(f"stream too short for the length header: {e}") from e
    if count == 0:
        return Decoding(data=b'')

    root = read_tree(reader)
    # every symbol costs at least one bit
    if count > reader.bits_remaining:
        raise MalformedStreamError(
            f"header claims {count} bytes but only {reader.bits_remaining} bits remain")
    try:
        data = _decode_symbols(reader, root, count)
    except EOFError as e:
        raise MalformedStreamError(f"stream ends before {count} bytes were decoded: {e}") from e
    return Decoding(data=data, codes=huff.generate_huffman_codes(root))


def decode(payload: bytes) -> bytes:
    return decompress(payload).data


def tree_bits(root: Optional[Node]) -> int:
    """Size of the serialized tree: one marker bit per node plus 8 bits per leaf"""
    total = 0
    for node in huff.iter_nodes(root):
        total += 9 if isinstance(node, Leaf) else 1
    return total
