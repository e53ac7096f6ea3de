import heapq
from collections import Counter
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union


class HuffmanError(Exception): # Base class for every error raised by the codec
    pass

class MalformedStreamError(HuffmanError): # Compressed input is truncated or corrupted
    pass

class InvariantError(HuffmanError): # A tree or code table is internally inconsistent
    pass


class Leaf: # Leaf of the Huffman tree, one per distinct byte
    def __init__(self, symbol: int, frequency: int = 0, seq: int = 0):
        self.symbol = symbol # byte value 0..255
        self.frequency = frequency
        self.seq = seq # creation order, used to break ties

    def __lt__(self, other):
        return (self.frequency, self.seq) < (other.frequency, other.seq)

    def __repr__(self):
        return f"Leaf({self.symbol!r}, {self.frequency})"


class Internal: # Internal node, owns both children
    def __init__(self, left, right, seq: int = 0):
        self.left = left
        self.right = right
        self.frequency = left.frequency + right.frequency
        self.seq = seq

    def __lt__(self, other):
        return (self.frequency, self.seq) < (other.frequency, other.seq)

    def __repr__(self):
        return f"Internal({self.left!r}, {self.right!r})"


Node = Union[Leaf, Internal]


def count_frequencies(data: bytes) -> Mapping[int, int]:
    """
    Single pass count of every byte value in data
    Returns a read-only symbol -> count mapping (empty for empty input)
    """
    return MappingProxyType(dict(Counter(data)))


def build_huffman_tree(frequency_table: Mapping[int, int]) -> Optional[Node]: # frequency_table: dict of symbol -> frequency
    """
    Repeatedly merges the two smallest nodes until one root is left
    Nodes order by (frequency, seq). Leaves are created in ascending symbol
    order and merged nodes get later seq numbers, so equal leaves break
    ties by symbol and anything involving a merged node breaks ties by age
    """
    if not frequency_table:
        return None

    seq = 0
    priority_queue = []
    for symbol in sorted(frequency_table):
        priority_queue.append(Leaf(symbol, frequency_table[symbol], seq))
        seq += 1
    heapq.heapify(priority_queue)

    while len(priority_queue) > 1:
        left = heapq.heappop(priority_queue) # removed first becomes the left child
        right = heapq.heappop(priority_queue)
        heapq.heappush(priority_queue, Internal(left, right, seq))
        seq += 1

    return priority_queue[0] # a lone Leaf when only one symbol exists


def generate_huffman_codes(root: Optional[Node]) -> Mapping[int, str]: # root: root of the Huffman tree
    codes: Dict[int, str] = {}
    if root is None:
        return MappingProxyType(codes)

    # Single symbol: still needs one bit per occurrence so the decoder can count
    if isinstance(root, Leaf):
        codes[root.symbol] = '0'
        return MappingProxyType(codes)

    stack = [(root, '')]
    while stack:
        node, current_code = stack.pop()
        if isinstance(node, Leaf):
            codes[node.symbol] = current_code
        else:
            stack.append((node.right, current_code + '1'))
            stack.append((node.left, current_code + '0'))

    return MappingProxyType(codes)


def iter_nodes(root: Optional[Node]):
    """Preorder walk over every node of the tree"""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Internal):
            stack.append(node.right)
            stack.append(node.left)


def check_tree(root: Optional[Node]) -> None:
    """Raises InvariantError if an internal node's frequency is not the sum of its children"""
    for node in iter_nodes(root):
        if isinstance(node, Internal):
            expected = node.left.frequency + node.right.frequency
            if node.frequency != expected:
                raise InvariantError(
                    f"internal node frequency {node.frequency} != {expected} (sum of children)")


def check_prefix_free(codes: Mapping[int, str]) -> None:
    """Raises InvariantError if any code is empty or a prefix of another code"""
    # In sorted order a code that is a prefix of others sorts directly before one of them
    ordered = sorted(codes.items(), key=lambda item: item[1])
    for symbol, code in ordered:
        if not code:
            raise InvariantError(f"symbol {symbol} has an empty code")
    for (sym_a, code_a), (sym_b, code_b) in zip(ordered, ordered[1:]):
        if code_b.startswith(code_a):
            raise InvariantError(f"code {code_a!r} of symbol {sym_a} is a prefix of {code_b!r} (symbol {sym_b})")
