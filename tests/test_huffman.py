import random

import pytest

import huffman as huff
from huffman import Internal, InvariantError, Leaf


def test_count_frequencies():
    assert dict(huff.count_frequencies(b'AAAAABBBCC')) == {65: 5, 66: 3, 67: 2}
    assert dict(huff.count_frequencies(b'')) == {}


def test_frequency_table_is_read_only():
    ft = huff.count_frequencies(b'abc')
    with pytest.raises(TypeError):
        ft[97] = 10


def test_empty_table_builds_no_tree():
    assert huff.build_huffman_tree({}) is None
    assert dict(huff.generate_huffman_codes(None)) == {}


def test_scenario_a_codes():
    ft = huff.count_frequencies(b'AAAAABBBCC')
    root = huff.build_huffman_tree(ft)
    assert root.frequency == 10
    assert isinstance(root.left, Leaf) and root.left.symbol == ord('A')
    assert isinstance(root.right, Internal)
    assert root.right.left.symbol == ord('C')
    assert root.right.right.symbol == ord('B')
    codes = huff.generate_huffman_codes(root)
    assert dict(codes) == {ord('A'): '0', ord('B'): '11', ord('C'): '10'}


def test_equal_leaves_break_ties_by_symbol():
    codes = huff.generate_huffman_codes(huff.build_huffman_tree({68: 1, 67: 1, 66: 1, 65: 1}))
    assert dict(codes) == {65: '00', 66: '01', 67: '10', 68: '11'}


def test_older_node_wins_tie_against_merged_node():
    # A+B merge into a node of weight 2, which ties with leaf C created earlier
    codes = huff.generate_huffman_codes(huff.build_huffman_tree({65: 1, 66: 1, 67: 2}))
    assert dict(codes) == {67: '0', 65: '10', 66: '11'}


def test_single_symbol_gets_one_bit_code():
    root = huff.build_huffman_tree(huff.count_frequencies(b'AAAA'))
    assert isinstance(root, Leaf)
    assert root.frequency == 4
    assert dict(huff.generate_huffman_codes(root)) == {65: '0'}


def test_tree_structure_for_all_symbols():
    rng = random.Random(7)
    ft = {s: rng.randint(1, 50) for s in range(256)}
    root = huff.build_huffman_tree(ft)
    nodes = list(huff.iter_nodes(root))
    leaves = [n for n in nodes if isinstance(n, Leaf)]
    internals = [n for n in nodes if isinstance(n, Internal)]
    assert len(leaves) == 256
    assert len(internals) == 255
    assert root.frequency == sum(ft.values())
    huff.check_tree(root)
    codes = huff.generate_huffman_codes(root)
    assert set(codes) == set(range(256))
    huff.check_prefix_free(codes)


def test_build_is_deterministic():
    ft = {s: (s % 5) + 1 for s in range(40)}
    a = huff.generate_huffman_codes(huff.build_huffman_tree(ft))
    b = huff.generate_huffman_codes(huff.build_huffman_tree(dict(reversed(list(ft.items())))))
    assert dict(a) == dict(b)


def test_frequent_symbols_get_shorter_codes():
    codes = huff.generate_huffman_codes(huff.build_huffman_tree({1: 100, 2: 10, 3: 5, 4: 1}))
    assert len(codes[1]) <= len(codes[2]) <= len(codes[3]) <= len(codes[4])


def test_check_prefix_free_detects_prefix():
    with pytest.raises(InvariantError):
        huff.check_prefix_free({1: '0', 2: '01', 3: '1'})


def test_check_prefix_free_detects_duplicate_and_empty():
    with pytest.raises(InvariantError):
        huff.check_prefix_free({1: '10', 2: '10'})
    with pytest.raises(InvariantError):
        huff.check_prefix_free({1: ''})


def test_check_prefix_free_accepts_valid_table():
    huff.check_prefix_free({1: '0', 2: '10', 3: '110', 4: '111'})


def test_check_tree_detects_bad_frequency():
    root = huff.build_huffman_tree({65: 3, 66: 4, 67: 5})
    huff.check_tree(root)
    root.frequency += 1
    with pytest.raises(InvariantError):
        huff.check_tree(root)
