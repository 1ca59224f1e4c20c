"""
Comparison & Search - Unit Tests

Verifies:
  - equals() on length and content
  - compare() lexicographic ordering with prefix rule
  - compare() == 0 iff equals() over a generated population
  - index_of() offsets, misses and edge cases
"""

import itertools
import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bytesuite import ByteBuffer
from bytesuite.kernel import equals, compare, index_of


def test_equals_basic():
    assert equals(b"", b"")
    assert equals(b"abc", bytearray(b"abc"))
    assert not equals(b"abc", b"abd")
    assert not equals(b"abc", b"ab")


@pytest.mark.parametrize("a,b,expected", [
    (b"", b"", 0),
    (b"", b"\x00", -1),
    (b"\x00", b"", 1),
    (b"ab", b"abc", -1),
    (b"abc", b"ab", 1),
    (b"abd", b"abc", 1),
    (b"\x01\xff", b"\x02\x00", -1),
    (b"same", b"same", 0),
])
def test_compare_table(a, b, expected):
    assert compare(a, b) == expected


def test_compare_zero_iff_equals():
    """Tri-state ordering agrees with equality across empty, prefix and same-length pairs."""
    rng = random.Random(1234)
    population = [b"", b"\x00", b"\x00\x00", b"\xff", b"ab", b"abc", b"abd", b"abcd"]
    population += [bytes(rng.randrange(4) for _ in range(rng.randrange(5))) for _ in range(40)]
    buffers = [ByteBuffer.from_bytes(p) for p in population]

    for x, y in itertools.product(buffers, repeat=2):
        assert (x.compare(y) == 0) == x.equals(y), f"{x!r} vs {y!r}"
        assert x.compare(y) == -y.compare(x)
        assert x.compare(y) == (bytes(x) > bytes(y)) - (bytes(x) < bytes(y))


def test_index_of_basic():
    hay = b"abcabcabd"
    assert index_of(hay, b"abc") == 0
    assert index_of(hay, b"abc", 1) == 3
    assert index_of(hay, b"abd") == 6
    assert index_of(hay, b"d") == 8
    assert index_of(hay, b"abx") == -1


def test_index_of_edges():
    hay = b"hello"
    assert index_of(hay, None) == -1
    assert index_of(hay, b"hello!") == -1
    assert index_of(hay, b"lo", 4) == -1
    assert index_of(hay, b"o", 6) == -1
    assert index_of(hay, b"", 2) == 2
    assert index_of(hay, b"", 5) == 5
    assert index_of(hay, b"", 6) == -1
    assert index_of(hay, b"h", -1) == -1


def test_index_of_matches_bytes_find():
    """Horspool scan agrees with bytes.find on random inputs."""
    rng = random.Random(99)
    for _ in range(300):
        hay = bytes(rng.randrange(3) for _ in range(rng.randrange(20)))
        needle = bytes(rng.randrange(3) for _ in range(1 + rng.randrange(4)))
        offset = rng.randrange(len(hay) + 1)
        assert index_of(hay, needle, offset) == hay.find(needle, offset), (hay, needle, offset)


def test_buffer_index_of_ignores_unused_capacity():
    """Zeroed spare capacity is never matched."""
    buf = ByteBuffer.alloc()
    buf.write(b"\x01\x02")
    assert buf.index_of(b"\x00") == -1
    assert buf.index_of(ByteBuffer.from_bytes(b"\x02")) == 1
    assert buf.index_of(None) == -1
