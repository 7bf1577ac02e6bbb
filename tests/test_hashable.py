from dataclasses import dataclass

import pytest

from openhash.hashable import (
    DJB2_SEED,
    USIZE_MASK,
    HashAble,
    hash_bytes,
    hash_char,
    hash_key,
    hash_str,
)
from openhash.table import HashTable


def test_int_keys_hash_to_themselves():
    assert hash_key(0) == 0
    assert hash_key(7) == 7
    assert hash_key(True) == 1
    # negative values wrap like a cast to an unsigned machine word
    assert hash_key(-1) == USIZE_MASK
    assert hash_key(1 << 64) == 0


def test_char_keys():
    assert hash_key("a") == 5381 * 33 + 97 == 177670
    assert hash_char("b") == 177671
    # chars use the code point, not the encoded bytes
    assert hash_key("é") == 5381 * 33 + 233


def test_str_keys():
    assert hash_str("") == DJB2_SEED == 5381
    assert hash_str("a") == 177670
    assert hash_key("ab") == 177670 * 33 + 98 == 5863208
    # text is hashed over its utf-8 bytes
    assert hash_str("é") == (5381 * 33 + 0xC3) * 33 + 0xA9


def test_bytes_keys():
    assert hash_key(b"ab") == hash_key("ab")
    assert hash_bytes(bytearray(b"ab")) == 5863208


def test_long_str_wraps():
    digest = hash_key("x" * 1000)
    assert 0 <= digest <= USIZE_MASK
    assert digest == hash_key("x" * 1000)


@dataclass
class Point:
    x: int
    y: int

    def hash_key(self) -> int:
        return self.x * 31 + self.y


def test_hashable_protocol():
    assert isinstance(Point(1, 2), HashAble)
    assert hash_key(Point(1, 2)) == 33
    assert hash_key(Point(-1, 0)) == USIZE_MASK - 30

    t = HashTable()
    t.insert(Point(1, 2), "p")
    t.insert(Point(3, 4), "q")
    assert t.get(Point(1, 2)) == "p"
    assert t.get(Point(3, 4)) == "q"


def test_unsupported_keys():
    with pytest.raises(TypeError):
        hash_key(1.5)
    with pytest.raises(TypeError):
        hash_key((1, 2))
    with pytest.raises(TypeError):
        hash_key(None)


def test_hash_char_rejects_longer_text():
    with pytest.raises(ValueError):
        hash_char("ab")
    with pytest.raises(ValueError):
        hash_char("")
