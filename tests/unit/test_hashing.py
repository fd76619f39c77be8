# tests/unit/test_hashing.py

import pytest
from rendezvous.utils.hashing import (
    murmur3_128, make_murmur3_128, string_funnel, bytes_funnel, int_funnel,
)


def test_murmur3_is_deterministic_and_unsigned():
    """Tes hash default deterministik dan berada di rentang 128-bit tanpa tanda."""
    value = murmur3_128(b"keynode1")
    assert value == murmur3_128(b"keynode1")
    assert 0 <= value < 2 ** 128
    assert murmur3_128(b"keynode1") != murmur3_128(b"keynode2")

def test_seed_changes_hash():
    """Tes seed yang berbeda menghasilkan hash yang berbeda."""
    assert make_murmur3_128(1)(b"key") != make_murmur3_128(2)(b"key")
    assert make_murmur3_128(0)(b"key") == murmur3_128(b"key", 0)

def test_string_funnel():
    """Tes string_funnel memakai encoding utf-8 secara default."""
    assert string_funnel("node1") == b"node1"
    assert string_funnel("kunci-é") == "kunci-é".encode("utf-8")
    with pytest.raises(TypeError):
        string_funnel(b"node1")

def test_bytes_funnel():
    """Tes bytes_funnel mengembalikan bytes apa adanya."""
    assert bytes_funnel(b"\x00\x01") == b"\x00\x01"
    assert bytes_funnel(bytearray(b"ab")) == b"ab"

def test_int_funnel_fixed_width():
    """Tes integer 64-bit di-encode menjadi 8 byte big-endian."""
    assert int_funnel(1) == b"\x00" * 7 + b"\x01"
    assert int_funnel(-1) == b"\xff" * 8
    assert len(int_funnel(2 ** 63 - 1)) == 8
    assert len(int_funnel(-(2 ** 63))) == 8

def test_int_funnel_big_integers_do_not_collide():
    """Tes integer besar diberi prefiks panjang sehingga tidak bertabrakan."""
    big = int_funnel(2 ** 63)
    assert len(big) > 8
    assert big != int_funnel(0)
    assert int_funnel(2 ** 200) != int_funnel(2 ** 201)
    with pytest.raises(TypeError):
        int_funnel("1")

def test_bytes_funnel_rejects_other_types():
    """Tes bytes_funnel menolak int (bytes(3) akan menjadi tiga byte nol)."""
    assert bytes_funnel(memoryview(b"node")) == b"node"
    with pytest.raises(TypeError):
        bytes_funnel(3)
    with pytest.raises(TypeError):
        bytes_funnel(10 ** 10)
    with pytest.raises(TypeError):
        bytes_funnel("node1")
