# rendezvous/utils/hashing.py

import mmh3  # Pastikan Anda sudah 'pip install mmh3'

from .config import HASH_SEED, STRING_ENCODING

# Rentang integer yang muat di 8 byte signed
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1


def murmur3_128(data, seed=HASH_SEED):
    """
    Hash 128-bit (MurmurHash3 x64) tanpa tanda untuk sebuah bytes.
    Ini fungsi hash default untuk RendezvousHash.
    """
    return mmh3.hash128(data, seed=seed, x64arch=True, signed=False)


def make_murmur3_128(seed):
    """Membuat fungsi hash murmur3 dengan seed tertentu."""
    def hasher(data):
        return murmur3_128(data, seed)
    return hasher


# --------------------------------------------------------------------------
# FUNNELS
# Funnel mengubah sebuah nilai menjadi bytes yang akan di-hash.
# Dua nilai yang sama (==) wajib menghasilkan bytes yang sama.
# --------------------------------------------------------------------------

def string_funnel(value):
    """Mengubah str menjadi bytes dengan encoding dari konfigurasi."""
    if not isinstance(value, str):
        raise TypeError(f"string_funnel expects str, got {type(value).__name__}")
    return value.encode(STRING_ENCODING)


def bytes_funnel(value):
    """bytes dipakai apa adanya."""
    # bytes(int) menghasilkan deretan nol, jadi tipe lain ditolak
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"bytes_funnel expects bytes, got {type(value).__name__}")
    return bytes(value)


def int_funnel(value):
    """
    Integer 64-bit menjadi 8 byte big-endian signed.
    Integer yang lebih besar diberi prefiks panjang 4 byte, jadi kedua bentuk
    tidak pernah bertabrakan (panjangnya selalu berbeda).
    """
    if not isinstance(value, int):
        raise TypeError(f"int_funnel expects int, got {type(value).__name__}")
    if _INT64_MIN <= value <= _INT64_MAX:
        return value.to_bytes(8, "big", signed=True)

    length = (value.bit_length() + 8) // 8
    return length.to_bytes(4, "big") + value.to_bytes(length, "big", signed=True)
