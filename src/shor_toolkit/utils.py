"""Arbitrary-precision arithmetic helpers used by the factor searches."""

from __future__ import annotations

import math
import secrets

DEFAULT_BYTE_LENGTH = 8
# Exponents are consumed in blocks of this many bits.
EXPONENT_CHUNK_BITS = 30


def gcd(a: int, b: int) -> int:
    """Calculate the Greatest Common Divisor of a and b."""
    return math.gcd(a, b)


def byte_count(n: int) -> int:
    """Number of bytes needed to hold ``n`` as a signed two's complement value."""
    if n < 0:
        n = ~n
    return (n.bit_length() + 8) // 8


def random_odd_positive(byte_length: int = DEFAULT_BYTE_LENGTH) -> int:
    """Draw a random odd positive integer that fits in ``byte_length`` bytes.

    The low bit of the least significant byte is forced on and the high bit
    of the most significant byte is forced off, so the value is odd and
    positive when read as a signed big-endian integer.

    Raises:
        ValueError: If ``byte_length`` is not positive.
    """
    if byte_length <= 0:
        raise ValueError(f"byte_length must be positive, got {byte_length}")

    buf = bytearray(secrets.token_bytes(byte_length))
    buf[-1] |= 0x01
    buf[0] &= 0x7F
    return int.from_bytes(buf, "big")


def random_base(n: int) -> int:
    """Random odd base with the same byte length as ``n``, always > 1."""
    length = byte_count(n)
    while True:
        a = random_odd_positive(length)
        if a > 1:
            return a


def isqrt(n: int) -> int:
    """floor(sqrt(n)) by Newton's method starting from x0 = n."""
    if n < 0:
        raise ValueError(f"square root of negative number {n}")
    if n == 0:
        return 0

    x = n
    y = (x + 1) // 2
    while y < x:
        x = y
        y = (x + n // x) // 2
    return x


def is_prime(n: int) -> bool:
    """Deterministic trial division over odd divisors up to isqrt(n)."""
    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False

    limit = isqrt(n)
    for i in range(3, limit + 1, 2):
        if n % i == 0:
            return False
    return True


def _exponent_chunks(b: int) -> list[int]:
    """Split ``b`` into EXPONENT_CHUNK_BITS-wide digits, most significant first."""
    mask = (1 << EXPONENT_CHUNK_BITS) - 1
    chunks = []
    while b:
        chunks.append(b & mask)
        b >>= EXPONENT_CHUNK_BITS
    chunks.reverse()
    return chunks


def mod_pow(a: int, b: int, n: int) -> int:
    """Compute a^b mod n, consuming the exponent in bounded chunks.

    Each chunk is at most ``EXPONENT_CHUNK_BITS`` bits wide; the running
    result is raised by the chunk width and multiplied by a^chunk.
    """
    if n <= 0:
        raise ValueError(f"modulus must be positive, got {n}")
    if b < 0:
        raise ValueError(f"exponent must be non-negative, got {b}")

    shift = 1 << EXPONENT_CHUNK_BITS
    result = 1 % n
    for chunk in _exponent_chunks(b):
        result = pow(result, shift, n)
        result = (result * pow(a, chunk, n)) % n
    return result


def big_pow(a: int, b: int) -> int:
    """Unreduced a^b with the same chunking as ``mod_pow``.

    The result grows without bound; callers keep ``b`` small.
    """
    if b < 0:
        raise ValueError(f"exponent must be non-negative, got {b}")

    shift = 1 << EXPONENT_CHUNK_BITS
    result = 1
    for chunk in _exponent_chunks(b):
        if result != 1:
            result = result ** shift
        result *= a ** chunk
    return result
