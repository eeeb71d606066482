from __future__ import annotations

U64_BITS = 64
U64_MASK = (1 << U64_BITS) - 1


def to_u64(x: int) -> int:
    return int(x) & U64_MASK


def mulmod(a: int, b: int, m: int) -> int:
    """(a * b) mod m over unsigned 64-bit operands.

    The product is formed at full width before reduction, so it never wraps.
    m == 0 yields the sentinel 0.
    """
    m = to_u64(m)
    if m == 0:
        return 0
    return (to_u64(a) * to_u64(b)) % m


def mulmod_doubling(a: int, b: int, m: int) -> int:
    """Binary long multiplication, reducing mod m at every doubling step."""
    m = to_u64(m)
    if m == 0:
        return 0
    a = to_u64(a) % m
    b = to_u64(b)
    result = 0
    while b:
        if b & 1:
            result = (result + a) % m
        a = (a << 1) % m
        b >>= 1
    return result


def modexp(base: int, exponent: int, modulus: int) -> int:
    """base ** exponent mod modulus by square-and-multiply."""
    modulus = to_u64(modulus)
    if modulus <= 1:
        return 0
    base = to_u64(base) % modulus
    exponent = to_u64(exponent)
    result = 1
    while exponent > 0:
        if exponent & 1:
            result = mulmod(result, base, modulus)
        base = mulmod(base, base, modulus)
        exponent >>= 1
    return result
