from rationax.core.constants import INT_MIN


def trailing_zeros(x: int) -> int:
    """Number of trailing zero bits of a non-zero integer (two's complement for negative values)."""
    if x == 0:
        raise ValueError("trailing_zeros is undefined for zero")
    return (x & -x).bit_length() - 1


def gcd(m: int, n: int) -> int:
    """
    Greatest common divisor using Stein's algorithm. Only shifts and subtraction of non-negative values are used,
    so no intermediate value is larger than the inputs.

    Args:
        m (int): First integer, sign is ignored
        n (int): Second integer, sign is ignored

    Returns:
        int: Non-negative greatest common divisor. gcd(0, n) == abs(n) and gcd(0, 0) == 0.
    """
    if m == 0 or n == 0:
        return abs(m | n)

    # common factors of two
    shift = trailing_zeros(m | n)

    # abs(INT_MIN) is not representable in the fixed width. INT_MIN is a power of two, so the gcd is
    # given by the common shift alone.
    if m == INT_MIN or n == INT_MIN:
        return 1 << shift

    m = abs(m)
    n = abs(n)
    m >>= trailing_zeros(m)
    n >>= trailing_zeros(n)

    while m != n:
        if m > n:
            m -= n
            m >>= trailing_zeros(m)
        else:
            n -= m
            n >>= trailing_zeros(n)
    return m << shift
