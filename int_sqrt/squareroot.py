import math
from typing import Optional, TypeVar

from int_sqrt.utils.uint_typing import uint

T = TypeVar("T", bound=uint)

# A perfect square modulo 16 is always one of these residues.
SQUARE_RESIDUES_MOD_16 = frozenset((0, 1, 4, 9))

# Widths up to 32 bits are exactly representable by a double, and so is their root.
FLOAT_EXACT_MAX_BYTE_LENGTH = 4


def _check_uint(n: uint) -> None:
    if not isinstance(n, uint):
        raise TypeError(f"expected a fixed-width unsigned integer view, got {type(n).__name__}")


def _newton_squareroot(n: int) -> int:
    if n == 0:
        return 0
    previous = None
    x = 1
    while True:
        y = (x + n // x) // 2
        # Either settled, or oscillating between ``r`` and ``r + 1``.
        if y == x or y == previous:
            return min(x, y)
        previous, x = x, y


def integer_squareroot(n: T) -> T:
    """
    Return the largest integer ``x`` such that ``x**2 <= n``.

    The result has the same type as ``n``. The iteration runs on plain ints:
    ``x + n // x`` does not fit the width of ``n`` on the first step when ``n``
    is the maximum value, and uint views refuse to overflow.
    """
    _check_uint(n)
    return n.__class__(_newton_squareroot(int(n)))


def exact_squareroot(n: T) -> Optional[T]:
    """
    Return the root of ``n`` if ``n`` is a perfect square, ``None`` otherwise.
    """
    _check_uint(n)
    value = int(n)
    if value % 16 not in SQUARE_RESIDUES_MOD_16:
        return None
    root = _newton_squareroot(value)
    if root * root != value:
        return None
    return n.__class__(root)


def is_perfect_square(n: uint) -> bool:
    return exact_squareroot(n) is not None


def float_squareroot(n: T) -> T:
    """
    Floor square root through a double-precision ``math.sqrt``.

    Only exact for widths of at most 32 bits: wider operands lose mantissa bits
    and the truncated root can be off by one near the top of the range.
    """
    _check_uint(n)
    assert n.__class__.type_byte_length() <= FLOAT_EXACT_MAX_BYTE_LENGTH
    return n.__class__(int(math.sqrt(n)))
