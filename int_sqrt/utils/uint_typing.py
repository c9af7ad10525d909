# ruff: noqa: F401
import sys

from remerkleable.basic import (
    boolean,
    uint,
    uint8,
    uint16,
    uint32,
    uint64,
    uint128,
    uint256,
)

_WORD = uint64 if sys.maxsize > 2**32 else uint32


class usize(_WORD):
    """Machine-word sized unsigned integer."""

    @classmethod
    def type_repr(cls) -> str:
        return "usize"


# Every width the square-root operations are exercised over, narrowest first.
UINT_TYPES = (uint8, uint16, uint32, uint64, usize, uint128, uint256)


def bit_length(typ: type[uint]) -> int:
    return typ.type_byte_length() << 3


def max_value(typ: type[uint]) -> int:
    """
    Return the largest value representable by ``typ``, as a plain ``int``.
    """
    return (1 << bit_length(typ)) - 1
