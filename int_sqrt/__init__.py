from .squareroot import (
    exact_squareroot,
    float_squareroot,
    integer_squareroot,
    is_perfect_square,
)
from .utils.uint_typing import (
    UINT_TYPES,
    uint8,
    uint16,
    uint32,
    uint64,
    uint128,
    uint256,
    usize,
)

__all__ = [  # avoid "unused import" lint error
    "exact_squareroot",
    "float_squareroot",
    "integer_squareroot",
    "is_perfect_square",
    "UINT_TYPES",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "uint128",
    "uint256",
    "usize",
]
