from enum import Enum
from random import Random

from int_sqrt.squareroot import integer_squareroot
from int_sqrt.utils.uint_typing import max_value, uint

random_mode_names = ("random", "zero", "max", "one", "square", "square_plus_one", "square_minus_one")


class RandomizationMode(Enum):
    # random value over the full width
    mode_random = 0
    # Zero-value
    mode_zero = 1
    # Maximum value of the width
    mode_max = 2
    # The smallest non-zero value
    mode_one = 3
    # A random perfect square that fits the width
    mode_square = 4
    # One above a random perfect square (wraps to a square below the maximum if needed)
    mode_square_plus_one = 5
    # One below a random perfect square, never 0
    mode_square_minus_one = 6

    def to_name(self):
        return random_mode_names[self.value]

    def is_changing(self):
        return self.value in [0, 4, 5, 6]

    def is_square(self):
        return self.value in [1, 3, 4]


def get_random_uint(rng: Random, typ: type[uint], mode: RandomizationMode) -> uint:
    """
    Create an operand of the given width.
    :param rng: The random number generator to use.
    :param typ: The uint type to instantiate
    :param mode: how to randomize
    :return: the operand, of the given type.
    """
    if mode == RandomizationMode.mode_zero:
        return typ(0)
    elif mode == RandomizationMode.mode_max:
        return typ(max_value(typ))
    elif mode == RandomizationMode.mode_one:
        return typ(1)
    elif mode == RandomizationMode.mode_random:
        return typ(rng.randint(0, max_value(typ)))

    max_root = int(integer_squareroot(typ(max_value(typ))))
    if mode == RandomizationMode.mode_square:
        root = rng.randint(0, max_root)
        return typ(root * root)
    elif mode == RandomizationMode.mode_square_plus_one:
        # the largest square of the width plus one may be the maximum itself, keep one step below
        root = rng.randint(1, max_root - 1)
        return typ(root * root + 1)
    elif mode == RandomizationMode.mode_square_minus_one:
        root = rng.randint(2, max_root)
        return typ(root * root - 1)
    else:
        raise ValueError(f"Randomization mode not recognized: mode={mode}")


def get_random_uints(rng: Random, typ: type[uint], mode: RandomizationMode, count: int) -> list[uint]:
    return [get_random_uint(rng, typ, mode) for _ in range(count)]
