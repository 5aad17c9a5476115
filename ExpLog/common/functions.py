from ExpLog.common.constants import WORD_BITS
from ExpLog.common.constants import WORD_MASK


def word(x):
    return x & WORD_MASK


def signed(x):
    x = word(x)
    return x - (1 << WORD_BITS) if x >> (WORD_BITS - 1) else x


def add(x, y):
    return word(x + y)


def neg(x):
    return word(-x)


def inv(x):
    return word(x) ^ WORD_MASK


def shl(x, n):
    return word(x << n)


def sar(x, n):
    return word(signed(x) >> n)


def bit(x, n):
    return (word(x) >> n) & 1
