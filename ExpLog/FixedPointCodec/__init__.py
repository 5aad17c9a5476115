from math import floor
from ExpLog.errors import ConfigurationError
from ExpLog.common.functions import bit
from ExpLog.common.functions import neg
from ExpLog.common.functions import word
from ExpLog.common.constants import WORD_BITS
from ExpLog.common.constants import INT_BITS
from ExpLog.common.constants import FRACT_BITS
from ExpLog.common.constants import MIN_FRACT_BITS
from ExpLog.common.constants import MAX_FRACT_BITS


def checkFractBits(fractBits):
    if not MIN_FRACT_BITS <= fractBits <= MAX_FRACT_BITS:
        raise ConfigurationError('fractional width {} is outside [{}, {}]'.format(fractBits, MIN_FRACT_BITS, MAX_FRACT_BITS))
    return fractBits


def signBit(fractBits=FRACT_BITS):
    '''
        @dev the bit that the decoder reads as the sign of a value with 'fractBits' fractional bits

        It sits right above the integer bits; at the widest fraction it falls on the top bit of the word
    '''
    return min(checkFractBits(fractBits) + INT_BITS + 1, WORD_BITS - 1)


def encode(x, fractBits=FRACT_BITS):
    '''
        @dev convert a float to a fixed-point word, truncating the fraction towards zero

        The result is off by less than 2 ^ -fractBits
    '''
    checkFractBits(fractBits)
    negative = x < 0
    if negative:
        x = -x
    integer = floor(x)
    result = (integer << fractBits) + int((1 << fractBits) * (x - integer))
    if negative:
        return neg(result)
    return word(result)


def decode(v, fractBits=FRACT_BITS):
    '''
        @dev convert a fixed-point word back to a float
    '''
    negative = bit(v, signBit(fractBits))
    v = neg(v) if negative else word(v)
    integer = v >> fractBits
    fraction = (v - (integer << fractBits)) / (1 << fractBits)
    result = integer + fraction
    if negative:
        return -result
    return result
