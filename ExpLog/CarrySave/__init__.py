'''
    Arithmetic units of the datapath, modelled on pairs of 64-bit words.

    A carry-save number is a pair (sum, carry) whose value is (sum + carry) mod 2 ^ 64.
    The compressors reduce three or four words to such a pair without propagating carries;
    'resolve' is the only place where a full carry propagation (a ripple-carry adder) happens.
'''
from collections import namedtuple
from ExpLog.errors import ShiftHazard
from ExpLog.common.functions import add
from ExpLog.common.functions import inv
from ExpLog.common.functions import sar
from ExpLog.common.functions import shl
from ExpLog.common.functions import signed
from ExpLog.common.functions import word
from ExpLog.common.constants import WORD_BITS


CarrySaveNumber = namedtuple('CarrySaveNumber', 'sum,carry')


ZERO = CarrySaveNumber(0, 0)


def fromBinary(x):
    return CarrySaveNumber(word(x), 0)


def combine3(x, y, z):
    '''
        @dev 3:2 compressor (a row of full adders)
    '''
    x, y, z = word(x), word(y), word(z)
    return CarrySaveNumber(x ^ y ^ z, shl((x & y) | (x & z) | (y & z), 1))


def combine4(x, y, z, o, cin0, cin1):
    '''
        @dev 4:2 compressor made of two chained 3:2 stages

        'cin0' enters the least significant bit of the first stage's carries and 'cin1' the one of the output carries.
        Feeding the complements of a pair with cin0 = cin1 = 1 subtracts that pair (~a + 1 == -a)
    '''
    assert cin0 in (0, 1) and cin1 in (0, 1)
    x, y, z, o = word(x), word(y), word(z), word(o)
    majority = add(shl((x & y) | (y & z) | (x & z), 1), cin0)
    parity = x ^ y ^ z ^ o
    return CarrySaveNumber(parity ^ majority, add(shl(add(parity & majority, inv(parity) & o), 1), cin1))


def complement(x):
    return CarrySaveNumber(inv(x.sum), inv(x.carry))


def shiftLeft(x, n):
    return CarrySaveNumber(shl(x.sum, n), shl(x.carry, n))


def shiftRight(x, n):
    '''
        @dev arithmetic right shift of both words

        Shifting the words one by one loses the carries between the shifted-out bits (at most one ulp),
        and is wrong by a multiple of 2 ^ (64 - n) whenever the signed words overflow when added
        (Tenca et al. 2006, https://doi.org/10.1109/TC.2006.70); such pairs are rejected
    '''
    total = signed(x.sum) + signed(x.carry)
    if not -(1 << (WORD_BITS - 1)) <= total < (1 << (WORD_BITS - 1)):
        raise ShiftHazard(x, n)
    return CarrySaveNumber(sar(x.sum, n), sar(x.carry, n))


def window(x, shift, bits):
    '''
        @dev the 'bits'-wide field found 'shift' bits up, as a single binary code

        Only the low bits of each shifted word survive the masks, so no hazard applies here
    '''
    mask = (1 << bits) - 1
    return resolve(CarrySaveNumber(sar(x.sum, shift) & mask, sar(x.carry, shift) & mask)) & mask


def resolve(x):
    return add(x.sum, x.carry)
