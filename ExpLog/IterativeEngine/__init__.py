'''
    Iterative exp(x) / ln(x) in carry-save representation.

    Algorithm from p. 139, Chapter 8 of Elementary Functions: Algorithms and Implementation
    (3rd edition) by J.-M. Muller.

    Two accumulators are refined one signed digit per step k:
        E <- E * (1 + d * 2 ^ -k)
        L <- L - log(1 + d * 2 ^ -k)
    For exp(x), E starts at 1 and L at x, and the digits drive L to zero, so E converges to exp(x).
    For ln(x), E starts at x and L at 0, and the digits drive E to one, so L converges to ln(x).
    Every digit is chosen from a 4-bit window of the live accumulators (3 integer bits, 1 fractional bit).
'''
import enum
import logging
from collections import namedtuple
from ExpLog.errors import ConfigurationError
from ExpLog.errors import SelectionInvariantViolation
from ExpLog.CarrySave import ZERO
from ExpLog.CarrySave import combine3
from ExpLog.CarrySave import combine4
from ExpLog.CarrySave import complement
from ExpLog.CarrySave import fromBinary
from ExpLog.CarrySave import resolve
from ExpLog.CarrySave import shiftLeft
from ExpLog.CarrySave import shiftRight
from ExpLog.CarrySave import window
from ExpLog.ConstantTables import TABLES
from ExpLog.ConstantTables import stepIncrement
from ExpLog.FixedPointCodec import checkFractBits
from ExpLog.FixedPointCodec import encode
from ExpLog.common.functions import shl
from ExpLog.common.functions import word
from ExpLog.common.constants import FRACT_BITS
from ExpLog.common.constants import MIN_ITERATIONS
from ExpLog.common.constants import WINDOW_BITS
from ExpLog.common.constants import WORD_MASK


logger = logging.getLogger(__name__)


@enum.unique
class Mode(enum.Enum):
    EXP = 'exp'
    LOG = 'log'


Step = namedtuple('Step', 'index,code,digit,E,L')


# The digit selected for every window code; None marks an impossible code.
# The ranges overlap to absorb the truncation error of the window.
SELECTION_TABLE = {
    Mode.EXP: (
        +1, +1, +1, +1,             # 0x0 - 0x3
        None, None, None, None,     # 0x4 - 0x7
        None, None,                 # 0x8 - 0x9
        -1, -1, -1, -1,             # 0xA - 0xD
        0, 0,                       # 0xE - 0xF
    ),
    Mode.LOG: (
        0,                          # 0x0
        -1, -1, -1, -1, -1,         # 0x1 - 0x5
        -1, -1, -1, -1,             # 0x6 - 0x9
        +1, +1, +1, +1, +1,         # 0xA - 0xE
        0,                          # 0xF
    ),
}


def selectDigit(mode, code, index=None):
    digit = SELECTION_TABLE[mode][code]
    if digit is None:
        logger.error('impossible window code %#x at step %s for %s', code, index, mode.name)
        raise SelectionInvariantViolation(mode, code, index)
    return digit


def initialState(x, mode, fractBits=FRACT_BITS):
    if mode is Mode.EXP:
        return fromBinary(encode(1.0, fractBits)), fromBinary(x)
    return fromBinary(x), ZERO


def selectionWindow(E, L, mode, index, fractBits=FRACT_BITS):
    '''
        @dev the window code of 2 ^ index * L (for exp) or 2 ^ index * (E - 1) (for ln)
    '''
    if mode is Mode.EXP:
        scaled = shiftLeft(L, index)
    else:
        minusOne = shl(WORD_MASK, fractBits)
        scaled = shiftLeft(combine3(E.sum, E.carry, minusOne), index)
    return window(scaled, fractBits - 1, WINDOW_BITS)


def updateState(E, L, digit, index, fractBits=FRACT_BITS, tables=TABLES):
    if digit == 0:
        return E, L
    L = combine3(L.sum, L.carry, stepIncrement(tables, digit, index, fractBits))
    shifted = shiftRight(E, index)
    if digit == -1:
        # E - shifted, as E + ~shifted + 1 + 1
        inverted = complement(shifted)
        E = combine4(E.sum, E.carry, inverted.sum, inverted.carry, 1, 1)
    else:
        partial = combine3(E.sum, E.carry, shifted.sum)
        E = combine3(partial.sum, partial.carry, shifted.carry)
    return E, L


def iterateExpLog(x, iterations, mode, fractBits=FRACT_BITS, tables=TABLES):
    '''
        @dev run the recurrence on the fixed-point word 'x', yielding the initial state as Step 0 and then a Step per update

        Steps 1 to iterations - 1 are performed; log(1 - 2 ^ 0) is undefined, so there is no update with weight 2 ^ 0.
        A step whose weight 2 ^ -index lies below the fractional LSB is retired with a zero digit:
        its window would only read bits below the fixed-point field, and its updates would be below one ulp.

        The input domain is not checked: x must lie in about [-1.2, 0.86) for exp and [0.42, 3.4) for ln.
    '''
    checkFractBits(fractBits)
    if iterations < MIN_ITERATIONS:
        raise ConfigurationError('at least {} iterations are required, got {}'.format(MIN_ITERATIONS, iterations))
    mode = Mode(mode)
    E, L = initialState(word(x), mode, fractBits)
    yield Step(0, None, 0, resolve(E), resolve(L))
    for index in range(1, iterations):
        if index > fractBits:
            code = None
            digit = 0
        else:
            code = selectionWindow(E, L, mode, index, fractBits)
            digit = selectDigit(mode, code, index)
        E, L = updateState(E, L, digit, index, fractBits, tables)
        yield Step(index, code, digit, resolve(E), resolve(L))


def computeExpLog(x, iterations, mode, trace=False, fractBits=FRACT_BITS, tables=TABLES):
    '''
        @dev exp(x) or ln(x) of the fixed-point word 'x', as a fixed-point word

        With 'trace' set, every step is logged at debug level
    '''
    for step in iterateExpLog(x, iterations, mode, fractBits, tables):
        if trace:
            logger.debug('step %2d: code=%s digit=%+d E=%#018x L=%#018x', step.index, step.code, step.digit, step.E, step.L)
    if Mode(mode) is Mode.EXP:
        return step.E
    return step.L
