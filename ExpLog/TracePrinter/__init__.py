from math import exp
from math import log
from ExpLog.FixedPointCodec import decode
from ExpLog.IterativeEngine import Mode
from ExpLog.IterativeEngine import iterateExpLog
from ExpLog.common.constants import FRACT_BITS


RULE = '=' * 56


def traceLines(x, iterations, mode, fractBits=FRACT_BITS):
    '''
        @dev the per-iteration table of a run followed by an accuracy report, as lines of text
    '''
    mode = Mode(mode)
    value = decode(x, fractBits)
    if mode is Mode.EXP:
        yield 'Exponential of {:f}'.format(value)
        reference = exp(value)
    else:
        yield 'Logarithm of {:f}'.format(value)
        reference = log(value)
    yield RULE
    yield ' i            E_n                    L_n            d '
    for step in iterateExpLog(x, iterations, mode, fractBits):
        E = decode(step.E, fractBits)
        L = decode(step.L, fractBits)
        if step.index == 0:
            yield '{:2d} {:23.20f} {:23.20f} '.format(step.index, E, L)
        else:
            yield '{:2d} {:23.20f} {:23.20f} {:2d} '.format(step.index, E, L, step.digit)
    approximation = E if mode is Mode.EXP else L
    yield ''
    yield 'Approximation:        {:33.30f} '.format(approximation)
    yield 'Double precision ref: {:33.30f} '.format(reference)
    yield 'Abs. error:           {:33.30f} '.format(reference - approximation)
    yield 'Iterations performed: {:3d} '.format(iterations)
    yield 'Bits in the fraction: {:3d} '.format(fractBits)
    yield 'Machine epsilon:      {:33.30f} '.format(2.0 ** -fractBits)
    yield RULE
    yield ''


def printTrace(x, iterations, mode, fractBits=FRACT_BITS):
    for line in traceLines(x, iterations, mode, fractBits):
        print(line)
