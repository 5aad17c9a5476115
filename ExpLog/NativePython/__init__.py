from decimal import Decimal
from decimal import getcontext


getcontext().prec = 50


def exp(x):
    return Decimal(x).exp()


def ln(x):
    return Decimal(x).ln()


def errorBound(iterations, fractBits):
    '''
        @dev the observed accuracy envelope of the recurrence: 8 * 2 ^ -n plus a floor of 32 ulps

        Steps below the fractional LSB are retired, so the envelope stops shrinking at n = fractBits + 1
    '''
    n = min(iterations, fractBits + 1)
    return 2.0 ** (3 - n) + 2.0 ** (5 - fractBits)
