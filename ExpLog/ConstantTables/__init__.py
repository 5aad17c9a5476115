'''
    Tables of log(1 + 2 ^ -k) and -log(1 - 2 ^ -k) in s3.60 format, indexed by the step index k.

    The values below were produced by 'AutoGenerate/PrintLogTables.py'.
    If you change TABLE_SIZE or TABLE_LIMIT, run it and paste the results below.
'''
from collections import namedtuple
from decimal import Decimal
from decimal import localcontext
from decimal import ROUND_HALF_EVEN
from ExpLog.common.functions import neg
from ExpLog.common.functions import sar
from ExpLog.common.constants import FRACT_BITS
from ExpLog.common.constants import TABLE_FRACT_BITS
from ExpLog.common.constants import TABLE_LIMIT
from ExpLog.common.constants import TABLE_SIZE


LogTables = namedtuple('LogTables', 'positive,negative')


POSITIVE_STEP_TABLE = (
    0x0b17217f7d1cf79b, #  0
    0x067cc8fb2fe612fd, #  1
    0x0391fef8f3534436, #  2
    0x01e27076e2af2e5f, #  3
    0x00f85186008b1533, #  4
    0x007e0a6c39e0cc01, #  5
    0x003f815161f807c8, #  6
    0x001fe02a6b106789, #  7
    0x000ff805515885e0, #  8
    0x0007fe00aa6ac43a, #  9
    0x0003ff8015515622, # 10
    0x0001ffe002aa6ab1, # 11
    0x0000fff800555156, # 12
    0x00007ffe000aaa6b, # 13
    0x00003fff80015551, # 14
    0x00001fffe0002aaa, # 15
    0x00000ffff8000555, # 16
    0x000007fffe0000ab, # 17
    0x000003ffff800015, # 18
    0x000001ffffe00003, # 19
    0x000000fffff80000, # 20
    0x0000007ffffe0000, # 21
    0x0000003fffff8000, # 22
    0x0000001fffffe000, # 23
    0x0000000ffffff800, # 24
    0x00000007fffffe00, # 25
    0x00000003ffffff80, # 26
    0x00000001ffffffe0, # 27
    0x00000000fffffff8, # 28
    0x000000007ffffffe, # 29
    0x0000000040000000, # 30
    0x0000000020000000, # 31
    0x0000000010000000, # 32
    0x0000000008000000, # 33
    0x0000000004000000, # 34
    0x0000000002000000, # 35
    0x0000000001000000, # 36
    0x0000000000800000, # 37
    0x0000000000400000, # 38
    0x0000000000200000, # 39
    0x0000000000100000, # 40
    0x0000000000080000, # 41
    0x0000000000040000, # 42
    0x0000000000020000, # 43
    0x0000000000010000, # 44
    0x0000000000008000, # 45
    0x0000000000004000, # 46
    0x0000000000002000, # 47
    0x0000000000001000, # 48
    0x0000000000000800, # 49
    0x0000000000000400, # 50
    0x0000000000000200, # 51
    0x0000000000000100, # 52
    0x0000000000000080, # 53
    0x0000000000000040, # 54
    0x0000000000000020, # 55
    0x0000000000000010, # 56
    0x0000000000000008, # 57
    0x0000000000000004, # 58
    0x0000000000000002, # 59
    0x0000000000000001, # 60
    0x0000000000000000, # 61
    0x0000000000000000, # 62
    0x0000000000000000, # 63
)


NEGATIVE_STEP_TABLE = (
    0x0000000000000000, #  0
    0x0b17217f7d1cf79b, #  1
    0x049a58844d36e49e, #  2
    0x0222f1d044fc8f7c, #  3
    0x0108598b59e3a069, #  4
    0x00820aec4f3a2224, #  5
    0x00408159624d611d, #  6
    0x0020202aeb11bce2, #  7
    0x0010080559588b35, #  8
    0x00080200aaeac44f, #  9
    0x0004008015595622, # 10
    0x0002002002aaeab1, # 11
    0x0001000800555956, # 12
    0x00008002000aaaeb, # 13
    0x0000400080015559, # 14
    0x0000200020002aab, # 15
    0x0000100008000555, # 16
    0x00000800020000ab, # 17
    0x0000040000800015, # 18
    0x0000020000200003, # 19
    0x0000010000080000, # 20
    0x0000008000020000, # 21
    0x0000004000008000, # 22
    0x0000002000002000, # 23
    0x0000001000000800, # 24
    0x0000000800000200, # 25
    0x0000000400000080, # 26
    0x0000000200000020, # 27
    0x0000000100000008, # 28
    0x0000000080000002, # 29
    0x0000000040000001, # 30
    0x0000000020000000, # 31
    0x0000000010000000, # 32
    0x0000000008000000, # 33
    0x0000000004000000, # 34
    0x0000000002000000, # 35
    0x0000000001000000, # 36
    0x0000000000800000, # 37
    0x0000000000400000, # 38
    0x0000000000200000, # 39
    0x0000000000100000, # 40
    0x0000000000080000, # 41
    0x0000000000040000, # 42
    0x0000000000020000, # 43
    0x0000000000010000, # 44
    0x0000000000008000, # 45
    0x0000000000004000, # 46
    0x0000000000002000, # 47
    0x0000000000001000, # 48
    0x0000000000000800, # 49
    0x0000000000000400, # 50
    0x0000000000000200, # 51
    0x0000000000000100, # 52
    0x0000000000000080, # 53
    0x0000000000000040, # 54
    0x0000000000000020, # 55
    0x0000000000000010, # 56
    0x0000000000000008, # 57
    0x0000000000000004, # 58
    0x0000000000000002, # 59
    0x0000000000000001, # 60
    0x0000000000000000, # 61
    0x0000000000000000, # 62
    0x0000000000000000, # 63
)


TABLES = LogTables(POSITIVE_STEP_TABLE, NEGATIVE_STEP_TABLE)


def generateTables(size=TABLE_SIZE, limit=TABLE_LIMIT):
    '''
        @dev derive both tables with 100 significant digits, rounding every entry to the nearest s3.60 value

        Entries above 'limit' are held at zero, and so is the undefined entry -log(1 - 2 ^ 0)
    '''
    one = Decimal(1)
    scale = Decimal(2) ** TABLE_FRACT_BITS
    positive = []
    negative = []
    with localcontext() as context:
        context.prec = 100
        for k in range(size):
            if k > limit:
                positive.append(0)
                negative.append(0)
                continue
            step = Decimal(2) ** -k
            positive.append(int((scale * (one + step).ln()).to_integral_value(rounding=ROUND_HALF_EVEN)))
            negative.append(int((scale * -(one - step).ln()).to_integral_value(rounding=ROUND_HALF_EVEN)) if k > 0 else 0)
    return LogTables(tuple(positive), tuple(negative))


def stepIncrement(tables, digit, index, fractBits=FRACT_BITS):
    '''
        @dev the word added to the residual accumulator by a step with a nonzero digit

        A step multiplies the result by (1 + digit * 2 ^ -index), so the residual drops by log(1 + digit * 2 ^ -index):
        - digit = +1: add -log(1 + 2 ^ -index)
        - digit = -1: add -log(1 - 2 ^ -index)
        The entry is negated in s3.60 and then floored to 'fractBits' fractional bits
    '''
    if index >= len(tables.positive):
        return 0
    if digit == +1:
        entry = neg(tables.positive[index])
    elif digit == -1:
        entry = tables.negative[index]
    else:
        raise ValueError('no table increment for digit {}'.format(digit))
    return sar(entry, TABLE_FRACT_BITS - fractBits)
