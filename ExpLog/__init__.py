from ExpLog.errors import ExpLogError
from ExpLog.errors import ConfigurationError
from ExpLog.errors import DomainViolation
from ExpLog.errors import SelectionInvariantViolation
from ExpLog.errors import ShiftHazard
from ExpLog.FixedPointCodec import encode
from ExpLog.FixedPointCodec import decode
from ExpLog.IterativeEngine import Mode
from ExpLog.IterativeEngine import Step
from ExpLog.IterativeEngine import computeExpLog
from ExpLog.IterativeEngine import iterateExpLog
from ExpLog.common.constants import FRACT_BITS
from ExpLog.common.constants import DEFAULT_ITERATIONS
from ExpLog.common.constants import EXP_DOMAIN
from ExpLog.common.constants import LOG_DOMAIN


EXP = Mode.EXP
LOG = Mode.LOG


DOMAINS = {
    Mode.EXP: EXP_DOMAIN,
    Mode.LOG: LOG_DOMAIN,
}


def checkDomain(value, mode):
    mode = Mode(mode)
    domain = DOMAINS[mode]
    if not domain[0] <= value < domain[1]:
        raise DomainViolation(value, mode, domain)
    return value


def calculateExp(x, iterations=DEFAULT_ITERATIONS, fractBits=FRACT_BITS, strict=False):
    return calculate(x, iterations, Mode.EXP, fractBits, strict)


def calculateLog(x, iterations=DEFAULT_ITERATIONS, fractBits=FRACT_BITS, strict=False):
    return calculate(x, iterations, Mode.LOG, fractBits, strict)


def calculate(x, iterations, mode, fractBits=FRACT_BITS, strict=False):
    '''
        @dev float in, float out

        The recurrence does not validate its input; with 'strict' set, inputs outside the domain of the mode are rejected first
    '''
    if strict:
        checkDomain(x, mode)
    return decode(computeExpLog(encode(x, fractBits), iterations, mode, fractBits=fractBits), fractBits)
