import sys
import random
import ExpLog
import ExpLog.NativePython as NativePython
from ExpLog.common.constants import LOG_DOMAIN
from ExpLog.common.constants import FRACT_BITS


def logTest(x, iterations):
    resultCarrySave = ExpLog.calculateLog(x, iterations)
    resultNativePython = NativePython.ln(ExpLog.decode(ExpLog.encode(x)))
    error = abs(float(resultNativePython) - resultCarrySave)
    if error > NativePython.errorBound(iterations, FRACT_BITS):
        raise Exception('x = {}: resultCarrySave = {}, resultNativePython = {}'.format(x, resultCarrySave, resultNativePython))
    return error


size = int(sys.argv[1]) if len(sys.argv) > 1 else 0
if size == 0:
    size = int(input('How many test-cases would you like to execute? '))
iterations = int(sys.argv[2]) if len(sys.argv) > 2 else FRACT_BITS + 1


worstError = 0
numOfFailures = 0


for n in range(size):
    x = random.uniform(*LOG_DOMAIN)
    try:
        error = logTest(x, iterations)
        worstError = max(worstError, error)
    except Exception as failure:
        print(failure)
        error = 0
        numOfFailures += 1
    print('Test #{}: error = {:.3e}, worst error = {:.3e}, num of failures = {}'.format(n, error, worstError, numOfFailures))
