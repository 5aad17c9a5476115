from sys import argv
from ExpLog import EXP
from ExpLog import LOG
from ExpLog import encode
from ExpLog.TracePrinter import printTrace
from ExpLog.common.constants import DEFAULT_ITERATIONS


iterations = int(argv[1]) if len(argv) > 1 else DEFAULT_ITERATIONS


# Calculate exponential of an arbitrary value
printTrace(encode(0.5), iterations, EXP)


# Calculate logarithm of an arbitrary value
printTrace(encode(1.5), iterations, LOG)
