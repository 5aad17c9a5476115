WORD_BITS = 64 # Every register of the datapath is a word of this width
WORD_MASK = (1 << WORD_BITS) - 1


FRACT_BITS     = 40 # Default number of fractional bits of the working format
MIN_FRACT_BITS =  1
MAX_FRACT_BITS = 60 # Bounded by the precision of the constant tables
INT_BITS       =  3 # Integer bits above the fraction; with the sign bit, values lie in [-8, 8)


TABLE_FRACT_BITS = 60 # The constant tables are stored in s3.60 format
TABLE_SIZE       = 64 # Number of entries in every constant table
TABLE_LIMIT      = 60 # Entries above this index are below the table precision and held at zero


WINDOW_BITS = 4 # The selection window keeps 3 integer bits and 1 fractional bit


MIN_ITERATIONS     =  2 # Iteration 1 has no update since log(1 - 2 ^ 0) is undefined
DEFAULT_ITERATIONS = 16


EXP_DOMAIN = (-1.2 , 0.86) # Inputs of the exponential must lie in [EXP_DOMAIN[0], EXP_DOMAIN[1])
LOG_DOMAIN = ( 0.42, 3.4 ) # Inputs of the logarithm must lie in [LOG_DOMAIN[0], LOG_DOMAIN[1])
