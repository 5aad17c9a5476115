class ExpLogError(Exception):
    pass


class ConfigurationError(ExpLogError, ValueError):
    '''
        Raised when a fractional width or an iteration count is outside the supported range
    '''


class DomainViolation(ExpLogError, ValueError):
    '''
        Raised by the domain check when the input lies outside the interval supported by the mode.
        The recurrence itself never raises it: out-of-domain inputs only produce inaccurate results.
    '''
    def __init__(self, value, mode, domain):
        self.value = value
        self.mode = mode
        self.domain = domain
        super().__init__('{} is outside [{}, {}) for {}'.format(value, domain[0], domain[1], mode.name))


class SelectionInvariantViolation(ExpLogError):
    '''
        Raised when the truncated window code falls outside every selection range of the mode.
        This signals either an out-of-domain input or a defect; the partial result is discarded.
    '''
    def __init__(self, mode, code, index):
        self.mode = mode
        self.code = code
        self.index = index
        super().__init__('impossible window code {:#x} at step {} for {}'.format(code, index, mode.name))


class ShiftHazard(ExpLogError):
    '''
        Raised when a carry-save pair cannot be right-shifted word by word.
        Sign-extending the two words independently is only sound while their signed sum fits in a word.
    '''
    def __init__(self, number, shift):
        self.number = number
        self.shift = shift
        super().__init__('cannot shift {} right by {} without re-propagating carries'.format(number, shift))
