# Copyright (C) 2026 Alex Cobb
# Licensed under the BSD 2-Clause License (see LICENSE-BSD.txt)

"""Package-specific exceptions

Each kind of failure renders as a fixed upper-case label, followed by the
message for the kinds that carry one.

"""


class NumalError(Exception):
    """Base class for numal errors"""


class InvalidInputError(NumalError, ValueError):
    """Caller-supplied argument violates a precondition"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f'INVALID INPUT: {self.message}'


class ConvergenceError(NumalError):
    """Indicates that a value has failed to come within tolerance"""

    def __str__(self):
        return 'FAILED TO CONVERGE'


class DerivativeNotComputableError(NumalError):
    """A derivative-dependent operation could not produce a value"""

    def __str__(self):
        return 'DERIVATIVE NOT COMPUTABLE'


class LibError(NumalError):
    """Error reported by an underlying library, forwarded verbatim"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f'NUMAL LIB ERROR: {self.message}'
