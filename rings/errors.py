"""Exceptions raised by the ring types."""


class RingError(Exception):
    """Base class for all errors raised by this package."""


class ParseError(RingError, ValueError):
    """A string could not be parsed as an integer in the requested base."""


class NotInvertibleError(RingError, ArithmeticError):
    """An element has no multiplicative inverse."""


class ModulusError(RingError):
    """A quotient ring was used before init() or re-initialised while in use."""


class RingMismatchError(RingError, TypeError):
    """Elements of two different rings were combined."""
