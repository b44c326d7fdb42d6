"""Exceptions raised by gffact.

Each exception derives from the built-in exception Python itself would raise
in a similar situation, so callers can catch either one.
"""


class DivisionByZero(ZeroDivisionError):
    """Division (or GCD) with a zero divisor."""


class NoInverse(ZeroDivisionError):
    """Field element without multiplicative inverse."""


class CapacityExceeded(OverflowError):
    """Dense binary polynomial would exceed the capacity of its type."""


class InvalidDivisibility(ValueError):
    """Exponent of a polynomial not divisible by the given power."""


class FactorizationExhausted(ArithmeticError):
    """Splitting strategy ran out of attempts or candidates without finding a factor."""
