"""This module collects all gmpy2 functions used by gffact.

Results are converted to Python ints, so that gmpy2's mpz type does not leak
into field elements and polynomial coefficients.
"""

import logging
import gmpy2

logging.debug(f'Load gmpy2 version {gmpy2.version()}')


def is_prime(x):
    """Return True if x is probably prime, else False if x is definitely composite."""
    return bool(gmpy2.is_prime(x))


def invert(x, m):
    """Return y such that x*y == 1 modulo m.

    Raises ZeroDivisionError if no inverse y exists (or, if m is zero).
    """
    return int(gmpy2.invert(x, m))


def powmod(x, y, m):
    """Return (x**y) mod m."""
    return int(gmpy2.powmod(x, y, m))
