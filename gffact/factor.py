"""This module provides factorization of polynomials over GF(p).

The factorization proceeds in three stages. Square-free factorization splits
a polynomial into square-free factors with multiplicities. Distinct-degree
factorization splits a square-free polynomial into products of irreducible
factors of equal degree. Equal-degree splitting finally breaks these products
into irreducible factors, using one of the strategies listed in STRATEGIES:

    'cantor-zassenhaus': randomized splitting (Cantor and Zassenhaus, 1981),
    'trace': deterministic splitting by the trace of monomials X^k,
    'period': splitting by traces over the period of the Frobenius map on X.

Function factorize() combines all stages. All functions work for each of the
polynomial representations provided by gffact.gfpx.GFpX.
"""

import os
import random
import logging
import functools
import operator
from gffact.gfpx import Polynomial
from gffact.errors import FactorizationExhausted

STRATEGIES = ('cantor-zassenhaus', 'trace', 'period')


def _characteristic(f, p):
    # check that p matches the field of f, if given
    if not isinstance(f, Polynomial):
        raise TypeError('polynomial over GF(p) required')

    if p is None:
        return f.p

    if p != f.p:
        raise ValueError(f'characteristic {p} does not match polynomial over GF({f.p})')

    return p


def _prod(factors, poly):
    return functools.reduce(operator.mul, factors, poly(1))


def square_free_factors(f, p=None):
    """Return the square-free factorization of f as a list of pairs (g, m).

    Each g is monic, square-free and nonconstant, the g's are pairwise coprime,
    and the product of all g^m equals f made monic. Pairs are sorted by multiplicity m.
    Constant f gives the empty list.
    """
    p = _characteristic(f, p)
    if not f:
        raise ValueError('zero polynomial has no square-free factorization')

    factors = _square_free_factors(f.monic(), p)
    factors.sort(key=lambda gm: gm[1])
    logging.debug(f'Square-free factors of degree {f.degree()} polynomial: '
                  f'{[(g.degree(), m) for g, m in factors]}')
    return factors


def _square_free_factors(f, p):
    # f monic
    if f.degree() <= 0:
        return []

    df = f.derivative()
    if not df:
        # f is a p-th power, f(X) = g(X^p) = g(X)^p
        return [(g, m * p) for g, m in _square_free_factors(f.unpower(p), p)]

    poly = type(f)
    factors = []
    c = poly.gcd(f, df)
    w = f // c
    i = 1
    while w != 1:
        y = poly.gcd(w, c)
        z = w // y
        if z != 1:
            factors.append((z, i))
        w = y
        c //= y
        i += 1
    if c != 1:
        # leftover c collects the factors with multiplicities divisible by p
        factors.extend((g, m * p) for g, m in _square_free_factors(c.unpower(p), p))
    return factors


def square_free_part(f, p=None):
    """Return the square-free part of f, the product of all distinct monic irreducible factors."""
    factors = square_free_factors(f, p)
    return _prod((g for g, _ in factors), type(f))


def distinct_degree_factors(f, p=None):
    """Return the distinct-degree factorization of the square-free part s of f.

    The result is a list g of length deg(s), where g[i] is the product of all
    irreducible factors of s of degree i+1, and g[i] = 1 if there are none.
    """
    s = square_free_part(f, p)
    return _distinct_degree_factors(s)


def _distinct_degree_factors(s):
    # s monic and square-free
    poly = type(s)
    p = poly.p
    n = s.degree()
    factors = [poly(1)] * n
    x = poly.monomial(1)
    xq = x  # X^(p^i) mod h
    h = s
    for i in range(n):
        if h.degree() < 2*(i+1):
            break  # remaining h is irreducible (or a unit)

        xq = poly.powmod(xq, p, h)
        g = poly.gcd(h, xq - x)
        if g != 1:
            factors[i] = g
            h //= g
            xq %= h
    if h.degree() > 0:
        factors[h.degree() - 1] = h
    logging.debug(f'Distinct-degree factors of degree {n} polynomial: '
                  f'{[(i+1, g.degree() // (i+1)) for i, g in enumerate(factors) if g != 1]}')
    return factors


def _trace(a, d, h):
    """Return a + a^p + ... + a^(p^(d-1)) modulo h."""
    poly = type(h)
    p = poly.p
    u = a % h
    t = u
    for _ in range(d - 1):
        u = poly.powmod(u, p, h)
        t += u
    return t


def cantor_zassenhaus(h, d, rng=None, max_attempts=None):
    """Return a proper monic factor of h using the randomized Cantor-Zassenhaus method.

    Polynomial h is assumed to be monic and the product of at least two distinct
    irreducible polynomials of degree d. Random polynomials a are drawn from rng,
    an instance of random.Random. For odd p, the factor is found as the gcd of h
    with a^((p^d - 1)/2) + 1, and for p=2, as the gcd of h with the trace of a.

    Raises FactorizationExhausted after max_attempts unsuccessful draws
    (default set by command line option --max-attempts).
    """
    poly = type(h)
    p = poly.p
    n = h.degree()
    if rng is None:
        rng = random.Random()
    if max_attempts is None:
        max_attempts = int(os.getenv('GFFACT_MAXATTEMPTS', '100'))
    e = (p**d - 1) // 2
    for attempt in range(1, max_attempts + 1):
        a = poly.random(n, rng)
        if a.degree() <= 0:
            continue

        g = poly.gcd(h, a)
        if 0 < g.degree() < n:
            logging.debug(f'Cantor-Zassenhaus: lucky gcd in attempt {attempt}')
            return g

        if p == 2:
            a = _trace(a, d, h)
        else:
            a = poly.powmod(a, e, h) + 1
        g = poly.gcd(h, a)
        if 0 < g.degree() < n:
            logging.debug(f'Cantor-Zassenhaus: split degree {n} into {g.degree()} + '
                          f'{n - g.degree()} in attempt {attempt}')
            return g

    logging.info(f'Cantor-Zassenhaus: no split of degree {n} polynomial in {max_attempts} attempts')
    raise FactorizationExhausted(f'no factor found in {max_attempts} attempts')


def trace_split(h, d):
    """Return a proper monic factor of h using traces of monomials.

    Polynomial h is assumed to be monic and the product of at least two distinct
    irreducible polynomials of degree d. For k=1,2,... not divisible by p, the trace
    u = X^k + X^(kp) + ... + X^(kp^(d-1)) modulo h is computed, and the first proper
    factor gcd(h, u - c) for c in GF(p) is returned. Deterministic.

    Raises FactorizationExhausted if no monomial yields a proper factor.
    """
    poly = type(h)
    p = poly.p
    n = h.degree()
    for k in range(1, n):
        if k % p == 0:
            continue  # trace of X^(pk) equals trace of X^k

        u = _trace(poly.monomial(k), d, h)
        for c in range(p):
            g = poly.gcd(h, u - c)
            if 0 < g.degree() < n:
                logging.debug(f'Trace split: degree {n} into {g.degree()} + {n - g.degree()} '
                              f'using X^{k}')
                return g

    logging.info(f'Trace split: no monomial splits degree {n} polynomial')
    raise FactorizationExhausted('no monomial trace yields a factor')


def period_split(f):
    """Return a proper monic factor of f using the period of the Frobenius map.

    Polynomial f is assumed to be monic, square-free and reducible. First, the
    least N > 0 with X^(p^N) = X modulo f is determined. Then, for i=1,2,..., the
    sum T_i of (X^i)^(p^j) over 0 <= j < N modulo f is computed, and the first
    proper factor gcd(f, T_i - c) for c in GF(p) is returned.

    Raises FactorizationExhausted if the powers X^(p^j) cycle without returning
    to X (f not square-free), or if no T_i yields a proper factor.
    """
    poly = type(f)
    p = poly.p
    n = f.degree()
    x = poly.monomial(1) % f
    y = x
    seen = set()
    N = 0
    while True:
        y = poly.powmod(y, p, f)
        N += 1
        if y == x:
            break

        if y in seen:
            logging.info(f'Period split: powers of X cycle without period modulo degree {n} polynomial')
            raise FactorizationExhausted('Frobenius map on X has no period, polynomial not square-free')

        seen.add(y)
    logging.debug(f'Period split: X^({p}^{N}) = X modulo degree {n} polynomial')

    for i in range(1, n):
        u = poly.monomial(i) % f
        t = u
        for _ in range(N - 1):
            u = poly.powmod(u, p, f)
            t += u
        for c in range(p):
            g = poly.gcd(f, t - c)
            if 0 < g.degree() < n:
                q, r = divmod(f, g)
                if not r and g * q == f:
                    logging.debug(f'Period split: degree {n} into {g.degree()} + {q.degree()} '
                                  f'using T_{i}')
                    return g

    logging.info(f'Period split: no trace splits degree {n} polynomial')
    raise FactorizationExhausted('no trace over the period yields a factor')


def equal_degree_split(h, d, strategy='cantor-zassenhaus', rng=None, max_attempts=None):
    """Return a proper monic factor of h, a product of distinct irreducibles of degree d."""
    if strategy == 'cantor-zassenhaus':
        return cantor_zassenhaus(h, d, rng=rng, max_attempts=max_attempts)

    if strategy == 'trace':
        return trace_split(h, d)

    if strategy == 'period':
        return period_split(h)

    raise ValueError(f'unknown strategy {strategy!r}, use one of {STRATEGIES}')


def factorize_multiplicities(f, p=None, strategy='cantor-zassenhaus', rng=None,
                             max_attempts=None):
    """Return the factorization of f into monic irreducibles as a list of pairs (g, m).

    The product of all g^m equals f made monic. Pairs are sorted by the degree
    and then the integer value of g. See factorize() for the parameters.
    """
    p = _characteristic(f, p)
    if strategy not in STRATEGIES:
        raise ValueError(f'unknown strategy {strategy!r}, use one of {STRATEGIES}')

    if rng is None:
        rng = random.Random()
    factors = []
    for g, m in square_free_factors(f, p):
        for i, b in enumerate(_distinct_degree_factors(g)):
            if b == 1:
                continue

            d = i + 1
            stack = [b]
            while stack:
                h = stack.pop()
                if h.degree() == d:
                    factors.append((h, m))
                    continue

                u = equal_degree_split(h, d, strategy, rng, max_attempts)
                stack.append(u)
                stack.append(h // u)
    factors.sort(key=lambda gm: (gm[0].degree(), int(gm[0])))
    logging.debug(f'Factorization of degree {f.degree()} polynomial using {strategy}: '
                  f'{len(factors)} distinct irreducible factors')
    return factors


def factorize(f, p=None, strategy='cantor-zassenhaus', rng=None, max_attempts=None):
    """Return the monic irreducible factors of f, repeated according to multiplicity.

    Factors are sorted by degree and then by integer value; their product equals
    f made monic. Constant f gives the empty list, and zero f raises ValueError.

    The equal-degree splitting strategy is one of STRATEGIES. For strategy
    'cantor-zassenhaus', random polynomials are drawn from rng (instance of
    random.Random), trying at most max_attempts times per split.
    """
    return [g for g, m in factorize_multiplicities(f, p, strategy, rng, max_attempts)
            for _ in range(m)]
