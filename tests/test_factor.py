import os
import functools
import operator
import random
import unittest
from unittest import mock
from gffact import gfpx
from gffact import factor
from gffact.errors import FactorizationExhausted


def prod(factors, poly):
    return functools.reduce(operator.mul, factors, poly(1))


# degree-30 and degree-62 binary polynomials, each with two factors of equal degree
A30 = [1, 1, 1, 0, 0, 1, 1, 1, 0, 0, 0, 0, 0, 1, 1, 0, 1, 1, 1, 0, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 1]
A30_1 = [1, 1, 0, 0, 1, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1]
A30_2 = [1, 0, 1, 1, 0, 0, 0, 0, 1, 1, 0, 0, 0, 1, 0, 1]
A62 = [1, 1, 0, 0, 1, 1, 0, 0, 1, 1, 1, 0, 1, 1, 1, 1, 1, 1, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 1,
       0, 1, 0, 0, 0, 1, 1, 0, 0, 1, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 1, 1, 1, 1, 1, 0, 1, 1, 0, 1, 1, 1]
A62_1 = [1, 0, 1, 1, 0, 0, 0, 0, 1, 1, 0, 0, 0, 0, 0, 1, 0, 1, 0, 1, 0, 0, 1, 0, 1, 1, 1, 1, 1, 0,
         0, 1]
A62_2 = [1, 1, 1, 0, 1, 0, 1, 1, 1, 1, 1, 1, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 1, 1, 0, 0, 0, 1, 1, 1,
         1, 1]


class SquareFree(unittest.TestCase):

    def setUp(self):
        global mod_2
        mod_2 = (gfpx.GFpX(2), gfpx.GFpX(2, 'sparse'), gfpx.GFpX(2, 'list'))

    def test_mod2(self):
        for poly in mod_2:
            self.assertEqual(factor.square_free_part(poly([1, 0, 0, 0, 1])), poly([1, 1]))
            self.assertEqual(factor.square_free_part(poly([1, 0, 1, 0, 1])), poly([1, 1, 1]))
            self.assertEqual(factor.square_free_factors(poly([1, 0, 1])), [(poly([1, 1]), 2)])
            self.assertEqual(factor.square_free_factors(poly([1, 1, 1])), [(poly([1, 1, 1]), 1)])
            self.assertEqual(factor.square_free_factors(poly(1)), [])
            self.assertEqual(factor.square_free_part(poly(1)), 1)
            self.assertEqual(factor.square_free_factors(poly.monomial(12)), [(poly([0, 1]), 12)])

            # (X+1) (X^2+X+1)^2 X^6
            a, b, c = poly([1, 1]), poly([1, 1, 1]), poly([0, 1])
            f = a * b**2 * c**6
            self.assertEqual(factor.square_free_factors(f), [(a, 1), (b, 2), (c, 6)])
            self.assertEqual(factor.square_free_part(f), a * b * c)

    def test_mod3(self):
        poly = gfpx.GFpX(3)
        f = poly([1, 0, 2, 2, 0, 1, 1, 0, 2, 2, 0, 1])
        factors = factor.square_free_factors(f)
        self.assertEqual(factors, [(poly([1, 1]), 1), (poly([1, 0, 1]), 3), (poly([2, 1]), 4)])
        self.assertEqual(prod((g**m for g, m in factors), poly), f)
        self.assertEqual(factor.square_free_factors(f.scale(2)), factors)
        self.assertEqual(factor.square_free_part(f), poly([1, 1]) * poly([1, 0, 1]) * poly([2, 1]))

    def test_random(self):
        rng = random.Random(11)
        for poly in (gfpx.GFpX(2), gfpx.GFpX(2, 'sparse'), gfpx.GFpX(5), gfpx.GFpX(7)):
            for _ in range(10):
                f = poly.random(rng.randrange(1, 12), rng) * poly.random(4, rng)**rng.randrange(1, 8)
                if not f:
                    continue

                factors = factor.square_free_factors(f)
                self.assertEqual(prod((g**m for g, m in factors), poly), f.monic())
                for g, m in factors:
                    self.assertEqual(g, g.monic())
                    self.assertEqual(factor.square_free_factors(g), [(g, 1)])

    def test_errors(self):
        poly = gfpx.GFpX(3)
        self.assertRaises(ValueError, factor.square_free_factors, poly(0))
        self.assertRaises(ValueError, factor.square_free_part, poly(0))
        self.assertRaises(ValueError, factor.square_free_factors, poly(5), 2)
        self.assertRaises(TypeError, factor.square_free_factors, 5)
        self.assertEqual(factor.square_free_factors(poly(5), 3), [(poly([2, 1]), 1)])


class DistinctDegree(unittest.TestCase):

    def test_mod5(self):
        poly = gfpx.GFpX(5)
        f = poly([1, 1]) * poly([2, 1]) * poly([1, 1, 1]) * poly([2, 1, 1])
        factors = factor.distinct_degree_factors(f)
        self.assertEqual(len(factors), 6)
        self.assertEqual(factors[0], poly([2, 3, 1]))
        self.assertEqual(factors[1], poly([2, 3, 4, 2, 1]))
        self.assertEqual(factors[2:], [1, 1, 1, 1])
        self.assertEqual(prod(factors, poly), f)
        self.assertEqual(factor.distinct_degree_factors(f**3), factors)

    def test_mod2(self):
        for poly in (gfpx.GFpX(2), gfpx.GFpX(2, 'sparse')):
            f = poly([1, 1, 0, 0, 1, 1, 0, 1])
            factors = factor.distinct_degree_factors(f)
            self.assertEqual(len(factors), 7)
            self.assertEqual(factors[1], poly([1, 1, 1]))
            self.assertEqual(factors[4], poly([1, 0, 1, 1, 1, 1]))
            self.assertEqual(prod(factors, poly), f)

            f = poly(A30)
            factors = factor.distinct_degree_factors(f)
            self.assertEqual(len(factors), 30)
            self.assertEqual(factors[14], f)
            self.assertEqual(factors[:14] + factors[15:], [1] * 29)

            self.assertEqual(factor.distinct_degree_factors(poly([0, 1])), [poly([0, 1])])
            self.assertEqual(factor.distinct_degree_factors(poly(1)), [])

    def test_random(self):
        rng = random.Random(3)
        for poly in (gfpx.GFpX(2), gfpx.GFpX(3), gfpx.GFpX(7)):
            for _ in range(10):
                f = poly.random(rng.randrange(2, 16), rng)
                if f.degree() <= 0:
                    continue

                s = factor.square_free_part(f)
                factors = factor.distinct_degree_factors(f)
                self.assertEqual(len(factors), s.degree())
                self.assertEqual(prod(factors, poly), s)
                for i, g in enumerate(factors):
                    self.assertEqual(g.degree() % (i+1), 0)


class Splitting(unittest.TestCase):

    def _test_split(self, h, d, factors):
        rng = random.Random(5)
        g = factor.cantor_zassenhaus(h, d, rng=rng)
        self.assertIn(g, factors)
        g = factor.trace_split(h, d)
        self.assertIn(g, factors)
        g = factor.period_split(h)
        self.assertIn(g, factors)
        for strategy in factor.STRATEGIES:
            g = factor.equal_degree_split(h, d, strategy, rng)
            self.assertIn(g, factors)

    def test_mod2(self):
        for poly in (gfpx.GFpX(2), gfpx.GFpX(2, 'sparse')):
            f1, f2 = poly([1, 1, 0, 0, 0, 0, 0, 1]), poly([1, 0, 1, 0, 0, 1, 1, 1])
            h = poly([1, 1, 1, 1, 0, 1, 0, 1, 1, 1, 0, 0, 1, 1, 1])
            self.assertEqual(f1 * f2, h)
            self._test_split(h, 7, (f1, f2))

            f1, f2 = poly(A30_1), poly(A30_2)
            h = poly(A30)
            self.assertEqual(f1 * f2, h)
            self._test_split(h, 15, (f1, f2))

    def test_mod2_large(self):
        poly = gfpx.GFpX(2)
        f1, f2 = poly(A62_1), poly(A62_2)
        h = poly(A62)
        self.assertEqual(f1 * f2, h)
        self._test_split(h, 31, (f1, f2))

    def test_mod5(self):
        poly = gfpx.GFpX(5)
        f1, f2 = poly([1, 1]), poly([2, 1])
        self._test_split(f1 * f2, 1, (f1, f2))
        f1, f2 = poly([1, 1, 1]), poly([2, 1, 1])
        self._test_split(f1 * f2, 2, (f1, f2))

    def test_mod3(self):
        poly = gfpx.GFpX(3)
        f = [poly([0, 1]), poly([1, 1]), poly([2, 1])]  # X^3 - X
        h = prod(f, poly)
        self.assertEqual(h, poly.monomial(3) - poly.monomial(1))
        self._test_split(h, 1, f + [f[0] * f[1], f[0] * f[2], f[1] * f[2]])

    def test_exhausted(self):
        poly = gfpx.GFpX(2)
        h = poly(A30)
        self.assertRaises(FactorizationExhausted, factor.cantor_zassenhaus, h, 15, max_attempts=0)
        self.assertRaises(ArithmeticError, factor.cantor_zassenhaus, h, 15, max_attempts=0)
        self.assertRaises(FactorizationExhausted, factor.trace_split, poly([1, 1, 1]), 2)
        self.assertRaises(FactorizationExhausted, factor.period_split, poly([1, 1, 1]))
        self.assertRaises(FactorizationExhausted, factor.period_split, poly([1, 0, 1]))
        self.assertRaises(ValueError, factor.equal_degree_split, h, 15, 'berlekamp')

        with mock.patch.dict(os.environ, {'GFFACT_MAXATTEMPTS': '0'}):
            self.assertRaises(FactorizationExhausted, factor.cantor_zassenhaus, h, 15)
            self.assertRaises(FactorizationExhausted, factor.factorize, h)
        with mock.patch.dict(os.environ, {'GFFACT_MAXATTEMPTS': '100'}):
            g = factor.cantor_zassenhaus(h, 15, rng=random.Random(2))
            self.assertIn(g, (poly(A30_1), poly(A30_2)))


class Factorize(unittest.TestCase):

    def test_mod2(self):
        for poly in (gfpx.GFpX(2), gfpx.GFpX(2, 'sparse'), gfpx.GFpX(2, 'list')):
            for strategy in factor.STRATEGIES:
                f = poly([1, 1, 0, 0, 1, 1, 0, 1])
                self.assertEqual(factor.factorize(f, strategy=strategy),
                                 [poly([1, 1, 1]), poly([1, 0, 1, 1, 1, 1])])
                f = poly([1, 1, 1, 1, 0, 1, 0, 1, 1, 1, 0, 0, 1, 1, 1])
                self.assertEqual(factor.factorize(f, 2, strategy),
                                 [poly([1, 1, 0, 0, 0, 0, 0, 1]), poly([1, 0, 1, 0, 0, 1, 1, 1])])
                f = poly(A30)
                self.assertEqual(factor.factorize(f, strategy=strategy, rng=random.Random(1)),
                                 sorted([poly(A30_1), poly(A30_2)]))
                self.assertEqual(factor.factorize(poly([1, 0, 1]), strategy=strategy),
                                 [poly([1, 1]), poly([1, 1])])

    def test_multiplicities(self):
        poly = gfpx.GFpX(3)
        f = poly([1, 0, 2, 2, 0, 1, 1, 0, 2, 2, 0, 1]).scale(2)
        self.assertEqual(factor.factorize_multiplicities(f),
                         [(poly([1, 1]), 1), (poly([2, 1]), 4), (poly([1, 0, 1]), 3)])
        self.assertEqual(factor.factorize(f),
                         [poly([1, 1])] + [poly([2, 1])] * 4 + [poly([1, 0, 1])] * 3)
        self.assertEqual(factor.factorize(poly(2)), [])
        self.assertEqual(factor.factorize_multiplicities(poly(2)), [])

    def test_random(self):
        rng = random.Random(13)
        for poly in (gfpx.GFpX(2), gfpx.GFpX(2, 'sparse'), gfpx.GFpX(3), gfpx.GFpX(101)):
            for strategy in factor.STRATEGIES:
                # product of known irreducibles, with multiplicities
                factors = []
                a = poly(rng.randrange(poly.p, poly.p**3))
                for _ in range(4):
                    a = poly.next_irreducible(a)
                    factors.extend([a] * rng.randrange(1, 4))
                factors.sort(key=lambda g: (g.degree(), int(g)))
                f = prod(factors, poly).scale(rng.randrange(1, poly.p))
                self.assertEqual(factor.factorize(f, strategy=strategy, rng=rng), factors)

                f = poly.random(20, rng)
                if not f:
                    continue

                factors = factor.factorize(f, strategy=strategy, rng=rng)
                self.assertEqual(prod(factors, poly), f.monic())
                for g in factors:
                    self.assertTrue(poly.is_irreducible(g))
                    self.assertEqual(g, g.monic())
                self.assertEqual(factors, sorted(factors, key=lambda g: (g.degree(), int(g))))

    def test_errors(self):
        poly = gfpx.GFpX(2)
        self.assertRaises(ValueError, factor.factorize, poly(0))
        self.assertRaises(ValueError, factor.factorize, poly(3), 3)
        self.assertRaises(ValueError, factor.factorize, poly(3), strategy='knuth')
        self.assertRaises(TypeError, factor.factorize, [1, 1])

        # splitting failures reach the caller
        for poly in (gfpx.GFpX(2), gfpx.GFpX(2, 'sparse')):
            f = poly(A30)
            self.assertRaises(FactorizationExhausted, factor.factorize, f, max_attempts=0)
            self.assertRaises(FactorizationExhausted, factor.factorize_multiplicities, f,
                              max_attempts=0)
            self.assertRaises(ArithmeticError, factor.factorize, f * f, max_attempts=0)
        # no splitting needed, so no attempts needed
        poly = gfpx.GFpX(2)
        self.assertEqual(factor.factorize(poly([1, 1, 0, 0, 1, 1, 0, 1]), max_attempts=0),
                         [poly([1, 1, 1]), poly([1, 0, 1, 1, 1, 1])])

    def test_capacity(self):
        # modular arithmetic stays within capacity for degrees above capacity/2
        poly = gfpx.GFpX(2, capacity=16)
        f1, f2 = poly([1, 0, 1, 0, 0, 1]), poly([1, 0, 0, 1, 0, 1])  # X^5+X^2+1, X^5+X^3+1
        f = f1 * f2
        self.assertEqual(f.degree(), 10)
        large = gfpx.GFpX(2, capacity=64)
        self.assertEqual(int(poly.powmod(poly.monomial(9), 2, f)),
                         int(large.powmod(2**9, 2, int(f))))
        self.assertEqual(factor.distinct_degree_factors(f)[4], f)
        for strategy in factor.STRATEGIES:
            self.assertEqual(factor.factorize(f, strategy=strategy, rng=random.Random(3)), [f1, f2])

        poly = gfpx.GFpX(2, capacity=64)
        f = poly(A62)
        for strategy in factor.STRATEGIES:
            self.assertEqual(factor.factorize(f, strategy=strategy, rng=random.Random(4)),
                             sorted([poly(A62_1), poly(A62_2)]))


if __name__ == "__main__":
    unittest.main()
