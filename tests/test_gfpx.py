import operator
import unittest
from fastarith import gfpx
from fastarith import finfields
from fastarith.errors import NotInvertibleError, PreconditionError, RingMismatchError

X = gfpx.X


class Arithmetic(unittest.TestCase):

    def setUp(self):
        global mod_all
        gf2x = gfpx.GFpX(2)
        gf3x = gfpx.GFpX(3)
        gf101x = gfpx.GFpX(finfields.GF(101))
        mod_all = (gf2x, gf3x, gf101x)

    def test_caching(self):
        self.assertRaises(ValueError, gfpx.GFpX, 4)
        self.assertRaises(TypeError, gfpx.GFpX, int)
        self.assertIs(gfpx.GFpX(11), gfpx.GFpX(finfields.GF(11)))
        self.assertIs(gfpx.GFpX(11).field, finfields.GF(11))
        self.assertEqual(gfpx.GFpX(11).p, 11)

    def test_modall(self):
        for poly in mod_all:
            self._test_modall(poly)
            self._test_errors(poly)

    def _test_modall(self, poly):
        p = poly.p
        self.assertEqual(poly()(1), 0)
        self.assertEqual(poly.from_terms('0'), 0)
        self.assertEqual(poly.from_terms('1'), 1)
        self.assertEqual(poly.from_terms(f'{X}'), [0, 1])
        self.assertEqual(poly.from_terms(f'{X} + {X}^2'), [0, 1, 1])
        self.assertEqual(poly.from_terms(f'{X}^2 + {p}{X}'), [0, 0, 1])
        self.assertEqual(poly(f'{X}').value, [0, 1])
        self.assertEqual(repr(poly(0)), '0')
        self.assertEqual(repr(poly(1)), '1')
        self.assertEqual(repr(poly(f'{X}')), f'{X}')
        self.assertEqual(repr(poly([0, 1, 1])), f'{X}^2+{X}')
        self.assertEqual(poly(0).degree(), -1)
        self.assertEqual(poly(1).degree(), 0)
        self.assertEqual(poly(f'{X}^3+1').degree(), 3)
        self.assertFalse(poly(0) == 0.1)
        self.assertTrue(poly(0) != 0.1)
        self.assertFalse(poly(0))
        self.assertTrue(poly(1))
        self.assertIsNot(0, poly(0))
        self.assertEqual(0, poly(0))
        self.assertEqual(poly(1) + poly(0), poly(0) + poly(1))
        self.assertEqual(1 + poly(0), 0 + poly(1))
        self.assertEqual(1 - poly(1), 0)
        self.assertEqual(1 * poly(0), 0 * poly(1))
        self.assertEqual(poly(0) + (), 0)
        self.assertEqual(poly([1, 0, 0]), 1)
        self.assertEqual(poly(poly.field(1)), 1)
        self.assertEqual(poly([poly.field(1), 1]), [1, 1])
        self.assertEqual(hash(poly([1])), hash(poly(1)))
        self.assertEqual(-poly([1, 1]) + poly([1, 1]), 0)

    def test_int_constants(self):
        for poly in mod_all:
            p = poly.p
            field = poly.field
            self.assertEqual(poly(p), 0)
            self.assertEqual(poly(p).value, [])
            self.assertEqual(poly(p), field(p))
            self.assertEqual(field(p), poly(p))
            self.assertEqual(poly(p + 1), 1)
            self.assertEqual(poly(-1), [p - 1])
            self.assertEqual(poly(-1), field(-1))
            self.assertEqual(poly(3 * p + 2).degree(), poly(2).degree())
            self.assertEqual(poly(f'{X}') + p, poly(f'{X}'))
            self.assertEqual(poly(f'{X}') * (p + 1), poly(f'{X}'))

        poly = gfpx.GFpX(29)
        self.assertEqual(poly(29), poly.field(29))
        self.assertEqual(poly(30), poly.field(30))
        self.assertEqual(repr(poly(30)), '1')
        self.assertEqual(repr(poly(-3)), '26')
        self.assertEqual(poly(29)(5), 0)
        self.assertEqual(poly(32)(5), 3)
        self.assertFalse(hasattr(poly(29), '__int__'))

    def _test_errors(self, poly):
        self.assertRaises(ValueError, poly.from_terms, 'x**2')
        self.assertRaises(ValueError, poly.from_terms, 'x^')
        self.assertRaises(ValueError, poly.from_terms, 'x+')
        self.assertRaises(ValueError, poly.from_terms, 'y')
        self.assertRaises(TypeError, poly, 0.1)
        self.assertRaises(TypeError, int, poly(1))
        self.assertRaises(TypeError, poly, gfpx.GFpX(257)(0))
        self.assertRaises(RingMismatchError, poly, gfpx.GFpX(257)(0))
        self.assertRaises(RingMismatchError, poly, [finfields.GF(257)(1)])
        self.assertRaises(ValueError, poly, [poly.p])
        self.assertRaises(ValueError, poly, [-1])
        self.assertRaises(TypeError, operator.add, poly(0), 0.1)
        self.assertRaises(TypeError, operator.iadd, poly(0), 0.1)
        self.assertRaises(TypeError, operator.sub, poly(0), 0.1)
        self.assertRaises(TypeError, operator.sub, 0.1, poly(0))
        self.assertRaises(TypeError, operator.mul, poly(0), 0.1)
        self.assertRaises(TypeError, operator.lshift, poly(0), 0.1)
        self.assertRaises(TypeError, operator.lshift, 0.1, poly(0))
        self.assertRaises(TypeError, operator.rshift, poly(0), 0.1)
        self.assertRaises(TypeError, operator.rshift, 0.1, poly(0))
        self.assertRaises(TypeError, operator.floordiv, poly(0), 0.1)
        self.assertRaises(TypeError, operator.floordiv, 0.1, poly(0))
        self.assertRaises(TypeError, operator.mod, poly(0), 0.1)
        self.assertRaises(TypeError, operator.mod, 0.1, poly(0))
        self.assertRaises(TypeError, divmod, poly(0), 0.1)
        self.assertRaises(TypeError, divmod, 0.1, poly(0))
        f = poly(f'{X}^2+1')
        self.assertRaises(ZeroDivisionError, poly.invert, f, poly(0))
        self.assertRaises(NotInvertibleError, poly.invert, f, f)
        self.assertRaises(ZeroDivisionError, operator.mod, f, poly(0))
        self.assertRaises(ZeroDivisionError, divmod, f, 0)
        self.assertRaises(ValueError, operator.pow, f, -16)
        self.assertRaises(ValueError, f.reverse, -2)
        self.assertRaises(IndexError, operator.getitem, f, 0.5)
        self.assertRaises(IndexError, operator.getitem, f, slice(0, 1))
        self.assertRaises(IndexError, operator.getitem, f, -1)

    def test_mod2(self):
        poly = gfpx.GFpX(2)
        self.assertEqual(poly([0, 1, 1]), f'{X}^2+{X}')
        self.assertEqual(poly.from_terms(f'{X}+{X}'), 0)
        self.assertEqual(repr(poly([1, 1])), f'{X}+1')
        self.assertEqual(poly('x^2+x')(1), 0)
        self.assertEqual(poly('x^2+x+1')(0), 1)
        self.assertEqual(poly('x^2+x+1')(1), 1)

        self.assertEqual(1 + poly(1), 0)
        self.assertEqual(poly('x+1') + poly('x^2'), poly('x^2+x+1'))
        self.assertEqual(poly('x+1') - poly('x^2'), poly('x^2+x+1'))
        self.assertEqual(poly('x') * poly('x+1'), poly('x^2+x'))
        self.assertEqual(poly.lshift('x^3+x^2+x+1', 2), poly('x^5+x^4+x^3+x^2'))
        self.assertEqual(poly('x^3+x^2+x+1') >> 2, poly('x+1'))
        self.assertEqual(poly('x^5') // poly('x^3'), poly('x^2'))
        self.assertEqual(poly('x^5') % poly('x^3'), 0)
        self.assertEqual(divmod(poly('x^5'), poly('x^3')), (poly('x^2'), 0))
        self.assertEqual(poly('x^4+x^3+x^2+x+1') // poly('x^2+1'), poly('x^2+x'))
        self.assertEqual(poly('x^4+x^3+x^2+x+1') % poly('x^2+1'), 1)
        self.assertEqual(poly('x^4+x^3+x^2+x+1') // 1, poly('x^4+x^3+x^2+x+1'))
        self.assertEqual(poly('x+1') ** 16, poly('x^16+1'))

        a = poly(1)
        b = a
        a += b
        self.assertEqual(a, poly(0))
        self.assertEqual(b, poly(1))
        a <<= 1
        self.assertEqual(a, poly(0))
        a = b << 1
        self.assertEqual(a, poly('x'))

        self.assertEqual(poly.gcd('x', 'x^2+1'), poly(1))
        self.assertEqual(poly.gcd('x+1', 'x^2+1'), poly('x+1'))

        # Example 2.223 from HAC:
        a = poly('x^10+x^9+x^8+x^6+x^5+x^4+1')
        b = poly('x^9+x^6+x^5+x^3+x^2+1')
        d = poly('x^3+x+1')
        self.assertEqual(poly.gcd(a, b), d)
        g, s, t = poly.gcdext(a, b)
        self.assertEqual(g, d)
        self.assertEqual(a * s + b * t, d)
        g, s, t = poly.gcdext(b, a)
        self.assertEqual(g, d)
        self.assertEqual(b * s + a * t, d)

        m = poly('x^8+x^4+x^3+x+1')
        self.assertEqual((poly.invert(d, m) * d) % m, 1)
        self.assertEqual(poly.invert(d + m, m) * d % m, 1)

    def test_mod3(self):
        poly = gfpx.GFpX(3)
        self.assertEqual(poly(1) + poly(1), 2)
        self.assertEqual(poly(1) * poly(2), 2)
        self.assertEqual(poly(2) * poly(2), 1)
        self.assertEqual(poly('x+1') + poly(2), poly('x'))
        self.assertEqual(poly('x+1') * poly('2x'), poly('2x^2+2x'))
        self.assertEqual(poly('x+2') << 2, poly('x^3+2x^2'))
        self.assertEqual(poly('x^3+2x^2') >> 2, poly('x+2'))
        self.assertEqual(poly('x^4+1') % poly('x^3+2x^2+1'), poly('x^2+2x'))
        self.assertEqual(divmod(poly('x^4'), poly('x^2')), (poly('x^2'), 0))
        self.assertEqual(divmod(poly('x^4+2'), poly('x^2')), (poly('x^2'), poly(2)))
        a = poly('x^5+2x^4+x^3+2x^2+x+2')
        b = poly('x^5+2x^4+x+2')
        self.assertEqual(poly.gcd(a, b), poly('x+2'))
        self.assertEqual(poly('x^3').derivative(), 0)
        self.assertEqual(poly('x^3+x^2').derivative(), poly('2x'))

    def test_mod11(self):
        poly = gfpx.GFpX(11)
        self.assertEqual(poly(7)(0), 7)
        self.assertEqual(poly('x')(17), 6)
        self.assertEqual(poly('3x+1')(3), 10)
        self.assertEqual(repr(poly([1, 0, 1])), f'{X}^2+1')
        self.assertEqual(repr(poly('x^2+12x+13')), f'{X}^2+{X}+2')
        self.assertEqual(poly(9) + poly(4), 2)
        self.assertEqual(poly(4) * poly(3), 1)
        self.assertEqual(poly('4x+5') << 2, poly('4x^3+5x^2'))
        self.assertEqual(poly('4x^3+5x^2') >> 2, poly('4x+5'))
        self.assertEqual(poly('4x^3+5x^2') >> 5, 0)
        self.assertEqual(divmod(poly('x^4'), poly('x^2')), (poly('x^2'), 0))
        self.assertEqual(poly('x^4+2') % poly('x^2'), poly(2))
        self.assertEqual(poly('x^2+3') // poly('2x'), poly('6x'))
        self.assertEqual(poly('x^2+3') // 2, poly('6x^2+7'))

        self.assertEqual(poly.gcd('3x^2+8x+4', '3x^2+5x+2'), poly('x+8'))
        a = poly('x + 10')  # x - 1
        b = a**2 * (a-1)**2
        c = a * (a-2)**2
        d, s, t = poly.gcdext(b, c)
        self.assertEqual(d, a)
        self.assertEqual(b * s + c * t, a)
        d, s, t = poly.gcdext(poly('3x+3'), poly('2x^2+2'))
        self.assertEqual(d, 1)
        self.assertEqual(poly('3x+3') * s + poly('2x^2+2') * t, 1)
        self.assertEqual(poly.gcdext('2x+4', 0), (poly('x+2'), poly(6), poly(0)))
        self.assertEqual(poly.gcdext(0, 0), (poly(0), poly(1), poly(0)))

        f = poly('x^3+2x+5')
        self.assertEqual(f.degree(), 3)
        self.assertEqual(f.lc(), 1)
        self.assertEqual(f[1], 2)
        self.assertEqual(f[9], 0)
        self.assertEqual(list(f), [5, 2, 0, 1])
        self.assertEqual(f.coefficients(), [5, 2, 0, 1])
        self.assertEqual(f.coefficients(2), [5, 2])
        self.assertEqual(f.coefficients(6), [5, 2, 0, 1, 0, 0])
        self.assertIsInstance(f.coefficients()[0], poly.field)
        self.assertEqual(poly().coefficients(2), [0, 0])
        self.assertEqual(poly()[-1], 0)
        self.assertEqual(f.derivative(), poly('3x^2+2'))
        self.assertEqual(f.truncate(2), poly('2x+5'))
        self.assertEqual(f.truncate(3), poly('2x+5'))
        self.assertEqual(f.truncate(0), 0)
        self.assertEqual(f.reverse(), poly('5x^3+2x^2+1'))
        self.assertEqual(f.reverse(4), poly('5x^4+2x^3+x'))
        self.assertEqual(f.reverse(1), poly('5x+2'))
        self.assertEqual(f.reverse(-1), 0)
        self.assertEqual(poly('2x+4').monic(), poly('x+2'))
        self.assertEqual(poly(0).monic(), 0)
        self.assertEqual(poly.powmod(poly('x'), 10, poly('x^2+1')), 10)
        self.assertEqual(poly.powmod(poly('x'), -1, poly('x^2+1')), poly('10x'))
        self.assertEqual(poly.powmod(poly('x'), 0, poly('x^2+1')), 1)
        self.assertEqual(poly.powmod(poly('x'), 5, 1), 0)

    def test_power_series(self):
        poly = gfpx.GFpX(11)
        self.assertEqual(poly.mullow([1, 1], [1, 1], 2), poly('2x+1'))
        self.assertEqual(poly.mullow([1, 1], [1, 1], 5), poly('x^2+2x+1'))
        self.assertEqual(poly.mullow([0, 1], [0, 1], 2), 0)
        self.assertEqual(poly.mullow([1, 2, 3], [4, 5, 6], 0), 0)
        a = poly('3x^4+x^3+7x^2+2x+5')
        b = poly('9x^3+4x+6')
        for n in range(9):
            self.assertEqual(poly.mullow(a, b, n), (a * b).truncate(n))
        t4 = poly.lshift(1, 4)
        self.assertEqual(t4, poly('x^4'))
        self.assertEqual(poly.invert([1, 1], t4), [1, 10, 1, 10])
        self.assertEqual(poly.mullow(poly.invert(a, t4), a, 4), 1)
        self.assertRaises(NotInvertibleError, poly.invert, [0, 1], t4)

    def test_contract_helpers(self):
        poly = gfpx.GFpX(11)
        f11 = poly.field
        v = poly.vector([1, f11(2), -1])
        self.assertEqual(v, [1, 2, 10])
        self.assertTrue(all(isinstance(a, f11) for a in v))
        self.assertRaises(RingMismatchError, poly.vector, [finfields.GF(19)(1)])
        self.assertRaises(RingMismatchError, poly.vector, [1.5])
        self.assertEqual(poly('x^2+1').check_modulus(), 2)
        self.assertEqual(poly('x^2+1').check_modulus(squarefree=True), 2)
        self.assertEqual(poly('x+3').check_modulus(squarefree=True), 1)
        self.assertRaises(PreconditionError, poly('2x^2+1').check_modulus)
        self.assertRaises(PreconditionError, poly(1).check_modulus)
        self.assertRaises(PreconditionError, poly(0).check_modulus)
        self.assertRaises(ValueError, poly(5).check_modulus)
        self.assertEqual(poly('x^2+2x+1').check_modulus(), 2)
        self.assertRaises(PreconditionError, poly('x^2+2x+1').check_modulus, squarefree=True)


if __name__ == "__main__":
    unittest.main()
