"""Tests for the printing module."""
import doctest
import unittest

from hypothesis import given
from hypothesis.strategies import integers

from bitmath.core import Bits, bitsify
from bitmath.printing import bits_string, pretty_uhex_string, signed_hex

MIN_SIZE = 1
MAX_SIZE = 72


class TestBitsString(unittest.TestCase):
    """Tests of the binary representation."""

    def test_bits_string(self):
        x = Bits[12].from_unsigned(0xa5c)
        self.assertEqual(bits_string(x), "101001011100")
        self.assertEqual(bits_string(x, pretty=True), "1010 0101 1100")
        self.assertEqual(x.bits_string(pretty=True), "1010 0101 1100")
        self.assertEqual(Bits[1]("1").bits_string(pretty=True), "1")
        self.assertEqual(Bits[5]("10011").bits_string(pretty=True), "1 0011")
        self.assertEqual(Bits[7]("1100011").bits_string(pretty=True), "110 0011")

    @given(
        integers(min_value=MIN_SIZE, max_value=MAX_SIZE),
        integers(min_value=0),
    )
    def test_pretty_groups(self, width, x):
        pretty = bitsify(x % 2 ** width, width).bits_string(pretty=True)
        groups = pretty.split(" ")
        self.assertFalse(pretty.startswith(" "))
        self.assertEqual("".join(groups), bits_string(bitsify(x % 2 ** width, width)))
        self.assertTrue(all(len(g) == 4 for g in groups[1:]))
        self.assertTrue(1 <= len(groups[0]) <= 4)


class TestHexString(unittest.TestCase):
    """Tests of the hexadecimal representation."""

    def test_pretty_uhex_string(self):
        self.assertEqual(pretty_uhex_string(Bits[8].from_unsigned(0xab)), "ab")
        self.assertEqual(pretty_uhex_string(Bits[12].from_unsigned(0xabc)), "a bc")
        self.assertEqual(pretty_uhex_string(Bits[12].from_unsigned(0x00c)), "0 0c")
        self.assertEqual(pretty_uhex_string(Bits[4].from_unsigned(0x7)), "7")
        self.assertEqual(pretty_uhex_string(Bits[3].from_unsigned(0x7)), "7")
        self.assertEqual(pretty_uhex_string(Bits[16].from_unsigned(0xbeef)), "be ef")
        self.assertEqual(
            Bits[32].from_unsigned(0xdeadbeef).pretty_uhex_string(), "de ad be ef")
        self.assertEqual(Bits[36]("1" * 36).pretty_uhex_string(), "f ff ff ff ff")

    def test_signed_hex(self):
        self.assertEqual(signed_hex(0), "0")
        self.assertEqual(signed_hex(-1, "0x"), "-0x1")
        self.assertEqual(signed_hex(255, "0x"), "0xff")


class TestDisplay(unittest.TestCase):
    """Tests of the str and repr methods."""

    def test_str(self):
        self.assertEqual(
            str(Bits[8].from_unsigned(255)),
            "Bits<8>{ 1111 1111 | dec 255/-1 | hex 0xff/-0x1 }")
        self.assertEqual(
            str(Bits[8].from_unsigned(0x7f)),
            "Bits<8>{ 0111 1111 | dec 127/127 | hex 0x7f/0x7f }")
        self.assertEqual(
            str(Bits[4]()),
            "Bits<4>{ 0000 | dec 0/0 | hex 0x0/0x0 }")

    def test_repr(self):
        x = Bits[6]("101100")
        self.assertEqual(repr(x), "Bits[6]('101100')")
        self.assertEqual(eval(repr(x), {"Bits": Bits}), x)


# noinspection PyUnusedLocal,PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    import bitmath.printing
    tests.addTests(doctest.DocTestSuite(bitmath.printing))
    return tests
