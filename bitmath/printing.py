"""Manage the representation of bit vectors."""
from sympy.printing import repr as sympy_repr
from sympy.printing import str as sympy_str


def bits_string(bv, pretty=False):
    """Return the binary representation (most significant bit first).

    If ``pretty`` is True, the bits are grouped in nibbles counting
    from the least significant bit.

        >>> from bitmath.core import Bits
        >>> from bitmath.printing import bits_string
        >>> bits_string(Bits[6].from_unsigned(0b101100))
        '101100'
        >>> bits_string(Bits[6].from_unsigned(0b101100), pretty=True)
        '10 1100'
        >>> bits_string(Bits[8].from_unsigned(0xf0), pretty=True)
        '1111 0000'

    """
    digits = "".join("1" if b else "0" for b in bv)
    if not pretty:
        return digits
    nibbles = [digits[max(0, i - 4):i] for i in range(len(digits), 0, -4)]
    return " ".join(reversed(nibbles))


def pretty_uhex_string(bv):
    """Return the hexadecimal representation grouped in bytes.

    The unsigned value is printed with one digit per nibble (the
    most significant nibble may be incomplete) and the digits
    are grouped in pairs counting from the least significant digit.

        >>> from bitmath.core import Bits
        >>> from bitmath.printing import pretty_uhex_string
        >>> pretty_uhex_string(Bits[8].from_unsigned(0xab))
        'ab'
        >>> pretty_uhex_string(Bits[12].from_unsigned(0xabc))
        'a bc'
        >>> pretty_uhex_string(Bits[18].from_unsigned(0x1))
        '0 00 01'

    """
    num_digits = -(-bv.width // 4)
    padding = " " * (num_digits % 2)
    digits = padding + format(bv.uint, "0{}x".format(num_digits))
    chunks = [digits[i:i + 2] for i in range(0, len(digits), 2)]
    # the padding is removed once the digits are grouped
    return " ".join(chunk.replace(" ", "") for chunk in chunks)


def signed_hex(val, prefix=""):
    """Return the hexadecimal representation of a signed integer.

        >>> from bitmath.printing import signed_hex
        >>> signed_hex(-26, prefix="0x")
        '-0x1a'
        >>> signed_hex(26)
        '1a'

    """
    sign = "-" if val < 0 else ""
    return "{}{}{:x}".format(sign, prefix, abs(val))


# noinspection PyPep8Naming,PyMethodMayBeStatic
class BitsStrPrinter(sympy_str.StrPrinter):
    """Printing class that handles the `str` method of `Bits`.

    The representation contains the width, the bits, and the
    unsigned and signed values in decimal and hexadecimal.

        >>> from bitmath.core import Bits
        >>> print(Bits[8].from_signed(-1))
        Bits<8>{ 1111 1111 | dec 255/-1 | hex 0xff/-0x1 }
        >>> print(Bits[6].from_unsigned(0b101100))
        Bits<6>{ 10 1100 | dec 44/-20 | hex 0x2c/-0x14 }

    The prefix of the hexadecimal values and the grouping of the bits
    can be disabled with the `HexPrefix` and `NibbleGrouping` contexts.
    """

    def _print_Bits(self, bv):
        from bitmath import context

        prefix = "0x" if context.HexPrefix.current_context else ""
        pretty = context.NibbleGrouping.current_context

        return "Bits<{}>{{ {} | dec {}/{} | hex {}/{} }}".format(
            bv.width,
            bits_string(bv, pretty),
            bv.uint,
            bv.sint,
            "{}{:x}".format(prefix, bv.uint),
            signed_hex(bv.sint, prefix))


# noinspection PyPep8Naming,PyMethodMayBeStatic
class BitsReprPrinter(sympy_repr.ReprPrinter):
    """Printing class that handles the `repr` method of `Bits`.

        >>> from bitmath.core import Bits
        >>> Bits[4].from_unsigned(3)
        Bits[4]('0011')

    """

    def _print_Bits(self, bv):
        return "{}({})".format(type(bv).__name__, self._print(bits_string(bv)))
