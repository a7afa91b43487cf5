"""Provide the arithmetic and rotation operations of bit vectors.

Additions return the result together with an overflow flag; the
result always wraps around modulo ``2**width`` and overflows are
reported, never raised.
"""
from bitmath import core


def _parse_args(x, y):
    """Check the operands of a binary operation.

    The second operand can be given as a plain integer, which is
    converted to a bit vector of the width of the first operand.
    """
    assert isinstance(x, core.Bits)
    y = core.bitsify(y, x.width)
    assert x.width == y.width
    return x, y


# Arithmetic

def unsigned_add(x, y):
    """Add two bit vectors interpreted as unsigned integers.

    Return the sum modulo ``2**width`` and whether the exact sum
    does not fit in ``width`` bits.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import unsigned_add
        >>> unsigned_add(Bits[8].from_unsigned(255), Bits[8].from_unsigned(1))
        (Bits[8]('00000000'), True)
        >>> unsigned_add(Bits[8].from_unsigned(200), 50)
        (Bits[8]('11111010'), False)

    """
    x, y = _parse_args(x, y)
    width = x.width
    total = x.uint + y.uint
    mask = 2 ** width - 1
    return type(x)._from_int(total & mask), (total >> width) > 0


def signed_add(x, y):
    """Add two bit vectors interpreted as two's complement integers.

    Return the sum modulo ``2**width`` and whether the exact sum
    lies outside ``[-2**(width-1), 2**(width-1) - 1]``.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import signed_add
        >>> r, overflow = signed_add(Bits[8].from_signed(127), Bits[8].from_signed(127))
        >>> r.signed_value(), overflow
        (-2, True)
        >>> r, overflow = signed_add(Bits[8].from_signed(-1), Bits[8].from_signed(-128))
        >>> r.signed_value(), overflow
        (127, True)
        >>> signed_add(Bits[4].from_signed(-3), -4)[0].signed_value()
        -7

    """
    x, y = _parse_args(x, y)
    width = x.width
    total = x.sint + y.sint
    mask = 2 ** width - 1
    bound = 2 ** (width - 1)
    overflow = total < -bound or total > bound - 1
    return type(x)._from_int(total & mask), overflow


# Rotations

def rotate_left(x, r):
    """Circular left rotation.

    The bit at position ``i`` moves to position ``(i - r) % width``.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import rotate_left
        >>> rotate_left(Bits[8].from_unsigned(150), 2).unsigned_value()
        90
        >>> rotate_left(Bits[4]("1000"), 5)
        Bits[4]('0001')

    """
    def doit(val, r, width):
        """Left cyclic rotation operation when both operands are int."""
        mask = 2 ** width - 1
        r = r % width
        return ((val << r) & mask) | ((val & mask) >> (width - r))

    assert isinstance(x, core.Bits)
    assert isinstance(r, int) and r >= 0
    return type(x)._from_int(doit(x.uint, r, x.width))


def rotate_right(x, r):
    """Circular right rotation.

    The bit at position ``i`` moves to position ``(i + r) % width``.

        >>> from bitmath.core import Bits
        >>> from bitmath.operation import rotate_right
        >>> rotate_right(Bits[8].from_unsigned(150), 3).unsigned_value()
        210
        >>> rotate_right(Bits[4]("1000"), 5)
        Bits[4]('0100')

    """
    def doit(val, r, width):
        """Right cyclic rotation operation when both operands are int."""
        mask = 2 ** width - 1
        r = r % width
        return ((val & mask) >> r) | (val << (width - r) & mask)

    assert isinstance(x, core.Bits)
    assert isinstance(r, int) and r >= 0
    return type(x)._from_int(doit(x.uint, r, x.width))
