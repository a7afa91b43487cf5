"""Provide the fixed-width bit-vector type."""
import functools
import warnings


SOURCE_WIDTH = 32


class BitsWarning(UserWarning):
    """Warning issued for input that is accepted but likely unintended."""


class ConstructionError(Exception):
    """Base class of the errors raised when a bit vector cannot be built."""


class InvalidInputError(ConstructionError, ValueError):
    """A binary literal is not made of ``0`` and ``1`` or is too wide."""


class WidthMismatchError(ConstructionError, ValueError):
    """A bit sequence (or bit range) does not have the target width.

    Attributes:
        expected: the width of the target bit-vector type.
        found: the width of the given sequence or range.
    """

    def __init__(self, expected, found):
        msg = "expected {} bits but found {}".format(expected, found)
        super().__init__(msg)
        self.expected = expected
        self.found = found


class BitIndexOutOfRangeError(ConstructionError, IndexError):
    """A high:low range exceeds the bounds of its backing sequence."""


@functools.lru_cache(maxsize=None)
def _sized(base, width):
    """Return the subclass of *base* with the given bit-width."""
    assert isinstance(width, int) and 0 < width
    name = "{}[{}]".format(base.__name__, width)
    namespace = {
        "width": width,
        "__slots__": (),
        "__module__": base.__module__,
        "__qualname__": name,
    }
    return type(name, (base,), namespace)


def _sequence_bits(bits):
    """Return the list of booleans of a bit sequence.

    Strings are read as binary literals (whitespace is ignored) rather
    than converted element by element, since every character is truthy.
    """
    if isinstance(bits, (bytes, bytearray)):
        msg = "cannot convert '{}' to a bit sequence"
        raise TypeError(msg.format(type(bits).__name__))
    if isinstance(bits, str):
        literal = "".join(bits.split())
        if any(c not in "01" for c in literal):
            raise InvalidInputError("invalid binary literal {!r}".format(bits))
        return [c == "1" for c in literal]
    return [bool(b) for b in bits]


class Bits(object):
    """Represent fixed-width bit vectors.

    A bit vector of width ``n`` is an ordered sequence of ``n`` bits where
    position 0 is the most significant bit and position ``n - 1`` the least
    significant one. When a bit vector is interpreted as a signed integer,
    bit 0 is the sign bit (two's complement).

    The width is part of the type: ``Bits[n]`` is the bit-vector type of
    width ``n`` and the unsized ``Bits`` cannot be instantiated.

    Args:
        bits: a sequence of exactly ``width`` booleans (MSB first) or a
            binary literal (see `from_string`). If omitted, all the bits
            are zero.

    ::

        >>> from bitmath.core import Bits
        >>> Bits[4]()
        Bits[4]('0000')
        >>> Bits[4]([True, False, True, True])
        Bits[4]('1011')
        >>> Bits[8]("1010 0101")
        Bits[8]('10100101')
        >>> Bits[8].from_signed(-1).width
        8

    Bit vectors are mutable values: single bits and ranges of bits can be
    assigned (see `__setitem__`), while arithmetic and rotation return new
    bit vectors. Since they are mutable, bit vectors are not hashable.
    """

    width = None

    __slots__ = ["_bits"]

    def __class_getitem__(cls, width):
        assert cls.width is None, "{} is already sized".format(cls.__name__)
        return _sized(cls, width)

    def __init__(self, bits=None):
        assert self.width is not None, "use Bits[width] to create bit vectors"
        if bits is None:
            self._bits = [False] * self.width
            return
        if isinstance(bits, str):
            bits = self._parse_literal(bits)
        else:
            bits = _sequence_bits(bits)
        if len(bits) != self.width:
            raise WidthMismatchError(self.width, len(bits))
        self._bits = bits

    # Construction

    @classmethod
    def zero(cls):
        """Return the bit vector with all bits set to zero."""
        return cls()

    @classmethod
    def _from_int(cls, val):
        """Return the bit vector of the *width* least significant bits of val.

        Negative values are taken in two's complement, so the result is
        sign-extended when ``val`` has fewer bits than the width.
        """
        val &= 2 ** cls.width - 1
        return cls([(val >> (cls.width - 1 - i)) & 1 for i in range(cls.width)])

    @classmethod
    def from_signed(cls, x):
        """Build a bit vector from a signed 32-bit integer.

        When the width is at most 32 bits, the least significant bits of
        the two's complement pattern of ``x`` are kept. Otherwise, the value
        is sign-extended.

            >>> from bitmath.core import Bits
            >>> Bits[4].from_signed(-3)
            Bits[4]('1101')
            >>> Bits[4].from_signed(0x7a)
            Bits[4]('1010')
            >>> Bits[36].from_signed(-2).bits_string(pretty=True)
            '1111 1111 1111 1111 1111 1111 1111 1111 1110'

        """
        assert isinstance(x, int) and -2 ** (SOURCE_WIDTH - 1) <= x < 2 ** (SOURCE_WIDTH - 1)
        return cls._from_int(x)

    @classmethod
    def from_unsigned(cls, x):
        """Build a bit vector from an unsigned 32-bit integer.

        Like `from_signed`, but the value is zero-extended when the width
        is larger than 32 bits.

            >>> from bitmath.core import Bits
            >>> Bits[8].from_unsigned(0xab)
            Bits[8]('10101011')
            >>> Bits[36].from_unsigned(0xffffffff).bits_string(pretty=True)
            '0000 1111 1111 1111 1111 1111 1111 1111 1111'

        """
        assert isinstance(x, int) and 0 <= x < 2 ** SOURCE_WIDTH
        return cls._from_int(x)

    @classmethod
    def from_bits(cls, bits):
        """Build a bit vector from a sequence of booleans (MSB first).

        A string is read as a sequence of ``0`` and ``1`` characters
        (whitespace is ignored) and must have exactly *width* bits.

            >>> from bitmath.core import Bits
            >>> Bits[3].from_bits("100")
            Bits[3]('100')
            >>> Bits[3].from_bits([1, 0, 0])
            Bits[3]('100')
            >>> Bits[4].from_bits([True, False, False])
            Traceback (most recent call last):
             ...
            bitmath.core.WidthMismatchError: expected 4 bits but found 3

        """
        return cls(_sequence_bits(bits))

    @classmethod
    def from_reverse_index(cls, bits, hi, lo):
        """Build a bit vector from the bits ``hi`` down to ``lo`` of a sequence.

        The indices follow the hardware convention: position 0 is the last
        (least significant) element of ``bits``. The order of ``hi`` and
        ``lo`` does not matter, and both end points are included.

            >>> from bitmath.core import Bits
            >>> Bits[4].from_reverse_index(Bits[8]("10110010"), 3, 0)
            Bits[4]('0010')
            >>> Bits[4].from_reverse_index("1011 0010", 4, 7)
            Bits[4]('1011')

        See also `bitslice`.
        """
        assert isinstance(hi, int) and isinstance(lo, int)
        bits = _sequence_bits(bits)
        high, low = max(hi, lo), min(hi, lo)
        if low < 0 or high >= len(bits):
            msg = "bit range [{}:{}] out of range for {} bits"
            raise BitIndexOutOfRangeError(msg.format(high, low, len(bits)))
        width = high - low + 1
        if width != cls.width:
            raise WidthMismatchError(cls.width, width)
        start = len(bits) - high - 1
        return cls(bits[start:start + width])

    @classmethod
    def _parse_literal(cls, text):
        """Return the list of bits of a binary literal of at most *width* bits."""
        assert isinstance(text, str)
        literal = "".join(text.split())
        if len(literal) > cls.width:
            msg = "binary literal {!r} has more than {} bits"
            raise InvalidInputError(msg.format(text, cls.width))
        if any(c not in "01" for c in literal):
            raise InvalidInputError("invalid binary literal {!r}".format(text))
        if len(literal) < cls.width:
            msg = "binary literal {!r} has less than {} bits, padding with zeros"
            warnings.warn(msg.format(text, cls.width), BitsWarning)
        padding = [False] * (cls.width - len(literal))
        return padding + [c == "1" for c in literal]

    @classmethod
    def from_string(cls, text):
        """Build a bit vector from a binary literal.

        Whitespace is ignored. Literals shorter than the width are padded
        with zeros on the most significant side (a `BitsWarning` is issued),
        so ``"101"`` gives the 8-bit vector ``00000101``.

        Note:
            The characters are right-aligned, that is, they fill the least
            significant positions and the value of the literal is kept.
            They are not written left-aligned from the most significant
            bit, which would turn ``"101"`` into ``10100000``.

            >>> from bitmath.core import Bits
            >>> Bits[8].from_string(" 1111 0000 ")
            Bits[8]('11110000')
            >>> Bits[4].from_string("10x1")
            Traceback (most recent call last):
             ...
            bitmath.core.InvalidInputError: invalid binary literal '10x1'

        """
        return cls(cls._parse_literal(text))

    # Conversion

    @property
    def uint(self):
        """The unsigned integer represented by all the bits."""
        val = 0
        for b in self._bits:
            val = (val << 1) | b
        return val

    @property
    def sint(self):
        """The two's complement integer represented by all the bits."""
        val = self.uint
        if self._bits[0]:
            val -= 2 ** self.width
        return val

    def __int__(self):
        return self.uint

    def unsigned_value(self):
        """Return the unsigned 32-bit value of the bit vector.

        If the width is larger than 32 bits, only the 32 least significant
        bits are taken into account.

            >>> from bitmath.core import Bits
            >>> Bits[8].from_signed(-1).unsigned_value()
            255
            >>> Bits[40]("1" + "0" * 36 + "101").unsigned_value()
            5

        """
        return self.uint & (2 ** SOURCE_WIDTH - 1)

    def signed_value(self):
        """Return the signed 32-bit value of the bit vector.

        If the width is smaller than 32 bits, bit 0 is sign-extended.
        Otherwise, the 32 least significant bits are taken as a two's
        complement pattern.

            >>> from bitmath.core import Bits
            >>> Bits[8].from_unsigned(255).signed_value()
            -1
            >>> Bits[40].from_unsigned(2 ** 31).signed_value()
            -2147483648

        """
        if self.width < SOURCE_WIDTH:
            return self.sint
        val = self.unsigned_value()
        if val >> (SOURCE_WIDTH - 1):
            val -= 2 ** SOURCE_WIDTH
        return val

    # Addressing

    def _check_index(self, i):
        # bool is a subclass of int but not a valid bit position
        if isinstance(i, bool) or not isinstance(i, int):
            raise TypeError("invalid index")
        if i < 0 or i >= self.width:
            raise IndexError("bit index {} out of range".format(i))

    def _check_range(self, key):
        assert key.step is None or key.step == 1
        start = key.start if key.start is not None else 0
        stop = key.stop if key.stop is not None else self.width
        for index in (start, stop):
            if isinstance(index, bool) or not isinstance(index, int):
                raise TypeError("invalid index")
        if not 0 <= start <= stop <= self.width:
            raise IndexError("bit range [{}:{}] out of range".format(start, stop))
        return start, stop

    def __getitem__(self, key):
        """Override [] operator.

        ``v[i]`` returns the bit at position ``i`` (0 is the most
        significant bit) and ``v[i:j]`` returns the bits from position ``i``
        up to (not included) position ``j`` as a tuple.

            >>> from bitmath.core import Bits
            >>> v = Bits[6]("101100")
            >>> v[0], v[5]
            (True, False)
            >>> v[1:4]
            (False, True, True)

        Warning:
            Positions are counted from the most significant bit, unlike
            the hardware convention of `bitslice`.

        Indices out of range raise `IndexError`.
        """
        if isinstance(key, slice):
            start, stop = self._check_range(key)
            return tuple(self._bits[start:stop])
        self._check_index(key)
        return self._bits[key]

    def __setitem__(self, key, value):
        """Override [] assignment.

            >>> from bitmath.core import Bits
            >>> v = Bits[6]()
            >>> v[0] = True
            >>> v[2:5] = [1, 1, 0]
            >>> v
            Bits[6]('101100')

        """
        if isinstance(key, slice):
            start, stop = self._check_range(key)
            value = [bool(b) for b in value]
            if len(value) != stop - start:
                msg = "cannot assign {} bits to a range of {} bits"
                raise ValueError(msg.format(len(value), stop - start))
            self._bits[start:stop] = value
        else:
            self._check_index(key)
            self._bits[key] = bool(value)

    def get_bit(self, i):
        """Return the bit at position ``i``."""
        return self[i]

    def set_bit(self, i, value):
        """Set the bit at position ``i``."""
        self[i] = value

    def get_range_inclusive(self, first, last):
        """Return the bits from position ``first`` to ``last`` (included)."""
        if first > last:
            raise IndexError("bit range [{}..{}] out of range".format(first, last))
        return self[first:last + 1]

    def set_range_inclusive(self, first, last, value):
        """Set the bits from position ``first`` to ``last`` (included)."""
        if first > last:
            raise IndexError("bit range [{}..{}] out of range".format(first, last))
        self[first:last + 1] = value

    def __len__(self):
        return self.width

    def __iter__(self):
        return iter(list(self._bits))

    def __eq__(self, other):
        """Override == operator."""
        if not isinstance(other, Bits):
            return NotImplemented
        return self.width == other.width and self._bits == other._bits

    __hash__ = None

    def copy(self):
        """Return an independent copy of the bit vector."""
        return type(self)(self._bits)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    # Arithmetic and rotation

    def __add__(self, other):
        """Override + operator (modular addition)."""
        from bitmath import operation
        return operation.unsigned_add(self, other)[0]

    def unsigned_add(self, other):
        """Return the unsigned sum and the overflow flag.

        See `operation.unsigned_add`.
        """
        from bitmath import operation
        return operation.unsigned_add(self, other)

    def signed_add(self, other):
        """Return the signed sum and the overflow flag.

        See `operation.signed_add`.
        """
        from bitmath import operation
        return operation.signed_add(self, other)

    def rotate_left(self, r):
        """Return the bit vector rotated ``r`` positions to the left."""
        from bitmath import operation
        return operation.rotate_left(self, r)

    def rotate_right(self, r):
        """Return the bit vector rotated ``r`` positions to the right."""
        from bitmath import operation
        return operation.rotate_right(self, r)

    # Printing

    def __str__(self):
        """Return the display representation."""
        from bitmath import printing
        return (printing.BitsStrPrinter()).doprint(self)

    def __repr__(self):
        from bitmath import printing
        return (printing.BitsReprPrinter()).doprint(self)

    def bits_string(self, pretty=False):
        """Return the binary representation.

        See `printing.bits_string`.
        """
        from bitmath import printing
        return printing.bits_string(self, pretty)

    def pretty_uhex_string(self):
        """Return the hexadecimal representation grouped in bytes.

        See `printing.pretty_uhex_string`.
        """
        from bitmath import printing
        return printing.pretty_uhex_string(self)


def bitsify(t, width):
    """Convert the argument *t* to a bit vector of bit-width *width*.

    Integers can be given in the unsigned or in the signed range.

        >>> from bitmath.core import bitsify
        >>> bitsify(3, 4)
        Bits[4]('0011')
        >>> bitsify(-1, 4)
        Bits[4]('1111')
        >>> bitsify("0110", 4)
        Bits[4]('0110')

    """
    if isinstance(t, int):
        assert -2 ** (width - 1) <= t < 2 ** width
        return Bits[width]._from_int(t)
    elif isinstance(t, str):
        return Bits[width].from_string(t)
    elif isinstance(t, Bits):
        assert t.width == width
        return t
    else:
        msg = "cannot convert '{}' to a bit vector"
        raise TypeError(msg.format(type(t).__name__))


def bitslice(bits, hi, lo):
    """Return the bits from position ``hi`` down to ``lo`` of a sequence.

    Positions are counted from the least significant bit (the last element
    of ``bits``) and both end points are included, as in the ``x[hi:lo]``
    notation of hardware description languages. The width of the result is
    ``abs(hi - lo) + 1``.

        >>> from bitmath.core import Bits, bitslice
        >>> instr = Bits[16]("0010 0111 1000 0001")
        >>> bitslice(instr, 15, 12)
        Bits[4]('0010')
        >>> bitslice(instr, 7, 0).unsigned_value()
        129
        >>> bitslice([True, False], 0, 0)
        Bits[1]('0')

    """
    assert isinstance(hi, int) and isinstance(lo, int)
    width = abs(hi - lo) + 1
    return Bits[width].from_reverse_index(bits, hi, lo)
