"""Manipulate fixed-width bit vectors.

This package provides a bit-vector type whose width is fixed
when the type is created (``Bits[8]``, ``Bits[32]``, ...), with
two's complement arithmetic and overflow detection, bit and range
addressing (including the ``hi:lo`` notation of hardware description
languages with `bitslice`), rotations and binary/hexadecimal printing.

"""
from bitmath.core import (
    Bits, BitsWarning, ConstructionError, InvalidInputError,
    WidthMismatchError, BitIndexOutOfRangeError, bitsify, bitslice
)
