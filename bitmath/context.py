"""Provide context managers to modify the default behaviour."""
import contextlib


class StatefulContext(contextlib.AbstractContextManager):
    """Base class for context managers with history."""

    current_context = None

    def __init__(self, new_context):
        """Initialize the context."""
        self.new_context = new_context

    def __enter__(self):
        self.previous_context = type(self).current_context
        type(self).current_context = self.new_context

    def __exit__(self, *args):
        type(self).current_context = self.previous_context


class HexPrefix(StatefulContext):
    """Control the HexPrefix context.

    Control whether or not the hexadecimal values of the display
    representation of bit vectors are prefixed with ``0x``.
    By default, the prefix is printed.

        >>> from bitmath.core import Bits
        >>> from bitmath.context import HexPrefix
        >>> print(Bits[8].from_signed(-6))
        Bits<8>{ 1111 1010 | dec 250/-6 | hex 0xfa/-0x6 }
        >>> with HexPrefix(False):
        ...     print(Bits[8].from_signed(-6))
        Bits<8>{ 1111 1010 | dec 250/-6 | hex fa/-6 }

    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert new_context in [True, False]
        super().__init__(new_context)


class NibbleGrouping(StatefulContext):
    """Control the NibbleGrouping context.

    Control whether or not the bits of the display representation
    of bit vectors are grouped in nibbles. By default, they are grouped.

        >>> from bitmath.core import Bits
        >>> from bitmath.context import NibbleGrouping
        >>> with NibbleGrouping(False):
        ...     print(Bits[8].from_unsigned(3))
        Bits<8>{ 00000011 | dec 3/3 | hex 0x3/0x3 }

    Note that `Bits.bits_string` is not affected by this context.
    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert new_context in [True, False]
        super().__init__(new_context)
