"""Bit-level writer for the flat serialisation format."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from plutusflat.errors import FlatEncodeError
from plutusflat.zigzag import zigzag

T = TypeVar("T")

_BLOCK_SIZE = 255


class Encoder:
    """Accumulates bits and bytes into :attr:`buffer`.

    Every writing method returns the encoder, so calls can be chained.
    Bits of a byte that is not yet complete are held back until the byte
    fills up or :meth:`filler` pads it out.
    """

    def __init__(self) -> None:
        self.buffer = bytearray()
        self._used_bits = 0
        self._current_byte = 0

    def _varint(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"cannot encode negative value {value} as a word")
        while True:
            chunk = value & 0x7F
            value >>= 7
            if value:
                chunk |= 0x80
            self.bits(8, chunk)
            if not value:
                break

    def word(self, value: int) -> Encoder:
        """Write an unsigned integer seven bits at a time, low bits first.

        Each byte's top bit tells whether another byte follows.
        """
        self._varint(value)
        return self

    def big_word(self, value: int) -> Encoder:
        """Write an unsigned integer of any size, as :meth:`word` does."""
        self._varint(value)
        return self

    def integer(self, value: int) -> Encoder:
        """Write a signed integer of any size, zigzag-mapped first."""
        self._varint(zigzag(value))
        return self

    def bits(self, num_bits: int, value: int) -> Encoder:
        """Write the low ``num_bits`` bits of ``value`` (at most eight).

        The value is expected to fit in ``num_bits`` bits.
        """
        self._used_bits += num_bits
        unused = 8 - self._used_bits
        if unused == 0:
            self._current_byte |= value
            self._next_byte()
        elif unused > 0:
            self._current_byte |= (value << unused) & 0xFF
        else:
            spill = -unused
            self._current_byte |= value >> spill
            self._next_byte()
            self._current_byte = (value << (8 - spill)) & 0xFF
            self._used_bits = spill
        return self

    def safe_bits(self, num_bits: int, value: int) -> Encoder:
        """Write ``value`` in ``num_bits`` bits, refusing values that do not fit."""
        if value >= 1 << num_bits:
            raise FlatEncodeError(
                FlatEncodeError.OVERFLOW, byte=value, num_bits=num_bits
            )
        return self.bits(num_bits, value)

    def byte_array(self, data: bytes) -> Encoder:
        """Write ``data`` as length-prefixed blocks; the buffer must be aligned."""
        if self._used_bits != 0:
            raise FlatEncodeError(FlatEncodeError.BUFFER_NOT_BYTE_ALIGNED)
        view = memoryview(data)
        for start in range(0, len(view), _BLOCK_SIZE):
            block = view[start:start + _BLOCK_SIZE]
            self.buffer.append(len(block))
            self.buffer.extend(block)
        self.buffer.append(0)
        return self

    def utf8(self, text: str) -> Encoder:
        """Write a string as its UTF-8 bytes."""
        return self.bytes(text.encode("utf-8"))

    def list_with(
        self, items: Iterable[T], encode_item: Callable[[Encoder, T], object]
    ) -> Encoder:
        """Write each item behind a 1 bit, then a closing 0 bit."""
        for item in items:
            self._one()
            encode_item(self, item)
        self._zero()
        return self

    def filler(self) -> Encoder:
        """Pad the current byte with zeros ending in a single 1 bit."""
        self._current_byte |= 1
        self._next_byte()
        return self

    def bytes(self, data: bytes) -> Encoder:
        """Align the buffer with a filler, then write ``data`` in blocks."""
        self.filler()
        return self.byte_array(data)

    def bool(self, value: bool) -> Encoder:
        """Write one bit: 1 for true, 0 for false."""
        if value:
            self._one()
        else:
            self._zero()
        return self

    def _zero(self) -> None:
        if self._used_bits == 7:
            self._next_byte()
        else:
            self._used_bits += 1

    def _one(self) -> None:
        if self._used_bits == 7:
            self._current_byte |= 1
            self._next_byte()
        else:
            self._current_byte |= 0x80 >> self._used_bits
            self._used_bits += 1

    def _next_byte(self) -> None:
        self.buffer.append(self._current_byte)
        self._current_byte = 0
        self._used_bits = 0