"""Bit-level reader for the flat serialisation format."""

from __future__ import annotations

from typing import Callable, List, TypeVar

from plutusflat.errors import FlatDecodeError
from plutusflat.zigzag import unzigzag

T = TypeVar("T")


class Decoder:
    """Reads values from a flat-encoded buffer, tracking a bit position."""

    def __init__(self, data: bytes) -> None:
        self.buffer = bytes(data)
        self.pos = 0
        self.used_bits = 0

    def _varint(self) -> int:
        result = 0
        shift = 0
        while True:
            chunk = self.bits8(8)
            result |= (chunk & 0x7F) << shift
            shift += 7
            if not chunk & 0x80:
                return result

    def word(self) -> int:
        """Read an unsigned integer written seven bits per byte, low bits first."""
        return self._varint()

    def big_word(self) -> int:
        """Read an unsigned integer of any size, as :meth:`word` does."""
        return self._varint()

    def integer(self) -> int:
        """Read a signed integer of any size stored zigzag-mapped."""
        return unzigzag(self._varint())

    def list_with(self, decode_item: Callable[[Decoder], T]) -> List[T]:
        """Read items, each announced by a 1 bit, until a 0 bit."""
        items = []
        while self.bit():
            items.append(decode_item(self))
        return items

    def bits8(self, num_bits: int) -> int:
        """Read up to eight bits as an unsigned value."""
        if num_bits > 8:
            raise FlatDecodeError(FlatDecodeError.INCORRECT_NUM_BITS)
        self._ensure_bits(num_bits)
        unused = 8 - self.used_bits
        leading_zeroes = 8 - num_bits
        value = ((self.buffer[self.pos] << self.used_bits) & 0xFF) >> leading_zeroes
        if num_bits > unused:
            value |= self.buffer[self.pos + 1] >> (unused + leading_zeroes)
        self._drop_bits(num_bits)
        return value

    def filler(self) -> None:
        """Skip zero bits up to and including the next 1 bit."""
        while not self.bit():
            pass

    def bit(self) -> bool:
        """Read a single bit."""
        if self.pos >= len(self.buffer):
            raise FlatDecodeError(FlatDecodeError.END_OF_BUFFER)
        value = bool(self.buffer[self.pos] & (0x80 >> self.used_bits))
        if self.used_bits == 7:
            self.pos += 1
            self.used_bits = 0
        else:
            self.used_bits += 1
        return value

    def _byte_array(self) -> bytes:
        if self.used_bits != 0:
            raise FlatDecodeError(FlatDecodeError.BUFFER_NOT_BYTE_ALIGNED)
        self._ensure_bytes(1)
        block_len = self.buffer[self.pos]
        self.pos += 1
        out = bytearray()
        while block_len:
            self._ensure_bytes(block_len + 1)
            out += self.buffer[self.pos:self.pos + block_len]
            self.pos += block_len
            block_len = self.buffer[self.pos]
            self.pos += 1
        return bytes(out)

    def bytes(self) -> bytes:
        """Skip a filler, then read a byte string stored as length-prefixed blocks."""
        self.filler()
        return self._byte_array()

    def utf8(self) -> str:
        """Read a byte string and decode it as UTF-8."""
        raw = self.bytes()
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FlatDecodeError(FlatDecodeError.DECODE_UTF8, error=str(exc)) from exc

    def _ensure_bits(self, required: int) -> None:
        if required > (len(self.buffer) - self.pos) * 8 - self.used_bits:
            raise FlatDecodeError(FlatDecodeError.NOT_ENOUGH_BITS, required=required)

    def _ensure_bytes(self, required: int) -> None:
        if required > len(self.buffer) - self.pos:
            raise FlatDecodeError(FlatDecodeError.NOT_ENOUGH_BYTES, required=required)

    def _drop_bits(self, num_bits: int) -> None:
        total = num_bits + self.used_bits
        self.used_bits = total % 8
        self.pos += total // 8