"""Plutus data values and their CBOR encoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

_U64_LIMIT = 1 << 64
_CHUNK_SIZE = 64
_BREAK = 0xFF
_ARG_SIZES = {24: 1, 25: 2, 26: 4, 27: 8}

_MAJOR_UINT = 0
_MAJOR_NINT = 1
_MAJOR_BYTES = 2
_MAJOR_TEXT = 3
_MAJOR_ARRAY = 4
_MAJOR_MAP = 5
_MAJOR_TAG = 6

_TAG_POS_BIGNUM = 2
_TAG_NEG_BIGNUM = 3
_TAG_CONSTR_ANY = 102

_MAJOR_NAMES = {
    _MAJOR_TEXT: "String",
    7: "Simple",
}


class CborDecodeError(ValueError):
    """Raised when bytes are not valid CBOR for Plutus data."""


@dataclass(frozen=True)
class Constr:
    """A constructor application: an alternative number and its fields."""

    tag: int
    fields: Tuple["PlutusData", ...] = ()

    def __post_init__(self) -> None:
        if not 0 <= self.tag < _U64_LIMIT:
            raise ValueError(f"constructor tag out of range: {self.tag}")
        object.__setattr__(self, "fields", tuple(self.fields))


@dataclass(frozen=True)
class Map:
    """An ordered list of key/value pairs."""

    items: Tuple[Tuple["PlutusData", "PlutusData"], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple((k, v) for k, v in self.items))


@dataclass(frozen=True)
class Integer:
    """An integer of any size."""

    value: int


@dataclass(frozen=True)
class ByteString:
    """A string of bytes."""

    value: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", bytes(self.value))


@dataclass(frozen=True)
class List:
    """A list of data values."""

    items: Tuple["PlutusData", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


PlutusData = Union[Constr, Map, Integer, ByteString, List]


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def take(self, count: int) -> bytes:
        end = self._pos + count
        if end > len(self._data):
            raise CborDecodeError("unexpected end of input")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def head(self) -> Tuple[int, Optional[int]]:
        """Read an initial byte and its argument; ``None`` means indefinite."""
        initial = self.take(1)[0]
        major, info = initial >> 5, initial & 0x1F
        if info < 24:
            return major, info
        if info in _ARG_SIZES:
            return major, int.from_bytes(self.take(_ARG_SIZES[info]), "big")
        if info == 31:
            return major, None
        raise CborDecodeError(f"reserved additional information {info}")

    def at_break(self) -> bool:
        if self._pos >= len(self._data):
            raise CborDecodeError("unexpected end of input")
        if self._data[self._pos] == _BREAK:
            self._pos += 1
            return True
        return False

    def items(self, length: Optional[int]) -> Iterator[None]:
        if length is None:
            while not self.at_break():
                yield None
        else:
            for _ in range(length):
                yield None

    def byte_string(self, length: Optional[int]) -> bytes:
        if length is not None:
            return self.take(length)
        out = bytearray()
        while not self.at_break():
            major, chunk_len = self.head()
            if major != _MAJOR_BYTES or chunk_len is None:
                raise CborDecodeError("invalid chunk in indefinite byte string")
            out += self.take(chunk_len)
        return bytes(out)


def _decode(reader: _Reader) -> PlutusData:
    major, arg = reader.head()
    if arg is None and major in (_MAJOR_UINT, _MAJOR_NINT, _MAJOR_TAG):
        raise CborDecodeError(f"indefinite length not allowed for major type {major}")
    if major == _MAJOR_UINT:
        return Integer(arg)
    if major == _MAJOR_NINT:
        return Integer(-1 - arg)
    if major == _MAJOR_BYTES:
        return ByteString(reader.byte_string(arg))
    if major == _MAJOR_ARRAY:
        return List(tuple(_decode(reader) for _ in reader.items(arg)))
    if major == _MAJOR_MAP:
        pairs = []
        for _ in reader.items(arg):
            key = _decode(reader)
            value = _decode(reader)
            pairs.append((key, value))
        return Map(tuple(pairs))
    if major == _MAJOR_TAG:
        return _decode_tagged(reader, arg)
    name = _MAJOR_NAMES.get(major, str(major))
    raise CborDecodeError(f"bad cbor data type ({name}) for plutus data")


def _decode_fields(reader: _Reader) -> Tuple[PlutusData, ...]:
    major, length = reader.head()
    if major != _MAJOR_ARRAY:
        raise CborDecodeError("expected an array of constructor fields")
    return tuple(_decode(reader) for _ in reader.items(length))


def _decode_tagged(reader: _Reader, tag: int) -> PlutusData:
    if 121 <= tag <= 127:
        return Constr(tag - 121, _decode_fields(reader))
    if 1280 <= tag <= 1400:
        return Constr(tag - 1280 + 7, _decode_fields(reader))
    if tag == _TAG_CONSTR_ANY:
        major, length = reader.head()
        if major != _MAJOR_ARRAY or length != 2:
            raise CborDecodeError("expected a two-element array for tagged constructor")
        major, alternative = reader.head()
        if major != _MAJOR_UINT or alternative is None:
            raise CborDecodeError("expected an unsigned constructor alternative")
        return Constr(alternative, _decode_fields(reader))
    if tag in (_TAG_POS_BIGNUM, _TAG_NEG_BIGNUM):
        major, length = reader.head()
        if major != _MAJOR_BYTES:
            raise CborDecodeError("expected a byte string for a big integer")
        magnitude = int.from_bytes(reader.byte_string(length), "big")
        return Integer(magnitude if tag == _TAG_POS_BIGNUM else -1 - magnitude)
    raise CborDecodeError(f"unknown tag for plutus data tag: {tag}")


def decode_data(cbor: bytes) -> PlutusData:
    """Decode one Plutus data value from CBOR bytes."""
    return _decode(_Reader(cbor))


def _write_head(out: bytearray, major: int, arg: int) -> None:
    prefix = major << 5
    if arg < 24:
        out.append(prefix | arg)
    elif arg < 1 << 8:
        out.append(prefix | 24)
        out += arg.to_bytes(1, "big")
    elif arg < 1 << 16:
        out.append(prefix | 25)
        out += arg.to_bytes(2, "big")
    elif arg < 1 << 32:
        out.append(prefix | 26)
        out += arg.to_bytes(4, "big")
    else:
        out.append(prefix | 27)
        out += arg.to_bytes(8, "big")


def _write_bytes(out: bytearray, value: bytes) -> None:
    # Byte strings longer than one chunk are written as indefinite sequences.
    if len(value) <= _CHUNK_SIZE:
        _write_head(out, _MAJOR_BYTES, len(value))
        out += value
        return
    out.append((_MAJOR_BYTES << 5) | 31)
    for start in range(0, len(value), _CHUNK_SIZE):
        chunk = value[start:start + _CHUNK_SIZE]
        _write_head(out, _MAJOR_BYTES, len(chunk))
        out += chunk
    out.append(_BREAK)


def _write_integer(out: bytearray, value: int) -> None:
    if 0 <= value < _U64_LIMIT:
        _write_head(out, _MAJOR_UINT, value)
    elif -_U64_LIMIT <= value < 0:
        _write_head(out, _MAJOR_NINT, -1 - value)
    else:
        tag, magnitude = (
            (_TAG_POS_BIGNUM, value) if value >= 0 else (_TAG_NEG_BIGNUM, -1 - value)
        )
        _write_head(out, _MAJOR_TAG, tag)
        _write_bytes(out, magnitude.to_bytes((magnitude.bit_length() + 7) // 8, "big"))


def _write_array(out: bytearray, items: Tuple[PlutusData, ...]) -> None:
    _write_head(out, _MAJOR_ARRAY, len(items))
    for item in items:
        _encode(out, item)


def _encode(out: bytearray, data: PlutusData) -> None:
    if isinstance(data, Constr):
        if data.tag < 7:
            _write_head(out, _MAJOR_TAG, 121 + data.tag)
        elif data.tag < 128:
            _write_head(out, _MAJOR_TAG, 1280 + data.tag - 7)
        else:
            _write_head(out, _MAJOR_TAG, _TAG_CONSTR_ANY)
            _write_head(out, _MAJOR_ARRAY, 2)
            _write_head(out, _MAJOR_UINT, data.tag)
        _write_array(out, data.fields)
    elif isinstance(data, Map):
        _write_head(out, _MAJOR_MAP, len(data.items))
        for key, value in data.items:
            _encode(out, key)
            _encode(out, value)
    elif isinstance(data, Integer):
        _write_integer(out, data.value)
    elif isinstance(data, ByteString):
        _write_bytes(out, data.value)
    elif isinstance(data, List):
        _write_array(out, data.items)
    else:
        raise TypeError(f"not a Plutus data value: {data!r}")


def encode_data(data: PlutusData) -> bytes:
    """Encode a Plutus data value as CBOR bytes."""
    out = bytearray()
    _encode(out, data)
    return bytes(out)