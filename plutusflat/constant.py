"""Constants of Untyped Plutus Core and their flat encoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from plutusflat.data import CborDecodeError, PlutusData, decode_data, encode_data
from plutusflat.decoder import Decoder
from plutusflat.encoder import Encoder
from plutusflat.errors import FlatDecodeError

# Widths, in bits, of the tags in the flat format.
TERM_TAG_WIDTH = 4
CONST_TAG_WIDTH = 4
BUILTIN_TAG_WIDTH = 7

# Term tags.
VAR = 0
DELAY = 1
LAMBDA = 2
APPLY = 3
CONSTANT = 4
FORCE = 5
ERROR = 6
BUILTIN = 7
CONSTR = 8
CASE = 9

# Constant type tags.
INTEGER = 0
BYTE_STRING = 1
STRING = 2
UNIT = 3
BOOL = 4
DATA = 8
PROTO_LIST_ONE = 7
PROTO_LIST_TWO = 5
PROTO_PAIR_ONE = 7
PROTO_PAIR_TWO = 7
PROTO_PAIR_THREE = 6


@dataclass(frozen=True)
class IntegerConstant:
    """An integer of any size."""

    value: int


@dataclass(frozen=True)
class ByteStringConstant:
    """A string of bytes."""

    value: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", bytes(self.value))


@dataclass(frozen=True)
class StringConstant:
    """A text string."""

    value: str


@dataclass(frozen=True)
class BooleanConstant:
    """A truth value."""

    value: bool


@dataclass(frozen=True)
class UnitConstant:
    """The unit value."""


@dataclass(frozen=True)
class DataConstant:
    """A Plutus data value."""

    value: PlutusData


Constant = Union[
    IntegerConstant,
    ByteStringConstant,
    StringConstant,
    BooleanConstant,
    UnitConstant,
    DataConstant,
]


def _encode_tag(encoder: Encoder, tag: int) -> None:
    encoder.safe_bits(CONST_TAG_WIDTH, tag)


def _encode_tags(encoder: Encoder, *tags: int) -> None:
    encoder.list_with(tags, _encode_tag)


def encode_constant(encoder: Encoder, constant: Constant) -> Encoder:
    """Write a constant's type tags followed by its value."""
    if isinstance(constant, IntegerConstant):
        _encode_tags(encoder, INTEGER)
        encoder.integer(constant.value)
    elif isinstance(constant, ByteStringConstant):
        _encode_tags(encoder, BYTE_STRING)
        encoder.bytes(constant.value)
    elif isinstance(constant, StringConstant):
        _encode_tags(encoder, STRING)
        encoder.utf8(constant.value)
    elif isinstance(constant, UnitConstant):
        _encode_tags(encoder, UNIT)
    elif isinstance(constant, BooleanConstant):
        _encode_tags(encoder, BOOL)
        encoder.bool(constant.value)
    elif isinstance(constant, DataConstant):
        _encode_tags(encoder, DATA)
        encoder.bytes(encode_data(constant.value))
    else:
        raise TypeError(f"not a constant: {constant!r}")
    return encoder


def _decode_tag(decoder: Decoder) -> int:
    return decoder.bits8(CONST_TAG_WIDTH)


def _is_list_type(tags: Tuple[int, ...]) -> bool:
    return tags[:2] == (PROTO_LIST_ONE, PROTO_LIST_TWO)


def _is_pair_type(tags: Tuple[int, ...]) -> bool:
    return tags[:3] == (PROTO_PAIR_ONE, PROTO_PAIR_TWO, PROTO_PAIR_THREE)


def decode_constant(decoder: Decoder) -> Constant:
    """Read a constant written by :func:`encode_constant`."""
    tags = tuple(decoder.list_with(_decode_tag))

    if tags == (INTEGER,):
        return IntegerConstant(decoder.integer())
    if tags == (BYTE_STRING,):
        return ByteStringConstant(decoder.bytes())
    if tags == (STRING,):
        return StringConstant(decoder.utf8())
    if tags == (UNIT,):
        return UnitConstant()
    if tags == (BOOL,):
        return BooleanConstant(decoder.bit())
    if tags == (DATA,):
        cbor = decoder.bytes()
        try:
            return DataConstant(decode_data(cbor))
        except CborDecodeError as exc:
            raise FlatDecodeError(FlatDecodeError.DECODE_CBOR, error=str(exc)) from exc
    if _is_pair_type(tags):
        raise FlatDecodeError(
            FlatDecodeError.MESSAGE, message="pair constants are not supported"
        )
    if _is_list_type(tags):
        raise FlatDecodeError(
            FlatDecodeError.MESSAGE, message="list constants are not supported"
        )
    raise FlatDecodeError(FlatDecodeError.UNKNOWN_CONSTANT_CONSTRUCTOR, tags=list(tags))