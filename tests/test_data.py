import pytest
from hypothesis import given
from hypothesis import strategies as st

from plutusflat.data import (
    ByteString,
    CborDecodeError,
    Constr,
    Integer,
    List,
    Map,
    decode_data,
    encode_data,
)

_leaves = st.one_of(
    st.integers().map(Integer),
    st.binary(max_size=200).map(ByteString),
)


def _extend(children):
    return st.one_of(
        st.lists(children, max_size=4).map(lambda xs: List(tuple(xs))),
        st.lists(st.tuples(children, children), max_size=3).map(
            lambda ps: Map(tuple(ps))
        ),
        st.tuples(st.integers(0, 300), st.lists(children, max_size=3)).map(
            lambda t: Constr(t[0], tuple(t[1]))
        ),
    )


_data = st.recursive(_leaves, _extend, max_leaves=12)


@given(_data)
def test_round_trip(value):
    assert decode_data(encode_data(value)) == value


@given(st.integers())
def test_integer_round_trip(n):
    assert decode_data(encode_data(Integer(n))) == Integer(n)


@given(st.integers(min_value=0, max_value=2**64 - 1))
def test_constr_tag_round_trip(tag):
    value = Constr(tag, (Integer(1),))
    assert decode_data(encode_data(value)) == value


def test_empty_constr_zero_wire_bytes():
    assert encode_data(Constr(0)) == b"\xd8\x79\x80"


def test_long_byte_string_is_chunked():
    raw = bytes(range(65))
    encoded = encode_data(ByteString(raw))
    assert encoded[:3] == b"\x5f\x58\x40"
    assert encoded[-1] == 0xFF
    assert decode_data(encoded) == ByteString(raw)


def test_short_byte_string_is_definite():
    raw = bytes(64)
    encoded = encode_data(ByteString(raw))
    assert encoded[0] >> 5 == 2
    assert encoded[-64:] == raw


def test_big_integers_use_bignum_tags():
    assert encode_data(Integer(2**64))[0] == 0xC2
    assert encode_data(Integer(-(2**64) - 1))[0] == 0xC3


def test_small_integers_share_encoding_with_unsigned_words():
    assert encode_data(Integer(5)) == bytes([5])
    assert decode_data(bytes([5])) == Integer(5)


def test_decode_indefinite_array():
    assert decode_data(b"\x9f\x01\x02\xff") == List((Integer(1), Integer(2)))


def test_decode_indefinite_map():
    assert decode_data(b"\xbf\x01\x02\xff") == Map(((Integer(1), Integer(2)),))


def test_decode_negative_integer():
    assert decode_data(b"\x20") == Integer(-1)


def test_decode_indefinite_constr_fields():
    assert decode_data(b"\xd8\x7a\x9f\x03\xff") == Constr(1, (Integer(3),))


def test_decode_tag_102_constructor():
    encoded = encode_data(Constr(500, (ByteString(b"ab"),)))
    assert encoded[:2] == b"\xd8\x66"
    assert decode_data(encoded) == Constr(500, (ByteString(b"ab"),))


def test_unknown_tag_rejected():
    with pytest.raises(CborDecodeError, match="unknown tag for plutus data tag: 1"):
        decode_data(b"\xc1\x00")


def test_text_string_rejected():
    with pytest.raises(CborDecodeError, match="bad cbor data type"):
        decode_data(b"\x61a")


def test_empty_input_rejected():
    with pytest.raises(CborDecodeError):
        decode_data(b"")


def test_truncated_input_rejected():
    encoded = encode_data(List((Integer(1), ByteString(b"xyz"))))
    with pytest.raises(CborDecodeError):
        decode_data(encoded[:-1])


def test_constr_fields_must_be_array():
    with pytest.raises(CborDecodeError):
        decode_data(b"\xd8\x79\x01")


def test_constr_rejects_negative_tag():
    with pytest.raises(ValueError):
        Constr(-1)


def test_containers_normalise_to_tuples():
    assert List([Integer(1)]) == List((Integer(1),))
    assert Map([(Integer(1), Integer(2))]) == Map(((Integer(1), Integer(2)),))
    assert Constr(0, [Integer(1)]).fields == (Integer(1),)


def test_encode_rejects_foreign_values():
    with pytest.raises(TypeError):
        encode_data(42)