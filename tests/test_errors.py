import pytest

from plutusflat.errors import FlatDecodeError, FlatEncodeError


def test_end_of_buffer_message():
    err = FlatDecodeError(FlatDecodeError.END_OF_BUFFER)
    assert str(err) == "Reached end of buffer"
    assert err.kind == FlatDecodeError.END_OF_BUFFER
    assert err.details == {}


def test_decode_not_aligned_message():
    err = FlatDecodeError(FlatDecodeError.BUFFER_NOT_BYTE_ALIGNED)
    assert str(err) == "Buffer is not byte aligned"


def test_incorrect_num_bits_message():
    err = FlatDecodeError(FlatDecodeError.INCORRECT_NUM_BITS)
    assert str(err) == "Incorrect value of num_bits, must be less than 9"


@pytest.mark.parametrize(
    "kind, unit",
    [
        (FlatDecodeError.NOT_ENOUGH_BYTES, "bytes"),
        (FlatDecodeError.NOT_ENOUGH_BITS, "bits"),
    ],
)
def test_not_enough_messages(kind, unit):
    err = FlatDecodeError(kind, required=12)
    assert str(err) == f"Not enough data available, required 12 {unit}"
    assert err.details == {"required": 12}


def test_message_kind():
    err = FlatDecodeError(FlatDecodeError.MESSAGE, message="something broke")
    assert str(err) == "something broke"


def test_tag_messages():
    assert (
        str(FlatDecodeError(FlatDecodeError.DEFAULT_FUNCTION_NOT_FOUND, tag=99))
        == "Default Function not found: 99"
    )
    assert (
        str(FlatDecodeError(FlatDecodeError.UNKNOWN_TERM_CONSTRUCTOR, tag=12))
        == "Unknown term constructor tag: 12"
    )
    assert (
        str(FlatDecodeError(FlatDecodeError.DECODE_CHAR, code=55296))
        == "Decoding u32 to char 55296"
    )


def test_unknown_constant_constructor_lists_tags():
    err = FlatDecodeError(FlatDecodeError.UNKNOWN_CONSTANT_CONSTRUCTOR, tags=[9, 10])
    assert str(err) == "Unknown constant constructor tag: [9, 10]"
    assert err.details["tags"] == [9, 10]


def test_overflow_message():
    err = FlatEncodeError(FlatEncodeError.OVERFLOW, byte=20, num_bits=4)
    assert str(err) == "Overflow detected, cannot fit 20 in 4 bits."
    assert err.details == {"byte": 20, "num_bits": 4}


def test_encode_simple_messages():
    assert (
        str(FlatEncodeError(FlatEncodeError.BUFFER_NOT_BYTE_ALIGNED))
        == "Buffer is not byte aligned"
    )
    assert (
        str(FlatEncodeError(FlatEncodeError.BLS_ELEMENT_NOT_SUPPORTED))
        == "Cannot encode BLS12-381 constants"
    )


def test_encode_cbor_is_transparent():
    inner = ValueError("cbor went wrong")
    err = FlatEncodeError(FlatEncodeError.ENCODE_CBOR, error=inner)
    assert str(err) == "cbor went wrong"


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        FlatDecodeError("no_such_kind")
    with pytest.raises(ValueError):
        FlatEncodeError(FlatDecodeError.END_OF_BUFFER)


def test_missing_detail_rejected():
    with pytest.raises(TypeError):
        FlatEncodeError(FlatEncodeError.OVERFLOW, byte=3)


def test_decode_error_is_an_exception_distinct_from_encode_error():
    err = FlatDecodeError(FlatDecodeError.NOT_ENOUGH_BITS, required=8)
    assert isinstance(err, Exception)
    assert not isinstance(err, FlatEncodeError)
    assert err.kind == FlatDecodeError.NOT_ENOUGH_BITS
    assert err.details == {"required": 8}
    assert str(err) == "Not enough data available, required 8 bits"


def test_encode_error_is_an_exception_distinct_from_decode_error():
    err = FlatEncodeError(FlatEncodeError.BUFFER_NOT_BYTE_ALIGNED)
    assert isinstance(err, Exception)
    assert not isinstance(err, FlatDecodeError)
    assert err.kind == FlatEncodeError.BUFFER_NOT_BYTE_ALIGNED
    assert err.details == {}