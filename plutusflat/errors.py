"""Errors raised while encoding or decoding the flat format."""


class _FlatError(Exception):
    """Error that carries a kind and the details its message is built from."""

    _MESSAGES: dict = {}

    def __init__(self, kind: str, **details):
        try:
            template = self._MESSAGES[kind]
        except KeyError:
            raise ValueError(f"unknown error kind: {kind!r}") from None
        try:
            message = template.format(**details)
        except KeyError as missing:
            raise TypeError(f"missing detail {missing} for {kind!r}") from None
        super().__init__(message)
        self.kind = kind
        self.details = details


class FlatDecodeError(_FlatError):
    """Raised when flat-encoded bytes cannot be decoded."""

    END_OF_BUFFER = "end_of_buffer"
    BUFFER_NOT_BYTE_ALIGNED = "buffer_not_byte_aligned"
    INCORRECT_NUM_BITS = "incorrect_num_bits"
    NOT_ENOUGH_BYTES = "not_enough_bytes"
    NOT_ENOUGH_BITS = "not_enough_bits"
    DECODE_UTF8 = "decode_utf8"
    DECODE_CBOR = "decode_cbor"
    DECODE_CHAR = "decode_char"
    MESSAGE = "message"
    DEFAULT_FUNCTION_NOT_FOUND = "default_function_not_found"
    UNKNOWN_TERM_CONSTRUCTOR = "unknown_term_constructor"
    UNKNOWN_CONSTANT_CONSTRUCTOR = "unknown_constant_constructor"

    _MESSAGES = {
        END_OF_BUFFER: "Reached end of buffer",
        BUFFER_NOT_BYTE_ALIGNED: "Buffer is not byte aligned",
        INCORRECT_NUM_BITS: "Incorrect value of num_bits, must be less than 9",
        NOT_ENOUGH_BYTES: "Not enough data available, required {required} bytes",
        NOT_ENOUGH_BITS: "Not enough data available, required {required} bits",
        DECODE_UTF8: "{error}",
        DECODE_CBOR: "{error}",
        DECODE_CHAR: "Decoding u32 to char {code}",
        MESSAGE: "{message}",
        DEFAULT_FUNCTION_NOT_FOUND: "Default Function not found: {tag}",
        UNKNOWN_TERM_CONSTRUCTOR: "Unknown term constructor tag: {tag}",
        UNKNOWN_CONSTANT_CONSTRUCTOR: "Unknown constant constructor tag: {tags}",
    }


class FlatEncodeError(_FlatError):
    """Raised when a value cannot be written in the flat format."""

    OVERFLOW = "overflow"
    BUFFER_NOT_BYTE_ALIGNED = "buffer_not_byte_aligned"
    BLS_ELEMENT_NOT_SUPPORTED = "bls_element_not_supported"
    ENCODE_CBOR = "encode_cbor"

    _MESSAGES = {
        OVERFLOW: "Overflow detected, cannot fit {byte} in {num_bits} bits.",
        BUFFER_NOT_BYTE_ALIGNED: "Buffer is not byte aligned",
        BLS_ELEMENT_NOT_SUPPORTED: "Cannot encode BLS12-381 constants",
        ENCODE_CBOR: "{error}",
    }