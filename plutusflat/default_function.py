"""Builtin functions of Untyped Plutus Core and their flat tags."""

from enum import IntEnum

from plutusflat.errors import FlatDecodeError


class DefaultFunction(IntEnum):
    """A builtin function; its value is the tag used in the flat format."""

    # Integer functions
    ADD_INTEGER = 0
    SUBTRACT_INTEGER = 1
    MULTIPLY_INTEGER = 2
    DIVIDE_INTEGER = 3
    QUOTIENT_INTEGER = 4
    REMAINDER_INTEGER = 5
    MOD_INTEGER = 6
    EQUALS_INTEGER = 7
    LESS_THAN_INTEGER = 8
    LESS_THAN_EQUALS_INTEGER = 9
    # ByteString functions
    APPEND_BYTE_STRING = 10
    CONS_BYTE_STRING = 11
    SLICE_BYTE_STRING = 12
    LENGTH_OF_BYTE_STRING = 13
    INDEX_BYTE_STRING = 14
    EQUALS_BYTE_STRING = 15
    LESS_THAN_BYTE_STRING = 16
    LESS_THAN_EQUALS_BYTE_STRING = 17
    # Cryptography and hash functions
    SHA2_256 = 18
    SHA3_256 = 19
    BLAKE2B_256 = 20
    KECCAK_256 = 71
    BLAKE2B_224 = 72
    VERIFY_ED25519_SIGNATURE = 21
    VERIFY_ECDSA_SECP256K1_SIGNATURE = 52
    VERIFY_SCHNORR_SECP256K1_SIGNATURE = 53
    # String functions
    APPEND_STRING = 22
    EQUALS_STRING = 23
    ENCODE_UTF8 = 24
    DECODE_UTF8 = 25
    # Bool, unit and tracing
    IF_THEN_ELSE = 26
    CHOOSE_UNIT = 27
    TRACE = 28
    # Pairs
    FST_PAIR = 29
    SND_PAIR = 30
    # Lists
    CHOOSE_LIST = 31
    MK_CONS = 32
    HEAD_LIST = 33
    TAIL_LIST = 34
    NULL_LIST = 35
    # Data
    CHOOSE_DATA = 36
    CONSTR_DATA = 37
    MAP_DATA = 38
    LIST_DATA = 39
    I_DATA = 40
    B_DATA = 41
    UN_CONSTR_DATA = 42
    UN_MAP_DATA = 43
    UN_LIST_DATA = 44
    UN_I_DATA = 45
    UN_B_DATA = 46
    EQUALS_DATA = 47
    SERIALISE_DATA = 51
    # Misc constructors
    MK_PAIR_DATA = 48
    MK_NIL_DATA = 49
    MK_NIL_PAIR_DATA = 50
    # BLS12-381
    BLS12_381_G1_ADD = 54
    BLS12_381_G1_NEG = 55
    BLS12_381_G1_SCALAR_MUL = 56
    BLS12_381_G1_EQUAL = 57
    BLS12_381_G1_COMPRESS = 58
    BLS12_381_G1_UNCOMPRESS = 59
    BLS12_381_G1_HASH_TO_GROUP = 60
    BLS12_381_G2_ADD = 61
    BLS12_381_G2_NEG = 62
    BLS12_381_G2_SCALAR_MUL = 63
    BLS12_381_G2_EQUAL = 64
    BLS12_381_G2_COMPRESS = 65
    BLS12_381_G2_UNCOMPRESS = 66
    BLS12_381_G2_HASH_TO_GROUP = 67
    BLS12_381_MILLER_LOOP = 68
    BLS12_381_MUL_ML_RESULT = 69
    BLS12_381_FINAL_VERIFY = 70
    # Bitwise
    INTEGER_TO_BYTE_STRING = 73
    BYTE_STRING_TO_INTEGER = 74

    def force_count(self) -> int:
        """Number of forces the builtin needs before it can be applied."""
        return _FORCE_COUNTS.get(self, 0)

    def arity(self) -> int:
        """Number of arguments the builtin takes."""
        return _ARITIES[self]


_F = DefaultFunction

_FORCE_COUNTS = {
    _F.IF_THEN_ELSE: 1,
    _F.CHOOSE_UNIT: 1,
    _F.TRACE: 1,
    _F.FST_PAIR: 2,
    _F.SND_PAIR: 2,
    _F.CHOOSE_LIST: 2,
    _F.MK_CONS: 1,
    _F.HEAD_LIST: 1,
    _F.TAIL_LIST: 1,
    _F.NULL_LIST: 1,
    _F.CHOOSE_DATA: 1,
}

_ARITIES = {
    _F.ADD_INTEGER: 2,
    _F.SUBTRACT_INTEGER: 2,
    _F.MULTIPLY_INTEGER: 2,
    _F.DIVIDE_INTEGER: 2,
    _F.QUOTIENT_INTEGER: 2,
    _F.REMAINDER_INTEGER: 2,
    _F.MOD_INTEGER: 2,
    _F.EQUALS_INTEGER: 2,
    _F.LESS_THAN_INTEGER: 2,
    _F.LESS_THAN_EQUALS_INTEGER: 2,
    _F.APPEND_BYTE_STRING: 2,
    _F.CONS_BYTE_STRING: 2,
    _F.SLICE_BYTE_STRING: 3,
    _F.LENGTH_OF_BYTE_STRING: 1,
    _F.INDEX_BYTE_STRING: 2,
    _F.EQUALS_BYTE_STRING: 2,
    _F.LESS_THAN_BYTE_STRING: 2,
    _F.LESS_THAN_EQUALS_BYTE_STRING: 2,
    _F.SHA2_256: 1,
    _F.SHA3_256: 1,
    _F.BLAKE2B_224: 1,
    _F.BLAKE2B_256: 1,
    _F.KECCAK_256: 1,
    _F.VERIFY_ED25519_SIGNATURE: 3,
    _F.VERIFY_ECDSA_SECP256K1_SIGNATURE: 3,
    _F.VERIFY_SCHNORR_SECP256K1_SIGNATURE: 3,
    _F.APPEND_STRING: 2,
    _F.EQUALS_STRING: 2,
    _F.ENCODE_UTF8: 1,
    _F.DECODE_UTF8: 1,
    _F.IF_THEN_ELSE: 3,
    _F.CHOOSE_UNIT: 2,
    _F.TRACE: 2,
    _F.FST_PAIR: 1,
    _F.SND_PAIR: 1,
    _F.CHOOSE_LIST: 3,
    _F.MK_CONS: 2,
    _F.HEAD_LIST: 1,
    _F.TAIL_LIST: 1,
    _F.NULL_LIST: 1,
    _F.CHOOSE_DATA: 6,
    _F.CONSTR_DATA: 2,
    _F.MAP_DATA: 1,
    _F.LIST_DATA: 1,
    _F.I_DATA: 1,
    _F.B_DATA: 1,
    _F.UN_CONSTR_DATA: 1,
    _F.UN_MAP_DATA: 1,
    _F.UN_LIST_DATA: 1,
    _F.UN_I_DATA: 1,
    _F.UN_B_DATA: 1,
    _F.EQUALS_DATA: 2,
    _F.SERIALISE_DATA: 1,
    _F.MK_PAIR_DATA: 2,
    _F.MK_NIL_DATA: 1,
    _F.MK_NIL_PAIR_DATA: 1,
    _F.BLS12_381_G1_ADD: 2,
    _F.BLS12_381_G1_NEG: 1,
    _F.BLS12_381_G1_SCALAR_MUL: 2,
    _F.BLS12_381_G1_EQUAL: 2,
    _F.BLS12_381_G1_COMPRESS: 1,
    _F.BLS12_381_G1_UNCOMPRESS: 1,
    _F.BLS12_381_G1_HASH_TO_GROUP: 2,
    _F.BLS12_381_G2_ADD: 2,
    _F.BLS12_381_G2_NEG: 1,
    _F.BLS12_381_G2_SCALAR_MUL: 2,
    _F.BLS12_381_G2_EQUAL: 2,
    _F.BLS12_381_G2_COMPRESS: 1,
    _F.BLS12_381_G2_UNCOMPRESS: 1,
    _F.BLS12_381_G2_HASH_TO_GROUP: 2,
    _F.BLS12_381_MILLER_LOOP: 2,
    _F.BLS12_381_MUL_ML_RESULT: 2,
    _F.BLS12_381_FINAL_VERIFY: 2,
    _F.INTEGER_TO_BYTE_STRING: 3,
    _F.BYTE_STRING_TO_INTEGER: 2,
}


def function_from_tag(tag: int) -> DefaultFunction:
    """Return the builtin with the given flat tag."""
    try:
        return DefaultFunction(tag)
    except ValueError:
        raise FlatDecodeError(
            FlatDecodeError.DEFAULT_FUNCTION_NOT_FOUND, tag=tag
        ) from None