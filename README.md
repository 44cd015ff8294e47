# plutusflat

Building blocks for the *flat* binary format used by Untyped Plutus Core:
a bit-level encoder and decoder, the table of builtin functions with their
flat tags, variable binders, Plutus data with its CBOR form, and the
encoding of constants. It has no dependencies outside the standard library.

## Installation

```
pip install plutusflat
```

To run the test suite:

```
pip install "plutusflat[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `plutusflat.zigzag` | `zigzag` and `unzigzag`, mapping signed integers to non-negative ones and back |
| `plutusflat.errors` | `FlatDecodeError`, `FlatEncodeError`; each carries a `kind` and `details` |
| `plutusflat.default_function` | `DefaultFunction` (an `IntEnum` whose values are the flat tags) with `arity()` and `force_count()`; `function_from_tag` |
| `plutusflat.encoder` | `Encoder`: `bits`, `safe_bits`, `bool`, `word`, `big_word`, `integer`, `bytes`, `byte_array`, `utf8`, `list_with`, `filler`; output collects in `buffer` |
| `plutusflat.decoder` | `Decoder`: `bit`, `bits8`, `word`, `big_word`, `integer`, `bytes`, `utf8`, `list_with`, `filler` |
| `plutusflat.binder` | `DeBruijn`, `Name`, `NamedDeBruijn`, each with `var_encode` / `var_decode` and `parameter_encode` / `parameter_decode` |
| `plutusflat.data` | Plutus data (`Constr`, `Map`, `Integer`, `ByteString`, `List`), `decode_data`, `encode_data`, `CborDecodeError` |
| `plutusflat.constant` | `IntegerConstant`, `ByteStringConstant`, `StringConstant`, `BooleanConstant`, `UnitConstant`, `DataConstant`; `encode_constant`, `decode_constant`; the flat tag numbers and widths |

## Examples

Round-trip an integer through the flat encoding. Writing methods return
the encoder, so they chain:

```python
from plutusflat.encoder import Encoder
from plutusflat.decoder import Decoder

encoder = Encoder().integer(-42).filler()

decoder = Decoder(bytes(encoder.buffer))
assert decoder.integer() == -42
```

Look up a builtin by its flat tag:

```python
from plutusflat.default_function import DefaultFunction, function_from_tag

fn = function_from_tag(0)
assert fn is DefaultFunction.ADD_INTEGER
assert fn.arity() == 2
assert DefaultFunction.IF_THEN_ELSE.force_count() == 1
```

An unknown tag raises `FlatDecodeError`.

Encode and decode a constant:

```python
from plutusflat.constant import IntegerConstant, encode_constant, decode_constant
from plutusflat.encoder import Encoder
from plutusflat.decoder import Decoder

encoder = Encoder()
encode_constant(encoder, IntegerConstant(7))
encoder.filler()

assert decode_constant(Decoder(bytes(encoder.buffer))) == IntegerConstant(7)
```

Decode and encode Plutus data as CBOR:

```python
from plutusflat.data import Constr, Integer, decode_data, encode_data

data = decode_data(bytes.fromhex("d87980"))
assert data == Constr(0, ())
assert encode_data(Constr(1, (Integer(5),))) == bytes.fromhex("d87a8105")
```

Constructor alternatives 0–6 use CBOR tags 121–127, 7–127 use tags
1280–1400, and larger ones use tag 102. Integers outside the 64-bit range
use the big-number tags 2 and 3. Byte strings longer than 64 bytes are
written as indefinite-length strings in 64-byte chunks.

## Errors

- `FlatDecodeError` — the flat bytes cannot be read (end of buffer, not
  enough bits or bytes, misaligned buffer, invalid UTF-8, bad CBOR inside a
  data constant, unknown builtin or constant tag).
- `FlatEncodeError` — a value cannot be written (a tag too wide for its
  field, a byte array written to a buffer that is not byte aligned).
- `CborDecodeError` — bytes are not valid CBOR for Plutus data.

## What this package does not do

- It has no representation of terms or programs, so it does not encode or
  decode whole programs; the term tag numbers are defined in
  `plutusflat.constant` but nothing uses them yet.
- It does not evaluate anything and has no command-line tool.
- List and pair constants are not supported: `decode_constant` raises
  `FlatDecodeError` for them, and there are no classes to encode them.
- BLS12-381 constants are not supported.