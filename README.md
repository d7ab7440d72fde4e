# zkvm_primitives

Small, dependency-free building blocks shared by a zkVM prover and its guest
programs.

## Modules

- `zkvm_primitives.consts`: `MAXIMUM_MEMORY_SIZE`, `WORD_SIZE`,
  `words_to_bytes_le` and `bytes_to_words_le` (32-bit words in little endian;
  a trailing partial word is dropped when decoding), and
  `num_to_comma_separated`, which puts a comma between every three characters
  counted from the right.
- `zkvm_primitives.bincode`: encoding compatible with the bincode 1.x default
  wire format, driven by a schema: `serialize`, `deserialize` and
  `serialized_size`. Schemas are primitive names such as `"u32"`, `"bool"`,
  `"str"` or `"bytes"`, or tuples such as `("vec", "u8")`,
  `("array", "u32", 4)`, `("option", "u64")`, `("map", "str", "u32")`,
  `("struct", ((name, schema), ...))` and `("enum", ((name, schema), ...))`.
  Failures raise `BincodeError`, a subclass of `ValueError`.
- `zkvm_primitives.types`: `Buffer`, a byte buffer with a read position
  (`read`, `read_slice`, `write`, `write_slice`, `head`); the
  `RecursionProgramType` enum (`CORE`, `DEFERRED`, `COMPRESS`, `SHRINK`,
  `WRAP`); and `IdentityHasher`, whose hash is the 4-byte key it was fed.
- `zkvm_primitives.io`: `PublicValues`, the public output of a program, with
  `raw` (0x-prefixed hex), `to_bytes`, buffered reads and writes, `hash`
  (SHA-256) and `hash_bn254`, the SHA-256 digest with its top three bits
  cleared, as an integer.
- `zkvm_primitives.babybear`: the BabyBear field modulus `ORDER` and
  `from_wrapped_u32`, `add`, `mul` and `power` on elements held as plain ints.
- `zkvm_primitives.round_constants`: `round_constants_u32` and
  `round_constants`, the 30 rows of 16 Poseidon2 round constants, raw and
  reduced into the field.
- `zkvm_primitives.poseidon2`: the width-16, degree-7 `Poseidon2` permutation
  (8 full and 13 partial rounds in the standard setup), the overwrite-mode
  `PaddingFreeSponge` (rate 8, output 8), `poseidon2_init`,
  `poseidon2_hasher`, `poseidon2_hash` and `hash_deferred_proof`, which takes
  digests of 8, 8 and 32 elements.

## Installation

```
pip install .
```

## Usage

```python
from zkvm_primitives.bincode import deserialize, serialize
from zkvm_primitives.consts import num_to_comma_separated, words_to_bytes_le
from zkvm_primitives.io import PublicValues
from zkvm_primitives.poseidon2 import poseidon2_hash

words_to_bytes_le([1, 2])          # b"\x01\x00\x00\x00\x02\x00\x00\x00"
num_to_comma_separated(1234567)    # "1,234,567"

encoded = serialize([1, 2, 3], ("vec", "u32"))
deserialize(encoded, ("vec", "u32"))  # [1, 2, 3]

values = PublicValues()
values.write_slice(bytes.fromhex("1234567890abcdef"))
values.raw()                       # "0x1234567890abcdef"
values.hash()                      # SHA-256 digest as bytes
values.hash_bn254()                # int, with the top 3 bits masked off

digest = poseidon2_hash(range(16)) # list of eight BabyBear field elements
```

## What it does not do

This package holds primitives only. It does not execute programs, build or
verify proofs, and has no command-line interface.

## Running the tests

```
pip install .[test]
pytest
```