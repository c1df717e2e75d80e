# authrules

Client-side building blocks for a token authorization rules program: public
keys and program-derived addresses, the `Payload` passed in for validation,
and the encoding of the program's instructions. No third-party runtime
dependencies.

## Modules

- `authrules.pubkey`
  - `Pubkey`: a 32-byte key. Build it from bytes, from base58 text with
    `Pubkey.from_string`, or at random with `Pubkey.random`. `bytes(key)` and
    `str(key)` give the raw and base58 forms; `is_on_curve()` tells whether the
    key is a point on the ed25519 curve. Malformed input raises `PubkeyError`.
  - `b58encode`, `b58decode`: base58 text encoding.
  - `create_program_address(seeds, program_id)` and
    `find_program_address(seeds, program_id)`: program-derived addresses.
    Seeds may be bytes, strings or `Pubkey` values; at most 16 seeds of at most
    32 bytes each. `find_program_address` returns `(address, bump)`, trying
    bump seeds from 255 downward.
  - `PROGRAM_ID`, `SYSTEM_PROGRAM_ID` and `MAX_NAME_LENGTH` (32).
- `authrules.pda`: `find_rule_set_address(creator, rule_set_name)`,
  `find_rule_set_state_address(creator, rule_set_name, mint)` and
  `find_buffer_address(creator)`, using the seed prefixes `PREFIX`
  (`"rule_set"`) and `STATE_PDA` (`"rule_set_state"`).
- `authrules.borsh`: a small Borsh `Writer` and `Reader` for little-endian
  `u8`/`u32`/`u64`, booleans, length-prefixed bytes and strings, and fixed
  byte runs. `Reader.finish()` fails if input is left over. Errors raise
  `BorshError`.
- `authrules.payload`: the `Payload` map from string keys to values, where a
  value is a `Pubkey`, a `SeedsVec`, a `ProofInfo` (32-byte proof nodes) or an
  unsigned 64-bit integer. Typed getters (`get_pubkey`, `get_seeds`,
  `get_merkle_proof`, `get_amount`) return `None` when the key is absent or
  holds another kind of value. `to_bytes`/`from_bytes` give its Borsh form,
  entries ordered by key; `encode_value`/`decode_value` handle single values.
- `authrules.instruction`: `AccountMeta`, `Instruction`, the argument types
  `CreateOrUpdateArgs`, `ValidateArgs`, `WriteToBufferArgs` and
  `PuffRuleSetArgs`, `encode_instruction`/`decode_instruction`, and the
  builders `CreateOrUpdate`, `Validate`, `WriteToBuffer` and `PuffRuleSet`,
  whose `instruction()` returns the `Instruction` with its accounts in the
  program's order. An optional account left as `None` is filled in with
  `PROGRAM_ID` as a read-only, non-signing account.
- `authrules.errors`: the `RuleSetError` codes and `RuleSetException`.

## Install

```
pip install .
```

## Example

```python
from authrules.instruction import Validate, ValidateArgs, decode_instruction
from authrules.payload import Payload
from authrules.pda import find_rule_set_address
from authrules.pubkey import Pubkey

creator = Pubkey.random()
address, bump = find_rule_set_address(creator, "test rule_set")

payload = Payload.from_pairs([("Amount", 1), ("Destination", address)])
assert payload.get_amount("Amount") == 1
assert payload.get_pubkey("Destination") == address
assert Payload.from_bytes(payload.to_bytes()) == payload

args = ValidateArgs("Transfer:Holder", payload)
ix = Validate(rule_set_pda=address, mint=Pubkey.random(), args=args).instruction()
assert decode_instruction(ix.data) == args
```

## Errors

When a key is already present, `Payload.try_insert` raises
`RuleSetException` carrying `RuleSetError.VALUE_OCCUPIED`; the exception's
`error` and `code` attributes give the error and its number. An error's
numeric code and message are `error.value` and `error.message()`, and
`RuleSetError.from_code(code)` looks one up.

## What this package does not do

It does not hold or evaluate rule sets: there are no rule types, no rule set
serialization and no validation of a payload against rules. It builds and
decodes instructions but does not sign or send transactions, and it does not
read account state from a network.

## Tests

```
pip install ".[test]"
pytest
```