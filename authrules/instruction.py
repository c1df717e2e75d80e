"""Instruction arguments, their wire encoding and instruction builders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Optional, Union

from .borsh import BorshError, Reader, Writer
from .payload import Payload
from .pubkey import PROGRAM_ID, SYSTEM_PROGRAM_ID, Pubkey

_VERSION_V1 = 0
_MAX_U64 = 2**64 - 1


class InstructionKind(IntEnum):
    """The instructions the rule set program accepts, by wire tag."""

    CREATE_OR_UPDATE = 0
    VALIDATE = 1
    WRITE_TO_BUFFER = 2
    PUFF_RULE_SET = 3


@dataclass(frozen=True)
class AccountMeta:
    """An account passed to an instruction, with its signer and writable flags."""

    pubkey: Pubkey
    is_signer: bool
    is_writable: bool

    def __post_init__(self) -> None:
        if not isinstance(self.pubkey, Pubkey):
            raise TypeError("AccountMeta needs a Pubkey")

    @classmethod
    def new(cls, pubkey: Pubkey, is_signer: bool) -> "AccountMeta":
        """A writable account."""
        return cls(pubkey, bool(is_signer), True)

    @classmethod
    def new_readonly(cls, pubkey: Pubkey, is_signer: bool) -> "AccountMeta":
        """A read-only account."""
        return cls(pubkey, bool(is_signer), False)


@dataclass(frozen=True)
class Instruction:
    """A program id, the accounts it touches and the encoded arguments."""

    program_id: Pubkey
    accounts: tuple
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "accounts", tuple(self.accounts))
        object.__setattr__(self, "data", bytes(self.data))


@dataclass(frozen=True)
class CreateOrUpdateArgs:
    """Arguments of `CreateOrUpdate`: a rule set already serialized by the caller."""

    serialized_rule_set: bytes

    kind: ClassVar[InstructionKind] = InstructionKind.CREATE_OR_UPDATE

    def __post_init__(self) -> None:
        object.__setattr__(self, "serialized_rule_set", bytes(self.serialized_rule_set))

    def _encode_fields(self, writer: Writer) -> None:
        writer.write_bytes(self.serialized_rule_set)

    @classmethod
    def _decode_fields(cls, reader: Reader) -> "CreateOrUpdateArgs":
        return cls(reader.read_bytes())


@dataclass(frozen=True)
class ValidateArgs:
    """Arguments of `Validate`: the operation, its payload and revision selection."""

    operation: str
    payload: Payload = field(default_factory=Payload)
    update_rule_state: bool = False
    rule_set_revision: Optional[int] = None

    kind: ClassVar[InstructionKind] = InstructionKind.VALIDATE

    def __post_init__(self) -> None:
        if not isinstance(self.operation, str):
            raise TypeError("operation must be a string")
        if not isinstance(self.payload, Payload):
            raise TypeError("payload must be a Payload")
        revision = self.rule_set_revision
        if revision is not None:
            if isinstance(revision, bool) or not isinstance(revision, int):
                raise TypeError("rule_set_revision must be an integer or None")
            if not 0 <= revision <= _MAX_U64:
                raise ValueError(f"rule_set_revision {revision} is out of range")
        object.__setattr__(self, "update_rule_state", bool(self.update_rule_state))

    def _encode_fields(self, writer: Writer) -> None:
        writer.write_string(self.operation)
        self.payload.encode(writer)
        writer.write_bool(self.update_rule_state)
        if self.rule_set_revision is None:
            writer.write_u8(0)
        else:
            writer.write_u8(1)
            writer.write_u64(self.rule_set_revision)

    @classmethod
    def _decode_fields(cls, reader: Reader) -> "ValidateArgs":
        operation = reader.read_string()
        payload = Payload.decode(reader)
        update_rule_state = reader.read_bool()
        option_tag = reader.read_u8()
        if option_tag == 0:
            revision = None
        elif option_tag == 1:
            revision = reader.read_u64()
        else:
            raise BorshError(f"invalid option tag {option_tag}")
        return cls(operation, payload, update_rule_state, revision)


@dataclass(frozen=True)
class WriteToBufferArgs:
    """Arguments of `WriteToBuffer`: a chunk of serialized rule set data."""

    serialized_rule_set: bytes
    overwrite: bool = False

    kind: ClassVar[InstructionKind] = InstructionKind.WRITE_TO_BUFFER

    def __post_init__(self) -> None:
        object.__setattr__(self, "serialized_rule_set", bytes(self.serialized_rule_set))
        object.__setattr__(self, "overwrite", bool(self.overwrite))

    def _encode_fields(self, writer: Writer) -> None:
        writer.write_bytes(self.serialized_rule_set)
        writer.write_bool(self.overwrite)

    @classmethod
    def _decode_fields(cls, reader: Reader) -> "WriteToBufferArgs":
        data = reader.read_bytes()
        return cls(data, reader.read_bool())


@dataclass(frozen=True)
class PuffRuleSetArgs:
    """Arguments of `PuffRuleSet`: the name of the rule set to grow."""

    rule_set_name: str

    kind: ClassVar[InstructionKind] = InstructionKind.PUFF_RULE_SET

    def __post_init__(self) -> None:
        if not isinstance(self.rule_set_name, str):
            raise TypeError("rule_set_name must be a string")

    def _encode_fields(self, writer: Writer) -> None:
        writer.write_string(self.rule_set_name)

    @classmethod
    def _decode_fields(cls, reader: Reader) -> "PuffRuleSetArgs":
        return cls(reader.read_string())


InstructionArgs = Union[CreateOrUpdateArgs, ValidateArgs, WriteToBufferArgs, PuffRuleSetArgs]

_ARGS_BY_KIND = {
    InstructionKind.CREATE_OR_UPDATE: CreateOrUpdateArgs,
    InstructionKind.VALIDATE: ValidateArgs,
    InstructionKind.WRITE_TO_BUFFER: WriteToBufferArgs,
    InstructionKind.PUFF_RULE_SET: PuffRuleSetArgs,
}


def encode_instruction(args: InstructionArgs) -> bytes:
    """Encode instruction arguments as instruction data."""
    if not isinstance(args, tuple(_ARGS_BY_KIND.values())):
        raise TypeError(f"not instruction arguments: {type(args).__name__}")
    writer = Writer()
    writer.write_u8(int(args.kind))
    writer.write_u8(_VERSION_V1)
    args._encode_fields(writer)
    return writer.getvalue()


def decode_instruction(data: bytes) -> InstructionArgs:
    """Decode instruction data into its arguments."""
    reader = Reader(data)
    tag = reader.read_u8()
    try:
        kind = InstructionKind(tag)
    except ValueError:
        raise BorshError(f"unknown instruction tag {tag}") from None
    version = reader.read_u8()
    if version != _VERSION_V1:
        raise BorshError(f"unknown argument version {version}")
    args = _ARGS_BY_KIND[kind]._decode_fields(reader)
    reader.finish()
    return args


def _require(args: object, kind: type) -> None:
    if not isinstance(args, kind):
        raise TypeError(f"expected {kind.__name__}, got {type(args).__name__}")


def _optional_or_program(pubkey: Optional[Pubkey], meta: type) -> AccountMeta:
    """The account for an optional slot, or the program id when it is absent."""
    if pubkey is None:
        return AccountMeta.new_readonly(PROGRAM_ID, False)
    return meta(pubkey)


@dataclass(frozen=True)
class CreateOrUpdate:
    """Builds a `CreateOrUpdate` instruction."""

    payer: Pubkey
    rule_set_pda: Pubkey
    args: CreateOrUpdateArgs
    buffer_pda: Optional[Pubkey] = None

    def __post_init__(self) -> None:
        _require(self.args, CreateOrUpdateArgs)

    def instruction(self) -> Instruction:
        accounts = [
            AccountMeta.new(self.payer, True),
            AccountMeta.new(self.rule_set_pda, False),
            AccountMeta.new_readonly(SYSTEM_PROGRAM_ID, False),
            _optional_or_program(
                self.buffer_pda, lambda key: AccountMeta.new_readonly(key, False)
            ),
        ]
        return Instruction(PROGRAM_ID, accounts, encode_instruction(self.args))


@dataclass(frozen=True)
class Validate:
    """Builds a `Validate` instruction."""

    rule_set_pda: Pubkey
    mint: Pubkey
    args: ValidateArgs
    payer: Optional[Pubkey] = None
    rule_authority: Optional[Pubkey] = None
    rule_set_state_pda: Optional[Pubkey] = None
    additional_rule_accounts: tuple = ()

    def __post_init__(self) -> None:
        _require(self.args, ValidateArgs)
        extra = tuple(self.additional_rule_accounts)
        if not all(isinstance(meta, AccountMeta) for meta in extra):
            raise TypeError("additional_rule_accounts must hold AccountMeta values")
        object.__setattr__(self, "additional_rule_accounts", extra)

    def instruction(self) -> Instruction:
        accounts = [
            AccountMeta.new_readonly(self.rule_set_pda, False),
            AccountMeta.new_readonly(self.mint, False),
            AccountMeta.new_readonly(SYSTEM_PROGRAM_ID, False),
            _optional_or_program(self.payer, lambda key: AccountMeta.new(key, True)),
            _optional_or_program(
                self.rule_authority, lambda key: AccountMeta.new_readonly(key, True)
            ),
            _optional_or_program(
                self.rule_set_state_pda, lambda key: AccountMeta.new(key, False)
            ),
            *self.additional_rule_accounts,
        ]
        return Instruction(PROGRAM_ID, accounts, encode_instruction(self.args))


@dataclass(frozen=True)
class WriteToBuffer:
    """Builds a `WriteToBuffer` instruction."""

    payer: Pubkey
    buffer_pda: Pubkey
    args: WriteToBufferArgs

    def __post_init__(self) -> None:
        _require(self.args, WriteToBufferArgs)

    def instruction(self) -> Instruction:
        accounts = [
            AccountMeta.new(self.payer, True),
            AccountMeta.new(self.buffer_pda, False),
            AccountMeta.new_readonly(SYSTEM_PROGRAM_ID, False),
        ]
        return Instruction(PROGRAM_ID, accounts, encode_instruction(self.args))


@dataclass(frozen=True)
class PuffRuleSet:
    """Builds a `PuffRuleSet` instruction."""

    payer: Pubkey
    rule_set_pda: Pubkey
    args: PuffRuleSetArgs

    def __post_init__(self) -> None:
        _require(self.args, PuffRuleSetArgs)

    def instruction(self) -> Instruction:
        accounts = [
            AccountMeta.new(self.payer, True),
            AccountMeta.new(self.rule_set_pda, False),
            AccountMeta.new_readonly(SYSTEM_PROGRAM_ID, False),
        ]
        return Instruction(PROGRAM_ID, accounts, encode_instruction(self.args))