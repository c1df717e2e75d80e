"""Error codes reported by the rule set program."""

from __future__ import annotations

from enum import IntEnum


class RuleSetError(IntEnum):
    """The errors a rule set instruction can report, keyed by their numeric code."""

    NUMERICAL_OVERFLOW = 0
    DATA_TYPE_MISMATCH = 1
    DATA_SLICE_UNEXPECTED_INDEX_ERROR = 2
    INCORRECT_OWNER = 3
    PAYLOAD_VEC_INDEX_ERROR = 4
    DERIVED_KEY_INVALID = 5
    PAYER_IS_NOT_SIGNER = 6
    NOT_IMPLEMENTED = 7
    BORSH_SERIALIZATION_ERROR = 8
    BORSH_DESERIALIZATION_ERROR = 9
    VALUE_OCCUPIED = 10
    DATA_IS_EMPTY = 11
    MESSAGE_PACK_SERIALIZATION_ERROR = 12
    MESSAGE_PACK_DESERIALIZATION_ERROR = 13
    MISSING_ACCOUNT = 14
    MISSING_PAYLOAD_VALUE = 15
    RULE_SET_OWNER_MISMATCH = 16
    NAME_TOO_LONG = 17
    OPERATION_NOT_FOUND = 18
    RULE_AUTHORITY_IS_NOT_SIGNER = 19
    UNSUPPORTED_RULE_SET_REV_MAP_VERSION = 20
    UNSUPPORTED_RULE_SET_VERSION = 21
    UNEXPECTED_RULE_SET_FAILURE = 22
    RULE_SET_REVISION_NOT_AVAILABLE = 23
    ADDITIONAL_SIGNER_CHECK_FAILED = 24
    PUBKEY_MATCH_CHECK_FAILED = 25
    PUBKEY_LIST_MATCH_CHECK_FAILED = 26
    PUBKEY_TREE_MATCH_CHECK_FAILED = 27
    PDA_MATCH_CHECK_FAILED = 28
    PROGRAM_OWNED_CHECK_FAILED = 29
    PROGRAM_OWNED_LIST_CHECK_FAILED = 30
    PROGRAM_OWNED_TREE_CHECK_FAILED = 31
    AMOUNT_CHECK_FAILED = 32
    FREQUENCY_CHECK_FAILED = 33
    IS_WALLET_CHECK_FAILED = 34
    PROGRAM_OWNED_SET_CHECK_FAILED = 35

    def message(self) -> str:
        """Return the human-readable description of this error."""
        return _MESSAGES[self]

    @classmethod
    def from_code(cls, code: int) -> "RuleSetError":
        """Look up an error by its numeric code."""
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"unknown rule set error code: {code!r}") from None

    def __str__(self) -> str:
        return self.message()


_MESSAGES = {
    RuleSetError.NUMERICAL_OVERFLOW: "Numerical Overflow",
    RuleSetError.DATA_TYPE_MISMATCH: "Data type mismatch",
    RuleSetError.DATA_SLICE_UNEXPECTED_INDEX_ERROR: "Data slice unexpected index error",
    RuleSetError.INCORRECT_OWNER: "Incorrect account owner",
    RuleSetError.PAYLOAD_VEC_INDEX_ERROR: "Could not index into PayloadVec",
    RuleSetError.DERIVED_KEY_INVALID: "Derived key invalid",
    RuleSetError.PAYER_IS_NOT_SIGNER: "Payer is not a signer",
    RuleSetError.NOT_IMPLEMENTED: "Not implemented",
    RuleSetError.BORSH_SERIALIZATION_ERROR: "Borsh serialization error",
    RuleSetError.BORSH_DESERIALIZATION_ERROR: "Borsh deserialization error",
    RuleSetError.VALUE_OCCUPIED: "Value in Payload or RuleSet is occupied",
    RuleSetError.DATA_IS_EMPTY: "Account data is empty",
    RuleSetError.MESSAGE_PACK_SERIALIZATION_ERROR: "MessagePack serialization error",
    RuleSetError.MESSAGE_PACK_DESERIALIZATION_ERROR: "MessagePack deserialization error",
    RuleSetError.MISSING_ACCOUNT: "Missing account",
    RuleSetError.MISSING_PAYLOAD_VALUE: "Missing Payload value",
    RuleSetError.RULE_SET_OWNER_MISMATCH: "RuleSet owner must be payer",
    RuleSetError.NAME_TOO_LONG: "Name too long",
    RuleSetError.OPERATION_NOT_FOUND: "The operation retrieved is not in the selected RuleSet",
    RuleSetError.RULE_AUTHORITY_IS_NOT_SIGNER: "Rule authority is not signer",
    RuleSetError.UNSUPPORTED_RULE_SET_REV_MAP_VERSION: "Unsupported RuleSet revision map version",
    RuleSetError.UNSUPPORTED_RULE_SET_VERSION: "Unsupported RuleSet version",
    RuleSetError.UNEXPECTED_RULE_SET_FAILURE: "Unexpected RuleSet failure",
    RuleSetError.RULE_SET_REVISION_NOT_AVAILABLE: "RuleSet revision not available",
    RuleSetError.ADDITIONAL_SIGNER_CHECK_FAILED: "Additional Signer check failed",
    RuleSetError.PUBKEY_MATCH_CHECK_FAILED: "Pubkey Match check failed",
    RuleSetError.PUBKEY_LIST_MATCH_CHECK_FAILED: "Pubkey List Match check failed",
    RuleSetError.PUBKEY_TREE_MATCH_CHECK_FAILED: "Pubkey Tree Match check failed",
    RuleSetError.PDA_MATCH_CHECK_FAILED: "PDA Match check failed",
    RuleSetError.PROGRAM_OWNED_CHECK_FAILED: "Program Owned check failed",
    RuleSetError.PROGRAM_OWNED_LIST_CHECK_FAILED: "Program Owned List check failed",
    RuleSetError.PROGRAM_OWNED_TREE_CHECK_FAILED: "Program Owned Tree check failed",
    RuleSetError.AMOUNT_CHECK_FAILED: "Amount checked failed",
    RuleSetError.FREQUENCY_CHECK_FAILED: "Frequency check failed",
    RuleSetError.IS_WALLET_CHECK_FAILED: "IsWallet check failed",
    RuleSetError.PROGRAM_OWNED_SET_CHECK_FAILED: "Program Owned Set check failed",
}


class RuleSetException(Exception):
    """Raised when an operation fails with a `RuleSetError`."""

    def __init__(self, error: RuleSetError) -> None:
        self.error = RuleSetError(error)
        super().__init__(self.error.message())

    @property
    def code(self) -> int:
        """The numeric custom error code."""
        return int(self.error)