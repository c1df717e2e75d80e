import pytest

from authrules.borsh import BorshError, Reader, Writer
from authrules.errors import RuleSetError, RuleSetException
from authrules.payload import (
    Payload,
    ProofInfo,
    SeedsVec,
    decode_value,
    encode_value,
)
from authrules.pubkey import PROGRAM_ID, Pubkey

LEAF = Pubkey(
    bytes(
        [
            2, 157, 245, 156, 21, 37, 147, 96, 42, 190, 206, 14, 24, 1, 106, 49, 167, 236,
            38, 73, 98, 53, 60, 9, 154, 31, 240, 126, 210, 197, 76, 7,
        ]
    )
)

PROOF = ProofInfo(
    (
        bytes([246, 54, 96, 185, 234, 119, 124, 220, 54, 137, 25, 200, 18, 12, 114, 75,
               211, 203, 154, 229, 197, 53, 164, 84, 38, 56, 20, 74, 192, 119, 37, 175]),
        bytes([193, 84, 33, 232, 119, 107, 227, 166, 30, 233, 40, 10, 51, 229, 90, 59,
               165, 212, 67, 193, 159, 126, 26, 200, 13, 209, 162, 98, 52, 125, 240, 77]),
        bytes([238, 14, 13, 214, 124, 172, 89, 7, 66, 168, 226, 88, 92, 22, 18, 17,
               94, 96, 37, 234, 101, 96, 129, 26, 137, 222, 96, 86, 245, 11, 199, 140]),
    )
)


def full_payload():
    return Payload.from_pairs(
        [
            ("Amount", 1),
            ("Authority", LEAF),
            ("AuthorityProof", PROOF),
            ("DestinationSeeds", SeedsVec((b"rule_set", bytes(PROGRAM_ID), b"test rule_set"))),
        ]
    )


def test_insert_returns_previous():
    payload = Payload()
    assert payload.insert("Amount", 1) is None
    assert payload.insert("Amount", 2) == 1
    assert payload.get_amount("Amount") == 2


def test_try_insert_occupied():
    payload = Payload({"Amount": 1})
    with pytest.raises(RuleSetException) as info:
        payload.try_insert("Amount", 5)
    assert info.value.error is RuleSetError.VALUE_OCCUPIED
    assert payload.get("Amount") == 1


def test_try_insert_new_key():
    payload = Payload()
    payload.try_insert("Authority", LEAF)
    assert payload.get_pubkey("Authority") == LEAF


def test_typed_getters():
    payload = full_payload()
    assert payload.get_pubkey("Authority") == LEAF
    assert payload.get_merkle_proof("AuthorityProof") == PROOF
    assert payload.get_seeds("DestinationSeeds").seeds[0] == b"rule_set"
    assert payload.get_amount("Amount") == 1
    assert payload.get_pubkey("Amount") is None
    assert payload.get_amount("Authority") is None
    assert payload.get_seeds("Missing") is None
    assert payload.get("Missing") is None


def test_container_protocol():
    payload = full_payload()
    assert len(payload) == 4
    assert "Amount" in payload
    assert "Missing" not in payload
    assert set(payload) == {"Amount", "Authority", "AuthorityProof", "DestinationSeeds"}


def test_round_trip():
    payload = full_payload()
    assert Payload.from_bytes(payload.to_bytes()) == payload


def test_encoding_independent_of_insertion_order():
    forward = Payload.from_pairs([("Amount", 1), ("Authority", LEAF)])
    backward = Payload.from_pairs([("Authority", LEAF), ("Amount", 1)])
    assert forward.to_bytes() == backward.to_bytes()


def test_empty_payload_bytes():
    assert Payload().to_bytes() == b"\x00\x00\x00\x00"
    assert len(Payload.from_bytes(b"\x00\x00\x00\x00")) == 0


def test_number_wire_format():
    expected = (
        b"\x01\x00\x00\x00"
        + b"\x06\x00\x00\x00Amount"
        + b"\x03"
        + (1).to_bytes(8, "little")
    )
    assert Payload({"Amount": 1}).to_bytes() == expected


def test_pubkey_value_wire_format():
    writer = Writer()
    encode_value(LEAF, writer)
    assert writer.getvalue() == b"\x00" + bytes(LEAF)
    assert decode_value(Reader(writer.getvalue())) == LEAF


def test_unknown_tag():
    with pytest.raises(BorshError):
        decode_value(Reader(b"\x09"))


def test_trailing_bytes_rejected():
    with pytest.raises(BorshError):
        Payload.from_bytes(Payload().to_bytes() + b"\x00")


def test_bad_proof_node_length():
    with pytest.raises(ValueError):
        ProofInfo((bytes(31),))


def test_number_out_of_range():
    with pytest.raises(ValueError):
        Payload({"Amount": -1})
    with pytest.raises(ValueError):
        Payload({"Amount": 2**64})


def test_unsupported_value_type():
    with pytest.raises(TypeError):
        Payload({"Amount": "one"})
    with pytest.raises(TypeError):
        Payload({"Flag": True})


def test_non_string_key():
    with pytest.raises(TypeError):
        Payload().insert(1, 2)