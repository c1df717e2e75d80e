import pytest

from authrules.pda import (
    PREFIX,
    STATE_PDA,
    find_buffer_address,
    find_rule_set_address,
    find_rule_set_state_address,
)
from authrules.pubkey import PROGRAM_ID, Pubkey, PubkeyError, create_program_address

CREATOR = Pubkey(bytes(range(32)))
MINT = Pubkey(bytes(range(32, 64)))


def test_rule_set_address_matches_prefix_seeds():
    address, bump = find_rule_set_address(CREATOR, "test rule_set")
    seeds = [b"rule_set", bytes(CREATOR), b"test rule_set", bytes([bump])]
    assert create_program_address(seeds, PROGRAM_ID) == address
    assert PREFIX.encode() == seeds[0]


def test_state_address_matches_seeds():
    address, bump = find_rule_set_state_address(CREATOR, "test rule_set", MINT)
    seeds = [b"rule_set_state", bytes(CREATOR), b"test rule_set", bytes(MINT), bytes([bump])]
    assert create_program_address(seeds, PROGRAM_ID) == address
    assert STATE_PDA.encode() == seeds[0]


def test_buffer_address_matches_seeds():
    address, bump = find_buffer_address(CREATOR)
    seeds = [PREFIX.encode(), bytes(CREATOR), bytes([bump])]
    assert create_program_address(seeds, PROGRAM_ID) == address


def test_addresses_are_distinct():
    rule_set = find_rule_set_address(CREATOR, "test rule_set")[0]
    other = find_rule_set_address(CREATOR, "second_rule_set")[0]
    state = find_rule_set_state_address(CREATOR, "test rule_set", MINT)[0]
    buffer = find_buffer_address(CREATOR)[0]
    assert len({rule_set, other, state, buffer}) == 4


def test_state_address_depends_on_mint():
    first = find_rule_set_state_address(CREATOR, "test rule_set", MINT)
    second = find_rule_set_state_address(CREATOR, "test rule_set", CREATOR)
    assert first[0] != second[0]


def test_addresses_are_deterministic_and_off_curve():
    first = find_rule_set_address(CREATOR, "test rule_set")
    assert first == find_rule_set_address(CREATOR, "test rule_set")
    assert not first[0].is_on_curve()


def test_overlong_name_rejected():
    with pytest.raises(PubkeyError):
        find_rule_set_address(CREATOR, "n" * 33)