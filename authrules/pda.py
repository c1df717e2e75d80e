"""Addresses of the accounts owned by the rule set program."""

from __future__ import annotations

from .pubkey import PROGRAM_ID, Pubkey, find_program_address

PREFIX = "rule_set"
"""Seed prefix for rule set accounts."""

STATE_PDA = "rule_set_state"
"""Seed prefix for rule set state accounts."""


def find_rule_set_address(creator: Pubkey, rule_set_name: str) -> tuple[Pubkey, int]:
    """Find the address of a rule set account."""
    return find_program_address(
        [PREFIX.encode(), bytes(creator), rule_set_name.encode("utf-8")], PROGRAM_ID
    )


def find_rule_set_state_address(
    creator: Pubkey, rule_set_name: str, mint: Pubkey
) -> tuple[Pubkey, int]:
    """Find the address of a rule set state account."""
    return find_program_address(
        [STATE_PDA.encode(), bytes(creator), rule_set_name.encode("utf-8"), bytes(mint)],
        PROGRAM_ID,
    )


def find_buffer_address(creator: Pubkey) -> tuple[Pubkey, int]:
    """Find the address of the rule set buffer account."""
    return find_program_address([PREFIX.encode(), bytes(creator)], PROGRAM_ID)