"""Payloads, program-derived addresses and instruction encoding for a token authorization rules program."""

__version__ = "0.1.0"
__all__ = ["errors", "pubkey", "pda", "borsh", "payload", "instruction"]