"""Public keys, base58 text form and program-derived addresses."""

from __future__ import annotations

import hashlib
import os
from typing import Iterable, Union

MAX_NAME_LENGTH = 32
"""Maximum length of any name used by the rule set program."""

PUBKEY_LENGTH = 32
MAX_SEEDS = 16
MAX_SEED_LENGTH = 32
_PDA_MARKER = b"ProgramDerivedAddress"

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: index for index, char in enumerate(_ALPHABET)}

_P = 2**255 - 19
_D = -121665 * pow(121666, -1, _P) % _P


class PubkeyError(ValueError):
    """Raised for malformed keys or seeds that cannot derive an address."""


class _InvalidSeedsError(PubkeyError):
    """The seeds hash to a point on the curve."""


def b58encode(data: bytes) -> str:
    """Encode bytes as base58 text."""
    data = bytes(data)
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_ALPHABET[remainder])
    leading_zeros = len(data) - len(data.lstrip(b"\0"))
    return "1" * leading_zeros + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode base58 text into bytes."""
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise PubkeyError(f"invalid base58 character {char!r}") from None
    leading_ones = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    return b"\0" * leading_ones + body


def _on_curve(data: bytes) -> bool:
    y = int.from_bytes(data, "little") & ((1 << 255) - 1)
    y %= _P
    y2 = y * y % _P
    u = (y2 - 1) % _P
    v = (_D * y2 + 1) % _P
    x2 = u * pow(v, _P - 2, _P) % _P
    return x2 == 0 or pow(x2, (_P - 1) // 2, _P) == 1


class Pubkey:
    """A 32-byte public key."""

    __slots__ = ("_key",)

    def __init__(self, value: Union[bytes, bytearray, "Pubkey", Iterable[int]]) -> None:
        if isinstance(value, (str, int)):
            raise TypeError("Pubkey needs bytes; use Pubkey.from_string for text")
        data = bytes(value)
        if len(data) != PUBKEY_LENGTH:
            raise PubkeyError(f"a pubkey is {PUBKEY_LENGTH} bytes, got {len(data)}")
        self._key = data

    @classmethod
    def from_string(cls, text: str) -> "Pubkey":
        """Parse a pubkey from its base58 text."""
        return cls(b58decode(text))

    @classmethod
    def random(cls) -> "Pubkey":
        """Return a pubkey made of random bytes."""
        return cls(os.urandom(PUBKEY_LENGTH))

    def __bytes__(self) -> bytes:
        return self._key

    def __str__(self) -> str:
        return b58encode(self._key)

    def __repr__(self) -> str:
        return f"Pubkey({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Pubkey):
            return self._key == other._key
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key)

    def is_on_curve(self) -> bool:
        """Whether the key decodes to a point on the ed25519 curve."""
        return _on_curve(self._key)


PROGRAM_ID = Pubkey.from_string("auth9SigNpDKz4sJJ1DfCTuZrZNSAgh9sFD3rboVmgg")
SYSTEM_PROGRAM_ID = Pubkey(bytes(PUBKEY_LENGTH))


def _seed_bytes(seed: Union[bytes, bytearray, str, Pubkey]) -> bytes:
    if isinstance(seed, str):
        return seed.encode("utf-8")
    return bytes(seed)


def create_program_address(seeds, program_id: Pubkey) -> Pubkey:
    """Derive the program address for exactly these seeds."""
    seed_list = [_seed_bytes(seed) for seed in seeds]
    if len(seed_list) > MAX_SEEDS:
        raise PubkeyError(f"at most {MAX_SEEDS} seeds are allowed")
    if any(len(seed) > MAX_SEED_LENGTH for seed in seed_list):
        raise PubkeyError(f"a seed is at most {MAX_SEED_LENGTH} bytes")
    digest = hashlib.sha256()
    for seed in seed_list:
        digest.update(seed)
    digest.update(bytes(program_id))
    digest.update(_PDA_MARKER)
    candidate = digest.digest()
    if _on_curve(candidate):
        raise _InvalidSeedsError("Provided seeds do not result in a valid address")
    return Pubkey(candidate)


def find_program_address(seeds, program_id: Pubkey) -> tuple[Pubkey, int]:
    """Find the off-curve address and the highest bump seed that yields it."""
    seed_list = [_seed_bytes(seed) for seed in seeds]
    for bump in range(255, 0, -1):
        try:
            return create_program_address([*seed_list, bytes([bump])], program_id), bump
        except _InvalidSeedsError:
            continue
    raise PubkeyError("Unable to find a viable program address bump seed")