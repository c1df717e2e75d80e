"""The keyed data a client passes in for rule validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from .borsh import BorshError, Reader, Writer
from .errors import RuleSetError, RuleSetException
from .pubkey import PUBKEY_LENGTH, Pubkey

_MAX_U64 = 2**64 - 1

_TAG_PUBKEY = 0
_TAG_SEEDS = 1
_TAG_MERKLE_PROOF = 2
_TAG_NUMBER = 3


@dataclass(frozen=True)
class SeedsVec:
    """Derivation seeds used by the derived-key match rule."""

    seeds: tuple

    def __post_init__(self) -> None:
        object.__setattr__(self, "seeds", tuple(bytes(seed) for seed in self.seeds))


@dataclass(frozen=True)
class ProofInfo:
    """A merkle proof used by the pubkey tree match rule."""

    proof: tuple

    def __post_init__(self) -> None:
        nodes = tuple(bytes(node) for node in self.proof)
        if any(len(node) != 32 for node in nodes):
            raise ValueError("every proof node must be 32 bytes")
        object.__setattr__(self, "proof", nodes)


PayloadValue = Union[Pubkey, SeedsVec, ProofInfo, int]


def _check_value(value: object) -> PayloadValue:
    if isinstance(value, (Pubkey, SeedsVec, ProofInfo)):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if not 0 <= value <= _MAX_U64:
            raise ValueError(f"payload number {value} does not fit in u64")
        return value
    raise TypeError(f"unsupported payload value type: {type(value).__name__}")


def encode_value(value: PayloadValue, writer: Writer) -> None:
    """Write one payload value with its variant tag."""
    value = _check_value(value)
    if isinstance(value, Pubkey):
        writer.write_u8(_TAG_PUBKEY)
        writer.write_fixed(bytes(value))
    elif isinstance(value, SeedsVec):
        writer.write_u8(_TAG_SEEDS)
        writer.write_u32(len(value.seeds))
        for seed in value.seeds:
            writer.write_bytes(seed)
    elif isinstance(value, ProofInfo):
        writer.write_u8(_TAG_MERKLE_PROOF)
        writer.write_u32(len(value.proof))
        for node in value.proof:
            writer.write_fixed(node)
    else:
        writer.write_u8(_TAG_NUMBER)
        writer.write_u64(value)


def decode_value(reader: Reader) -> PayloadValue:
    """Read one tagged payload value."""
    tag = reader.read_u8()
    if tag == _TAG_PUBKEY:
        return Pubkey(reader.read_fixed(PUBKEY_LENGTH))
    if tag == _TAG_SEEDS:
        count = reader.read_u32()
        return SeedsVec(tuple(reader.read_bytes() for _ in range(count)))
    if tag == _TAG_MERKLE_PROOF:
        count = reader.read_u32()
        return ProofInfo(tuple(reader.read_fixed(32) for _ in range(count)))
    if tag == _TAG_NUMBER:
        return reader.read_u64()
    raise BorshError(f"unknown payload value tag {tag}")


class Payload:
    """A map from field names to payload values."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, entries=None) -> None:
        self._map: dict[str, PayloadValue] = {}
        if entries is None:
            return
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        for key, value in pairs:
            self.insert(key, value)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, PayloadValue]]) -> "Payload":
        """Build a payload from (key, value) pairs."""
        return cls(pairs)

    @staticmethod
    def _check_key(key: object) -> str:
        if not isinstance(key, str):
            raise TypeError("payload keys must be strings")
        return key

    def insert(self, key: str, value: PayloadValue) -> Optional[PayloadValue]:
        """Set a value, returning the one it replaced, if any."""
        key = self._check_key(key)
        value = _check_value(value)
        previous = self._map.get(key)
        self._map[key] = value
        return previous

    def try_insert(self, key: str, value: PayloadValue) -> None:
        """Set a value only if the key is absent; raise if it is present."""
        key = self._check_key(key)
        if key in self._map:
            raise RuleSetException(RuleSetError.VALUE_OCCUPIED)
        self._map[key] = _check_value(value)

    def get(self, key: str) -> Optional[PayloadValue]:
        return self._map.get(key)

    def _get_as(self, key: str, kind: type):
        value = self._map.get(key)
        if isinstance(value, kind) and not isinstance(value, bool):
            return value
        return None

    def get_pubkey(self, key: str) -> Optional[Pubkey]:
        return self._get_as(key, Pubkey)

    def get_seeds(self, key: str) -> Optional[SeedsVec]:
        return self._get_as(key, SeedsVec)

    def get_merkle_proof(self, key: str) -> Optional[ProofInfo]:
        return self._get_as(key, ProofInfo)

    def get_amount(self, key: str) -> Optional[int]:
        return self._get_as(key, int)

    def items(self):
        return self._map.items()

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Payload):
            return self._map == other._map
        return NotImplemented

    def __repr__(self) -> str:
        return f"Payload({self._map!r})"

    def encode(self, writer: Writer) -> None:
        """Write the payload, entries ordered by key."""
        writer.write_u32(len(self._map))
        for key in sorted(self._map, key=lambda k: k.encode("utf-8")):
            writer.write_string(key)
            encode_value(self._map[key], writer)

    @classmethod
    def decode(cls, reader: Reader) -> "Payload":
        payload = cls()
        for _ in range(reader.read_u32()):
            key = reader.read_string()
            payload._map[key] = decode_value(reader)
        return payload

    def to_bytes(self) -> bytes:
        writer = Writer()
        self.encode(writer)
        return writer.getvalue()

    @classmethod
    def from_bytes(cls, data: bytes) -> "Payload":
        reader = Reader(data)
        payload = cls.decode(reader)
        reader.finish()
        return payload