"""Parsing helpers for modular-crypt bcrypt hashes."""

from __future__ import annotations

import re
from dataclasses import dataclass

from passhash.domain.cost import MAX_COST, MIN_COST
from passhash.domain.errors import MalformedHashError

SUPPORTED_VERSIONS = frozenset({"2a", "2b", "2y"})
ENCODED_HASH_LENGTH = 60

_HASH_PATTERN = re.compile(
    rb"\$(?P<version>2[a-z]?)\$(?P<cost>\d{2})\$(?P<body>[./A-Za-z0-9]{53})"
)


@dataclass(frozen=True)
class HashMetadata:
    """Version and cost embedded in one encoded hash."""

    version: str
    cost: int


def coerce_encoded_hash(password_hash: bytes | str) -> bytes:
    """Return the encoded hash as bytes, rejecting other input types."""

    if isinstance(password_hash, bytes):
        return password_hash
    if isinstance(password_hash, str):
        try:
            return password_hash.encode("ascii")
        except UnicodeEncodeError as exc:
            raise MalformedHashError("hash contains non-ascii characters") from exc
    raise MalformedHashError(f"hash must be bytes or str, got {type(password_hash).__name__}")


def parse_hash_metadata(password_hash: bytes | str) -> HashMetadata:
    """Parse version and cost from one encoded hash."""

    encoded = coerce_encoded_hash(password_hash)
    if len(encoded) != ENCODED_HASH_LENGTH:
        raise MalformedHashError(f"hash must be {ENCODED_HASH_LENGTH} bytes long")

    match = _HASH_PATTERN.fullmatch(encoded)
    if match is None:
        raise MalformedHashError("hash does not match the modular-crypt layout")

    version = match.group("version").decode("ascii")
    if version not in SUPPORTED_VERSIONS:
        raise MalformedHashError(f"unsupported hash version {version!r}")

    cost = int(match.group("cost"))
    if cost < MIN_COST or cost > MAX_COST:
        raise MalformedHashError(f"embedded cost {cost} is out of range")

    return HashMetadata(version=version, cost=cost)
