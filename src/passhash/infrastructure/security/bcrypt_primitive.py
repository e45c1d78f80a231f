"""Bcrypt adaptive hash primitive adapter."""

from __future__ import annotations

import logging

import bcrypt

from passhash.application.ports.hash_primitive_port import HashPrimitivePort
from passhash.domain.cost import validate_cost
from passhash.domain.errors import EntropyFailureError, MalformedHashError, PasswordTooLongError
from passhash.domain.hash_format import coerce_encoded_hash, parse_hash_metadata

logger = logging.getLogger(__name__)

# bcrypt only processes the first 72 bytes of its key.
MAX_PASSWORD_BYTES = 72


class BcryptHashPrimitive(HashPrimitivePort):
    """Hash primitive adapter using the `bcrypt` library."""

    def hash(self, password: bytes, cost: int) -> bytes:
        _ensure_bytes(password)
        validate_cost(cost=cost)
        if len(password) > MAX_PASSWORD_BYTES:
            raise PasswordTooLongError(
                f"password is {len(password)} bytes, bcrypt accepts at most {MAX_PASSWORD_BYTES}"
            )

        try:
            salt = bcrypt.gensalt(rounds=cost)
        except (OSError, NotImplementedError) as exc:
            raise EntropyFailureError("bcrypt could not read the secure random source") from exc
        return bcrypt.hashpw(password, salt)

    def verify(self, encoded: bytes, password: bytes) -> bool:
        if not isinstance(password, bytes):
            logger.debug("password_verify_rejected reason=password_type")
            return False
        if len(password) > MAX_PASSWORD_BYTES:
            logger.debug("password_verify_rejected reason=password_too_long")
            return False

        try:
            hashed = coerce_encoded_hash(encoded)
            parse_hash_metadata(hashed)
        except MalformedHashError as exc:
            logger.debug("password_verify_rejected reason=malformed_hash detail=%s", exc)
            return False

        try:
            return bcrypt.checkpw(password, hashed)
        except ValueError:
            logger.debug("password_verify_rejected reason=primitive_error")
            return False

    def extract_cost(self, encoded: bytes) -> int:
        return parse_hash_metadata(encoded).cost


def _ensure_bytes(password: bytes) -> None:
    if not isinstance(password, bytes):
        raise TypeError(f"password must be bytes, got {type(password).__name__}")
