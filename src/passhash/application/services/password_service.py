"""Application service for salts, password hashing, verification and rehash checks."""

from __future__ import annotations

import logging

from passhash.application.ports.hash_primitive_port import HashPrimitivePort
from passhash.application.ports.random_source_port import RandomSourcePort
from passhash.domain.cost import DEFAULT_COST
from passhash.domain.errors import EntropyFailureError, MalformedHashError
from passhash.domain.hash_format import coerce_encoded_hash

logger = logging.getLogger(__name__)

SALT_SIZE = 16


class PasswordService:
    """Hash and verify passwords under one target cost factor.

    Holds no mutable state, so one instance may be shared across threads.
    Services with different costs can live side by side.
    """

    def __init__(
        self,
        *,
        primitive: HashPrimitivePort,
        random_source: RandomSourcePort,
        cost: int = DEFAULT_COST,
    ) -> None:
        self._primitive = primitive
        self._random_source = random_source
        self._cost = cost

    @property
    def cost(self) -> int:
        """Target cost factor used for new hashes and rehash checks."""

        return self._cost

    def generate_salt(self) -> bytes:
        """Return a fresh 128-bit salt from the secure random source."""

        salt = self._random_source.read(SALT_SIZE)
        if len(salt) != SALT_SIZE:
            raise EntropyFailureError(f"expected {SALT_SIZE} salt bytes, got {len(salt)}")
        return salt

    def hash_password(self, password: bytes) -> bytes:
        """Hash password with a fresh salt at the configured cost."""

        if not isinstance(password, bytes):
            raise TypeError(f"password must be bytes, got {type(password).__name__}")
        password_hash = self._primitive.hash(password, self._cost)
        logger.debug("password_hash_created cost=%s", self._cost)
        return password_hash

    def hash_password_from_string(self, password: str) -> bytes:
        """Hash a text password after encoding it as UTF-8."""

        if not isinstance(password, str):
            raise TypeError(f"password must be str, got {type(password).__name__}")
        return self.hash_password(password.encode("utf-8"))

    def verify_password(self, password_hash: bytes | str, password: bytes) -> bool:
        """Return whether password matches password_hash.

        Malformed or foreign hashes never raise; they simply do not verify.
        """

        try:
            encoded = coerce_encoded_hash(password_hash)
        except MalformedHashError:
            logger.debug("password_verify_rejected reason=hash_type")
            return False
        return self._primitive.verify(encoded, password)

    def needs_rehash(self, password_hash: bytes | str) -> bool:
        """Return whether password_hash was made below the target cost.

        Hashes that cannot be parsed are reported as needing a rehash.
        """

        try:
            embedded_cost = self._primitive.extract_cost(coerce_encoded_hash(password_hash))
        except MalformedHashError as exc:
            logger.warning("password_rehash_check_unparseable error=%s", exc)
            return True

        stale = embedded_cost < self._cost
        if stale:
            logger.info(
                "password_rehash_needed embedded_cost=%s target_cost=%s",
                embedded_cost,
                self._cost,
            )
        return stale
