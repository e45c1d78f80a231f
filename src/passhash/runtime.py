"""Service wiring and module-level helpers bound to the default settings."""

from __future__ import annotations

import logging
from functools import lru_cache

from passhash.application.services.password_service import PasswordService
from passhash.config.settings import Settings, load_settings
from passhash.infrastructure.logging import configure_logging
from passhash.infrastructure.security.bcrypt_primitive import BcryptHashPrimitive
from passhash.infrastructure.security.system_random import SystemRandomSource

logger = logging.getLogger(__name__)


def build_password_service(settings: Settings | None = None) -> PasswordService:
    """Build a password service wired to bcrypt and the OS random source."""

    runtime_settings = settings or load_settings()
    return PasswordService(
        primitive=BcryptHashPrimitive(),
        random_source=SystemRandomSource(),
        cost=runtime_settings.cost,
    )


def bootstrap(settings: Settings | None = None) -> PasswordService:
    """Configure package logging from settings and return a wired service."""

    runtime_settings = settings or load_settings()
    configure_logging(level=runtime_settings.log_level)
    service = build_password_service(runtime_settings)
    logger.info("password_service_ready cost=%s", service.cost)
    return service


@lru_cache(maxsize=1)
def default_service() -> PasswordService:
    """Return the cached service used by the package-level helpers."""

    return build_password_service()


def generate_salt() -> bytes:
    return default_service().generate_salt()


def hash_password(password: bytes) -> bytes:
    return default_service().hash_password(password)


def hash_password_from_string(password: str) -> bytes:
    return default_service().hash_password_from_string(password)


def verify_password(password_hash: bytes | str, password: bytes) -> bool:
    return default_service().verify_password(password_hash, password)


def needs_rehash(password_hash: bytes | str) -> bool:
    return default_service().needs_rehash(password_hash)
