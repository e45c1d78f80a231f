"""Password hashing utilities built on bcrypt."""

from passhash.application.services.password_service import SALT_SIZE, PasswordService
from passhash.config.settings import Settings, load_settings
from passhash.domain.cost import DEFAULT_COST, MAX_COST, MIN_COST
from passhash.domain.errors import (
    EntropyFailureError,
    InvalidCostFactorError,
    MalformedHashError,
    PasswordHashingError,
    PasswordTooLongError,
)
from passhash.infrastructure.logging import configure_logging
from passhash.runtime import (
    bootstrap,
    build_password_service,
    generate_salt,
    hash_password,
    hash_password_from_string,
    needs_rehash,
    verify_password,
)

__all__ = [
    "DEFAULT_COST",
    "MAX_COST",
    "MIN_COST",
    "SALT_SIZE",
    "EntropyFailureError",
    "InvalidCostFactorError",
    "MalformedHashError",
    "PasswordHashingError",
    "PasswordService",
    "PasswordTooLongError",
    "Settings",
    "bootstrap",
    "build_password_service",
    "configure_logging",
    "generate_salt",
    "hash_password",
    "hash_password_from_string",
    "load_settings",
    "needs_rehash",
    "verify_password",
]
