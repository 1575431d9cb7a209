"""Password based key derivation."""

import secrets

import argon2.exceptions
import argon2.low_level

import text_lock_utility.exceptions
import text_lock_utility.types


def generate_salt() -> bytes:
    """Return a fresh salt from the operating system random source."""
    try:
        return secrets.token_bytes(text_lock_utility.types.SALT_LENGTH)
    except OSError as e:
        raise text_lock_utility.exceptions.RandomSourceUnavailable from e


def derive_key(password: bytes | str, salt: bytes) -> bytes:
    """Derive the container key from a password and a salt.

    The Argon2i cost profile is fixed (3 iterations, 8 KiB of memory, one
    lane), so the same password and salt always yield the same 32 byte key.
    Empty passwords are accepted, refusing them is left to the caller.
    """
    if isinstance(password, str):
        password = password.encode("utf-8")

    if len(salt) != text_lock_utility.types.SALT_LENGTH:
        raise text_lock_utility.exceptions.KeyDerivationFailed(
            f"Salt must be {text_lock_utility.types.SALT_LENGTH} bytes, got {len(salt)}."
        )

    try:
        return argon2.low_level.hash_secret_raw(
            secret=password,
            salt=salt,
            time_cost=text_lock_utility.types.KDF_ITERATIONS,
            memory_cost=text_lock_utility.types.KDF_MEMORY_KIB,
            parallelism=text_lock_utility.types.KDF_PARALLELISM,
            hash_len=text_lock_utility.types.KEY_LENGTH,
            type=argon2.low_level.Type.I,
        )
    except (argon2.exceptions.HashingError, MemoryError) as e:
        raise text_lock_utility.exceptions.KeyDerivationFailed from e
