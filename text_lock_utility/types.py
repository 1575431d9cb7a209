"""Common types for the text lock/unlock tool."""

import os
import pathlib
import typing

# Text lock utility constants

# The container layout and the key derivation profile are fixed. Changing
# any of these makes previously written containers unreadable.
SALT_LENGTH: int = 32
KEY_LENGTH: int = 32
KDF_ITERATIONS: int = 3
KDF_MEMORY_KIB: int = 8
KDF_PARALLELISM: int = 1

# ALLOW_EMPTY_PASSWORD sets the default for the empty password policy on
# encryption, the --allow-empty-password flag overrides it per command.
ALLOW_EMPTY_PASSWORD: bool = os.environ.get(
    "TEXT_LOCK_ALLOW_EMPTY_PASSWORD", "0"
).lower() in ("1", "true", "yes")


class TLCommandOptions(typing.TypedDict):
    """Type definitions for command options."""

    input_path: pathlib.Path
    output_path: pathlib.Path
    debug: bool
    verbose: bool


class TLLockOptions(TLCommandOptions):
    """Additional type definitions for encrypt command options."""

    allow_empty_password: bool


class TLUnlockOptions(TLCommandOptions):
    """Additional type definitions for decrypt command options."""

    to_stdout: bool


class TLContainerParts(typing.NamedTuple):
    """Salt and ciphertext of a parsed container."""

    salt: bytes
    ciphertext: bytes
