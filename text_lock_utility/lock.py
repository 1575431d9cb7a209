"""File lock operation."""

import typing

import click

import text_lock_utility.common
import text_lock_utility.container
import text_lock_utility.exceptions
import text_lock_utility.files
import text_lock_utility.types


def lock(opts: text_lock_utility.types.TLLockOptions) -> int:
    """Encrypt a plain-text file into a container file."""
    text_lock_utility.common.conditional_echo_verbose(
        opts, f"Reading plaintext from {opts['input_path']}"
    )
    plaintext = text_lock_utility.files.read_bytes(opts["input_path"])
    try:
        plaintext.decode("utf-8")
    except UnicodeDecodeError as e:
        raise text_lock_utility.exceptions.InvalidEncoding from e
    text_lock_utility.common.conditional_echo_debug(
        opts, f"Read {len(plaintext)} bytes of text."
    )

    password = text_lock_utility.files.prompt_password("Password")
    if not password and not opts["allow_empty_password"]:
        raise text_lock_utility.exceptions.EmptyPassword

    text_lock_utility.common.conditional_echo_debug(
        opts,
        "Deriving key with Argon2i "
        f"(t={text_lock_utility.types.KDF_ITERATIONS}, "
        f"m={text_lock_utility.types.KDF_MEMORY_KIB} KiB, "
        f"p={text_lock_utility.types.KDF_PARALLELISM})",
    )
    container = text_lock_utility.container.encrypt_to_container(plaintext, password)
    del password

    text_lock_utility.common.conditional_echo_verbose(
        opts, f"Writing {len(container)} bytes to {opts['output_path']}"
    )
    text_lock_utility.files.write_bytes(opts["output_path"], container)
    text_lock_utility.common.echo_success(
        f"Data was encrypted and written to {opts['output_path']}"
    )

    return 0


def wrap_lock_exceptions(opts: text_lock_utility.types.TLLockOptions) -> int:
    """Wrap the lock operation with required exception handling."""
    exc: typing.Any = None
    ret = 1
    try:
        ret = lock(opts)
    except text_lock_utility.exceptions.FileReadFailed as rex:
        text_lock_utility.common.echo_error(
            f"Could not read {rex.path} for encryption. {rex.reason}".rstrip()
        )
        ret = 3
    except text_lock_utility.exceptions.FileWriteFailed as wex:
        text_lock_utility.common.echo_error(
            f"Could not write the encrypted data to {wex.path}. {wex.reason}".rstrip()
        )
        ret = 3
    except text_lock_utility.exceptions.InvalidEncoding:
        text_lock_utility.common.echo_error(
            f"{opts['input_path']} is not a UTF-8 text file, refusing to encrypt it."
        )
    except text_lock_utility.exceptions.NoPassword:
        text_lock_utility.common.echo_error("Could not read the password.")
        ret = 2
    except text_lock_utility.exceptions.EmptyPassword:
        text_lock_utility.common.echo_error("Refusing to encrypt with an empty password.")
        click.echo(
            "Use --allow-empty-password if this really is what you want.", err=True
        )
        ret = 2
    except text_lock_utility.exceptions.RandomSourceUnavailable:
        text_lock_utility.common.echo_error(
            f"Could not generate random bytes for encrypting {opts['input_path']}."
        )
    except text_lock_utility.exceptions.KeyDerivationFailed:
        text_lock_utility.common.echo_error(
            f"Could not derive the secret key for encrypting {opts['input_path']}."
        )
    except Exception as e:
        ret = 42
        exc = e
    finally:
        # Log unhandled exceptions, but don't let them bubble
        if exc is not None:
            click.echo("Program encountered an unhandled exception.", err=True)
            click.echo(
                "If you think there's a mistake, copy this message and lines after it, and include it in your bug report.",
                err=True,
            )
            click.echo("Exception details:", err=True)
            click.echo(
                "-------------------------- BEGIN EXCEPTION TRACEBACK --------------------------",
                err=True,
            )
            raise exc

    return ret
