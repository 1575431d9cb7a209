"""File unlock operation."""

import typing

import click

import text_lock_utility.common
import text_lock_utility.container
import text_lock_utility.exceptions
import text_lock_utility.files
import text_lock_utility.types


def unlock(opts: text_lock_utility.types.TLUnlockOptions) -> int:
    """Decrypt a container file back into plain text."""
    text_lock_utility.common.conditional_echo_verbose(
        opts, f"Reading container from {opts['input_path']}"
    )
    container = text_lock_utility.files.read_bytes(opts["input_path"])
    parts = text_lock_utility.container.split_container(container)
    text_lock_utility.common.conditional_echo_debug(
        opts,
        f"Container holds a {len(parts.salt)} byte salt and "
        f"{len(parts.ciphertext)} bytes of ciphertext.",
    )

    password = text_lock_utility.files.prompt_password("Password")
    plaintext = text_lock_utility.container.decrypt_from_container(container, password)
    del password

    if opts["to_stdout"]:
        click.echo(plaintext, nl=False)
        return 0

    text_lock_utility.common.conditional_echo_verbose(
        opts, f"Writing plaintext to {opts['output_path']}"
    )
    text_lock_utility.files.write_bytes(
        opts["output_path"], plaintext.encode("utf-8")
    )
    text_lock_utility.common.echo_success(
        f"Data was decrypted and written to {opts['output_path']}"
    )

    return 0


def wrap_unlock_exceptions(opts: text_lock_utility.types.TLUnlockOptions) -> int:
    """Wrap the unlock operation with required exception handling."""
    exc: typing.Any = None
    ret = 1
    try:
        ret = unlock(opts)
    except text_lock_utility.exceptions.FileReadFailed as rex:
        text_lock_utility.common.echo_error(
            f"Could not read {rex.path} for decryption. {rex.reason}".rstrip()
        )
        ret = 3
    except text_lock_utility.exceptions.FileWriteFailed as wex:
        text_lock_utility.common.echo_error(
            f"Could not write the decrypted data to {wex.path}. {wex.reason}".rstrip()
        )
        ret = 3
    except text_lock_utility.exceptions.MalformedContainer:
        text_lock_utility.common.echo_error(
            f"{opts['input_path']} is too short to be an encrypted file."
        )
    except text_lock_utility.exceptions.NoPassword:
        text_lock_utility.common.echo_error("Could not read the password.")
        ret = 2
    except text_lock_utility.exceptions.AuthenticationFailed:
        text_lock_utility.common.echo_error(
            f"Failed to decrypt {opts['input_path']}, please check the password."
        )
    except text_lock_utility.exceptions.InvalidEncoding:
        text_lock_utility.common.echo_error(
            f"Decrypted contents of {opts['input_path']} are not UTF-8 text."
        )
    except text_lock_utility.exceptions.KeyDerivationFailed:
        text_lock_utility.common.echo_error(
            f"Could not derive the secret key for decrypting {opts['input_path']}."
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
