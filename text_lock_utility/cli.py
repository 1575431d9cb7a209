"""CLI for locking and unlocking text files with a password."""

import pathlib
import sys
import traceback

import click

import text_lock_utility
import text_lock_utility.lock
import text_lock_utility.types
import text_lock_utility.unlock

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--allow-empty-password/--deny-empty-password",
    default=text_lock_utility.types.ALLOW_EMPTY_PASSWORD,
    show_default=True,
    help="Accept an empty password when encrypting.",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Print more information.",
)
@click.option("--debug", is_flag=True, help="Print debug information.")
@click.argument("input_path")
@click.argument("output_path")
def encrypt(
    input_path: str,
    output_path: str,
    allow_empty_password: bool,
    verbose: bool,
    debug: bool,
) -> None:
    """Encrypt the text file INPUT_PATH into OUTPUT_PATH."""
    plpath = pathlib.Path(input_path)
    if not plpath.is_file():
        click.echo("Could not access the provided input path.", err=True)
        sys.exit(3)

    opts: text_lock_utility.types.TLLockOptions = {
        "input_path": plpath,
        "output_path": pathlib.Path(output_path),
        "allow_empty_password": allow_empty_password,
        "debug": debug,
        "verbose": verbose or debug,
    }

    ret = 0
    try:
        ret = text_lock_utility.lock.wrap_lock_exceptions(opts)
    except KeyboardInterrupt:
        click.echo("Received a keyboard interrupt, aborting...", err=True)
        ret = 130
    except Exception:
        # Banner was already printed by the wrapper
        click.echo(traceback.format_exc(), err=True, nl=False)
        ret = 42
    sys.exit(ret)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print the decrypted text instead of writing it to a file.",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Print more information.",
)
@click.option("--debug", is_flag=True, help="Print debug information.")
@click.argument("input_path")
@click.argument("output_path", default="")
def decrypt(
    input_path: str,
    output_path: str,
    to_stdout: bool,
    verbose: bool,
    debug: bool,
) -> None:
    """Decrypt the encrypted file INPUT_PATH into OUTPUT_PATH."""
    plpath = pathlib.Path(input_path)
    if not plpath.is_file():
        click.echo("Could not access the provided input path.", err=True)
        sys.exit(3)

    if not output_path and not to_stdout:
        click.echo("No output path was provided, use --stdout to print instead.", err=True)
        sys.exit(2)

    if to_stdout and (verbose or debug):
        click.echo("Verbose and debug output can't be used with --stdout.", err=True)
        click.echo("They will be disabled for this run.", err=True)

    opts: text_lock_utility.types.TLUnlockOptions = {
        "input_path": plpath,
        "output_path": pathlib.Path(output_path or "-"),
        "to_stdout": to_stdout,
        "debug": debug if not to_stdout else False,
        "verbose": (verbose or debug) if not to_stdout else False,
    }

    ret = 0
    try:
        ret = text_lock_utility.unlock.wrap_unlock_exceptions(opts)
    except KeyboardInterrupt:
        click.echo("Received a keyboard interrupt, aborting...", err=True)
        ret = 130
    except Exception:
        # Banner was already printed by the wrapper
        click.echo(traceback.format_exc(), err=True, nl=False)
        ret = 42
    sys.exit(ret)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(
    text_lock_utility.__version__,
    "-v",
    "--version",
    prog_name="text-lock",
    message="%(prog)s (%(version)s)\nLicense: " + text_lock_utility.__license__,
)
def wrap():
    """Encrypt and decrypt text files with a password."""
    pass


wrap.add_command(encrypt)
wrap.add_command(decrypt)


if __name__ == "__main__":
    wrap()
