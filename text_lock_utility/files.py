"""File and terminal access used by the lock and unlock operations."""

import os
import pathlib
import tempfile

import click

import text_lock_utility.exceptions


def read_bytes(path: pathlib.Path) -> bytes:
    """Read a whole file."""
    try:
        return path.read_bytes()
    except OSError as e:
        raise text_lock_utility.exceptions.FileReadFailed(path, e.strerror or "") from e


def write_bytes(path: pathlib.Path, data: bytes) -> None:
    """Write a whole file, replacing any existing one.

    The data is written to a temporary file next to the destination and
    renamed over it once flushed, so the destination either keeps its old
    contents or gets all of the new ones.
    """
    directory = path.parent if str(path.parent) else pathlib.Path(".")
    tmp_name = ""
    replaced = False
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=directory,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as out_f:
            tmp_name = out_f.name
            out_f.write(data)
            out_f.flush()
            os.fsync(out_f.fileno())
        os.replace(tmp_name, path)
        replaced = True
    except OSError as e:
        raise text_lock_utility.exceptions.FileWriteFailed(
            path, e.strerror or ""
        ) from e
    finally:
        if not replaced and tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)


def prompt_password(prompt: str = "Password") -> bytes:
    """Read a password from the terminal without echoing it."""
    try:
        password: str = click.prompt(
            prompt,
            hide_input=True,
            default="",
            show_default=False,
            err=True,
        )
    except click.exceptions.Abort as e:
        # click turns Ctrl-C into Abort, keep it an interrupt for the CLI
        if isinstance(e.__context__, KeyboardInterrupt):
            raise KeyboardInterrupt from e
        raise text_lock_utility.exceptions.NoPassword from e
    return password.encode("utf-8")
