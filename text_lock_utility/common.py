"""Common miscellaneous functions for text-lock."""

import click

import text_lock_utility.types


def conditional_echo_verbose(
    opts: text_lock_utility.types.TLCommandOptions, message: str
) -> None:
    """Echo verbose messages if verbose level is configured."""
    if opts["verbose"]:
        click.echo(message)


def conditional_echo_debug(
    opts: text_lock_utility.types.TLCommandOptions, message: str
) -> None:
    """Echo debug messages if debug level is configured."""
    if opts["debug"]:
        click.echo(message)


def echo_success(message: str) -> None:
    """Echo a green success line."""
    click.echo(f"{click.style('Success:', fg='bright_green')} {message}")


def echo_error(message: str) -> None:
    """Echo a red error line to stderr."""
    click.echo(f"{click.style('Error:', fg='bright_red')} {message}", err=True)
