# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Command line interface module."""

# flake8: noqa: E501
# pylint: disable=too-many-arguments,too-many-positional-arguments
import logging
import logging.config
from typing import Optional

import typer

from passcrypt._logging import LogLevel, get_log_level, get_logging_config
from passcrypt._version import __version__
from passcrypt.algorithms import Algorithm
from passcrypt.config import CryptSettings
from passcrypt.crypt import Crypt
from passcrypt.errors import CryptError

APP_NAME = "passcrypt"
APP_HELP = "Hash and verify passwords, generate random strings"

LOG = logging.getLogger(__name__)

app = typer.Typer(
    name=APP_NAME,
    help=APP_HELP,
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_short=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    algorithm: Optional[Algorithm] = typer.Option(
        None,
        help="The algorithm to use (default: best available)",
        case_sensitive=False,
    ),
    argon2_memory_cost: Optional[int] = typer.Option(
        None, help="The argon2 memory cost in KiB"
    ),
    argon2_time_cost: Optional[int] = typer.Option(
        None, help="The argon2 time cost"
    ),
    argon2_threads: Optional[int] = typer.Option(
        None, help="The argon2 number of threads"
    ),
    bcrypt_cost: Optional[int] = typer.Option(None, help="The bcrypt cost"),
    random_characters: Optional[str] = typer.Option(
        None, help="The character pool for random strings"
    ),
    log_level: LogLevel = typer.Option(
        default=get_log_level(),
        help="The log level",
        case_sensitive=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Configure logging and the crypt instance shared by the commands."""
    del version
    try:
        settings = CryptSettings.load(
            log_level=log_level.value,
            algorithm=algorithm,
            argon2_memory_cost=argon2_memory_cost,
            argon2_time_cost=argon2_time_cost,
            argon2_threads=argon2_threads,
            bcrypt_cost=bcrypt_cost,
            random_characters=random_characters,
        )
    except ValueError as exc:
        # pydantic's ValidationError is a ValueError
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    logging.config.dictConfig(get_logging_config(settings.log_level))
    ctx.obj = settings


def _crypt(ctx: typer.Context) -> Crypt:
    settings: CryptSettings = ctx.obj
    return Crypt.from_settings(settings)


@app.command("hash")
def hash_command(
    ctx: typer.Context,
    password: str = typer.Argument(..., help="The password to hash"),
) -> None:
    """Hash a password."""
    try:
        typer.echo(_crypt(ctx).hash(password))
    except CryptError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc


@app.command("verify")
def verify_command(
    ctx: typer.Context,
    password: str = typer.Argument(..., help="The password to check"),
    hashed: str = typer.Argument(..., help="The stored hash"),
) -> None:
    """Check a password against a hash (exit code 1 if no match)."""
    matches = _crypt(ctx).verify(password, hashed)
    typer.echo(str(matches).lower())
    if not matches:
        raise typer.Exit(code=1)


@app.command("needs-rehash")
def needs_rehash_command(
    ctx: typer.Context,
    hashed: str = typer.Argument(..., help="The stored hash"),
) -> None:
    """Check if a hash was made with other algorithm or parameters."""
    typer.echo(str(_crypt(ctx).needs_rehash(hashed)).lower())


@app.command("random")
def random_command(
    ctx: typer.Context,
    length: Optional[int] = typer.Option(
        None, "--length", "-l", help="The number of characters"
    ),
    characters: Optional[str] = typer.Option(
        None, "--characters", "-c", help="Character pool for this call only"
    ),
) -> None:
    """Generate a random string."""
    settings: CryptSettings = ctx.obj
    if length is None:
        length = settings.random_length
    try:
        typer.echo(_crypt(ctx).get_random_string(length, characters))
    except CryptError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc


if __name__ == "__main__":
    app()
