import asyncio
import sys

import click

from legitid.config import DEFAULT_ID_LENGTH, DEFAULT_SALT, SALT_ENV_VAR
from legitid.errors import InvalidLengthError
from legitid.ids import create_id, verify_id
from legitid.security import get_length_info

salt_option = click.option(
    "--salt",
    envvar=SALT_ENV_VAR,
    default=DEFAULT_SALT,
    show_default=False,
    help=f"Shared secret salt. Also read from {SALT_ENV_VAR}.",
)


@click.command("create")
@click.option(
    "--length",
    default=DEFAULT_ID_LENGTH,
    type=int,
    show_default=True,
    help="Approximate identifier length (1-54).",
)
@click.option("--count", default=1, type=click.IntRange(min=1), help="Number of ids.")
@salt_option
def create(length, count, salt):
    """Creates new identifiers."""
    try:
        for _ in range(count):
            click.echo(asyncio.run(create_id(length, salt)))
    except InvalidLengthError as e:
        raise click.BadParameter(str(e), param_hint="--length")


@click.command("verify")
@click.argument("identifier")
@salt_option
def verify(identifier, salt):
    """Verifies an identifier. Exits with status 1 when it is invalid."""
    if asyncio.run(verify_id(identifier, salt)):
        click.echo("valid")
    else:
        click.echo("invalid")
        sys.exit(1)


@click.command("info")
@click.option(
    "--length",
    default=DEFAULT_ID_LENGTH,
    type=int,
    show_default=True,
    help="Approximate identifier length (1-54).",
)
def info(length):
    """Shows the digit budget and security of an identifier length."""
    try:
        details = get_length_info(length)
    except InvalidLengthError as e:
        raise click.BadParameter(str(e), param_hint="--length")

    click.echo(f"Approximate length: {details['approximate_length']}")
    click.echo(
        f"Identifier length: {details['min_length']}-{details['max_length']} characters"
    )
    click.echo(f"Hex length: {details['hex_length']}")
    click.echo(
        f"Token digits: {details['token_digits']} ({details['token_bits']:.1f} bits)"
    )
    click.echo(
        f"Digest digits: {details['digest_digits']} ({details['digest_bits']:.0f} bits)"
    )
    click.echo(f"Forgery probability: {details['forgery_probability']:.3g}")
    if not details["verifiable"]:
        click.echo("Warning: ids of this length carry no digest and never verify")
