import asyncio
import sys

import click

from legitid.config import DEFAULT_SALT, MAX_ID_LENGTH, SALT_ENV_VAR
from legitid.selftest import run_all


@click.command("selftest")
@click.option("--iterations", default=100, type=click.IntRange(min=1), show_default=True)
@click.option(
    "--min-length",
    default=5,
    type=click.IntRange(1, MAX_ID_LENGTH),
    show_default=True,
)
@click.option(
    "--max-length",
    default=15,
    type=click.IntRange(1, MAX_ID_LENGTH),
    show_default=True,
)
@click.option("--salt", envvar=SALT_ENV_VAR, default=DEFAULT_SALT, show_default=False)
def selftest(iterations, min_length, max_length, salt):
    """Runs the create/verify, tamper and edge case sweeps."""
    if min_length > max_length:
        raise click.BadParameter(
            "--min-length must not exceed --max-length", param_hint="--min-length"
        )

    results = asyncio.run(run_all(min_length, max_length, iterations, salt))

    click.echo("Create + verify")
    click.echo("=" * 50)
    for result in results["roundtrip"]:
        click.echo(
            f"{result.name}: {result.passed}/{result.total} ({result.rate:.1f}%)"
        )
        for identifier in result.failures:
            click.echo(f"  failed verification: {identifier}", err=True)

    for key, title in (("tamper", "Tampered ids"), ("edge", "Edge cases")):
        click.echo("")
        click.echo(title)
        click.echo("=" * 50)
        for result in results[key]:
            click.echo(
                f"{result.name}: {result.passed}/{result.total} rejected ({result.rate:.1f}%)"
            )
            for failure in result.failures:
                click.echo(f"  incorrectly accepted: {failure}", err=True)

    all_ok = all(result.ok for group in results.values() for result in group)
    click.echo("")
    if all_ok:
        click.echo("All checks passed")
    else:
        click.echo("Some checks failed")
        sys.exit(1)
