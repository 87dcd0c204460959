import click

from legitid.cli.ids import create, verify, info
from legitid.cli.selftest import selftest


@click.group()
@click.version_option(package_name="legitid")
def cli():
    """Creates and verifies self-authenticating identifiers."""
    pass


cli.add_command(create)
cli.add_command(verify)
cli.add_command(info)
cli.add_command(selftest)


if __name__ == "__main__":
    cli()
