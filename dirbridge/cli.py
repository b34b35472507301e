import click, ctypes, json, os

from .bridge import (
    REPORT_FUNC,
    TOOL_SPECS,
    call_tool,
    load_directory_report,
    native_entry_address,
    release_native_string,
)
from .config import HOST_ENCODING, init_logging


@click.group()
def cli():
    init_logging()


@cli.command()
@click.option(
    "--native",
    is_flag=True,
    help="Go through the C callback (strdup/free round trip) instead of the Python bridge.",
)
@click.argument("path")
def report(path, native):
    """Print the entry report for the directory at PATH."""
    raw_path = os.fsencode(path)
    if not native:
        click.echo(load_directory_report(raw_path).decode(HOST_ENCODING))
        return

    entry = REPORT_FUNC(native_entry_address())
    address = entry(raw_path)
    if not address:
        click.echo("Native call returned NULL", err=True)
        raise SystemExit(1)
    try:
        click.echo(ctypes.string_at(address).decode(HOST_ENCODING))
    finally:
        release_native_string(address)


@cli.command()
def tools():
    """Print the exported tool specs."""
    click.echo(json.dumps(TOOL_SPECS, indent=2))


@cli.command("call")
@click.argument("name")
@click.argument("arguments", required=False, default="{}")
def call(name, arguments):
    """
    Dispatch tool NAME with the JSON object ARGUMENTS, e.g.

        dirbridge call load_directory_report '{"path": "/tmp"}'
    """
    click.echo(call_tool(name, arguments))


if __name__ == "__main__":
    cli()
