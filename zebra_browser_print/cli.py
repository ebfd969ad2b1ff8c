"""
Command-Line Interface for the Zebra Browser Print agent.

Usage:
    zebra-browser-print list              - List available printers
    zebra-browser-print default           - Show the default printer
    zebra-browser-print status            - Check printer readiness
    zebra-browser-print send DATA         - Send raw ZPL/text
    zebra-browser-print send-file PATH    - Upload a file
    zebra-browser-print read              - Read the printer's reply
"""

import sys
from typing import Optional

import click

from . import __version__
from .client import BrowserPrintClient
from .config import API_URL, setup_logging
from .exceptions import BrowserPrintError
from .models import Device


def select_device(client: BrowserPrintClient, uid: Optional[str]) -> Device:
    """Select the printer with the given uid, or the default printer.

    Args:
        client: Client to query and to select the device on
        uid: Device uid as listed by `list`, or None for the default printer

    Returns:
        The selected device

    Raises:
        click.ClickException: If no available printer has that uid
    """
    if uid is None:
        device = client.get_default_device()
    else:
        matches = [d for d in client.list_available_devices() if d.uid == uid]
        if not matches:
            raise click.ClickException(f"No available printer with uid {uid!r}")
        device = matches[0]

    client.set_device(device)
    return device


def _run(func, *args):
    """Call func, reporting library errors as a clean CLI failure."""
    try:
        return func(*args)
    except BrowserPrintError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


uid_option = click.option(
    "--uid", "-u", default=None, help="Printer uid (defaults to the agent's default printer)"
)


@click.group()
@click.version_option(__version__)
@click.option("--url", default=API_URL, show_default=True, help="Browser Print agent address")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, url, verbose):
    """Zebra Browser Print CLI."""
    setup_logging("DEBUG" if verbose else None)
    ctx.ensure_object(dict)
    client = BrowserPrintClient(url)
    ctx.call_on_close(client.close)
    ctx.obj["client"] = client


@main.command("list")
@click.pass_context
def list_devices(ctx):
    """List printers available through the agent."""
    devices = _run(ctx.obj["client"].list_available_devices)

    click.echo(f"Found {len(devices)} printer(s):\n")
    for device in devices:
        click.echo(f"  {device}")


@main.command()
@click.pass_context
def default(ctx):
    """Show the agent's default printer."""
    device = _run(ctx.obj["client"].get_default_device)

    click.echo(f"Name:         {device.name}")
    click.echo(f"Type:         {device.device_type}")
    click.echo(f"Connection:   {device.connection}")
    click.echo(f"UID:          {device.uid}")
    click.echo(f"Provider:     {device.provider}")
    click.echo(f"Manufacturer: {device.manufacturer}")


@main.command()
@uid_option
@click.pass_context
def status(ctx, uid):
    """Check whether the printer is ready to print.

    Exits with status 1 when the printer is not ready.
    """
    client = ctx.obj["client"]
    device = _run(select_device, client, uid)
    report = _run(client.check_status)

    click.echo(f"{device.name}: {'ready' if report.is_ready_to_print else 'not ready'}")
    for error in report.errors:
        click.echo(f"  - {error}")

    if not report.is_ready_to_print:
        sys.exit(1)


@main.command()
@click.argument("data")
@uid_option
@click.pass_context
def send(ctx, data, uid):
    """Send raw DATA (e.g. ZPL) to the printer."""
    client = ctx.obj["client"]
    device = _run(select_device, client, uid)
    _run(client.write, data)
    click.echo(f"Sent {len(data)} characters to {device.name}")


@main.command("send-file")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@uid_option
@click.pass_context
def send_file(ctx, path, uid):
    """Upload the file at PATH to the printer."""
    client = ctx.obj["client"]
    device = _run(select_device, client, uid)
    _run(client.print_file, path)
    click.echo(f"Sent {path} to {device.name}")


@main.command()
@uid_option
@click.pass_context
def read(ctx, uid):
    """Print whatever the printer has sent back."""
    client = ctx.obj["client"]
    _run(select_device, client, uid)
    click.echo(_run(client.read))


if __name__ == "__main__":
    main()
