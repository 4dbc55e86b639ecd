"""CLI command that starts the interactive shop session."""

from __future__ import annotations

import click

from karfa.infrastructure.bootstrap import build_shop
from karfa.infrastructure.console.io import ClickInputProvider, ClickOutputSink
from karfa.infrastructure.console.shop_console import ShopConsole


@click.command("shell")
def shell() -> None:
    """Shop interactively from a numbered menu."""
    console = ShopConsole(build_shop(), ClickInputProvider(), ClickOutputSink())
    console.run()
    click.echo("Bless!")
