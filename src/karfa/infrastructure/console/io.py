"""Console collaborators.

The shop procedures never touch stdin/stdout directly; they talk to an
``InputProvider`` and an ``OutputSink``.  The click-backed versions here
are what the CLI uses; tests substitute scripted ones.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import click


class InputProvider(ABC):

    @abstractmethod
    def ask(self, prompt: str) -> str | None:
        """Return what the user typed, or None if they declined to answer."""


class OutputSink(ABC):

    @abstractmethod
    def info(self, text: str) -> None:
        """Show a normal message."""

    @abstractmethod
    def error(self, text: str) -> None:
        """Show an error message."""


class ClickInputProvider(InputProvider):

    def ask(self, prompt: str) -> str | None:
        try:
            return click.prompt(
                prompt, default="", show_default=False, prompt_suffix=" "
            )
        except click.Abort:
            # Ctrl-C / Ctrl-D
            return None


class ClickOutputSink(OutputSink):

    def info(self, text: str) -> None:
        click.echo(text)

    def error(self, text: str) -> None:
        click.secho(text, fg="red", err=True)
