"""In-memory fake collaborators for testing.

These implement the same abstract interfaces as the click-backed console
I/O but read from a script and record everything. No terminal, no side
effects.
"""

from __future__ import annotations

from karfa.application.shop import Shop
from karfa.infrastructure.console.io import InputProvider, OutputSink
from karfa.infrastructure.persistence.catalog_seed import default_products
from karfa.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


class ScriptedInput(InputProvider):
    """Answers prompts from a fixed list; None entries mean 'declined'."""

    def __init__(self, answers: list[str | None] | None = None) -> None:
        self._answers = list(answers or [])
        self.prompts: list[str] = []

    def ask(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if not self._answers:
            return None
        return self._answers.pop(0)


class RecordingOutput(OutputSink):

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, text: str) -> None:
        self.infos.append(text)

    def error(self, text: str) -> None:
        self.errors.append(text)


def seeded_shop() -> Shop:
    """A shop holding the three default products and an empty cart."""
    return Shop(catalog=InMemoryProductRepository(default_products()))
