"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the console/CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the buyer asked for, still as raw text."""

    product_id: str
    quantity: str


@dataclass(frozen=True)
class AddToCartResult:
    """Output: the cart line after an add, ready for display."""

    product_id: int
    quantity: int
    merged: bool  # True if an existing line grew
    display: str  # formatted, e.g. "CSS sokkar — 4x3.000 kr. samtals 12.000 kr."
