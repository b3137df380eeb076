"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BeerInput:
    """Input: a beer as proposed by the caller (already format-checked)."""

    name: str
    brand: str
    max: int
    quantity: int
    type: str  # BeerType name or description, e.g. "IPA" or "Lager"


@dataclass(frozen=True)
class BeerDTO:
    """Output: a stored beer as displayed to the user."""

    id: int
    name: str
    brand: str
    max: int
    quantity: int
    type: str
