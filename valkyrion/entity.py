"""Entity identifiers, limits and component signatures."""

from __future__ import annotations

from dataclasses import dataclass

Entity = int
ComponentType = int

MAX_ENTITIES: int = 5000
MAX_COMPONENTS: int = 32


def _check_bit(bit: int) -> None:
    if not 0 <= bit < MAX_COMPONENTS:
        raise IndexError(f"signature bit {bit} out of range 0..{MAX_COMPONENTS - 1}")


@dataclass
class Signature:
    """A fixed-width set of component-type bits."""

    bits: int = 0

    def set(self, bit: int) -> None:
        """Turn on the bit for a component type."""
        _check_bit(bit)
        self.bits |= 1 << bit

    def test(self, bit: int) -> bool:
        """Return whether the bit for a component type is on."""
        _check_bit(bit)
        return bool(self.bits >> bit & 1)

    def clear(self) -> None:
        """Turn every bit off."""
        self.bits = 0