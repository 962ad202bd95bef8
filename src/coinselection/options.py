"""
Options injected into a coin selection run.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from coinselection.constants import MAX_INPUT_COUNT
from coinselection.models import CoinSelection

E = TypeVar("E")

MaximumInputCount = Callable[[int], int]


@dataclass(frozen=True)
class CoinSelectionOptions(Generic[E]):
    """
    Backend-supplied settings for one selection run.

    Both callables must be pure: selection runs may be executed concurrently
    and call them from several threads at once.

    Attributes:
        maximum_input_count: Maximum number of inputs allowed for a given
            number of outputs. Both sides are 8-bit counts (0-255).
        validate: Backend check of a finished selection. Returns None when
            the selection is acceptable, otherwise a backend-specific error.
    """

    maximum_input_count: MaximumInputCount
    validate: Callable[[CoinSelection], E | None]

    def input_limit(self, output_count: int) -> int:
        """
        Call maximum_input_count, enforcing the 8-bit domain on both sides.

        Raises:
            ValueError: If output_count or the policy result is outside 0-255
        """
        if not 0 <= output_count <= MAX_INPUT_COUNT:
            raise ValueError(f"Output count {output_count} outside 0-{MAX_INPUT_COUNT}")

        limit = self.maximum_input_count(output_count)
        if not 0 <= limit <= MAX_INPUT_COUNT:
            raise ValueError(
                f"maximum_input_count({output_count}) returned {limit}, "
                f"outside 0-{MAX_INPUT_COUNT}"
            )
        return limit


def fixed_input_limit(limit: int) -> MaximumInputCount:
    """Policy allowing the same number of inputs whatever the output count."""
    if not 0 <= limit <= MAX_INPUT_COUNT:
        raise ValueError(f"Input limit {limit} outside 0-{MAX_INPUT_COUNT}")

    def maximum_input_count(output_count: int) -> int:
        return limit

    return maximum_input_count


def accept_all(selection: CoinSelection) -> None:
    """Validator that never rejects a selection."""
    return None
