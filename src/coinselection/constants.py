"""
Numeric domain bounds for coin values and selection sizes.
"""

from __future__ import annotations

# Coin amounts are unsigned 64-bit integers
MAX_COIN_VALUE = 2**64 - 1

# Output and input counts passed through maximum_input_count are 8-bit
MAX_INPUT_COUNT = 255

# Transaction output indexes are 32-bit
MAX_OUTPUT_INDEX = 0xFFFFFFFF
