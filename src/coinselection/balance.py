"""
Balance calculations for coin selections.

All totals are kept inside the unsigned 64-bit range of a coin. Coin values
come from chain data, so a total that leaves the range raises instead of
wrapping around.
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from coinselection.constants import MAX_COIN_VALUE
from coinselection.errors import BalanceOverflowError, FeeUnderflowError
from coinselection.models import Coin, CoinSelection


def sum_coins(coins: Iterable[Coin], label: str = "coin") -> int:
    """
    Sum coin values left to right, checking the 64-bit bound at every step.

    Args:
        coins: Coins to add up
        label: Name of the balance, used in the overflow error

    Returns:
        Total value

    Raises:
        BalanceOverflowError: If the running total exceeds MAX_COIN_VALUE
    """
    total = 0
    for coin in coins:
        total += coin.value
        if total > MAX_COIN_VALUE:
            logger.error(f"{label} balance overflow at {total}")
            raise BalanceOverflowError(label, total)
    return total


def input_balance(selection: CoinSelection) -> int:
    """Calculate the sum of all input values."""
    return sum_coins((txout.coin for _, txout in selection.inputs), "input")


def output_balance(selection: CoinSelection) -> int:
    """Calculate the sum of all output values."""
    return sum_coins((txout.coin for txout in selection.outputs), "output")


def change_balance(selection: CoinSelection) -> int:
    """Calculate the sum of all change values."""
    return sum_coins(selection.change, "change")


def fee_balance(selection: CoinSelection) -> int:
    """
    Calculate the fee implied by a selection: inputs minus outputs and change.

    Only meaningful for a selection that already passed the balance checks.

    Raises:
        FeeUnderflowError: If outputs plus change exceed the inputs
        BalanceOverflowError: If any of the three balances overflows
    """
    inputs = input_balance(selection)
    outputs = output_balance(selection)
    change = change_balance(selection)

    if outputs + change > inputs:
        logger.error(f"Fee underflow: inputs={inputs} outputs={outputs} change={change}")
        raise FeeUnderflowError(inputs, outputs, change)

    return inputs - outputs - change
