"""
Selection checks.

A selection algorithm runs these at the stage where each problem shows up:

1. Static UTxO balance against the payment total
2. UTxO fragmentation against the number of outputs
3. (Depletion during the search, reported by the algorithm itself)
4. Input count against maximum_input_count
5. Backend validation of the finished selection

Every check raises the matching CoinSelectionError and returns None when the
selection passes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from loguru import logger

from coinselection.balance import fee_balance, sum_coins
from coinselection.errors import (
    InvalidSelectionError,
    MaximumInputCountExceededError,
    UtxoBalanceInsufficientError,
    UtxoNotFragmentedEnoughError,
    error_fields,
)
from coinselection.models import CoinSelection, TxIn, TxOut
from coinselection.options import CoinSelectionOptions

E = TypeVar("E")


def check_utxo_balance(available: int, required: int) -> None:
    """Fail when the UTxO balance cannot cover the payment total."""
    if available < required:
        error = UtxoBalanceInsufficientError(available, required)
        logger.debug(f"Selection rejected: {error_fields(error)}")
        raise error


def check_utxo_fragmentation(utxo_count: int, output_count: int) -> None:
    """Fail when there are fewer UTxO entries than requested outputs."""
    if utxo_count < output_count:
        error = UtxoNotFragmentedEnoughError(utxo_count, output_count)
        logger.debug(f"Selection rejected: {error_fields(error)}")
        raise error


def check_utxo_preconditions(
    utxo: Sequence[tuple[TxIn, TxOut]], outputs: Sequence[TxOut]
) -> None:
    """
    Run the static checks on a UTxO set before searching it.

    Args:
        utxo: Spendable entries, each with the output it refers to
        outputs: Requested payment outputs

    Raises:
        UtxoBalanceInsufficientError: If the UTxO total is below the payment total
        UtxoNotFragmentedEnoughError: If there are fewer entries than outputs
        BalanceOverflowError: If either total leaves the 64-bit range
    """
    available = sum_coins((txout.coin for _, txout in utxo), "utxo")
    required = sum_coins((txout.coin for txout in outputs), "payment")

    check_utxo_balance(available, required)
    check_utxo_fragmentation(len(utxo), len(outputs))


def check_input_count(selection: CoinSelection, options: CoinSelectionOptions[E]) -> None:
    """Fail when the selection uses more inputs than the backend allows."""
    limit = options.input_limit(len(selection.outputs))
    input_count = len(selection.inputs)
    if input_count > limit:
        error = MaximumInputCountExceededError(input_count)
        logger.debug(
            f"Selection rejected: {input_count} inputs for {len(selection.outputs)} "
            f"outputs, limit {limit}"
        )
        raise error


def check_backend(selection: CoinSelection, options: CoinSelectionOptions[E]) -> None:
    """Run the backend validate hook, wrapping any error it reports."""
    backend_error = options.validate(selection)
    if backend_error is not None:
        logger.debug(f"Selection rejected by backend: {backend_error!r}")
        raise InvalidSelectionError(backend_error)


def verify_selection(selection: CoinSelection, options: CoinSelectionOptions[E]) -> int:
    """
    Run the final checks on a finished selection.

    Args:
        selection: Selection produced by the algorithm
        options: Options of the run

    Returns:
        Fee paid by the selection

    Raises:
        MaximumInputCountExceededError: If there are too many inputs
        InvalidSelectionError: If the backend rejects the selection
        FeeUnderflowError: If outputs and change exceed the inputs (caller bug)
    """
    check_input_count(selection, options)
    fee = fee_balance(selection)
    check_backend(selection, options)

    logger.debug(
        f"Selection accepted: {len(selection.inputs)} inputs, "
        f"{len(selection.outputs)} outputs, {len(selection.change)} change, fee {fee}"
    )
    return fee
