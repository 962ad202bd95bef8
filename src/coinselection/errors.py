"""
Coin selection errors.

CoinSelectionError and its subclasses are the closed set of reasons a
selection attempt can fail. They are recoverable: the caller decides whether
to retry with a wider UTxO set or different options, or to give up.

BalanceOverflowError and FeeUnderflowError are not part of that set. They
signal that balance arithmetic was run on a selection that should never have
reached it, which is a bug in the caller.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

E = TypeVar("E")


class CoinSelectionError(Exception):
    """Base class for failures of a single selection attempt."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoinSelectionError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class UtxoBalanceInsufficientError(CoinSelectionError):
    """
    The UTxO balance was insufficient to cover the total payment amount.

    Records the UTxO balance and the total value of the payment.
    """

    def __init__(self, available: int, required: int):
        super().__init__(available, required)
        self.available = available
        self.required = required

    def __str__(self) -> str:
        return (
            f"Insufficient UTxO balance: available {self.available}, "
            f"required {self.required} (short by {self.required - self.available})"
        )


class UtxoNotFragmentedEnoughError(CoinSelectionError):
    """
    The UTxO was not fragmented enough to support the required number of
    transaction outputs.

    Records the number of UTxO entries and the number of outputs.
    """

    def __init__(self, utxo_count: int, output_count: int):
        super().__init__(utxo_count, output_count)
        self.utxo_count = utxo_count
        self.output_count = output_count

    def __str__(self) -> str:
        return (
            f"UTxO not fragmented enough: {self.utxo_count} entries available "
            f"for {self.output_count} outputs"
        )


class UtxoFullyDepletedError(CoinSelectionError):
    """
    All available UTxO entries were depleted before every requested output
    could be paid for, due to the distribution of values in the UTxO set.
    """

    def __str__(self) -> str:
        return "UTxO fully depleted before all outputs could be paid for"


class MaximumInputCountExceededError(CoinSelectionError):
    """
    The number of inputs needed to cover the payment exceeded the limit given
    by maximum_input_count.

    Records the number of inputs that was required.
    """

    def __init__(self, actual_input_count: int):
        super().__init__(actual_input_count)
        self.actual_input_count = actual_input_count

    def __str__(self) -> str:
        return (
            f"Maximum input count exceeded: selection needs {self.actual_input_count} inputs"
        )


class InvalidSelectionError(CoinSelectionError, Generic[E]):
    """
    The backend reported the selection as invalid.

    Records the backend-specific error returned by the validate hook.
    """

    def __init__(self, error: E):
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"Selection rejected by backend: {self.error}"


class BalanceOverflowError(OverflowError):
    """A balance total left the unsigned 64-bit range."""

    def __init__(self, label: str, total: int):
        super().__init__(f"{label} balance overflow: total {total} exceeds 64-bit range")
        self.label = label
        self.total = total


class FeeUnderflowError(ArithmeticError):
    """
    Fee computed on a selection whose outputs and change exceed its inputs.

    A selection in this state did not pass the balance checks and must not
    be used to build a transaction.
    """

    def __init__(self, input_balance: int, output_balance: int, change_balance: int):
        super().__init__(
            f"Fee underflow: inputs {input_balance} < outputs {output_balance} "
            f"+ change {change_balance}"
        )
        self.input_balance = input_balance
        self.output_balance = output_balance
        self.change_balance = change_balance


def error_fields(error: CoinSelectionError) -> dict[str, Any]:
    """Quantities carried by a selection error, keyed by field name."""
    return {k: v for k, v in vars(error).items() if not k.startswith("_")}
