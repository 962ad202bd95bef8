"""
coinselection - Coin selection results, balances and errors

Defines the value produced by a UTxO coin selection algorithm, the balance
arithmetic used to check it and the ways a selection attempt can fail.
"""

__version__ = "0.1.0"

from coinselection.balance import (
    change_balance,
    fee_balance,
    input_balance,
    output_balance,
    sum_coins,
)
from coinselection.constants import MAX_COIN_VALUE, MAX_INPUT_COUNT
from coinselection.errors import (
    BalanceOverflowError,
    CoinSelectionError,
    FeeUnderflowError,
    InvalidSelectionError,
    MaximumInputCountExceededError,
    UtxoBalanceInsufficientError,
    UtxoFullyDepletedError,
    UtxoNotFragmentedEnoughError,
)
from coinselection.models import (
    Coin,
    CoinSelection,
    TxIn,
    TxOut,
    combine,
    combine_all,
    empty,
    render_selection,
)
from coinselection.options import CoinSelectionOptions, accept_all, fixed_input_limit
from coinselection.verification import (
    check_backend,
    check_input_count,
    check_utxo_balance,
    check_utxo_fragmentation,
    check_utxo_preconditions,
    verify_selection,
)

__all__ = [
    "BalanceOverflowError",
    "Coin",
    "CoinSelection",
    "CoinSelectionError",
    "CoinSelectionOptions",
    "FeeUnderflowError",
    "InvalidSelectionError",
    "MAX_COIN_VALUE",
    "MAX_INPUT_COUNT",
    "MaximumInputCountExceededError",
    "TxIn",
    "TxOut",
    "UtxoBalanceInsufficientError",
    "UtxoFullyDepletedError",
    "UtxoNotFragmentedEnoughError",
    "accept_all",
    "change_balance",
    "check_backend",
    "check_input_count",
    "check_utxo_balance",
    "check_utxo_fragmentation",
    "check_utxo_preconditions",
    "combine",
    "combine_all",
    "empty",
    "fee_balance",
    "fixed_input_limit",
    "input_balance",
    "output_balance",
    "render_selection",
    "sum_coins",
    "verify_selection",
]
