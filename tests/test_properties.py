"""
Property tests for combining selections and balance arithmetic.

INVARIANTS:
    combine(empty, x) == x == combine(x, empty)
    combine(combine(a, b), c) == combine(a, combine(b, c))
    balance(combine(a, b)) == balance(a) + balance(b)
    fee == inputs - outputs - change, exactly
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from coinselection.balance import (
    change_balance,
    fee_balance,
    input_balance,
    output_balance,
    sum_coins,
)
from coinselection.constants import MAX_COIN_VALUE
from coinselection.errors import BalanceOverflowError, FeeUnderflowError
from coinselection.models import Coin, CoinSelection, TxIn, TxOut, combine, empty

# =============================================================================
# STRATEGIES
# =============================================================================

txids = st.text(alphabet="0123456789abcdef", min_size=64, max_size=64)
addresses = st.sampled_from(["addr_alice", "addr_bob", "addr_carol", "addr_change"])


def coins(min_value: int = 0, max_value: int = 10**12) -> st.SearchStrategy[Coin]:
    return st.builds(Coin, value=st.integers(min_value=min_value, max_value=max_value))


def txouts(min_value: int = 0, max_value: int = 10**12) -> st.SearchStrategy[TxOut]:
    return st.builds(TxOut, address=addresses, coin=coins(min_value, max_value))


txins = st.builds(TxIn, txid=txids, index=st.integers(min_value=0, max_value=16))

selections = st.builds(
    CoinSelection,
    inputs=st.lists(st.tuples(txins, txouts()), max_size=5),
    outputs=st.lists(txouts(), max_size=5),
    change=st.lists(coins(), max_size=5),
)

# Inputs of at least 10^12 always cover up to five outputs and five change
# values of at most 10^11 each.
balanced_selections = st.builds(
    CoinSelection,
    inputs=st.lists(st.tuples(txins, txouts(10**12, 10**13)), min_size=1, max_size=5),
    outputs=st.lists(txouts(0, 10**11), max_size=5),
    change=st.lists(coins(0, 10**11), max_size=5),
)


# =============================================================================
# COMBINE
# =============================================================================


@given(selections)
def test_empty_is_two_sided_identity(x: CoinSelection) -> None:
    assert combine(empty(), x) == x
    assert combine(x, empty()) == x


@given(selections, selections, selections)
def test_combine_is_associative(a: CoinSelection, b: CoinSelection, c: CoinSelection) -> None:
    assert combine(combine(a, b), c) == combine(a, combine(b, c))


@given(selections, selections)
def test_combine_concatenates(a: CoinSelection, b: CoinSelection) -> None:
    result = combine(a, b)
    assert list(result.inputs) == list(a.inputs) + list(b.inputs)
    assert list(result.outputs) == list(a.outputs) + list(b.outputs)
    assert list(result.change) == list(a.change) + list(b.change)


# =============================================================================
# BALANCES
# =============================================================================


@given(selections, selections)
def test_balances_are_additive(a: CoinSelection, b: CoinSelection) -> None:
    result = combine(a, b)
    assert input_balance(result) == input_balance(a) + input_balance(b)
    assert output_balance(result) == output_balance(a) + output_balance(b)
    assert change_balance(result) == change_balance(a) + change_balance(b)


@given(balanced_selections)
def test_fee_identity(sel: CoinSelection) -> None:
    expected = input_balance(sel) - output_balance(sel) - change_balance(sel)
    assert fee_balance(sel) == expected
    assert fee_balance(sel) >= 0


@given(
    st.integers(min_value=MAX_COIN_VALUE // 2 + 1, max_value=MAX_COIN_VALUE),
    st.integers(min_value=MAX_COIN_VALUE // 2 + 1, max_value=MAX_COIN_VALUE),
)
def test_overflow_never_wraps(a: int, b: int) -> None:
    with pytest.raises(BalanceOverflowError):
        sum_coins([Coin(value=a), Coin(value=b)])


@given(balanced_selections, st.integers(min_value=1, max_value=10**6))
def test_underflow_is_reported(sel: CoinSelection, excess: int) -> None:
    # Push outputs plus change just past the inputs
    shortfall = input_balance(sel) - output_balance(sel) - change_balance(sel) + excess
    unbalanced = combine(sel, CoinSelection(change=[Coin(value=shortfall)]))
    with pytest.raises(FeeUnderflowError):
        fee_balance(unbalanced)
