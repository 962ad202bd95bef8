"""
Pytest configuration and fixtures for coin selection tests.
"""

from __future__ import annotations

import pytest

from helpers import make_txin, make_txout

from coinselection.models import Coin, CoinSelection


@pytest.fixture
def txid() -> str:
    """A valid 32-byte transaction id in hex."""
    return "ab" * 32


@pytest.fixture
def scenario_a() -> CoinSelection:
    """One 100 input, one 60 output and 30 change: fee 10."""
    return CoinSelection(
        inputs=[(make_txin(1), make_txout(100, "addr_in"))],
        outputs=[make_txout(60, "addr_out")],
        change=[Coin(value=30)],
    )


@pytest.fixture
def selection_a() -> CoinSelection:
    """1 input, 1 output, 1 change."""
    return CoinSelection(
        inputs=[(make_txin(1), make_txout(1_000))],
        outputs=[make_txout(500)],
        change=[Coin(value=400)],
    )


@pytest.fixture
def selection_b() -> CoinSelection:
    """2 inputs, 1 output, no change."""
    return CoinSelection(
        inputs=[(make_txin(2), make_txout(300)), (make_txin(3), make_txout(200))],
        outputs=[make_txout(450)],
    )
