"""
Builders for ledger values used across the tests.
"""

from __future__ import annotations

from coinselection.models import Coin, TxIn, TxOut


def make_txin(n: int, index: int = 0) -> TxIn:
    return TxIn(txid=f"{n:064x}", index=index)


def make_txout(value: int, address: str = "addr_test1") -> TxOut:
    return TxOut(address=address, coin=Coin(value=value))
