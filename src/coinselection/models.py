"""
Core data models using Pydantic for validation and serialization.

Coin, TxIn and TxOut are the ledger primitives a selection is made of;
CoinSelection is the result an external selection algorithm produces.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field

from coinselection.constants import MAX_COIN_VALUE, MAX_OUTPUT_INDEX


class Coin(BaseModel):
    """An indivisible amount of lovelace, bounded to the unsigned 64-bit range."""

    value: int = Field(..., ge=0, le=MAX_COIN_VALUE)

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return str(self.value)


class TxIn(BaseModel):
    """Reference to a previous transaction output."""

    txid: str = Field(..., pattern=r"^[0-9a-fA-F]{64}$")
    index: int = Field(..., ge=0, le=MAX_OUTPUT_INDEX)

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.txid}:{self.index}"


class TxOut(BaseModel):
    address: str = Field(..., min_length=1)
    coin: Coin

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return f"{self.coin} @ {self.address}"


class CoinSelection(BaseModel):
    """
    Result of a coin selection.

    Holds the picked inputs (each with the output it spends), the payment
    outputs and the resulting change. Values are immutable: refining a
    selection means combining it with another one into a new value.

    Duplicates are representable. Whether the inputs are distinct is for the
    selection algorithm or the backend validator to decide.
    """

    inputs: tuple[tuple[TxIn, TxOut], ...] = ()
    outputs: tuple[TxOut, ...] = ()
    change: tuple[Coin, ...] = ()

    model_config = {"frozen": True}

    @classmethod
    def empty(cls) -> CoinSelection:
        """Selection with no inputs, outputs or change."""
        return cls()

    def __str__(self) -> str:
        return render_selection(self)


def empty() -> CoinSelection:
    return CoinSelection.empty()


def combine(a: CoinSelection, b: CoinSelection) -> CoinSelection:
    """
    Concatenate two selections field by field, ``a`` first.

    Selections are assumed to be built from independent elements, so no
    deduplication happens: combining overlapping selections yields a
    selection that spends the same input twice.

    Args:
        a: Left operand, its elements come first
        b: Right operand

    Returns:
        New CoinSelection; neither operand is modified
    """
    return CoinSelection(
        inputs=a.inputs + b.inputs,
        outputs=a.outputs + b.outputs,
        change=a.change + b.change,
    )


def combine_all(selections: Iterable[CoinSelection]) -> CoinSelection:
    """Fold selections together left to right, starting from the empty one."""
    result = empty()
    for selection in selections:
        result = combine(result, selection)
    return result


def _format_block(name: str, items: list[str]) -> list[str]:
    if not items:
        return [f"{name}: []"]
    return [f"{name}:"] + [f"  - {item}" for item in items]


def render_selection(selection: CoinSelection) -> str:
    """
    Render a selection for logs and debugging.

    Not meant to be parsed back; use model_dump_json() for that.
    """
    lines = _format_block("inputs", [f"{txin} (~ {txout})" for txin, txout in selection.inputs])
    lines += _format_block("outputs", [str(txout) for txout in selection.outputs])
    lines.append(f"change: [{', '.join(str(c) for c in selection.change)}]")
    return "\n".join(lines)
