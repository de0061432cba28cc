"""Orders as seen by an order-entry client, with a record of their life cycle."""

from __future__ import annotations

import enum
from dataclasses import dataclass

SIZE_UNCHANGED = 0
PRICE_UNCHANGED = 0


class State(enum.Enum):
    """Life-cycle states an order passes through."""

    SUBMITTED = "Submitted"
    REJECTED = "Rejected"
    ACCEPTED = "Accepted"
    MODIFY_REQUESTED = "ModifyRequested"
    MODIFY_REJECTED = "ModifyRejected"
    MODIFIED = "Modified"
    PARTIAL_FILLED = "PartialFilled"
    FILLED = "Filled"
    CANCEL_REQUESTED = "CancelRequested"
    CANCEL_REJECTED = "CancelRejected"
    CANCELLED = "Cancelled"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class StateChange:
    """One entry in an order's history."""

    state: State = State.UNKNOWN
    description: str = ""

    def __str__(self) -> str:
        return f"{{{self.state.value} {self.description}}}"


class Order:
    """A client order that records every event reported for it."""

    def __init__(
        self,
        order_id: str,
        is_buy: bool,
        quantity: int,
        symbol: str,
        price: int,
        stop_price: int = 0,
        all_or_none: bool = False,
        immediate_or_cancel: bool = False,
    ) -> None:
        self.order_id = order_id
        self.is_buy = is_buy
        self.order_qty = quantity
        self.symbol = symbol
        self.price = price
        self.stop_price = stop_price
        self.all_or_none = all_or_none
        self.immediate_or_cancel = immediate_or_cancel
        self.quantity_filled = 0
        self.quantity_on_market = 0
        self.fill_cost = 0
        self.verbose = False
        self.history: list[StateChange] = []

    @property
    def is_limit(self) -> bool:
        """True unless this is a market order (price zero)."""
        return self.price != 0

    @property
    def current_state(self) -> StateChange:
        """The latest history entry, or an ``Unknown`` entry if there is none."""
        return self.history[-1] if self.history else StateChange()

    def _record(self, state: State, description: str = "") -> None:
        self.history.append(StateChange(state, description))

    def on_submitted(self) -> None:
        side = "BUY" if self.is_buy else "SELL"
        where = "MKT" if self.price == 0 else str(self.price)
        self._record(State.SUBMITTED, f"{side} {self.order_qty} {self.symbol} @{where}")

    def on_accepted(self) -> None:
        self.quantity_on_market = self.order_qty
        self._record(State.ACCEPTED)

    def on_rejected(self, reason: str) -> None:
        self._record(State.REJECTED, reason)

    def on_filled(self, fill_qty: int, fill_cost: int) -> None:
        self.quantity_on_market -= fill_qty
        self.fill_cost += fill_cost
        self._record(State.FILLED, f"{fill_qty} for {fill_cost}")

    def on_cancel_requested(self) -> None:
        self._record(State.CANCEL_REQUESTED)

    def on_cancelled(self) -> None:
        self.quantity_on_market = 0
        self._record(State.CANCELLED)

    def on_cancel_rejected(self, reason: str) -> None:
        self._record(State.CANCEL_REJECTED, reason)

    @staticmethod
    def _change_text(size_delta: int, new_price: int) -> str:
        text = ""
        if size_delta != SIZE_UNCHANGED:
            text += f"Quantity change: {size_delta} "
        if new_price != PRICE_UNCHANGED:
            text += f"New Price {new_price}"
        return text

    def on_replace_requested(self, size_delta: int, new_price: int) -> None:
        self._record(State.MODIFY_REQUESTED, self._change_text(size_delta, new_price))

    def on_replaced(self, size_delta: int, new_price: int) -> None:
        if size_delta != SIZE_UNCHANGED:
            self.order_qty += size_delta
            self.quantity_on_market += size_delta
        if new_price != PRICE_UNCHANGED:
            self.price = new_price
        self._record(State.MODIFIED, self._change_text(size_delta, new_price))

    def on_replace_rejected(self, reason: str) -> None:
        self._record(State.MODIFY_REJECTED, reason)

    def __str__(self) -> str:
        parts = [
            f"[#{self.order_id}",
            f" {'BUY' if self.is_buy else 'SELL'}",
            f" {self.order_qty}",
            f" {self.symbol}",
            " MKT" if self.price == 0 else f" ${self.price}",
        ]
        if self.stop_price != 0:
            parts.append(f" STOP {self.stop_price}")
        if self.all_or_none:
            parts.append(" AON")
        if self.immediate_or_cancel:
            parts.append(" IOC")
        if self.quantity_on_market != 0:
            parts.append(f" Open: {self.quantity_on_market}")
        if self.quantity_filled != 0:
            parts.append(f" Filled: {self.quantity_filled}")
        if self.fill_cost != 0:
            parts.append(f" Cost: {self.fill_cost}")
        if self.verbose:
            parts.extend(f"\n\t{event}" for event in self.history)
        else:
            parts.append(f" Last Event:{self.current_state}")
        parts.append("]")
        return "".join(parts)