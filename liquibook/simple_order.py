"""A straightforward order implementation for use with an order book."""

from __future__ import annotations

import enum
import itertools
from typing import ClassVar, Iterator

from liquibook.order_tracker import OrderCondition


class OrderState(enum.Enum):
    """Life-cycle state of a ``SimpleOrder``."""

    NEW = 0
    ACCEPTED = 1
    COMPLETE = 2
    CANCELLED = 3
    REJECTED = 4


class SimpleOrder:
    """An order that records its own fills, acceptance, cancellation and replacement."""

    _ids: ClassVar[Iterator[int]] = itertools.count(1)

    def __init__(
        self,
        is_buy: bool,
        price: int,
        qty: int,
        stop_price: int = 0,
        conditions: int = OrderCondition.NO_CONDITIONS,
    ) -> None:
        self.state = OrderState.NEW
        self.is_buy = is_buy
        self.order_qty = qty
        self.price = price
        self.stop_price = stop_price
        self.conditions = OrderCondition(conditions)
        self.filled_qty = 0
        self.filled_cost = 0
        self.order_id = next(SimpleOrder._ids)

    def __repr__(self) -> str:
        side = "BUY" if self.is_buy else "SELL"
        return (
            f"SimpleOrder(#{self.order_id} {side} {self.order_qty} @ {self.price}, "
            f"state={self.state.name})"
        )

    @property
    def all_or_none(self) -> bool:
        return bool(self.conditions & OrderCondition.ALL_OR_NONE)

    @property
    def immediate_or_cancel(self) -> bool:
        return bool(self.conditions & OrderCondition.IMMEDIATE_OR_CANCEL)

    @property
    def open_qty(self) -> int:
        """Quantity not yet filled, never below zero."""
        if self.filled_qty < self.order_qty:
            return self.order_qty - self.filled_qty
        return 0

    def fill(self, fill_qty: int, fill_cost: int, fill_id: int = 0) -> None:
        """Record a fill; the order completes once nothing is left open."""
        self.filled_qty += fill_qty
        self.filled_cost += fill_cost
        if not self.open_qty:
            self.state = OrderState.COMPLETE

    def accept(self) -> None:
        """Mark a new order as accepted by the exchange."""
        if self.state is OrderState.NEW:
            self.state = OrderState.ACCEPTED

    def cancel(self) -> None:
        """Mark the order cancelled unless it has already completed."""
        if self.state is not OrderState.COMPLETE:
            self.state = OrderState.CANCELLED

    def replace(self, size_delta: int, new_price: int) -> None:
        """Apply a size change and new price to an accepted order."""
        if self.state is OrderState.ACCEPTED:
            self.order_qty += size_delta
            self.price = new_price