"""Book-side tracking of an order's open quantity and conditions."""

from __future__ import annotations

import enum
from typing import Any


class OrderCondition(enum.IntFlag):
    """Bit flags describing how an order may be matched."""

    NO_CONDITIONS = 0
    ALL_OR_NONE = 1
    IMMEDIATE_OR_CANCEL = 2
    FILL_OR_KILL = ALL_OR_NONE | IMMEDIATE_OR_CANCEL


class OrderTracker:
    """State of an order held inside an order book, kept apart from the order."""

    def __init__(self, order: Any, conditions: int = OrderCondition.NO_CONDITIONS) -> None:
        self.order = order
        self._open_qty = order.order_qty
        self._reserved = 0
        self.conditions = OrderCondition(conditions)

    def __repr__(self) -> str:
        return (
            f"OrderTracker(order={self.order!r}, open_qty={self.open_qty}, "
            f"conditions={self.conditions!r})"
        )

    def reserve(self, reserved: int) -> int:
        """Add to the reserved quantity; return what remains unreserved."""
        self._reserved += reserved
        return self._open_qty - self._reserved

    def change_qty(self, delta: int) -> None:
        """Change the open quantity by ``delta``."""
        if delta < 0 and self._open_qty < abs(delta):
            raise ValueError("Replace size reduction larger than open quantity")
        self._open_qty += delta

    def fill(self, qty: int) -> None:
        """Record a fill of ``qty`` units."""
        if qty > self._open_qty:
            raise ValueError("Fill size larger than open quantity")
        self._open_qty -= qty

    @property
    def filled(self) -> bool:
        """True when no open quantity remains."""
        return self._open_qty == 0

    @property
    def filled_qty(self) -> int:
        """Total quantity filled so far."""
        return self.order.order_qty - self.open_qty

    @property
    def open_qty(self) -> int:
        """Open quantity not held in reserve."""
        return self._open_qty - self._reserved

    @property
    def all_or_none(self) -> bool:
        return bool(self.conditions & OrderCondition.ALL_OR_NONE)

    @property
    def immediate_or_cancel(self) -> bool:
        return bool(self.conditions & OrderCondition.IMMEDIATE_OR_CANCEL)