"""Order tracking, a simple order model and order-entry helpers for a limit order book."""

__version__ = "0.1.0"
__all__ = ["entry_order", "order_tracker", "simple_order", "util"]