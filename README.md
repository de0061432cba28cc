# liquibook

Building blocks for a limit order book. The package provides three things.
The first is per-order tracking while an order rests in a book. The second is
a simple order model that follows exchange callbacks. The third is the order
model and input helpers used by an order-entry front end.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `liquibook.order_tracker`
  - `OrderCondition` is an `IntFlag` with the members `NO_CONDITIONS`,
    `ALL_OR_NONE`, `IMMEDIATE_OR_CANCEL` and `FILL_OR_KILL`.
  - `OrderTracker` keeps an order's open and reserved quantity.
  - Its methods are `fill(qty)`, `change_qty(delta)` and `reserve(reserved)`.
    `reserve` returns the quantity still unreserved.
  - Its properties are `open_qty`, `filled_qty`, `filled`, `all_or_none` and
    `immediate_or_cancel`.
  - Filling more than the open quantity, or shrinking the order by more than
    that, raises `ValueError`.
- `liquibook.simple_order`
  - `SimpleOrder` has the states in `OrderState`: `NEW`, `ACCEPTED`,
    `COMPLETE`, `CANCELLED` and `REJECTED`.
  - `accept()` moves a new order to accepted.
  - `fill(fill_qty, fill_cost, fill_id)` adds to `filled_qty` and
    `filled_cost`. The order completes once `open_qty` reaches zero.
  - `cancel()` cancels any order that is not complete.
  - `replace(size_delta, new_price)` changes an order only while it is
    accepted.
  - Each order gets an increasing `order_id`.
- `liquibook.entry_order`
  - `Order` is a client order with an identifier and a symbol.
  - Its `on_*` event methods append `StateChange` entries to `history`:
    submitted, accepted, rejected, filled, cancel requested, cancelled,
    cancel rejected, replace requested, replaced and replace rejected.
  - `on_replaced` applies the size change and new price to the order.
  - `str(order)` gives a one-line summary that ends with the last event.
    When `verbose` is true it lists the full history instead.
  - `State` names the life-cycle states.
- `liquibook.util`
  - `split` breaks text on a set of delimiter characters.
  - `to_uint32` and `to_int32` convert text to numbers and raise `ValueError`
    if the text is ill-formed or out of range.
  - `string_to_price` treats `MARKET` or `MKT` as price 0.
  - The console prompts are `prompt_for_string`, `prompt_for_price`,
    `prompt_for_uint32`, `prompt_for_int32` and `prompt_for_yes_no`.
    `prompt_for_yes_no` asks again until it gets an answer, and raises
    `EOFError` if input ends first.
  - The trimming helpers are `ltrimmed`, `rtrimmed` and `trimmed`.

## Example

```python
from liquibook.order_tracker import OrderCondition, OrderTracker
from liquibook.simple_order import OrderState, SimpleOrder

order = SimpleOrder(True, 1250, 100, 0, OrderCondition.ALL_OR_NONE)
order.accept()
order.fill(100, 125000, 1)
assert order.state is OrderState.COMPLETE

tracker = OrderTracker(SimpleOrder(False, 1251, 200, 0, 0), 0)
tracker.fill(50)
assert tracker.open_qty == 150
assert tracker.filled_qty == 50
```

## What this package does not do

The package has no order book. It does no matching of bids against asks and
keeps no depth or best-bid/offer aggregation. There is no market of symbols
and no interactive order-entry command program. The classes here are the
pieces such a book or program would use, and the package provides none of the
book or program itself.