import pytest

from liquibook.entry_order import Order, State, StateChange


def make_order(**overrides):
    args = dict(
        order_id="7",
        is_buy=True,
        quantity=100,
        symbol="IBM",
        price=50,
        stop_price=0,
        all_or_none=False,
        immediate_or_cancel=False,
    )
    args.update(overrides)
    return Order(**args)


def test_is_limit():
    assert make_order(price=50).is_limit is True
    assert make_order(price=0).is_limit is False


def test_current_state_without_history_is_unknown():
    order = make_order()
    assert order.current_state.state is State.UNKNOWN
    assert str(order.current_state) == "{Unknown }"


def test_submitted_market_description():
    order = make_order(price=0)
    order.on_submitted()
    assert order.current_state.state is State.SUBMITTED
    assert order.current_state.description == "BUY 100 IBM @MKT"


def test_submitted_limit_sell_description():
    order = make_order(is_buy=False, quantity=100, price=50)
    order.on_submitted()
    assert order.current_state.description == "SELL 100 IBM @50"


def test_accepted_puts_quantity_on_market():
    order = make_order()
    order.on_submitted()
    order.on_accepted()
    assert order.quantity_on_market == order.order_qty
    assert [e.state for e in order.history] == [State.SUBMITTED, State.ACCEPTED]


def test_filled_updates_market_and_cost():
    order = make_order()
    order.on_accepted()
    order.on_filled(40, 2000)
    order.on_filled(60, 3000)
    assert order.quantity_on_market == 0
    assert order.fill_cost == 5000
    assert order.current_state.state is State.FILLED
    assert order.current_state.description == "60 for 3000"


def test_cancel_flow():
    order = make_order()
    order.on_accepted()
    order.on_cancel_requested()
    assert order.current_state.state is State.CANCEL_REQUESTED
    order.on_cancelled()
    assert order.quantity_on_market == 0
    assert order.current_state.state is State.CANCELLED


def test_rejections_keep_reason():
    order = make_order()
    order.on_rejected("bad symbol")
    assert order.current_state == StateChange(State.REJECTED, "bad symbol")
    order.on_cancel_rejected("not found")
    assert order.current_state == StateChange(State.CANCEL_REJECTED, "not found")
    order.on_replace_rejected("too late")
    assert order.current_state == StateChange(State.MODIFY_REJECTED, "too late")


def test_replace_requested_does_not_change_order():
    order = make_order()
    order.on_accepted()
    order.on_replace_requested(-20, 55)
    assert order.order_qty == 100
    assert order.price == 50
    assert order.current_state.description == "Quantity change: -20 New Price 55"


def test_replace_requested_price_only():
    order = make_order()
    order.on_replace_requested(0, 55)
    assert order.current_state.description == "New Price 55"


def test_replaced_applies_changes():
    order = make_order()
    order.on_accepted()
    order.on_replaced(-20, 55)
    assert order.order_qty == 80
    assert order.quantity_on_market == 80
    assert order.price == 55
    assert order.current_state.state is State.MODIFIED


def test_replaced_with_unchanged_values():
    order = make_order()
    order.on_accepted()
    order.on_replaced(0, 0)
    assert order.order_qty == 100
    assert order.price == 50
    assert order.current_state.description == ""


def test_str_brief():
    order = make_order()
    order.on_submitted()
    order.on_accepted()
    assert str(order) == "[#7 BUY 100 IBM $50 Open: 100 Last Event:{Accepted }]"


def test_str_flags_and_stop():
    order = make_order(price=0, stop_price=45, all_or_none=True, immediate_or_cancel=True)
    text = str(order)
    assert " MKT" in text
    assert " STOP 45" in text
    assert " AON IOC" in text
    assert text.endswith("]")


def test_str_verbose_lists_history():
    order = make_order()
    order.on_submitted()
    order.on_accepted()
    order.on_filled(10, 500)
    order.verbose = True
    text = str(order)
    assert text.count("\n\t") == len(order.history)
    assert "Last Event" not in text
    for event in order.history:
        assert f"\n\t{event}" in text