import logging

import pytest

from app.donation.widget import (
    BUTTON_STYLE,
    DEFAULT_CONTAINER,
    RETRY_MESSAGE,
    DonationWidget,
    parse_amount,
)


class FakeOrder:
    def __init__(self, given_name: str = "Jane"):
        self.created: list[dict] = []
        self.captures = 0
        self._given_name = given_name

    async def create(self, order: dict) -> str:
        self.created.append(order)
        return "ORDER-1"

    async def capture(self) -> dict:
        self.captures += 1
        return {"id": "ORDER-1", "status": "COMPLETED", "payer": {"name": {"given_name": self._given_name, "surname": "Doe"}}}


class FakeActions:
    def __init__(self, order: FakeOrder):
        self.order = order


@pytest.fixture
def messages():
    return []


@pytest.fixture
def widget(messages):
    return DonationWidget(notify=messages.append)


def _ordered_value(order: FakeOrder) -> str:
    (request,) = order.created
    (unit,) = request["purchase_units"]
    return unit["amount"]["value"]


@pytest.mark.asyncio
async def test_default_amount_is_ten(widget):
    order = FakeOrder()
    assert await widget.create_order({}, FakeActions(order)) == "ORDER-1"
    assert _ordered_value(order) == "10.00"


@pytest.mark.asyncio
async def test_typed_amount_is_sent_with_two_decimals(widget):
    order = FakeOrder()
    widget.on_amount_input("25")
    await widget.create_order({}, FakeActions(order))
    assert _ordered_value(order) == "25.00"


@pytest.mark.asyncio
async def test_cleared_field_sends_zero(widget):
    order = FakeOrder()
    widget.on_amount_input("25")
    widget.on_amount_input("")
    await widget.create_order({}, FakeActions(order))
    assert _ordered_value(order) == "0.00"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12.345", "12.345"),
        ("7.5 dollars", "7.5"),
        ("abc", "0"),
        (".5", "0.5"),
        ("-5", "-5"),
        (None, "0"),
    ],
)
def test_parse_amount_reads_leading_number(raw, expected):
    assert str(parse_amount(raw)) == expected


@pytest.mark.asyncio
async def test_amount_rounds_half_up(widget):
    order = FakeOrder()
    widget.on_amount_input("12.345")
    await widget.create_order({}, FakeActions(order))
    assert _ordered_value(order) == "12.35"


@pytest.mark.asyncio
async def test_approve_captures_and_thanks_payer(widget, messages):
    order = FakeOrder(given_name="Jane")
    actions = FakeActions(order)
    widget.on_amount_input("25")
    await widget.create_order({}, actions)

    # editing the field after the order exists does not change what was charged
    widget.on_amount_input("99")
    await widget.on_approve({"orderID": "ORDER-1"}, actions)

    assert order.captures == 1
    assert messages == ["Thank you, Jane! Your donation of $25.00 has been received."]


def test_error_is_logged_and_user_told_to_retry(widget, messages, caplog):
    with caplog.at_level(logging.ERROR, logger="app.donation.widget"):
        widget.on_error(RuntimeError("card declined"))

    assert messages == [RETRY_MESSAGE]
    assert "card declined" in caplog.text


def test_render_mounts_buttons_in_container(widget):
    seen = {}

    class FakeButtons:
        def __init__(self, config):
            seen["config"] = config

        def render(self, container):
            seen["container"] = container
            return "rendered"

    assert widget.render(FakeButtons) == "rendered"
    assert seen["container"] == DEFAULT_CONTAINER
    assert seen["config"]["style"] == BUTTON_STYLE
    assert seen["config"]["createOrder"] == widget.create_order
    assert seen["config"]["onApprove"] == widget.on_approve
    assert seen["config"]["onError"] == widget.on_error
