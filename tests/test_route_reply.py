"""
Tests for forwarding driver replies to the customer of the active ride.
"""

from __future__ import annotations

import asyncio
import logging

from app.domain.entities.booking import BookingRequest
from app.domain.entities.message import InboundCallback
from app.domain.entities.ride import ActiveRide
from app.infrastructure.store.memory_store import KeyedActiveRideStore


SENDER = "whatsapp:+14155238886"
DRIVER = "whatsapp:+919000000001"
CUSTOMER = "whatsapp:+919812345678"


def _book(make_book_ride, driver_identity: str, phone: str) -> None:
    request = BookingRequest(name="Asha", phone=phone, pickup="MG Road", duration=1)
    asyncio.run(make_book_ride(driver_identity=driver_identity).execute(request))


def test_driver_reply_is_forwarded(make_book_ride, make_route_reply, platform):
    _book(make_book_ride, DRIVER, "+919812345678")
    platform.sent.clear()

    forwarded = make_route_reply().handle(InboundCallback(from_identity=DRIVER, body="Reaching in 5 min"))

    assert forwarded is not None
    assert platform.sent == [forwarded]
    assert forwarded.from_identity == SENDER
    assert forwarded.to_identity == CUSTOMER
    assert forwarded.body == "Message from your driver: Reaching in 5 min"


def test_unknown_sender_is_ignored(make_book_ride, make_route_reply, platform):
    _book(make_book_ride, DRIVER, "+919812345678")
    platform.sent.clear()

    forwarded = make_route_reply().handle(InboundCallback(from_identity=CUSTOMER, body="hello?"))

    assert forwarded is None
    assert platform.sent == []


def test_no_active_ride_is_ignored(make_route_reply, platform):
    assert make_route_reply().handle(InboundCallback(from_identity=DRIVER, body="hi")) is None
    assert platform.attempted == []


def test_previous_driver_no_longer_matches(make_book_ride, make_route_reply, platform):
    """Only the latest booking's driver is routed."""
    _book(make_book_ride, "whatsapp:+911", "+9101")
    _book(make_book_ride, "whatsapp:+912", "+9102")
    platform.sent.clear()

    router = make_route_reply()
    assert router.handle(InboundCallback(from_identity="whatsapp:+911", body="late reply")) is None
    assert platform.sent == []

    forwarded = router.handle(InboundCallback(from_identity="whatsapp:+912", body="here"))
    assert forwarded.to_identity == "whatsapp:+9102"


def test_forward_failure_is_swallowed(make_book_ride, make_route_reply, failing_platform):
    _book(make_book_ride, DRIVER, "+919812345678")
    failing = failing_platform(CUSTOMER)

    assert make_route_reply(messaging=failing).handle(InboundCallback(from_identity=DRIVER, body="hi")) is None
    assert len(failing.attempted) == 1


def test_router_does_not_modify_active_ride(make_book_ride, make_route_reply, store):
    _book(make_book_ride, DRIVER, "+919812345678")
    before = store.current()

    make_route_reply().handle(InboundCallback(from_identity=DRIVER, body="hi"))
    make_route_reply().handle(InboundCallback(from_identity="whatsapp:+1", body="hi"))

    assert store.current() is before


def test_keyed_store_keeps_one_ride_per_driver():
    store = KeyedActiveRideStore()
    store.record(ActiveRide(customer_identity="c1", driver_identity="d1"))
    store.record(ActiveRide(customer_identity="c2", driver_identity="d2"))
    store.record(ActiveRide(customer_identity="c3", driver_identity="d1"))

    assert store.customer_for("d1") == "c3"
    assert store.customer_for("d2") == "c2"
    assert store.customer_for("d3") is None
    assert store.current() == ActiveRide(customer_identity="c3", driver_identity="d1")


def test_ignored_reply_logs_why(make_book_ride, make_route_reply, caplog):
    router = make_route_reply()

    with caplog.at_level(logging.INFO, logger="app.application.use_cases.route_reply"):
        router.handle(InboundCallback(from_identity=DRIVER, body="hi"))
        _book(make_book_ride, DRIVER, "+919812345678")
        router.handle(InboundCallback(from_identity="whatsapp:+15550000000", body="hi"))

    reasons = [
        record.reason
        for record in caplog.records
        if record.name == "app.application.use_cases.route_reply" and hasattr(record, "reason")
    ]
    assert reasons == ["no_active_ride", "sender_not_active_driver"]
