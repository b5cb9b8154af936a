from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.booking import BookingRequest, Coordinates, PaymentMethod


DRIVER_REPLY_LABEL = "Message from your driver: "
MAP_LINK_BASE = "https://www.google.com/maps?q="


@dataclass(frozen=True)
class BookingMessages:
    customer: str
    driver: str


class MessageComposer:
    def __init__(
        self,
        business_name: str,
        payee_id: str,
        payment_scheme: str = "upi",
        currency_code: str = "INR",
    ) -> None:
        self._business_name = business_name
        self._payee_id = payee_id
        self._payment_scheme = payment_scheme
        self._currency_code = currency_code

    def payment_link(self) -> str:
        return (
            f"{self._payment_scheme}://pay?pa={self._payee_id}"
            f"&pn={self._business_name}&cu={self._currency_code}"
        )

    def compose_booking(self, request: BookingRequest) -> BookingMessages:
        return BookingMessages(
            customer=self.customer_message(request),
            driver=self.driver_message(request),
        )

    def customer_message(self, request: BookingRequest) -> str:
        summary = _booking_summary(request)
        if request.payment is PaymentMethod.online:
            body = f"""
Dear {request.name},

Your {self._business_name} booking has been confirmed. Please review the details below.

{summary}

To finalize your ride, please complete the payment using the link below or by entering the UPI ID in your payment app.
UPI Link: {self.payment_link()}
UPI ID: {self._payee_id}

A driver will be assigned to you shortly. Thank you for choosing {self._business_name}.
"""
        else:
            body = f"""
Dear {request.name},

Your {self._business_name} booking has been confirmed. Please review the details below.

{summary}

Payment Method: Pay with Cash
Please have the payment ready for your driver upon trip completion.

A driver is being assigned and will arrive at your location shortly. Thank you for choosing {self._business_name}.
"""
        return body.strip()

    def driver_message(self, request: BookingRequest) -> str:
        lines = [
            f"New {self._business_name} booking!",
            "",
            f"Customer: {request.name}",
            f"Phone: +{str(request.phone).lstrip('+')}",
            f"Pickup Location: {request.pickup}",
            f"Duration: {format_duration(request.duration)}",
        ]
        map_line = map_link_line(request.coordinates)
        if map_line:
            lines.append(map_line)
        return "\n".join(lines)


def forwarded_reply(text: str) -> str:
    return f"{DRIVER_REPLY_LABEL}{text}"


def format_duration(duration: int | float | str | None) -> str:
    """Render a duration in hours: "1hr" for exactly the number 1, "<N>hrs" otherwise."""
    if _is_number(duration) and duration == 1:
        return "1hr"
    return f"{_format_value(duration)}hrs"


def map_link_line(coordinates: Coordinates | None) -> str | None:
    if coordinates is None or not coordinates.is_complete:
        return None
    lat = _format_value(coordinates.lat)
    lon = _format_value(coordinates.lon)
    return f"Map: {MAP_LINK_BASE}{lat},{lon}"


def _booking_summary(request: BookingRequest) -> str:
    return (
        "Booking Summary:\n"
        f"- Pickup Location: {request.pickup}\n"
        f"- Duration: {format_duration(request.duration)}"
    )


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_value(value: object) -> str:
    # 2.0 -> "2", 1.5 -> "1.5"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
