from __future__ import annotations

from app.application.ports.ride_store import ActiveRideStorePort
from app.domain.entities.ride import ActiveRide


class SingleSlotActiveRideStore(ActiveRideStorePort):
    """Holds exactly one active ride. Every booking replaces the previous one."""

    def __init__(self) -> None:
        self._ride: ActiveRide | None = None

    def record(self, ride: ActiveRide) -> None:
        self._ride = ride

    def customer_for(self, driver_identity: str) -> str | None:
        ride = self._ride
        if ride is None or ride.driver_identity != driver_identity:
            return None
        return ride.customer_identity

    def current(self) -> ActiveRide | None:
        return self._ride


class KeyedActiveRideStore(ActiveRideStorePort):
    """One active ride per driver identity, last write wins per driver."""

    def __init__(self) -> None:
        self._rides: dict[str, ActiveRide] = {}
        self._last: ActiveRide | None = None

    def record(self, ride: ActiveRide) -> None:
        self._rides[ride.driver_identity] = ride
        self._last = ride

    def customer_for(self, driver_identity: str) -> str | None:
        ride = self._rides.get(driver_identity)
        return ride.customer_identity if ride else None

    def current(self) -> ActiveRide | None:
        return self._last
