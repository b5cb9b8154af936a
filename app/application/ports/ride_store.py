from abc import ABC, abstractmethod

from app.domain.entities.ride import ActiveRide


class ActiveRideStorePort(ABC):
    @abstractmethod
    def record(self, ride: ActiveRide) -> None:
        raise NotImplementedError

    @abstractmethod
    def customer_for(self, driver_identity: str) -> str | None:
        """
        Resolve the customer a driver's reply should be forwarded to.
        Returns None when the driver has no active ride.
        """
        raise NotImplementedError

    @abstractmethod
    def current(self) -> ActiveRide | None:
        raise NotImplementedError
