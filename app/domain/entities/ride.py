from dataclasses import dataclass


@dataclass(frozen=True)
class ActiveRide:
    customer_identity: str
    driver_identity: str
