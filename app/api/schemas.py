from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities.booking import BookingRequest, Coordinates


class CoordinatesSchema(BaseModel):
    lat: float | None = None
    lon: float | None = None


class BookRideRequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | int | float | None = None
    phone: str | int | float | None = None
    payment_method: str | None = Field(default=None, alias="paymentMethod")
    pickup: str | int | float | None = None
    duration: int | float | str | None = None
    coordinates: CoordinatesSchema | None = None

    def to_domain(self) -> BookingRequest:
        coordinates = None
        if self.coordinates is not None:
            coordinates = Coordinates(lat=self.coordinates.lat, lon=self.coordinates.lon)
        return BookingRequest(
            name=self.name,
            phone=self.phone,
            pickup=self.pickup,
            duration=self.duration,
            payment_method=self.payment_method,
            coordinates=coordinates,
        )


class BookRideResponseSchema(BaseModel):
    success: bool
    message: str | None = None
    error: str | None = None
