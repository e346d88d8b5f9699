"""Domain errors raised by the store and the booking service.

Each error carries the HTTP status it maps to; the application converts
them into ``{"success": false, "error": ...}`` responses.
"""


class ParkingError(Exception):
    """Base class for all booking-domain errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def public_message(self) -> str:
        """Text that is safe to return to the client."""
        return self.message


class ValidationError(ParkingError):
    """Missing or malformed request fields."""

    status_code = 400


class NotFoundError(ParkingError):
    """Unknown slot or booking."""

    status_code = 404


class ConflictError(ParkingError):
    """Slot is not in a state that allows the operation."""

    status_code = 409


class StoreError(ParkingError):
    """Underlying persistence failure."""

    status_code = 500

    @property
    def public_message(self) -> str:
        return "Database error"


class BookingIdCollisionError(StoreError):
    """Generated booking id already exists; the request can be retried."""

    status_code = 503

    @property
    def public_message(self) -> str:
        return "Booking could not be created, please retry"
