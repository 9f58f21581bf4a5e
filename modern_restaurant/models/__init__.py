"""Database models"""

from modern_restaurant.models.reservation import Reservation, ReservationStatus

__all__ = [
    "Reservation",
    "ReservationStatus",
]
