"""Pydantic schemas for request/response validation"""

from modern_restaurant.schemas.reservation import (
    ReservationCreate,
    StatusUpdate,
    ReservationResponse,
    ReservationCreatedResponse,
    ReservationListResponse,
    ReservationDetailResponse,
    MessageResponse,
)

__all__ = [
    "ReservationCreate",
    "StatusUpdate",
    "ReservationResponse",
    "ReservationCreatedResponse",
    "ReservationListResponse",
    "ReservationDetailResponse",
    "MessageResponse",
]
