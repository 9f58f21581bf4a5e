"""Reservation schemas"""

from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator


class ReservationCreate(BaseModel):
    """Create reservation request, as posted by the website form.

    Every field is optional here so that missing values are reported with
    the same message as blank ones; the API performs the real checks.
    """
    date: Optional[str] = None
    time: Optional[str] = None
    guests: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    special_requests: Optional[str] = Field(default=None, alias="specialRequests")

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("guests", mode="before")
    @classmethod
    def reject_bool_guests(cls, value):
        if isinstance(value, bool):
            raise ValueError("guests must be a number")
        return value

    class Config:
        populate_by_name = True


class StatusUpdate(BaseModel):
    """Update reservation status request"""
    status: Optional[str] = None


class ReservationResponse(BaseModel):
    """Reservation response"""
    id: int
    date: date
    time: str
    guests: int
    name: str
    email: str
    phone: str
    special_requests: Optional[str]
    status: str
    created_at: datetime

    class Config:
        from_attributes = True


class ReservationCreatedResponse(BaseModel):
    """Result of a submitted reservation"""
    success: bool = True
    message: str
    reservation_id: int = Field(alias="reservationId")
    reservation: ReservationResponse

    class Config:
        populate_by_name = True


class ReservationListResponse(BaseModel):
    """All reservations, newest first"""
    success: bool = True
    reservations: List[ReservationResponse]


class ReservationDetailResponse(BaseModel):
    success: bool = True
    reservation: ReservationResponse


class MessageResponse(BaseModel):
    success: bool = True
    message: str
