"""Reservation API endpoints"""

import re
from datetime import date

from fastapi import APIRouter, Depends, Request
import structlog

from modern_restaurant.exceptions import ValidationError
from modern_restaurant.models.reservation import MAX_INTEGER, ReservationStatus
from modern_restaurant.schemas.reservation import (
    ReservationCreate,
    StatusUpdate,
    ReservationCreatedResponse,
    ReservationListResponse,
    ReservationDetailResponse,
    MessageResponse,
)
from modern_restaurant.store import ReservationStore

router = APIRouter()
logger = structlog.get_logger()

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_FIELDS = ("date", "time", "guests", "name", "email", "phone")


def get_store(request: Request) -> ReservationStore:
    """Store built by the application lifespan"""
    return request.app.state.store


def today() -> date:
    return date.today()


def validate_reservation(data: ReservationCreate) -> date:
    """
    Check a reservation request in order: required fields, email, date.
    Returns the parsed reservation date.
    """
    # A guest count of 0 is reported like an empty field
    if any(getattr(data, field) is None for field in REQUIRED_FIELDS) or data.guests == 0:
        raise ValidationError("All required fields must be filled")

    if not EMAIL_PATTERN.match(data.email):
        raise ValidationError("Invalid email address")

    try:
        reservation_date = date.fromisoformat(data.date)
    except ValueError:
        raise ValidationError("Invalid reservation date")

    # Compared by calendar day, so today is still bookable
    if reservation_date < today():
        raise ValidationError("Reservation date must be in the future")

    if data.guests < 1:
        raise ValidationError("Number of guests must be a positive integer")

    if data.guests > MAX_INTEGER:
        raise ValidationError("Number of guests is too large")

    return reservation_date


def parse_status(value) -> ReservationStatus:
    try:
        return ReservationStatus(value)
    except ValueError:
        raise ValidationError("Invalid status. Must be: pending, confirmed, or cancelled")


@router.post("", response_model=ReservationCreatedResponse)
async def create_reservation(
    reservation_data: ReservationCreate,
    store: ReservationStore = Depends(get_store),
):
    """Submit a new reservation request"""
    try:
        reservation_date = validate_reservation(reservation_data)
    except ValidationError as e:
        logger.info("Reservation rejected", reason=e.message)
        raise

    reservation = await store.create(
        date=reservation_date,
        time=reservation_data.time,
        guests=reservation_data.guests,
        name=reservation_data.name,
        email=reservation_data.email,
        phone=reservation_data.phone,
        special_requests=reservation_data.special_requests,
    )

    logger.info(
        "Reservation created",
        reservation_id=reservation.id,
        date=str(reservation.date),
        guests=reservation.guests,
    )

    return ReservationCreatedResponse(
        message="Reservation submitted successfully! We will contact you shortly to confirm.",
        reservation_id=reservation.id,
        reservation=reservation,
    )


@router.get("", response_model=ReservationListResponse)
async def list_reservations(
    store: ReservationStore = Depends(get_store),
):
    """List all reservations, newest first"""
    reservations = await store.list()
    return ReservationListResponse(reservations=reservations)


@router.get("/{reservation_id}", response_model=ReservationDetailResponse)
async def get_reservation(
    reservation_id: int,
    store: ReservationStore = Depends(get_store),
):
    """Get reservation details"""
    reservation = await store.get(reservation_id)
    return ReservationDetailResponse(reservation=reservation)


@router.patch("/{reservation_id}/status", response_model=MessageResponse)
async def update_reservation_status(
    reservation_id: int,
    status_data: StatusUpdate,
    store: ReservationStore = Depends(get_store),
):
    """Confirm, cancel or reopen a reservation"""
    status = parse_status(status_data.status)

    await store.update_status(reservation_id, status)
    logger.info("Reservation status updated", reservation_id=reservation_id, status=status.value)

    return MessageResponse(message="Reservation status updated successfully")


@router.delete("/{reservation_id}", response_model=MessageResponse)
async def delete_reservation(
    reservation_id: int,
    store: ReservationStore = Depends(get_store),
):
    """Permanently remove a reservation"""
    await store.delete(reservation_id)
    logger.info("Reservation deleted", reservation_id=reservation_id)

    return MessageResponse(message="Reservation deleted successfully")
