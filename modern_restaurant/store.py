"""Reservation persistence"""

from datetime import date
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
import structlog

from modern_restaurant.database import Database
from modern_restaurant.exceptions import NotFoundError, StorageError
from modern_restaurant.models.reservation import MAX_INTEGER, Reservation, ReservationStatus

logger = structlog.get_logger()


def _check_id(reservation_id: int) -> None:
    # Identifiers start at 1 and cannot exceed the INTEGER range
    if not 1 <= reservation_id <= MAX_INTEGER:
        raise NotFoundError()


class ReservationStore:
    """
    CRUD access to the reservations table.

    One instance is built at startup and shared by all requests. Every method
    runs in its own session, so no transaction spans two operations.
    """

    def __init__(self, database: Database):
        self.database = database

    async def create(
        self,
        *,
        date: date,
        time: str,
        guests: int,
        name: str,
        email: str,
        phone: str,
        special_requests: Optional[str] = None,
    ) -> Reservation:
        reservation = Reservation(
            date=date,
            time=time,
            guests=guests,
            name=name,
            email=email,
            phone=phone,
            special_requests=special_requests or "",
            status=ReservationStatus.PENDING.value,
        )

        try:
            async with self.database.session() as db:
                db.add(reservation)
                await db.commit()
                await db.refresh(reservation)
        except (SQLAlchemyError, OverflowError) as e:
            logger.error("Database error", operation="create", error=str(e))
            raise StorageError("Error saving reservation. Please try again.") from e

        return reservation

    async def list(self) -> List[Reservation]:
        """All reservations, most recently created first"""
        query = select(Reservation).order_by(
            Reservation.created_at.desc(),
            Reservation.id.desc(),
        )

        try:
            async with self.database.session() as db:
                result = await db.execute(query)
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error", operation="list", error=str(e))
            raise StorageError("Error fetching reservations") from e

    async def get(self, reservation_id: int) -> Reservation:
        _check_id(reservation_id)

        try:
            async with self.database.session() as db:
                result = await db.execute(
                    select(Reservation).where(Reservation.id == reservation_id)
                )
                reservation = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error", operation="get", reservation_id=reservation_id, error=str(e))
            raise StorageError("Error fetching reservation") from e

        if not reservation:
            raise NotFoundError()

        return reservation

    async def update_status(self, reservation_id: int, status: ReservationStatus) -> None:
        _check_id(reservation_id)

        try:
            async with self.database.session() as db:
                result = await db.execute(
                    update(Reservation)
                    .where(Reservation.id == reservation_id)
                    .values(status=status.value)
                )
                await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error", operation="update_status", reservation_id=reservation_id, error=str(e))
            raise StorageError("Error updating reservation") from e

        if result.rowcount == 0:
            raise NotFoundError()

    async def delete(self, reservation_id: int) -> None:
        _check_id(reservation_id)

        try:
            async with self.database.session() as db:
                result = await db.execute(
                    delete(Reservation).where(Reservation.id == reservation_id)
                )
                await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error", operation="delete", reservation_id=reservation_id, error=str(e))
            raise StorageError("Error deleting reservation") from e

        if result.rowcount == 0:
            raise NotFoundError()

    async def ping(self) -> None:
        await self.database.ping()
