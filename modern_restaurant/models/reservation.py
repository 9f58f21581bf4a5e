"""Reservation model"""

import enum
from sqlalchemy import CheckConstraint, Column, Date, DateTime, Integer, String, Text, func

from modern_restaurant.database import Base


# Largest value an SQLite INTEGER column can hold
MAX_INTEGER = 2**63 - 1


class ReservationStatus(str, enum.Enum):
    """Reservation lifecycle states"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class Reservation(Base):
    """Table reservations"""
    __tablename__ = "reservations"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'confirmed', 'cancelled')",
            name="ck_reservations_status",
        ),
        # AUTOINCREMENT keeps identifiers of deleted rows from being reused
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Booking details
    date = Column(Date, nullable=False)
    time = Column(String(20), nullable=False)
    guests = Column(Integer, nullable=False)

    # Customer information
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    special_requests = Column(Text, default="")

    status = Column(
        String(20),
        nullable=False,
        default=ReservationStatus.PENDING.value,
        server_default=ReservationStatus.PENDING.value,
    )

    created_at = Column(DateTime, nullable=False, server_default=func.now(), index=True)
