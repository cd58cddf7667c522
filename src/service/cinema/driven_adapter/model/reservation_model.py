from datetime import datetime
from typing import List

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base
from src.service.cinema.driven_adapter.model._timestamp import utcnow


# Native text[] on PostgreSQL, JSON list elsewhere
SeatCollection = JSON().with_variant(ARRAY(String(16)), 'postgresql')


class ReservationModel(Base):
    __tablename__ = 'reservations'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True
    )
    movie_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('movies.id', ondelete='CASCADE'), nullable=False, index=True
    )
    showtime_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('showtimes.id', ondelete='CASCADE'), nullable=False, index=True
    )
    seats: Mapped[List[str]] = mapped_column(SeatCollection, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )

    def __repr__(self):
        return (
            f'<ReservationModel(id={self.id}, showtime_id={self.showtime_id}, seats={self.seats})>'
        )
