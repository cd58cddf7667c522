from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class ReservationSeatModel(Base):
    """
    One row per booked seat, derived from reservations.seats.

    The (showtime_id, seat_label) primary key rejects a second booking of
    the same seat even if two transactions pass the overlap check together.
    """

    __tablename__ = 'reservation_seats'

    showtime_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('showtimes.id', ondelete='CASCADE'), primary_key=True
    )
    seat_label: Mapped[str] = mapped_column(String(16), primary_key=True)
    reservation_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('reservations.id', ondelete='CASCADE'), nullable=False, index=True
    )

    def __repr__(self):
        return (
            f'<ReservationSeatModel(showtime_id={self.showtime_id}, '
            f'seat_label={self.seat_label}, reservation_id={self.reservation_id})>'
        )
