from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class ShowtimeModel(Base):
    __tablename__ = 'showtimes'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    movie_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('movies.id', ondelete='CASCADE'), nullable=False, index=True
    )
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    reserved: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    __table_args__ = (
        CheckConstraint('capacity >= 0', name='ck_showtime_capacity_non_negative'),
        CheckConstraint(
            'reserved >= 0 AND reserved <= capacity', name='ck_showtime_reserved_within_capacity'
        ),
    )

    def __repr__(self):
        return (
            f'<ShowtimeModel(id={self.id}, movie_id={self.movie_id}, '
            f'capacity={self.capacity}, reserved={self.reserved})>'
        )
