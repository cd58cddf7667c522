from datetime import datetime
from typing import List, Optional

import attrs

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger


@attrs.define
class ReservationEntity:
    user_id: int
    movie_id: int
    showtime_id: int
    seats: List[str] = attrs.field(factory=list)
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        user_id: Optional[int],
        movie_id: Optional[int],
        showtime_id: Optional[int],
        seats: Optional[List[str]],
    ) -> 'ReservationEntity':
        if not user_id:
            raise ValidationError('user_id is required')
        if not showtime_id:
            raise ValidationError('showtime_id is required')
        if not seats:
            raise ValidationError('At least one seat must be selected')

        normalized = [seat.strip().upper() for seat in seats]
        if any(not seat for seat in normalized):
            raise ValidationError('Seat labels must not be blank')
        if len(set(normalized)) != len(normalized):
            raise ValidationError('Seat labels must be unique within a reservation')

        return cls(
            user_id=user_id,
            movie_id=movie_id or 0,  # resolved from the showtime when omitted
            showtime_id=showtime_id,
            seats=normalized,
        )

    @property
    def seat_count(self) -> int:
        return len(self.seats)
