from datetime import datetime, timezone
from typing import Optional

import attrs

from src.platform.exception.exceptions import ValidationError


def ensure_utc(value: datetime) -> datetime:
    """Naive timestamps are stored and compared as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@attrs.define
class ShowtimeEntity:
    movie_id: int
    start_time: datetime = attrs.field(converter=ensure_utc)
    capacity: int
    reserved: int = 0
    id: Optional[int] = None

    @classmethod
    def create(cls, *, movie_id: int, start_time: datetime, capacity: int) -> 'ShowtimeEntity':
        if capacity < 0:
            raise ValidationError('Capacity must not be negative')
        return cls(movie_id=movie_id, start_time=start_time, capacity=capacity, reserved=0)

    def reschedule(self, *, movie_id: int, start_time: datetime, capacity: int) -> None:
        """Admin edit; the reserved counter is left to the reservation ledger"""
        if capacity < 0:
            raise ValidationError('Capacity must not be negative')
        if capacity < self.reserved:
            raise ValidationError(
                f'Capacity {capacity} is below the {self.reserved} seats already reserved'
            )
        if movie_id != self.movie_id and self.reserved:
            raise ValidationError('Cannot move a showtime with reservations to another movie')
        self.movie_id = movie_id
        self.start_time = ensure_utc(start_time)
        self.capacity = capacity

    def has_started(self, *, now: datetime) -> bool:
        return self.start_time <= ensure_utc(now)

    @property
    def available_count(self) -> int:
        return self.capacity - self.reserved
