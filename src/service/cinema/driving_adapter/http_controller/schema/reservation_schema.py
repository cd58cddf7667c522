from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class ReserveSeatsRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {'user_id': 2, 'movie_id': 1, 'showtime_id': 1, 'seats': ['A1', 'A2']}
        }
    }

    user_id: int = Field(..., gt=0)
    movie_id: Optional[int] = Field(None, gt=0, description='Defaults to the showtime movie')
    showtime_id: int = Field(..., gt=0)
    seats: List[str] = Field(..., min_length=1)


class ReserveSeatsResponse(BaseModel):
    message: str
    reservation_id: int


class CancelReservationResponse(BaseModel):
    message: str


class ReservationResponse(BaseModel):
    id: int
    user_id: int
    movie_id: int
    showtime_id: int
    seats: List[str]
    created_at: Optional[datetime] = None


class MovieReservationSummaryResponse(BaseModel):
    movie_id: int
    title: str
    reservation_count: int
    total_seats: int


class RevenueResponse(BaseModel):
    total_seats: int
    total_revenue: int
    revenue_per_movie: Dict[str, int]
