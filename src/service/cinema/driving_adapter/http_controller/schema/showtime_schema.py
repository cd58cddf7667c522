from datetime import datetime

from pydantic import BaseModel, Field


class ShowtimeRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'movie_id': 1,
                'start_time': '2030-01-01T19:30:00Z',
                'capacity': 100,
            }
        }
    }

    movie_id: int = Field(..., gt=0)
    start_time: datetime
    capacity: int = Field(..., ge=0)


class ShowtimeResponse(BaseModel):
    id: int
    movie_id: int
    start_time: datetime
    capacity: int
    reserved: int
    available: int
