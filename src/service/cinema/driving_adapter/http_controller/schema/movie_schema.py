from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class MovieRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'title': 'Inception',
                'description': 'A thief who steals corporate secrets through dream-sharing.',
                'genre': 'Sci-Fi',
                'poster_image': 'https://example.com/inception.jpg',
            }
        }
    }

    title: str = Field(..., min_length=1, max_length=255)
    description: str = ''
    genre: str = Field('', max_length=100)
    poster_image: str = Field('', max_length=500)


class MovieResponse(BaseModel):
    id: int
    title: str
    description: str
    genre: str
    poster_image: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
