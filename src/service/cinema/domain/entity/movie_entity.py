from datetime import datetime
from typing import Optional

import attrs

from src.platform.exception.exceptions import ValidationError


@attrs.define
class MovieEntity:
    title: str
    description: str = ''
    genre: str = ''
    poster_image: str = ''
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        title: str,
        description: str = '',
        genre: str = '',
        poster_image: str = '',
    ) -> 'MovieEntity':
        title = title.strip()
        if not title:
            raise ValidationError('Movie title is required')
        return cls(
            title=title,
            description=description,
            genre=genre.strip(),
            poster_image=poster_image,
        )
