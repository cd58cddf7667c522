#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the database

Features:
1. Create Users - the admin account plus one regular user
2. Create Movies - three movies, each with two upcoming showtimes
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from pydantic import SecretStr

from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.exception.exceptions import ConflictError
from src.service.cinema.app.command.movie_command_use_case import MovieCommandUseCase
from src.service.cinema.app.command.showtime_command_use_case import ShowtimeCommandUseCase
from src.service.cinema.app.command.user_command_use_case import UserCommandUseCase
import src.service.cinema.driven_adapter.model  # noqa: F401

DEFAULT_PASSWORD = 'P@ssw0rd'
DEFAULT_CAPACITY = 100


@dataclass
class MovieConfig:
    """Movie seed configuration"""
    title: str
    description: str
    genre: str
    poster_image: str


TEST_MOVIES = [
    MovieConfig(
        title='Inception',
        description='A thief who steals corporate secrets through dream-sharing technology.',
        genre='Sci-Fi',
        poster_image='https://example.com/posters/inception.jpg',
    ),
    MovieConfig(
        title='The Dark Knight',
        description='Batman faces the Joker, a criminal mastermind who thrives on chaos.',
        genre='Action',
        poster_image='https://example.com/posters/the_dark_knight.jpg',
    ),
    MovieConfig(
        title='Interstellar',
        description='Explorers travel through a wormhole in search of a new home for humanity.',
        genre='Sci-Fi',
        poster_image='https://example.com/posters/interstellar.jpg',
    ),
]


async def create_users() -> None:
    user_use_case = UserCommandUseCase(
        user_command_repo=container.user_command_repo(),
        user_query_repo=container.user_query_repo(),
        password_hasher=container.password_hasher(),
    )

    admin = await user_use_case.ensure_admin(
        username=settings.ADMIN_USERNAME, password=settings.ADMIN_PASSWORD
    )
    print(f'   ✅ Admin ready: ID={admin.id}, Username={admin.username}')

    try:
        user = await user_use_case.register_user(
            username='moviegoer', password=SecretStr(DEFAULT_PASSWORD)
        )
        print(f'   ✅ Created user: ID={user.id}, Username={user.username}')
    except ConflictError:
        print('   ⏭️  User moviegoer already exists')


async def create_movies_and_showtimes() -> None:
    movie_use_case = MovieCommandUseCase(uow_factory=container.unit_of_work)
    showtime_use_case = ShowtimeCommandUseCase(
        uow_factory=container.unit_of_work, layout_policy=container.seat_layout_policy()
    )
    tomorrow = (datetime.now(timezone.utc) + timedelta(days=1)).replace(
        minute=0, second=0, microsecond=0
    )

    for index, config in enumerate(TEST_MOVIES):
        try:
            movie = await movie_use_case.create_movie(
                title=config.title,
                description=config.description,
                genre=config.genre,
                poster_image=config.poster_image,
            )
        except ConflictError:
            print(f'   ⏭️  Movie {config.title!r} already exists')
            continue
        print(f'   ✅ Created movie: ID={movie.id}, Title={movie.title}')

        for hour_offset in (0, 3):
            showtime = await showtime_use_case.create_showtime(
                movie_id=movie.id or 0,
                start_time=tomorrow + timedelta(days=index, hours=hour_offset),
                capacity=DEFAULT_CAPACITY,
            )
            print(f'      🎬 Showtime ID={showtime.id} at {showtime.start_time.isoformat()}')


async def main():
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        print('👥 Creating users...')
        await create_users()
        print()

        print('🎞️  Creating movies and showtimes...')
        await create_movies_and_showtimes()
        print()

        print('=' * 50)
        print('🌱 Data seeding completed!')
        print('📋 Test accounts:')
        print(f'   Admin: {settings.ADMIN_USERNAME}')
        print(f'   User:  moviegoer / {DEFAULT_PASSWORD}')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        raise SystemExit(1) from e

    finally:
        await container.database().dispose()


if __name__ == '__main__':
    asyncio.run(main())
