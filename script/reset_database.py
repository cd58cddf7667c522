#!/usr/bin/env python3
"""
Database Reset Script
Reset the cinema database structure

Features:
1. PostgreSQL: drop & recreate the database, then run Alembic migrations
2. SQLite (DATABASE_URL override): drop and recreate all tables from the ORM metadata

Notes:
- This script only resets database structure, does not seed test data
- To seed test data, run `python -m script.seed_data`
"""

import asyncio
import os
import subprocess
import time

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url

from src.platform.config.core_setting import settings
from src.platform.constant.path import BASE_DIR
from src.platform.database.orm_db_setting import Database
import src.service.cinema.driven_adapter.model  # noqa: F401

DB_WAIT_SECONDS = 1


def _get_sync_url(async_url: str) -> str:
    """Convert async database URL to sync URL"""
    if async_url.startswith('postgresql+asyncpg://'):
        return async_url.replace('postgresql+asyncpg://', 'postgresql://')
    return async_url


def _parse_db_connection(database_url: str) -> tuple[str, str]:
    """Parse database URL and return (server_url, db_name)"""
    sync_url = _get_sync_url(database_url)
    db_name = sync_url.split('/')[-1]
    server_url = sync_url.rsplit('/', 1)[0]
    return server_url, db_name


def _drop_and_create_db(server_url: str, db_name: str) -> None:
    """Drop and recreate database"""
    admin_engine = create_engine(f'{server_url}/postgres', isolation_level='AUTOCOMMIT')

    try:
        with admin_engine.connect() as conn:
            conn.execute(
                text(
                    'SELECT pg_terminate_backend(pid) FROM pg_stat_activity '
                    'WHERE datname = :db_name AND pid <> pg_backend_pid()'
                ),
                {'db_name': db_name},
            )

            conn.execute(text(f'DROP DATABASE IF EXISTS "{db_name}"'))
            print(f"   ✅ Database '{db_name}' dropped")

            time.sleep(DB_WAIT_SECONDS)

            conn.execute(text(f'CREATE DATABASE "{db_name}"'))
            print(f"   ✅ Database '{db_name}' created")
    finally:
        admin_engine.dispose()


def _run_alembic_migrations() -> None:
    """Run Alembic migrations"""
    print("   🔄 Running 'alembic upgrade head'...")

    result = subprocess.run(
        ['alembic', 'upgrade', 'head'],
        cwd=BASE_DIR,
        capture_output=True,
        text=True,
        env=os.environ.copy(),
    )

    if result.returncode != 0:
        print(f'   ❌ Migration failed (return code: {result.returncode})')
        if result.stdout:
            print(f'   📋 STDOUT: {result.stdout}')
        if result.stderr:
            print(f'   📋 STDERR: {result.stderr}')
        raise RuntimeError(f'Alembic migration failed with return code {result.returncode}')

    print('   ✅ Database migrations completed')


async def _recreate_sqlite_tables(database_url: str) -> None:
    database = Database(database_url=database_url)
    try:
        await database.drop_tables()
        print('   ✅ Tables dropped')
        await database.create_tables()
        print('   ✅ Tables created')
    finally:
        await database.dispose()


async def reset_database() -> None:
    database_url = settings.DATABASE_URL_ASYNC
    print(f'Database URL: {make_url(database_url).render_as_string(hide_password=True)}')

    if make_url(database_url).get_backend_name() == 'sqlite':
        await _recreate_sqlite_tables(database_url)
        return

    server_url, db_name = _parse_db_connection(database_url)
    print('🗑️ Dropping database...')
    _drop_and_create_db(server_url, db_name)

    print('🏗️ Running database migrations...')
    _run_alembic_migrations()


async def main():
    print('🔄 Starting database reset...')
    print('=' * 50)

    try:
        await reset_database()
        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed test data, run: python -m script.seed_data')

    except Exception as e:
        print(f'❌ Reset failed: {e}')
        raise SystemExit(1) from e


if __name__ == '__main__':
    asyncio.run(main())
