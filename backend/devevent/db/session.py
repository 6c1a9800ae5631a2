"""
Request-scoped database sessions.
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from devevent.db.connection import ConnectionCache


def get_connection_cache(request: Request) -> ConnectionCache:
    return request.app.state.connections


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session bound to the cached engine; commit on success, roll back on error."""
    engine = await get_connection_cache(request).get_connection()
    async with AsyncSession(engine, expire_on_commit=False) as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
