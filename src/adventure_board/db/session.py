# src/adventure_board/db/session.py

import asyncio, aiomysql
from typing import Any, Sequence

from adventure_board.config import settings
from adventure_board.tools.logger import Logger


_LOG, _ = Logger().create(application="db")


class DB:
    """Process-wide aiomysql pool shared by every request.

    Acquisition beyond ``DB_MAX`` connections waits for a free connection;
    nothing here times out or retries a failed statement.
    """

    _pool: aiomysql.Pool | None = None
    _pool_loop: asyncio.AbstractEventLoop | None = None
    # One lock per event loop so a lock is never bound to a closed loop
    _locks: dict[asyncio.AbstractEventLoop, asyncio.Lock] = {}

    @classmethod
    def _get_lock(cls) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        if loop not in cls._locks:
            cls._locks[loop] = asyncio.Lock()
        return cls._locks[loop]

    @classmethod
    async def _create_pool(cls):
        pool = await aiomysql.create_pool(
            host=settings.DB_HOST,
            port=settings.DB_PORT,
            user=settings.DB_USER,
            password=settings.DB_PASS or "",
            db=settings.DB_NAME,
            minsize=settings.DB_MIN,
            maxsize=settings.DB_MAX,
            autocommit=True,
            charset="utf8mb4",
        )
        _LOG.info("MySQL pool created (max %s connections)", settings.DB_MAX)
        return pool

    @classmethod
    async def pool(cls) -> aiomysql.Pool:
        loop = asyncio.get_running_loop()
        if cls._pool is None or cls._pool_loop is not loop or getattr(cls._pool, "_closed", False):
            async with cls._get_lock():
                need_new = (
                    cls._pool is None
                    or cls._pool_loop is not loop
                    or getattr(cls._pool, "_closed", False)
                )
                if need_new:
                    if cls._pool is not None and not getattr(cls._pool, "_closed", False):
                        cls._pool.close()
                    cls._pool = await cls._create_pool()
                    cls._pool_loop = loop
        return cls._pool

    @classmethod
    async def fetch_one(cls, q: str, p: Sequence[Any] = ()) -> dict | None:
        pool = await cls.pool()
        async with pool.acquire() as conn, conn.cursor(aiomysql.DictCursor) as cur:
            await cur.execute(q, p)
            return await cur.fetchone()

    @classmethod
    async def fetch_all(cls, q: str, p: Sequence[Any] = ()) -> list[dict[str, Any]]:
        pool = await cls.pool()
        async with pool.acquire() as conn, conn.cursor(aiomysql.DictCursor) as cur:
            await cur.execute(q, p)
            rows = await cur.fetchall()
            return list(rows or [])

    @classmethod
    async def close(cls):
        try:
            lock = cls._get_lock()
        except RuntimeError:
            # No running loop; nothing to close against
            return
        async with lock:
            if cls._pool:
                cls._pool.close()
                await cls._pool.wait_closed()
                cls._pool = None
                cls._pool_loop = None
                _LOG.info("MySQL pool closed")
