"""Process-wide asyncpg pool for the profile store."""

from __future__ import annotations

import json
from typing import Optional

import asyncpg

from meetfit.settings import settings

_pool: Optional[asyncpg.pool.Pool] = None


def _dsn() -> str:
	# 127.0.0.1 avoids IPv6 resolution of localhost on some hosts
	return settings.postgres_url.replace("localhost", "127.0.0.1")


async def _init_connection(conn: asyncpg.Connection) -> None:
	# JSONB columns travel as Python dicts in both directions
	await conn.set_type_codec("jsonb", encoder=json.dumps, decoder=json.loads, schema="pg_catalog")


async def init_pool() -> asyncpg.pool.Pool:
	global _pool
	if _pool is None:
		_pool = await asyncpg.create_pool(
			dsn=_dsn(),
			min_size=settings.postgres_min_pool_size,
			max_size=settings.postgres_max_pool_size,
			ssl="require" if settings.postgres_ssl else "disable",
			init=_init_connection,
		)
	return _pool


async def get_pool() -> asyncpg.pool.Pool:
	return _pool if _pool is not None else await init_pool()


async def close_pool() -> None:
	global _pool
	pool, _pool = _pool, None
	if pool is not None:
		await pool.close()
