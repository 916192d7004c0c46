"""Storage contracts for profiles: asyncpg-backed and in-memory."""

from __future__ import annotations

import copy
from itertools import count
from typing import Any, Dict, List, Mapping, Optional, Protocol

from meetfit.domain.profiles.models import Profile
from meetfit.infra.postgres import get_pool


class ProfileRepository(Protocol):
	"""Persistence collaborator used by the profile service."""

	async def save(self, profile: Profile) -> Profile:
		"""Overwrite the record with the same id; otherwise insert under a new id."""

	async def find_all(self) -> List[Profile]:
		"""Return every record ordered by id."""

	async def find_one(self, profile_id: int) -> Optional[Profile]:
		"""Return the record with ``profile_id`` or None."""

	async def delete(self, profile_id: int) -> None:
		"""Remove the record if present."""


def _row_to_profile(row: Mapping[str, Any]) -> Profile:
	return Profile(id=int(row["id"]), attributes=dict(row["attributes"] or {}))


class PostgresProfileRepository:
	"""Thin data-access layer around asyncpg."""

	async def save(self, profile: Profile) -> Profile:
		pool = await get_pool()
		attributes = profile.attributes
		async with pool.acquire() as conn:
			row = None
			if profile.id is not None:
				row = await conn.fetchrow(
					"""
					UPDATE profile
					SET attributes = $2::jsonb, updated_at = NOW()
					WHERE id = $1
					RETURNING id, attributes
					""",
					profile.id,
					attributes,
				)
			# Unknown ids are never inserted verbatim; the sequence stays the only id source
			if row is None:
				row = await conn.fetchrow(
					"""
					INSERT INTO profile (attributes)
					VALUES ($1::jsonb)
					RETURNING id, attributes
					""",
					attributes,
				)
		return _row_to_profile(row)

	async def find_all(self) -> List[Profile]:
		pool = await get_pool()
		async with pool.acquire() as conn:
			rows = await conn.fetch("SELECT id, attributes FROM profile ORDER BY id ASC")
		return [_row_to_profile(row) for row in rows]

	async def find_one(self, profile_id: int) -> Optional[Profile]:
		pool = await get_pool()
		async with pool.acquire() as conn:
			row = await conn.fetchrow("SELECT id, attributes FROM profile WHERE id = $1", profile_id)
		return _row_to_profile(row) if row else None

	async def delete(self, profile_id: int) -> None:
		pool = await get_pool()
		async with pool.acquire() as conn:
			await conn.execute("DELETE FROM profile WHERE id = $1", profile_id)


class InMemoryProfileRepository:
	"""Process-local store used for development and tests."""

	def __init__(self) -> None:
		self._items: Dict[int, Dict[str, Any]] = {}
		self._ids = count(1)

	async def save(self, profile: Profile) -> Profile:
		profile_id = profile.id
		if profile_id is None or profile_id not in self._items:
			profile_id = next(self._ids)
		self._items[profile_id] = copy.deepcopy(profile.attributes)
		return Profile(id=profile_id, attributes=copy.deepcopy(profile.attributes))

	async def find_all(self) -> List[Profile]:
		return [
			Profile(id=profile_id, attributes=copy.deepcopy(attributes))
			for profile_id, attributes in sorted(self._items.items())
		]

	async def find_one(self, profile_id: int) -> Optional[Profile]:
		attributes = self._items.get(profile_id)
		if attributes is None:
			return None
		return Profile(id=profile_id, attributes=copy.deepcopy(attributes))

	async def delete(self, profile_id: int) -> None:
		self._items.pop(profile_id, None)

	def clear(self) -> None:
		self._items.clear()
		self._ids = count(1)
