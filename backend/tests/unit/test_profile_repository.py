import unittest.mock

import pytest

from meetfit.domain.profiles import repository as repository_module
from meetfit.domain.profiles.models import Profile
from meetfit.domain.profiles.repository import InMemoryProfileRepository, PostgresProfileRepository


def _mock_pool(monkeypatch) -> unittest.mock.AsyncMock:
	mock_conn = unittest.mock.AsyncMock()
	mock_pool = unittest.mock.MagicMock()
	mock_pool.acquire.return_value.__aenter__.return_value = mock_conn

	async def _mock_get_pool():
		return mock_pool

	monkeypatch.setattr(repository_module, "get_pool", _mock_get_pool)
	return mock_conn


@pytest.mark.asyncio
async def test_postgres_save_new_lets_database_assign_id(monkeypatch):
	conn = _mock_pool(monkeypatch)
	conn.fetchrow.return_value = {"id": 12, "attributes": {"displayName": "Ana"}}

	saved = await PostgresProfileRepository().save(Profile(id=None, attributes={"displayName": "Ana"}))

	assert saved == Profile(id=12, attributes={"displayName": "Ana"})
	query, *params = conn.fetchrow.await_args.args
	assert "INSERT INTO profile (attributes)" in query
	assert params[0] == {"displayName": "Ana"}


@pytest.mark.asyncio
async def test_postgres_save_existing_updates_in_place(monkeypatch):
	conn = _mock_pool(monkeypatch)
	conn.fetchrow.return_value = {"id": 4, "attributes": {"displayName": "Bo"}}

	saved = await PostgresProfileRepository().save(Profile(id=4, attributes={"displayName": "Bo"}))

	assert saved.id == 4
	conn.fetchrow.assert_awaited_once()
	query, profile_id, attributes = conn.fetchrow.await_args.args
	assert query.strip().startswith("UPDATE profile")
	assert "WHERE id = $1" in query
	assert profile_id == 4
	assert attributes == {"displayName": "Bo"}


@pytest.mark.asyncio
async def test_postgres_save_unknown_id_takes_id_from_sequence(monkeypatch):
	conn = _mock_pool(monkeypatch)
	conn.fetchrow.side_effect = [None, {"id": 1, "attributes": {"displayName": "Cy"}}]

	saved = await PostgresProfileRepository().save(Profile(id=50, attributes={"displayName": "Cy"}))

	assert saved == Profile(id=1, attributes={"displayName": "Cy"})
	update_call, insert_call = conn.fetchrow.await_args_list
	assert update_call.args[0].strip().startswith("UPDATE profile")
	assert update_call.args[1] == 50
	insert_query, *insert_params = insert_call.args
	assert "INSERT INTO profile (attributes)" in insert_query
	assert "(id, attributes)" not in insert_query
	assert len(insert_params) == 1
	assert insert_params[0] == {"displayName": "Cy"}


@pytest.mark.asyncio
async def test_postgres_create_after_unknown_id_update_never_inserts_explicit_id(monkeypatch):
	conn = _mock_pool(monkeypatch)
	conn.fetchrow.side_effect = [
		None,
		{"id": 1, "attributes": {}},
		{"id": 2, "attributes": {}},
	]
	repository = PostgresProfileRepository()

	updated = await repository.save(Profile(id=2, attributes={}))
	created = await repository.save(Profile(id=None, attributes={}))

	assert (updated.id, created.id) == (1, 2)
	queries = [call.args[0] for call in conn.fetchrow.await_args_list]
	assert all("(id, attributes)" not in query for query in queries)


@pytest.mark.asyncio
async def test_postgres_find_one_missing(monkeypatch):
	conn = _mock_pool(monkeypatch)
	conn.fetchrow.return_value = None

	assert await PostgresProfileRepository().find_one(1) is None


@pytest.mark.asyncio
async def test_postgres_find_all_orders_by_id(monkeypatch):
	conn = _mock_pool(monkeypatch)
	conn.fetch.return_value = [
		{"id": 1, "attributes": {}},
		{"id": 2, "attributes": {"a": 1}},
	]

	profiles = await PostgresProfileRepository().find_all()

	assert [p.id for p in profiles] == [1, 2]
	assert profiles[1].attributes == {"a": 1}
	assert "ORDER BY id" in conn.fetch.await_args.args[0]


@pytest.mark.asyncio
async def test_postgres_delete(monkeypatch):
	conn = _mock_pool(monkeypatch)

	await PostgresProfileRepository().delete(3)

	conn.execute.assert_awaited_once_with("DELETE FROM profile WHERE id = $1", 3)


@pytest.mark.asyncio
async def test_memory_repository_assigns_sequential_ids():
	repository = InMemoryProfileRepository()
	first = await repository.save(Profile(id=None, attributes={"n": 1}))
	second = await repository.save(Profile(id=None, attributes={"n": 2}))
	assert (first.id, second.id) == (1, 2)


@pytest.mark.asyncio
async def test_memory_repository_unknown_id_gets_generated_id():
	repository = InMemoryProfileRepository()
	updated = await repository.save(Profile(id=7, attributes={"n": 1}))
	created = await repository.save(Profile(id=None, attributes={"n": 2}))

	assert (updated.id, created.id) == (1, 2)
	assert await repository.find_one(7) is None


@pytest.mark.asyncio
async def test_memory_repository_existing_id_updates_in_place():
	repository = InMemoryProfileRepository()
	saved = await repository.save(Profile(id=None, attributes={"n": 1}))
	updated = await repository.save(Profile(id=saved.id, attributes={"n": 2}))

	assert updated.id == saved.id
	assert [p.attributes for p in await repository.find_all()] == [{"n": 2}]


@pytest.mark.asyncio
async def test_memory_repository_returns_copies():
	repository = InMemoryProfileRepository()
	saved = await repository.save(Profile(id=None, attributes={"tags": ["run"]}))
	saved.attributes["tags"].append("swim")

	stored = await repository.find_one(saved.id)
	assert stored.attributes == {"tags": ["run"]}


@pytest.mark.asyncio
async def test_memory_repository_delete_missing_is_noop():
	repository = InMemoryProfileRepository()
	await repository.delete(10)
	assert await repository.find_all() == []
