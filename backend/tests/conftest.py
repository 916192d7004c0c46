import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Ensure backend package is importable when tests run from repo root
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
	sys.path.insert(0, str(BACKEND_ROOT))

from meetfit.api import profiles as profiles_api
from meetfit.domain.profiles import InMemoryProfileRepository
from meetfit.domain.profiles import sockets as profile_sockets
from meetfit.infra import postgres
from meetfit.main import app
from meetfit.settings import settings


@pytest.fixture(autouse=True)
def patch_postgres(monkeypatch):
	async def _noop():
		return None

	monkeypatch.setattr(postgres, "init_pool", _noop)
	monkeypatch.setattr(postgres, "close_pool", _noop)


@pytest.fixture(autouse=True)
def force_test_settings():
	"""Keep alert naming and store selection stable regardless of the local .env."""
	original_app_name = settings.alert_app_name
	original_store = settings.profile_store
	settings.alert_app_name = "meetFitApp"
	settings.profile_store = "memory"
	try:
		yield
	finally:
		settings.alert_app_name = original_app_name
		settings.profile_store = original_store


@pytest.fixture(autouse=True)
def detach_profile_namespace():
	original = profile_sockets._namespace
	profile_sockets.set_namespace(None)
	try:
		yield
	finally:
		profile_sockets.set_namespace(original)


@pytest.fixture
def profile_repository():
	repository = InMemoryProfileRepository()
	app.dependency_overrides[profiles_api.get_profile_repository] = lambda: repository
	try:
		yield repository
	finally:
		app.dependency_overrides.pop(profiles_api.get_profile_repository, None)


@pytest_asyncio.fixture
async def api_client():
	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://testserver") as client:
		yield client
