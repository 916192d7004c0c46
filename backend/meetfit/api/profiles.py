"""REST endpoints for managing profiles."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from meetfit.api import alerts
from meetfit.domain.profiles import (
	ENTITY_NAME,
	InMemoryProfileRepository,
	PostgresProfileRepository,
	ProfileError,
	ProfileIdExists,
	ProfileRepository,
	ProfileService,
)
from meetfit.domain.profiles.schemas import ProfileIn, ProfileOut
from meetfit.settings import settings

router = APIRouter(prefix="/api", tags=["profiles"])

_memory_repository = InMemoryProfileRepository()


def get_profile_repository() -> ProfileRepository:
	if settings.uses_postgres():
		return PostgresProfileRepository()
	return _memory_repository


def get_profile_service(repository: ProfileRepository = Depends(get_profile_repository)) -> ProfileService:
	return ProfileService(repository)


def _to_http_error(exc: ProfileError) -> HTTPException:
	headers = None
	if isinstance(exc, ProfileIdExists):
		headers = alerts.failure_alert(ENTITY_NAME, exc.detail, exc.message)
	return HTTPException(status_code=exc.status_code, detail=exc.detail, headers=headers)


def _apply_headers(response: Response, headers: dict[str, str]) -> None:
	for key, value in headers.items():
		response.headers[key] = value


@router.post("/profiles", response_model=ProfileOut, status_code=status.HTTP_201_CREATED)
async def create_profile(
	payload: ProfileIn,
	response: Response,
	service: ProfileService = Depends(get_profile_service),
) -> ProfileOut:
	try:
		result = await service.create(payload)
	except ProfileError as exc:
		raise _to_http_error(exc) from None
	response.status_code = status.HTTP_201_CREATED
	response.headers["Location"] = f"/api/profiles/{result.id}"
	_apply_headers(response, alerts.entity_creation_alert(ENTITY_NAME, str(result.id)))
	return ProfileOut.from_domain(result)


@router.put("/profiles", response_model=ProfileOut)
async def update_profile(
	payload: ProfileIn,
	response: Response,
	service: ProfileService = Depends(get_profile_service),
) -> ProfileOut:
	try:
		outcome = await service.update(payload)
	except ProfileError as exc:
		raise _to_http_error(exc) from None
	result = outcome.profile
	if outcome.created:
		response.status_code = status.HTTP_201_CREATED
		response.headers["Location"] = f"/api/profiles/{result.id}"
		_apply_headers(response, alerts.entity_creation_alert(ENTITY_NAME, str(result.id)))
	else:
		_apply_headers(response, alerts.entity_update_alert(ENTITY_NAME, str(result.id)))
	return ProfileOut.from_domain(result)


@router.get("/profiles", response_model=List[ProfileOut])
async def get_all_profiles(service: ProfileService = Depends(get_profile_service)) -> List[ProfileOut]:
	profiles = await service.list_all()
	return [ProfileOut.from_domain(profile) for profile in profiles]


@router.get("/profiles/{profile_id}", response_model=ProfileOut)
async def get_profile(
	profile_id: int,
	service: ProfileService = Depends(get_profile_service),
) -> ProfileOut:
	try:
		return ProfileOut.from_domain(await service.get(profile_id))
	except ProfileError as exc:
		raise _to_http_error(exc) from None


@router.delete("/profiles/{profile_id}", response_class=Response, response_model=None)
async def delete_profile(
	profile_id: int,
	service: ProfileService = Depends(get_profile_service),
) -> Response:
	await service.delete(profile_id)
	return Response(
		status_code=status.HTTP_200_OK,
		headers=alerts.entity_deletion_alert(ENTITY_NAME, str(profile_id)),
	)
