"""Profile CRUD service: one repository call per operation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from meetfit.domain.profiles import sockets
from meetfit.domain.profiles.exceptions import ProfileIdExists, ProfileNotFound
from meetfit.domain.profiles.models import Profile
from meetfit.domain.profiles.repository import ProfileRepository
from meetfit.domain.profiles.schemas import ProfileIn
from meetfit.obs import metrics as obs_metrics

LOGGER = logging.getLogger(__name__)

ENTITY_NAME = "profile"


@dataclass(slots=True)
class SaveResult:
	"""Outcome of a create/update: the stored record and whether it was new."""

	profile: Profile
	created: bool


class ProfileService:
	def __init__(self, repository: ProfileRepository) -> None:
		self.repository = repository

	@obs_metrics.timed("create")
	async def create(self, payload: ProfileIn) -> Profile:
		LOGGER.debug("profile_save_requested", extra={"profile": payload.model_dump()})
		return await self._create(payload)

	@obs_metrics.timed("update")
	async def update(self, payload: ProfileIn) -> SaveResult:
		LOGGER.debug("profile_update_requested", extra={"profile": payload.model_dump()})
		if payload.id is None:
			return SaveResult(profile=await self._create(payload), created=True)
		result = await self.repository.save(payload.to_domain())
		obs_metrics.inc_profile_operation("update")
		await sockets.emit_profile_update(result.to_dict())
		return SaveResult(profile=result, created=False)

	# Untimed so an id-less update records a single latency sample
	async def _create(self, payload: ProfileIn) -> Profile:
		if payload.id is not None:
			obs_metrics.inc_profile_reject(ProfileIdExists.detail)
			raise ProfileIdExists()
		result = await self.repository.save(payload.to_domain())
		obs_metrics.inc_profile_operation("create")
		await sockets.emit_profile_update(result.to_dict())
		return result

	@obs_metrics.timed("list")
	async def list_all(self) -> List[Profile]:
		LOGGER.debug("profile_list_requested")
		return await self.repository.find_all()

	@obs_metrics.timed("get")
	async def get(self, profile_id: int) -> Profile:
		LOGGER.debug("profile_get_requested", extra={"profile_id": profile_id})
		profile = await self.repository.find_one(profile_id)
		if profile is None:
			raise ProfileNotFound()
		return profile

	@obs_metrics.timed("delete")
	async def delete(self, profile_id: int) -> None:
		LOGGER.debug("profile_delete_requested", extra={"profile_id": profile_id})
		await self.repository.delete(profile_id)
		obs_metrics.inc_profile_operation("delete")
		await sockets.emit_profile_delete(profile_id)
