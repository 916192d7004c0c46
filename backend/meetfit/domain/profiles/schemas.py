"""Pydantic schemas for the profiles API."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from meetfit.domain.profiles.models import Profile


class ProfileIn(BaseModel):
	"""Request body for create/update. Unknown keys are kept as attributes."""

	model_config = ConfigDict(extra="allow")

	id: Optional[int] = None

	def attributes(self) -> Dict[str, Any]:
		return dict(self.model_extra or {})

	def to_domain(self) -> Profile:
		return Profile(id=self.id, attributes=self.attributes())


class ProfileOut(BaseModel):
	model_config = ConfigDict(extra="allow")

	id: int

	@classmethod
	def from_domain(cls, profile: Profile) -> "ProfileOut":
		return cls.model_validate(profile.to_dict())
