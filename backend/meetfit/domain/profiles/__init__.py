"""Profile domain package."""

from meetfit.domain.profiles.exceptions import ProfileError, ProfileIdExists, ProfileNotFound
from meetfit.domain.profiles.models import Profile
from meetfit.domain.profiles.repository import (
	InMemoryProfileRepository,
	PostgresProfileRepository,
	ProfileRepository,
)
from meetfit.domain.profiles.service import ENTITY_NAME, ProfileService, SaveResult

__all__ = [
	"ENTITY_NAME",
	"InMemoryProfileRepository",
	"PostgresProfileRepository",
	"Profile",
	"ProfileError",
	"ProfileIdExists",
	"ProfileNotFound",
	"ProfileRepository",
	"ProfileService",
	"SaveResult",
]
