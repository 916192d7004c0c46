"""Custom exceptions for profile services."""

from __future__ import annotations

from fastapi import status


class ProfileError(Exception):
	"""Base class for profile related errors."""

	status_code: int = status.HTTP_400_BAD_REQUEST
	detail: str = "profile_error"
	message: str = "Profile request failed"

	def __init__(self, detail: str | None = None) -> None:
		super().__init__(detail or self.detail)
		if detail:
			self.detail = detail


class ProfileIdExists(ProfileError):
	"""Raised when a record submitted for creation already carries an id."""

	detail = "idexists"
	message = "A new profile cannot already have an ID"


class ProfileNotFound(ProfileError):
	status_code = status.HTTP_404_NOT_FOUND
	detail = "not_found"
	message = "Profile not found"
