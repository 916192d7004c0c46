"""Domain models for profiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(slots=True)
class Profile:
	"""A persisted profile record.

	``id`` is None until the record has been saved once. ``attributes`` holds
	every other field of the record and is stored verbatim.
	"""

	id: Optional[int]
	attributes: Dict[str, Any] = field(default_factory=dict)

	def to_dict(self) -> Dict[str, Any]:
		payload = dict(self.attributes)
		payload["id"] = self.id
		return payload
