"""Navigation state references handed to view controllers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True, slots=True)
class PreviousState:
	"""The state a view was entered from, used for back navigation."""

	name: str
	params: Dict[str, Any] = field(default_factory=dict)
