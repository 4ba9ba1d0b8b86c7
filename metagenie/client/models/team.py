"""Team context data model."""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class TeamContext(BaseModel):
    """Active team scope as persisted by the application shell."""

    team_id: str | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def is_scoped(self) -> bool:
        return bool(self.team_id)

    @classmethod
    def from_mapping(cls, data: Any) -> TeamContext:
        """Build from a decoded storage object.

        Both ``team_id`` and ``teamId`` spellings are accepted; the first
        truthy one wins. Anything that is not an object reads as no team.
        """
        if not isinstance(data, dict):
            return cls()
        team_id = data.get("team_id") or data.get("teamId") or None
        if team_id is None:
            return cls()
        return cls(team_id=str(team_id))

    @classmethod
    def from_storage(cls, raw: str | None) -> TeamContext:
        """Parse the raw JSON string stored under the team-context key."""
        if not raw:
            return cls()
        try:
            data = json.loads(raw)
        except ValueError:
            logger.debug("team_context_unparseable", extra={"raw_length": len(raw)})
            return cls()
        return cls.from_mapping(data)
