"""Response data models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError


class ErrorPayload(BaseModel):
    """Failure body convention of the remote API."""

    error: str | None = None
    code: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def parse(cls, data: Any) -> ErrorPayload | None:
        """Decode ``data`` if it looks like an error body, else ``None``."""
        if not isinstance(data, dict):
            return None
        try:
            return cls.model_validate(data)
        except ValidationError:
            return None


@dataclass(frozen=True)
class APIResponse:
    """Successful response from the remote API."""

    status: int
    data: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def get(self, key: str, default: Any = None) -> Any:
        """Look up ``key`` in a JSON object body."""
        if isinstance(self.data, dict):
            return self.data.get(key, default)
        return default
