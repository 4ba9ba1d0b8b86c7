"""Data models."""

from .response import APIResponse, ErrorPayload
from .team import TeamContext

__all__ = [
    "APIResponse",
    "ErrorPayload",
    "TeamContext",
]
