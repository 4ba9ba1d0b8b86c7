"""High-level API layer."""

from .client import MetaGenieAPI
from .resources import (
    AccountsResource,
    AIResource,
    AnalyticsResource,
    AuthResource,
    CreditsResource,
    DashboardResource,
    MediaResource,
    PostsResource,
    ScheduleResource,
    oauth_connect_url,
)

__all__ = [
    "MetaGenieAPI",
    "AuthResource",
    "DashboardResource",
    "AccountsResource",
    "PostsResource",
    "ScheduleResource",
    "AnalyticsResource",
    "CreditsResource",
    "AIResource",
    "MediaResource",
    "oauth_connect_url",
]
