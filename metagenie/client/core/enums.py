"""Core enumerations shared by the transport, gateway and API layers.

Key Types:
    - HttpMethod: Verbs the remote API accepts
    - Platform: Social platforms a post can target
    - StorageScope: Persistence scope of a host-stored key
"""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verbs used against the remote API."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class Platform(str, Enum):
    """Social platforms supported by the publishing backend."""

    INSTAGRAM = "instagram"
    THREADS = "threads"
    YOUTUBE = "youtube"

    @property
    def label(self) -> str:
        """Human readable platform name."""
        return _PLATFORM_LABELS[self]


_PLATFORM_LABELS = {
    Platform.INSTAGRAM: "Instagram",
    Platform.THREADS: "Threads",
    Platform.YOUTUBE: "YouTube",
}


class StorageScope(str, Enum):
    """Where a persisted key lives on the host.

    LOCAL survives across sessions; SESSION lives for one browsing session
    but survives navigations within it.
    """

    LOCAL = "local"
    SESSION = "session"
