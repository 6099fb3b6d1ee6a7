"""HTTP lookup of reusable block content.

- :class:`RestReferenceResolver` -- reference resolver backed by httpx.
- :class:`RemoteConfig` -- endpoint, auth and retry settings.
"""

from .config import RemoteConfig
from .resolver import RestReferenceResolver, extract_content

__all__ = [
    "RemoteConfig",
    "RestReferenceResolver",
    "extract_content",
]
