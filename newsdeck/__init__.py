"""NewsDeck: a filterable, paginated news article browser backend."""

from .api import create_app
from .backend import NewsDeckBackend
from .config import NewsDeckConfig
from .loader import DatasetLoadError
from .session import BrowseSession, BrowseView

__all__ = [
    "BrowseSession",
    "BrowseView",
    "DatasetLoadError",
    "NewsDeckBackend",
    "NewsDeckConfig",
    "create_app",
]
