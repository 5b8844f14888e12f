"""Headlines desktop reader package initializer."""

__version__ = "0.1.0"

from .config import ReaderConfig
from .coordinator import CoordinatorState, RefreshCoordinator
from .errors import ConfigurationError, FetchError, ProtocolError, TransportError
from .models import ArticleRecord, ClientConfig, FetchOutcome, RefreshCommand
from .state import PresentationState

__all__ = [
    "ArticleRecord",
    "ClientConfig",
    "ConfigurationError",
    "CoordinatorState",
    "FetchError",
    "FetchOutcome",
    "PresentationState",
    "ProtocolError",
    "ReaderConfig",
    "RefreshCommand",
    "RefreshCoordinator",
    "TransportError",
]
