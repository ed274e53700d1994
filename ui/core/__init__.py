"""Core data model, errors and interfaces."""

from .errors import DecodeError, FetchError, NetworkError, ServerError
from .models import ControllerState, Cursor, Page, Phase, Product
from .protocols import PageFetcherPort, ViewStateListener

__all__ = [
    "ControllerState",
    "Cursor",
    "DecodeError",
    "FetchError",
    "NetworkError",
    "Page",
    "PageFetcherPort",
    "Phase",
    "Product",
    "ServerError",
    "ViewStateListener",
]
