"""Presentation states derived from controller state."""

from .view_state import (
    ErrorView,
    InitialView,
    LoadingView,
    SuccessView,
    ViewState,
    project,
)

__all__ = [
    "ErrorView",
    "InitialView",
    "LoadingView",
    "SuccessView",
    "ViewState",
    "project",
]
