"""View states consumed by the product list window.

The window never sees the controller's mutable state, only the frozen
snapshots produced by ``project``.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from ui.core.models import ControllerState, Phase, Product

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"


@dataclass(frozen=True)
class InitialView:
    pass


@dataclass(frozen=True)
class LoadingView:
    pass


@dataclass(frozen=True)
class SuccessView:
    items: Tuple[Product, ...]
    is_loading_more: bool = False
    has_more: bool = True
    total: int = 0
    # Set when loading a later page failed; loaded items stay visible
    error_message: Optional[str] = None


@dataclass(frozen=True)
class ErrorView:
    message: str


ViewState = Union[InitialView, LoadingView, SuccessView, ErrorView]


def _error_message(state: ControllerState) -> str:
    if state.last_error is None or not state.last_error.message:
        return UNKNOWN_ERROR_MESSAGE
    return state.last_error.message


def project(state: ControllerState) -> ViewState:
    if state.phase is Phase.INITIAL:
        return InitialView()

    if state.phase is Phase.LOADING_FIRST_PAGE:
        return LoadingView()

    if state.phase is Phase.FAILED:
        if not state.items:
            return ErrorView(message=_error_message(state))
        return SuccessView(
            items=state.items,
            is_loading_more=False,
            has_more=state.cursor.has_more,
            total=state.total_available,
            error_message=_error_message(state),
        )

    return SuccessView(
        items=state.items,
        is_loading_more=state.fetching,
        has_more=state.cursor.has_more,
        total=state.total_available,
    )
