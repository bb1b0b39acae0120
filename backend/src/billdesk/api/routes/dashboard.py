"""
Dashboard endpoints.

Serves the partitioned document dashboard and the redirects behind its
navigation buttons. Every GET of the dashboard is one controller
activation: one fetch, one partition, one view.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from billdesk.api.schemas import DashboardResponse
from billdesk.config import Settings, get_settings
from billdesk.domain.errors import DateParseError
from billdesk.infrastructure.store import DocumentStore, SqlDocumentStore
from billdesk.services.dashboard import DashboardController
from billdesk.services.navigation import UrlNavigator
from billdesk.services.notifications import RecordingNotifier
from billdesk.services.view import build_dashboard_view

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


def get_document_store(request: Request) -> DocumentStore:
    """Use the store attached to the app, or the SQL store."""
    store = getattr(request.app.state, "document_store", None)
    if store is None:
        store = SqlDocumentStore()
        request.app.state.document_store = store
    return store


def get_notifier() -> RecordingNotifier:
    return RecordingNotifier()


def get_navigator(settings: Annotated[Settings, Depends(get_settings)]) -> UrlNavigator:
    return UrlNavigator(settings)


def get_dashboard_controller(
    store: Annotated[DocumentStore, Depends(get_document_store)],
    notifier: Annotated[RecordingNotifier, Depends(get_notifier)],
    navigator: Annotated[UrlNavigator, Depends(get_navigator)],
) -> DashboardController:
    """One controller per request; each request is one dashboard session."""
    return DashboardController(store=store, notifier=notifier, navigator=navigator)


@router.get(
    "",
    response_model=DashboardResponse,
    responses={
        502: {"description": "The store returned a document with an invalid issue date"},
    },
)
async def get_dashboard(
    controller: Annotated[DashboardController, Depends(get_dashboard_controller)],
    notifier: Annotated[RecordingNotifier, Depends(get_notifier)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> DashboardResponse:
    """
    Fetch all documents and return the dashboard view.

    **Modes:**
    - `ready`: one section per non-empty category, store order preserved
    - `empty`: the fetch succeeded with no documents
    - `error`: the fetch failed; see `notifications`
    """
    state = await controller.activate()

    try:
        view = build_dashboard_view(state, settings)
    except DateParseError as e:
        logger.error(f"Dashboard render failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Malformed document data: {e}",
        ) from e

    return DashboardResponse.from_view(view, notifier.notifications)


@router.get("/new", status_code=status.HTTP_303_SEE_OTHER)
async def create_document(
    controller: Annotated[DashboardController, Depends(get_dashboard_controller)],
    navigator: Annotated[UrlNavigator, Depends(get_navigator)],
) -> RedirectResponse:
    """Redirect to the editor for a new document."""
    controller.create_document()
    return RedirectResponse(navigator.location, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/documents/{document_id}", status_code=status.HTTP_303_SEE_OTHER)
async def edit_document(
    document_id: str,
    controller: Annotated[DashboardController, Depends(get_dashboard_controller)],
    navigator: Annotated[UrlNavigator, Depends(get_navigator)],
) -> RedirectResponse:
    """Redirect to the editor for an existing document."""
    controller.edit_document(document_id)
    return RedirectResponse(navigator.location, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/settings", status_code=status.HTTP_303_SEE_OTHER)
async def view_settings(
    controller: Annotated[DashboardController, Depends(get_dashboard_controller)],
    navigator: Annotated[UrlNavigator, Depends(get_navigator)],
) -> RedirectResponse:
    """Redirect to the settings screen."""
    controller.view_settings()
    return RedirectResponse(navigator.location, status_code=status.HTTP_303_SEE_OTHER)
