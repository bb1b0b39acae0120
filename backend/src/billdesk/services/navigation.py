"""
Navigation out of the dashboard.

The dashboard links to three screens: the editor for a new document,
the editor for an existing document and the settings page.
"""

import logging
from abc import ABC, abstractmethod

from billdesk.config import Settings

logger = logging.getLogger(__name__)


class Navigator(ABC):
    """Abstract interface for leaving the dashboard."""
    
    @abstractmethod
    def on_create_document(self) -> None:
        """Open the editor for a new document."""
        pass
    
    @abstractmethod
    def on_edit_document(self, document_id: str) -> None:
        """Open the editor for an existing document."""
        pass
    
    @abstractmethod
    def on_view_settings(self) -> None:
        """Open the settings screen."""
        pass


class UrlNavigator(Navigator):
    """
    Resolves navigation callbacks to URLs from settings.
    
    The last resolved URL is kept in `location` for the caller to
    redirect to.
    """
    
    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.location: str | None = None
    
    def on_create_document(self) -> None:
        self._go(self.settings.create_document_url)
    
    def on_edit_document(self, document_id: str) -> None:
        self._go(self.settings.edit_url_for(document_id))
    
    def on_view_settings(self) -> None:
        self._go(self.settings.settings_url)
    
    def _go(self, url: str) -> None:
        logger.debug(f"Navigating to {url}")
        self.location = url
