"""
Services package - Dashboard state, rendering and collaborators.

Includes the dashboard controller, the view builder, notifications
and navigation.
"""

from .dashboard import DashboardController, Failed, Loading, Ready, ViewState
from .navigation import Navigator, UrlNavigator
from .notifications import LoggingNotifier, Notifier, RecordingNotifier
from .view import DashboardView, build_dashboard_view

__all__ = [
    "DashboardController",
    "DashboardView",
    "Failed",
    "Loading",
    "LoggingNotifier",
    "Navigator",
    "Notifier",
    "Ready",
    "RecordingNotifier",
    "UrlNavigator",
    "ViewState",
    "build_dashboard_view",
]
