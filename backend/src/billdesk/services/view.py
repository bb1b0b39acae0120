"""
Dashboard view model.

Turns a controller state into the flat, display-ready structure the
HTTP layer and the terminal renderer consume. All per-item values come
from the presentation derivers.
"""

from dataclasses import dataclass, field

from billdesk.config import Settings
from billdesk.domain.models import CATEGORY_ORDER, Document, DocumentCategory, Partitions
from billdesk.domain.presentation import (
    SECTION_DELAYS,
    SECTION_TITLES,
    animation_delay_index,
    animation_delay_seconds,
    document_label,
    format_amount,
    format_date,
    format_money,
    status_style,
)

from .dashboard import Failed, Loading, Ready, ViewState


LOADING_MESSAGE = "Loading your invoices..."
EMPTY_TITLE = "No invoices or quotes yet"
EMPTY_MESSAGE = "Create your first document to get started"
ERROR_MESSAGE = "Failed to load invoices"


@dataclass(frozen=True)
class DashboardItem:
    """One document card."""
    id: str
    label: str
    number: str
    client_name: str
    issue_date: str
    amount: str
    money: str
    currency_code: str
    status: str
    status_style: str
    delay_index: int
    delay_seconds: float
    edit_url: str


@dataclass(frozen=True)
class DashboardSection:
    """One partition, rendered under its own heading."""
    category: DocumentCategory
    title: str
    delay_seconds: float
    items: tuple[DashboardItem, ...]


@dataclass(frozen=True)
class DashboardView:
    """
    Everything needed to draw the dashboard.

    mode is one of "loading", "error", "empty" or "ready". Sections are
    only populated in "ready" mode and never include an empty partition.
    """
    mode: str
    title: str
    heading: str | None = None
    message: str | None = None
    sections: tuple[DashboardSection, ...] = ()
    create_url: str = ""
    settings_url: str = ""
    counts: dict[str, int] = field(default_factory=dict)


def _build_item(
    document: Document,
    category: DocumentCategory,
    index: int,
    counts: dict[DocumentCategory, int],
    settings: Settings,
) -> DashboardItem:
    delay_index = animation_delay_index(category, index, counts)
    return DashboardItem(
        id=document.id,
        label=document_label(category, document.number),
        number=document.number,
        client_name=document.client_name,
        issue_date=format_date(document.issue_date),
        amount=format_amount(document.total),
        money=format_money(document.total, document.currency_code),
        currency_code=document.currency_code,
        status=document.status,
        status_style=status_style(document.status),
        delay_index=delay_index,
        delay_seconds=animation_delay_seconds(delay_index),
        edit_url=settings.edit_url_for(document.id),
    )


def _build_sections(partitions: Partitions, settings: Settings) -> tuple[DashboardSection, ...]:
    counts = partitions.counts()
    sections = []
    for category in CATEGORY_ORDER:
        documents = partitions.for_category(category)
        if not documents:
            continue
        items = tuple(
            _build_item(document, category, index, counts, settings)
            for index, document in enumerate(documents)
        )
        sections.append(DashboardSection(
            category=category,
            title=SECTION_TITLES[category],
            delay_seconds=SECTION_DELAYS[category],
            items=items,
        ))
    return tuple(sections)


def build_dashboard_view(state: ViewState, settings: Settings) -> DashboardView:
    """
    Build the view model for a controller state.

    Raises:
        DateParseError: If a document in a Ready state has an invalid issue date
    """
    common = {
        "title": settings.app_title,
        "create_url": settings.create_document_url,
        "settings_url": settings.settings_url,
    }

    if isinstance(state, Loading):
        return DashboardView(mode="loading", message=LOADING_MESSAGE, **common)

    if isinstance(state, Failed):
        return DashboardView(mode="error", message=ERROR_MESSAGE, **common)

    if isinstance(state, Ready):
        partitions = state.partitions
        counts = {category.value: count for category, count in partitions.counts().items()}
        if partitions.is_empty:
            return DashboardView(
                mode="empty",
                heading=EMPTY_TITLE,
                message=EMPTY_MESSAGE,
                counts=counts,
                **common,
            )
        return DashboardView(
            mode="ready",
            sections=_build_sections(partitions, settings),
            counts=counts,
            **common,
        )

    raise TypeError(f"Unknown dashboard state: {state!r}")
