"""
Tests for services/view.py

View model per controller state: loading, error, empty and ready.
"""

import pytest

from billdesk.domain.classification import partition
from billdesk.domain.errors import DateParseError, StoreError
from billdesk.domain.models import DocumentCategory, Partitions
from billdesk.services.dashboard import Failed, Loading, Ready
from billdesk.services.view import (
    EMPTY_TITLE,
    LOADING_MESSAGE,
    build_dashboard_view,
)

from conftest import make_document


def test_loading_view(settings):
    view = build_dashboard_view(Loading(activation=1), settings)
    assert view.mode == "loading"
    assert view.message == LOADING_MESSAGE
    assert view.sections == ()


def test_error_view_has_no_sections(settings):
    view = build_dashboard_view(Failed(error=StoreError("down")), settings)
    assert view.mode == "error"
    assert view.sections == ()


def test_empty_view(settings):
    view = build_dashboard_view(Ready(partitions=Partitions()), settings)
    assert view.mode == "empty"
    assert view.heading == EMPTY_TITLE
    assert view.create_url == "/editor/new"
    assert view.counts == {"invoice": 0, "quote": 0, "proforma": 0}


def test_ready_view_sections_skip_empty_partitions(settings):
    partitions = partition([
        make_document("inv-1", "invoice"),
        make_document("pro-1", "proforma"),
    ])
    view = build_dashboard_view(Ready(partitions=partitions), settings)

    assert view.mode == "ready"
    assert [s.category for s in view.sections] == [
        DocumentCategory.INVOICE,
        DocumentCategory.PROFORMA_INVOICE,
    ]
    assert [s.title for s in view.sections] == ["Invoices", "Proforma Invoices"]
    assert [s.delay_seconds for s in view.sections] == [0.0, 0.4]


def test_ready_view_items(settings, mixed_documents):
    view = build_dashboard_view(Ready(partitions=partition(mixed_documents)), settings)
    invoices, quotations, proformas = view.sections

    first = invoices.items[0]
    assert first.id == "inv-2"
    assert first.label == "Invoice #2"
    assert first.client_name == "Acme Ltd"
    assert first.issue_date == "Jan 05, 2024"
    assert first.amount == "100.00"
    assert first.money == "$100.00"
    assert first.status_style == "bg-accent text-accent-foreground"
    assert first.edit_url == "/editor/inv-2"

    assert quotations.items[0].label == "Quote #1"
    assert quotations.items[0].money == "€100.00"
    assert proformas.items[0].label == "Proforma Invoice #1"
    assert proformas.items[0].money == "£100.00"


def test_ready_view_delay_indices_run_across_sections(settings, mixed_documents):
    view = build_dashboard_view(Ready(partitions=partition(mixed_documents)), settings)
    indices = [item.delay_index for section in view.sections for item in section.items]
    assert indices == [0, 1, 2, 3, 4]
    assert view.sections[1].items[1].delay_seconds == 0.3


def test_ready_view_surfaces_bad_dates(settings):
    partitions = partition([make_document("inv-1", "invoice", issue_date="31/31/2024")])
    with pytest.raises(DateParseError):
        build_dashboard_view(Ready(partitions=partitions), settings)
