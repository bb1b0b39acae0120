"""
Shared fixtures for billdesk tests.

Provides a document factory and in-memory stores that stand in for the
SQL document store.
"""

import asyncio
import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Add backend/src to path for imports
project_root = Path(__file__).parent.parent
backend_src = project_root / "backend" / "src"
sys.path.insert(0, str(backend_src))

from billdesk.config import Settings
from billdesk.domain.errors import StoreError
from billdesk.domain.models import Document
from billdesk.infrastructure.store import DocumentStore


def make_document(
    id: str,
    category: str = "invoice",
    number: str | None = None,
    issue_date: str = "2024-01-05",
    client_name: str = "Acme Ltd",
    total: str = "100.00",
    status: str = "draft",
    currency_code: str = "USD",
) -> Document:
    return Document(
        id=id,
        number=number or id,
        category=category,
        issue_date=issue_date,
        client_name=client_name,
        total=Decimal(total),
        status=status,
        currency_code=currency_code,
    )


class StaticStore(DocumentStore):
    """Returns a fixed list of documents."""

    def __init__(self, documents: list[Document]) -> None:
        self.documents = documents
        self.calls = 0

    async def fetch_all_documents(self) -> list[Document]:
        self.calls += 1
        return list(self.documents)


class FailingStore(DocumentStore):
    """Always raises StoreError."""

    def __init__(self, message: str = "connection refused") -> None:
        self.message = message
        self.calls = 0

    async def fetch_all_documents(self) -> list[Document]:
        self.calls += 1
        raise StoreError(self.message)


class ScriptedStore(DocumentStore):
    """
    Serves queued responses, each released by its own event.

    Lets a test hold an older fetch open while a newer one completes.
    """

    def __init__(self) -> None:
        self._responses: list[tuple[asyncio.Event, list[Document] | Exception]] = []

    def queue(self, response: list[Document] | Exception) -> asyncio.Event:
        release = asyncio.Event()
        self._responses.append((release, response))
        return release

    async def fetch_all_documents(self) -> list[Document]:
        release, response = self._responses.pop(0)
        await release.wait()
        if isinstance(response, Exception):
            raise response
        return list(response)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_title="Invoice Manager",
        create_document_url="/editor/new",
        edit_document_url="/editor/{id}",
        settings_url="/settings",
    )


@pytest.fixture
def mixed_documents() -> list[Document]:
    """Store order, newest first, with categories interleaved."""
    return [
        make_document("inv-2", "invoice", number="2", status="paid"),
        make_document("quo-1", "quote", number="1", status="sent", currency_code="EUR"),
        make_document("inv-1", "invoice", number="1", status="overdue"),
        make_document("pro-1", "proforma", number="1", currency_code="GBP"),
        make_document("quo-0", "quote", number="0"),
    ]
