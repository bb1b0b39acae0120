"""
Document store access for the dashboard.

The store is the only source of documents. The dashboard fetches the
whole collection in one call, newest first, and never filters or pages.

Design Decisions:
- Abstract store interface so the controller can be driven by any backend
- Row mapping is the schema boundary: malformed rows become StoreError
  before they reach the domain
- Transport errors are wrapped in StoreError so callers handle one type
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Mapping

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from billdesk.domain.errors import StoreError
from billdesk.domain.models import Document

from .database import DocumentRecord, get_session

logger = logging.getLogger(__name__)


REQUIRED_FIELDS = ("id", "invoice_number", "invoice_type", "total")


class DocumentStore(ABC):
    """Abstract interface for the document store."""

    @abstractmethod
    async def fetch_all_documents(self) -> list[Document]:
        """
        Return every document, ordered by descending creation time.

        Raises:
            StoreError: If the store is unreachable or returns malformed data
        """
        pass


def document_from_row(row: Mapping[str, Any]) -> Document:
    """
    Build a Document from a store row.

    Row keys follow the invoices table: invoice_number, invoice_type,
    invoice_date, client_name, total, status, currency.

    Category, status and issue date are kept raw; the classifier and the
    derivers decide what to do with unexpected values.

    Raises:
        StoreError: If a required field is missing or the total is not
            a non-negative number
    """
    missing = [name for name in REQUIRED_FIELDS if row.get(name) is None]
    if missing:
        raise StoreError(f"Document row missing fields: {', '.join(missing)}")

    raw_total = row["total"]
    if isinstance(raw_total, bool):
        raise StoreError(f"Invalid total on document {row['id']}: {raw_total!r}")
    try:
        total = raw_total if isinstance(raw_total, Decimal) else Decimal(str(raw_total))
    except InvalidOperation as e:
        raise StoreError(f"Invalid total on document {row['id']}: {raw_total!r}") from e
    if not total.is_finite() or total < 0:
        raise StoreError(f"Invalid total on document {row['id']}: {raw_total!r}")

    return Document(
        id=str(row["id"]),
        number=str(row["invoice_number"]),
        category=row["invoice_type"],
        issue_date=row.get("invoice_date"),
        client_name=str(row.get("client_name") or ""),
        total=total,
        status=row.get("status") or "",
        currency_code=str(row.get("currency") or ""),
    )


def _record_to_row(record: DocumentRecord) -> dict[str, Any]:
    return {
        "id": record.id,
        "invoice_number": record.invoice_number,
        "invoice_type": record.invoice_type,
        "invoice_date": record.invoice_date,
        "client_name": record.client_name,
        "total": record.total,
        "status": record.status,
        "currency": record.currency,
    }


class SqlDocumentStore(DocumentStore):
    """
    Document store backed by the invoices table.

    Example:
        store = SqlDocumentStore()
        documents = await store.fetch_all_documents()
    """

    def __init__(
        self,
        session_provider: Callable[[], Any] | None = None,
    ) -> None:
        """
        Initialize SQL store.

        Args:
            session_provider: Async context manager factory yielding an
                AsyncSession (defaults to database.get_session)
        """
        self._session_provider = session_provider or get_session

    async def fetch_all_documents(self) -> list[Document]:
        """Load all documents, newest first."""
        try:
            async with self._session_provider() as session:
                records = await self._load_records(session)
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Document store query failed: {e}")
            raise StoreError(f"Document store unavailable: {e}") from e

        documents = [document_from_row(_record_to_row(record)) for record in records]
        logger.info(f"Fetched {len(documents)} documents from store")
        return documents

    async def _load_records(self, session: AsyncSession) -> list[DocumentRecord]:
        result = await session.execute(
            select(DocumentRecord).order_by(DocumentRecord.created_at.desc())
        )
        return list(result.scalars().all())
