"""
Domain models for the billing document dashboard.

Design Decisions:
- Frozen dataclasses so a fetched snapshot can never be patched in place
- Category and status stay as raw store tags on Document; the classifier
  and the derivers resolve them, so unknown values are handled in one place
- Decimal for all monetary values to avoid floating-point errors
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum


class DocumentCategory(Enum):
    """
    The three document partitions, in render order.
    
    Values are the tags stored in the invoice_type column.
    """
    INVOICE = "invoice"
    QUOTATION = "quote"
    PROFORMA_INVOICE = "proforma"


# Order in which partitions are rendered on the dashboard
CATEGORY_ORDER: tuple[DocumentCategory, ...] = (
    DocumentCategory.INVOICE,
    DocumentCategory.QUOTATION,
    DocumentCategory.PROFORMA_INVOICE,
)


class DocumentStatus(Enum):
    """Known document statuses. The store may send others."""
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


@dataclass(frozen=True)
class Document:
    """
    A billing document as read from the store.
    
    Instances are read-only snapshots; the editor and the store own all
    mutations.
    """
    id: str
    number: str
    category: str
    issue_date: date | datetime | str
    client_name: str
    total: Decimal
    status: str
    currency_code: str


@dataclass(frozen=True)
class Partitions:
    """
    One fetch cycle's documents split by category.
    
    Each tuple keeps the relative order the store returned.
    """
    invoices: tuple[Document, ...] = ()
    quotations: tuple[Document, ...] = ()
    proformas: tuple[Document, ...] = ()
    
    def for_category(self, category: DocumentCategory) -> tuple[Document, ...]:
        """Return the partition holding the given category."""
        if category is DocumentCategory.INVOICE:
            return self.invoices
        if category is DocumentCategory.QUOTATION:
            return self.quotations
        return self.proformas

    def counts(self) -> dict[DocumentCategory, int]:
        """Number of documents per category."""
        return {category: len(self.for_category(category)) for category in CATEGORY_ORDER}
    
    @property
    def total_count(self) -> int:
        return len(self.invoices) + len(self.quotations) + len(self.proformas)
    
    @property
    def is_empty(self) -> bool:
        """True when the fetch succeeded but returned no documents."""
        return self.total_count == 0
    
    def flatten(self) -> list[Document]:
        """Concatenate the partitions in render order."""
        return [doc for category in CATEGORY_ORDER for doc in self.for_category(category)]
