"""
Document classification and partitioning.

Pure functions, no I/O. The store returns one flat list of documents
ordered by creation time; the dashboard shows it as three lists, one per
document category.

Design Decisions:
- Unknown category tags raise instead of being dropped, so the three
  partitions always add up to the fetched collection
- Single pass with append keeps the store order inside each partition
- The whole partition aborts on the first bad tag; there is no partial result
"""

from typing import Iterable

from .errors import ClassificationError
from .models import Document, DocumentCategory, Partitions


_CATEGORY_BY_TAG: dict[str, DocumentCategory] = {
    category.value: category for category in DocumentCategory
}


def classify(document: Document) -> DocumentCategory:
    """
    Map a document's category tag to its partition.

    Tags are matched case-insensitively and ignoring surrounding
    whitespace.

    Raises:
        ClassificationError: If the tag is not one of the known categories
    """
    tag = document.category
    if isinstance(tag, DocumentCategory):
        return tag
    if isinstance(tag, str):
        category = _CATEGORY_BY_TAG.get(tag.strip().lower())
        if category is not None:
            return category
    raise ClassificationError(document.id, tag)


def partition(documents: Iterable[Document]) -> Partitions:
    """
    Split documents into invoices, quotations and proformas.

    Relative order within each partition matches the input order.
    Re-partitioning the flattened output yields the same partitions.

    Raises:
        ClassificationError: If any document has an unknown category tag
    """
    buckets: dict[DocumentCategory, list[Document]] = {
        category: [] for category in DocumentCategory
    }

    for document in documents:
        buckets[classify(document)].append(document)

    return Partitions(
        invoices=tuple(buckets[DocumentCategory.INVOICE]),
        quotations=tuple(buckets[DocumentCategory.QUOTATION]),
        proformas=tuple(buckets[DocumentCategory.PROFORMA_INVOICE]),
    )
