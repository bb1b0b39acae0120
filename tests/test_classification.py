"""
Unit tests for domain/classification.py

Covers classify and partition: completeness, disjointness, order
preservation, idempotence and the unknown-tag failure.
"""

from collections import Counter

import pytest

from billdesk.domain.classification import classify, partition
from billdesk.domain.errors import ClassificationError
from billdesk.domain.models import DocumentCategory, Partitions

from conftest import make_document


# ── classify ──────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("tag, expected", [
    ("invoice", DocumentCategory.INVOICE),
    ("quote", DocumentCategory.QUOTATION),
    ("proforma", DocumentCategory.PROFORMA_INVOICE),
    ("  Invoice ", DocumentCategory.INVOICE),
    ("QUOTE", DocumentCategory.QUOTATION),
])
def test_classify_known_tags(tag, expected):
    assert classify(make_document("d1", tag)) is expected


def test_classify_is_deterministic():
    doc = make_document("d1", "proforma")
    assert {classify(doc) for _ in range(5)} == {DocumentCategory.PROFORMA_INVOICE}


def test_classify_accepts_enum_member():
    doc = make_document("d1", DocumentCategory.QUOTATION)
    assert classify(doc) is DocumentCategory.QUOTATION


@pytest.mark.parametrize("tag", ["credit_note", "", "invoices", None, 3])
def test_classify_unknown_tag_raises(tag):
    with pytest.raises(ClassificationError) as exc_info:
        classify(make_document("bad-1", tag))
    assert exc_info.value.document_id == "bad-1"
    assert exc_info.value.tag == tag


# ── partition ─────────────────────────────────────────────────────────────────

def test_partition_empty_input():
    result = partition([])
    assert result == Partitions()
    assert result.is_empty


def test_partition_one_per_category():
    docs = [
        make_document("inv-1", "invoice"),
        make_document("quo-1", "quote"),
        make_document("pro-1", "proforma"),
    ]
    result = partition(docs)
    assert [d.id for d in result.invoices] == ["inv-1"]
    assert [d.id for d in result.quotations] == ["quo-1"]
    assert [d.id for d in result.proformas] == ["pro-1"]


def test_partition_is_complete_and_disjoint(mixed_documents):
    result = partition(mixed_documents)
    all_ids = [d.id for d in result.invoices + result.quotations + result.proformas]

    assert Counter(all_ids) == Counter(d.id for d in mixed_documents)
    assert len(all_ids) == len(set(all_ids))
    assert result.total_count == len(mixed_documents)


def test_partition_preserves_store_order(mixed_documents):
    result = partition(mixed_documents)
    assert [d.id for d in result.invoices] == ["inv-2", "inv-1"]
    assert [d.id for d in result.quotations] == ["quo-1", "quo-0"]
    assert [d.id for d in result.proformas] == ["pro-1"]


def test_partition_is_idempotent(mixed_documents):
    first = partition(mixed_documents)
    second = partition(first.flatten())
    assert second == first


def test_partition_accepts_generators(mixed_documents):
    result = partition(doc for doc in mixed_documents)
    assert result == partition(mixed_documents)


def test_partition_aborts_on_unknown_tag(mixed_documents):
    docs = mixed_documents[:2] + [make_document("cn-1", "credit_note")] + mixed_documents[2:]
    with pytest.raises(ClassificationError, match="credit_note"):
        partition(docs)


def test_partition_counts(mixed_documents):
    counts = partition(mixed_documents).counts()
    assert counts == {
        DocumentCategory.INVOICE: 2,
        DocumentCategory.QUOTATION: 2,
        DocumentCategory.PROFORMA_INVOICE: 1,
    }


def test_partitions_for_category(mixed_documents):
    result = partition(mixed_documents)
    assert result.for_category(DocumentCategory.QUOTATION) is result.quotations
    assert result.for_category(DocumentCategory.PROFORMA_INVOICE) is result.proformas
