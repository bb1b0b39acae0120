"""
billdesk - billing document dashboard.

Fetches invoices, quotations and proforma invoices from the document store,
partitions them by type and derives the per-item display values.
"""

__version__ = "0.1.0"
