"""
Exception taxonomy for the dashboard pipeline.

Fetch and classification failures are recovered by the dashboard
controller. Date parse failures are surfaced to the caller. Unknown
statuses and currencies are not errors at all; their derivers fall back
to a default display value.
"""


class DashboardError(Exception):
    """Base class for all dashboard errors."""


class StoreError(DashboardError):
    """
    The document store could not be reached or returned malformed data.
    """


# The fetch contract names this failure FetchError
FetchError = StoreError


class ClassificationError(DashboardError):
    """
    A document carries a category tag outside the known set.
    
    Raised instead of dropping the document so that the partitions always
    add up to the full fetched collection.
    """
    
    def __init__(self, document_id: str, tag: object) -> None:
        self.document_id = document_id
        self.tag = tag
        super().__init__(
            f"Unrecognized category tag {tag!r} on document {document_id}"
        )


class DateParseError(DashboardError, ValueError):
    """An issue date could not be parsed into a calendar date."""
    
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid issue date: {value!r}")
