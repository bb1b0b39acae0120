"""
Pydantic schemas for API responses.

These schemas define the contract between the dashboard frontend and
the backend. Amounts are pre-formatted strings; the frontend does no
number or date formatting of its own.
"""

from enum import Enum

from pydantic import BaseModel, Field

from billdesk.services.notifications import Notification
from billdesk.services.view import DashboardItem, DashboardSection, DashboardView


class DashboardModeEnum(str, Enum):
    """What the dashboard should draw."""
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"
    READY = "ready"


class CategoryEnum(str, Enum):
    """Document category of a dashboard section."""
    INVOICE = "invoice"
    QUOTATION = "quote"
    PROFORMA_INVOICE = "proforma"


# =============================================================================
# Response Schemas
# =============================================================================

class DashboardItemResponse(BaseModel):
    """One document card."""
    id: str
    label: str = Field(description="Card title, e.g. 'Invoice #12'")
    number: str
    client_name: str
    issue_date: str = Field(description="Display date, e.g. 'Jan 05, 2024'")
    amount: str = Field(description="Total with two decimals")
    money: str = Field(description="Currency symbol followed by amount")
    currency_code: str
    status: str
    status_style: str
    delay_index: int
    delay_seconds: float
    edit_url: str

    @classmethod
    def from_item(cls, item: DashboardItem) -> "DashboardItemResponse":
        return cls(
            id=item.id,
            label=item.label,
            number=item.number,
            client_name=item.client_name,
            issue_date=item.issue_date,
            amount=item.amount,
            money=item.money,
            currency_code=item.currency_code,
            status=item.status,
            status_style=item.status_style,
            delay_index=item.delay_index,
            delay_seconds=item.delay_seconds,
            edit_url=item.edit_url,
        )


class DashboardSectionResponse(BaseModel):
    """One non-empty partition."""
    category: CategoryEnum
    title: str
    delay_seconds: float
    items: list[DashboardItemResponse]

    @classmethod
    def from_section(cls, section: DashboardSection) -> "DashboardSectionResponse":
        return cls(
            category=CategoryEnum(section.category.value),
            title=section.title,
            delay_seconds=section.delay_seconds,
            items=[DashboardItemResponse.from_item(item) for item in section.items],
        )


class NotificationResponse(BaseModel):
    """A toast raised while building the dashboard."""
    title: str
    message: str
    variant: str = "destructive"


class DashboardResponse(BaseModel):
    """Full dashboard payload."""
    mode: DashboardModeEnum
    title: str
    heading: str | None = None
    message: str | None = None
    sections: list[DashboardSectionResponse] = []
    counts: dict[str, int] = {}
    create_url: str
    settings_url: str
    notifications: list[NotificationResponse] = []

    @classmethod
    def from_view(
        cls,
        view: DashboardView,
        notifications: list[Notification] | None = None,
    ) -> "DashboardResponse":
        return cls(
            mode=DashboardModeEnum(view.mode),
            title=view.title,
            heading=view.heading,
            message=view.message,
            sections=[DashboardSectionResponse.from_section(s) for s in view.sections],
            counts=view.counts,
            create_url=view.create_url,
            settings_url=view.settings_url,
            notifications=[
                NotificationResponse(title=n.title, message=n.message, variant=n.variant)
                for n in notifications or []
            ],
        )


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str
    database: str = "configured"


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: str | None = None
    code: str | None = None
