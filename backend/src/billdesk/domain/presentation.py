"""
Presentation derivers for dashboard items.

Each function computes one display value from raw document data. They are
pure, take no configuration and can be called in any order.

Design Decisions:
- Status and currency lookups fall back to a default instead of raising;
  they only affect how an item looks
- Dates raise DateParseError; a bad issue date means the store sent
  corrupt data
- Amounts round half-up on Decimal, never on float
- Month names come from a fixed table so output does not depend on locale
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation
from typing import Mapping

from .errors import DateParseError
from .models import CATEGORY_ORDER, DocumentCategory, DocumentStatus


# Style tokens per status
STATUS_STYLES: dict[DocumentStatus, str] = {
    DocumentStatus.PAID: "bg-accent text-accent-foreground",
    DocumentStatus.SENT: "bg-primary text-primary-foreground",
    DocumentStatus.OVERDUE: "bg-destructive text-destructive-foreground",
}

# Used for drafts and for any status the store adds later
DEFAULT_STATUS_STYLE = "bg-muted text-muted-foreground"

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "CNY": "¥",
    "INR": "₹",
    "KRW": "₩",
    "RUB": "₽",
    "TRY": "₺",
    "NGN": "₦",
    "PHP": "₱",
    "ILS": "₪",
    "VND": "₫",
    "THB": "฿",
    "UAH": "₴",
    "PLN": "zł",
    "ZAR": "R",
    "BRL": "R$",
    "AUD": "A$",
    "CAD": "C$",
    "NZD": "NZ$",
    "HKD": "HK$",
    "SGD": "S$",
    "MXN": "MX$",
    "CHF": "CHF",
    "SEK": "kr",
    "NOK": "kr",
    "DKK": "kr",
    "AED": "د.إ",
    "KES": "KSh",
}

_MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Fallback formats for issue dates that are not ISO-8601
ISSUE_DATE_FORMATS = [
    "%Y-%m-%d %H:%M:%S%z",
    "%Y/%m/%d",
    "%b %d, %Y",
]

_TWO_PLACES = Decimal("0.01")

# Seconds between consecutive item entrance animations
ANIMATION_STEP_SECONDS = 0.1

SECTION_TITLES: dict[DocumentCategory, str] = {
    DocumentCategory.INVOICE: "Invoices",
    DocumentCategory.QUOTATION: "Quotations",
    DocumentCategory.PROFORMA_INVOICE: "Proforma Invoices",
}

ITEM_LABEL_PREFIXES: dict[DocumentCategory, str] = {
    DocumentCategory.INVOICE: "Invoice",
    DocumentCategory.QUOTATION: "Quote",
    DocumentCategory.PROFORMA_INVOICE: "Proforma Invoice",
}

# Entrance delay of each section heading, in seconds
SECTION_DELAYS: dict[DocumentCategory, float] = {
    DocumentCategory.INVOICE: 0.0,
    DocumentCategory.QUOTATION: 0.2,
    DocumentCategory.PROFORMA_INVOICE: 0.4,
}


def status_style(status: str | None) -> str:
    """
    Return the badge style token for a document status.

    Never raises: unknown or missing statuses get DEFAULT_STATUS_STYLE.
    """
    if not isinstance(status, str):
        return DEFAULT_STATUS_STYLE
    try:
        known = DocumentStatus(status.strip().lower())
    except ValueError:
        return DEFAULT_STATUS_STYLE
    return STATUS_STYLES.get(known, DEFAULT_STATUS_STYLE)


def currency_symbol(currency_code: str | int | None) -> str:
    """
    Resolve a currency code to its display symbol.

    Unknown codes are returned unchanged so the amount still carries
    its currency.
    """
    if currency_code is None or currency_code == "":
        return ""
    code = str(currency_code)
    return CURRENCY_SYMBOLS.get(code.strip().upper(), code)


def format_amount(total: Decimal | int | float | str) -> str:
    """
    Format a total with exactly two decimals, rounding half-up.

    Examples:
        format_amount(0)      -> "0.00"
        format_amount(19.5)   -> "19.50"
        format_amount(19.999) -> "20.00"

    Raises:
        ValueError: If the total is not a finite number
    """
    if isinstance(total, bool):
        raise ValueError(f"Invalid amount: {total!r}")
    try:
        # str() first so floats keep their shortest repr (2.675 stays 2.675)
        value = total if isinstance(total, Decimal) else Decimal(str(total).strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {total!r}") from e
    if not value.is_finite():
        raise ValueError(f"Invalid amount: {total!r}")
    # Enough precision for every integer digit plus the two decimals
    context = Context(prec=max(28, value.adjusted() + 3), rounding=ROUND_HALF_UP)
    return f"{value.quantize(_TWO_PLACES, context=context):f}"


def format_money(total: Decimal | int | float | str, currency_code: str | None) -> str:
    """Symbol followed by the two-decimal amount, e.g. "$19.50"."""
    return f"{currency_symbol(currency_code)}{format_amount(total)}"


def parse_issue_date(value: date | datetime | str | None) -> date:
    """
    Coerce a raw issue date into a calendar date.

    Accepts date and datetime objects and ISO-8601 strings, with or
    without a time component.

    Raises:
        DateParseError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise DateParseError(value)

    cleaned = value.strip()
    try:
        return datetime.fromisoformat(cleaned).date()
    except ValueError:
        pass

    for fmt in ISSUE_DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).date()
        except ValueError:
            continue

    raise DateParseError(value)


def format_date(issue_date: date | datetime | str | None) -> str:
    """
    Render an issue date as "Jan 05, 2024".

    Raises:
        DateParseError: If the date is missing or unparseable
    """
    parsed = parse_issue_date(issue_date)
    month = _MONTH_ABBREVIATIONS[parsed.month - 1]
    return f"{month} {parsed.day:02d}, {parsed.year:04d}"


def animation_delay_index(
    category: DocumentCategory,
    index_within_category: int,
    category_counts: Mapping[DocumentCategory, int],
) -> int:
    """
    Position of an item in the dashboard-wide entrance sequence.

    The item's index within its own list plus the number of items in
    every category rendered before it. Presentation only.

    Args:
        category: Category the item is rendered under
        index_within_category: Zero-based position in its partition
        category_counts: Item count per category; missing entries count as 0
    """
    if index_within_category < 0:
        raise ValueError(f"Index must be non-negative, got {index_within_category}")

    preceding = 0
    for other in CATEGORY_ORDER:
        if other is category:
            break
        preceding += category_counts.get(other, 0)
    return index_within_category + preceding


def animation_delay_seconds(delay_index: int) -> float:
    """Convert a delay index into an animation delay in seconds."""
    return round(delay_index * ANIMATION_STEP_SECONDS, 3)


def document_label(category: DocumentCategory, number: str) -> str:
    """Card title for a document, e.g. "Quote #12"."""
    return f"{ITEM_LABEL_PREFIXES[category]} #{number}"
