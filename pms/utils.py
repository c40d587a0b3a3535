from datetime import datetime, date, timezone
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from dateutil import parser as date_parser

CENT = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")

def now_utc() -> datetime:
    return datetime.now(timezone.utc)

def now_utc_iso() -> str:
    return now_utc().isoformat()

def today_utc() -> date:
    return now_utc().date()

def to_decimal(val) -> Decimal:
    if isinstance(val, Decimal):
        return val
    if isinstance(val, float):
        return Decimal(str(val))
    try:
        return Decimal(val)
    except (InvalidOperation, TypeError) as exc:
        raise ValueError(f"not a decimal: {val!r}") from exc

def round_money(val) -> Decimal:
    return to_decimal(val).quantize(CENT, rounding=ROUND_HALF_UP)

# percentages share the cent quantum
round_pct = round_money

def pct_of(part, whole) -> Decimal:
    """Percentage of ``whole`` rounded to 2 dp; 0 when ``whole`` is not positive."""
    if whole is None or whole <= 0:
        return ZERO
    return round_pct(to_decimal(part) / to_decimal(whole) * HUNDRED)

def as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)

def parse_datetime(val) -> datetime | None:
    if val is None:
        return None
    if isinstance(val, datetime):
        return as_utc(val)
    if isinstance(val, date):
        return datetime(val.year, val.month, val.day, tzinfo=timezone.utc)
    text = str(val).strip()
    if not text:
        return None
    try:
        return as_utc(date_parser.isoparse(text))
    except ValueError:
        return as_utc(date_parser.parse(text))
