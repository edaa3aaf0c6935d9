"""
Helper Utilities
Number and date formatting shared by the report generator and service
"""

import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation, localcontext
from typing import Optional, Union

import pytz

logger = logging.getLogger(__name__)

DISPLAY_TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M:%S"
FILENAME_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

Number = Union[Decimal, float, int, str]


def to_decimal(value: Number) -> Decimal:
    """Convert to Decimal; floats go through repr() so 99.9 stays 99.9"""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        value = repr(value)
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Invalid amount: {value!r}") from e


def round_half_up(value: Number, decimals: int = 2) -> Decimal:
    """Round half up to the given number of decimal places"""
    d = to_decimal(value)
    quantum = Decimal(1).scaleb(-decimals)
    # quantize fails when the result needs more digits than the context precision
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, d.adjusted() + decimals + 2)
        return d.quantize(quantum, rounding=ROUND_HALF_UP)


def format_amount(amount: Number) -> str:
    """
    Format an amount with exactly two decimals, '.' as separator and no grouping.
    Independent of the process locale: 10 -> '10.00', 10.005 -> '10.01'.
    """
    return f"{round_half_up(amount, 2):f}"


def now_in_timezone(tz_name: Optional[str] = None) -> datetime:
    """Current wall-clock time in tz_name, or local time when unset or unknown"""
    if not tz_name:
        return datetime.now()
    try:
        return datetime.now(pytz.timezone(tz_name))
    except pytz.UnknownTimeZoneError:
        logger.warning(f"Unknown timezone '{tz_name}', falling back to local time")
        return datetime.now()


def format_display_timestamp(dt: datetime) -> str:
    """dd/MM/yyyy HH:mm:ss"""
    return dt.strftime(DISPLAY_TIMESTAMP_FORMAT)


def format_filename_timestamp(dt: datetime) -> str:
    """yyyyMMdd_HHmmss"""
    return dt.strftime(FILENAME_TIMESTAMP_FORMAT)
