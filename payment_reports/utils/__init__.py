# Shared utilities
from .helpers import (
    to_decimal,
    round_half_up,
    format_amount,
    now_in_timezone,
    format_display_timestamp,
    format_filename_timestamp,
)

__all__ = [
    'to_decimal',
    'round_half_up',
    'format_amount',
    'now_in_timezone',
    'format_display_timestamp',
    'format_filename_timestamp',
]
