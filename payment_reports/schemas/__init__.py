# Schemas for the Payment Reports API
from .report_config import (
    Theme,
    PageFormat,
    ReportConfig,
    ReportConfigBuilder,
    parse_theme,
    parse_page_format,
)
from .payment import PaymentRecord, PaymentReportRequest
from .responses import ErrorResponse, HealthResponse

__all__ = [
    'Theme',
    'PageFormat',
    'ReportConfig',
    'ReportConfigBuilder',
    'parse_theme',
    'parse_page_format',
    'PaymentRecord',
    'PaymentReportRequest',
    'ErrorResponse',
    'HealthResponse',
]
