from functools import lru_cache
import logging

from .config import get_settings
from .services.report_service import PaymentReportService
from .utils.helpers import now_in_timezone
from .utils.pdf_generator import PaymentReportGenerator

# Set up logging
logger = logging.getLogger(__name__)


@lru_cache()
def get_report_generator() -> PaymentReportGenerator:
    """
    Process-wide PDF generator built from settings.
    Tests replace it through app.dependency_overrides.
    """
    settings = get_settings()
    logger.debug(f"Creating report generator (logo: {settings.logo_path}, timezone: {settings.timezone})")
    return PaymentReportGenerator(
        logo_path=settings.logo_path,
        timezone=settings.timezone,
        invariant=settings.pdf_invariant,
    )


@lru_cache()
def get_report_service() -> PaymentReportService:
    settings = get_settings()
    return PaymentReportService(
        generator=get_report_generator(),
        clock=lambda: now_in_timezone(settings.timezone),
    )
