"""
Payment Report Service
Coordinates PDF generation for payment reports and names the resulting files
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from ..exceptions import ReportGenerationError
from ..schemas.payment import PaymentRecord
from ..schemas.report_config import ReportConfig
from ..utils.helpers import format_filename_timestamp, now_in_timezone
from ..utils.pdf_generator import PaymentReportGenerator

logger = logging.getLogger(__name__)

PREVIEW_FILENAME = "preview_payment_pdf"
PDF_MEDIA_TYPE = "application/pdf"


@dataclass(frozen=True)
class ReportResource:
    """Generated document bytes together with the filename they should be served under"""
    content: bytes
    filename: str
    media_type: str = PDF_MEDIA_TYPE

    @property
    def size(self) -> int:
        return len(self.content)


def build_report_filename(transaction_id: str, generated_at: datetime) -> str:
    """payment_report_{transaction_id}_{yyyyMMdd_HHmmss}.pdf"""
    return f"payment_report_{transaction_id}_{format_filename_timestamp(generated_at)}.pdf"


class PaymentReportService:
    """
    Service for generating payment report PDFs.

    Stateless apart from its collaborators: create it once at startup and share it.
    """

    def __init__(
        self,
        generator: PaymentReportGenerator,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.generator = generator
        self.clock = clock or now_in_timezone

    def generate(self, config: ReportConfig, payment: PaymentRecord) -> ReportResource:
        """
        Generate a PDF report for download.

        Returns:
            ReportResource named payment_report_{transaction_id}_{timestamp}.pdf

        Raises:
            ReportGenerationError: if rendering fails for any reason
        """
        try:
            logger.info(f"Generating PDF report for payment ID: {payment.transaction_id}")
            logger.debug(f"Report configuration: {config.describe()}")

            pdf_bytes = self.generator.generate_pdf(config, payment)

            filename = build_report_filename(payment.transaction_id, self.clock())
            logger.info(f"PDF report generated successfully: {filename}")

            return ReportResource(content=pdf_bytes, filename=filename)

        except Exception as e:
            logger.exception("Error generating PDF report")
            raise ReportGenerationError(f"Error generating PDF report: {e}", e) from e

    def preview(self, config: ReportConfig, payment: PaymentRecord) -> ReportResource:
        """Same rendering as generate(), served under a fixed temporary filename"""
        try:
            logger.info(f"Generating report preview for payment ID: {payment.transaction_id}")
            logger.debug(f"Report configuration: {config.describe()}")

            pdf_bytes = self.generator.generate_pdf(config, payment)

            return ReportResource(content=pdf_bytes, filename=PREVIEW_FILENAME)

        except Exception as e:
            logger.exception("Error generating report preview")
            raise ReportGenerationError(f"Error generating report preview: {e}", e) from e
