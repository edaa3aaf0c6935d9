"""
PDF Generation utilities for payment reports
"""
from reportlab.lib.pagesizes import letter, A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.utils import ImageReader
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, Image, HRFlowable
from reportlab.lib import colors
from reportlab.lib.enums import TA_LEFT, TA_CENTER, TA_RIGHT
from io import BytesIO
from dataclasses import dataclass
from functools import partial
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional, Union
from xml.sax.saxutils import escape
import logging

from ..config import DEFAULT_LOGO_PATH
from ..exceptions import AssetUnavailableError, ReportGenerationError
from ..schemas.payment import PaymentRecord
from ..schemas.report_config import PageFormat, ReportConfig, Theme
from .helpers import format_amount, format_display_timestamp, now_in_timezone

logger = logging.getLogger(__name__)

PAGE_SIZES = {
    PageFormat.A4: A4,
    PageFormat.LETTER: letter,
}

PAGE_MARGIN = 50
LOGO_MAX_SIZE = 150
TABLE_WIDTH_RATIO = 0.9
CELL_PADDING = 5

LOGO_PLACEHOLDER_TEXT = "Logo not available"
PAYMENT_DETAILS_HEADER = "Payment Details"
CUSTOMER_INFO_HEADER = "Customer Information"
TIMESTAMP_PREFIX = "Generated on: "


@dataclass(frozen=True)
class ThemePalette:
    """Background and text colours of a theme. The only place theme colours are decided."""
    background: colors.Color
    text: colors.Color

    @classmethod
    def for_theme(cls, theme: Theme) -> "ThemePalette":
        return THEME_PALETTES[theme]


THEME_PALETTES = {
    Theme.LIGHT: ThemePalette(
        background=colors.Color(255 / 255, 255 / 255, 255 / 255),
        text=colors.Color(0, 0, 0),
    ),
    Theme.DARK: ThemePalette(
        background=colors.Color(50 / 255, 50 / 255, 50 / 255),
        text=colors.Color(255 / 255, 255 / 255, 255 / 255),
    ),
}


class PaymentReportGenerator:
    """
    Lays out a payment report PDF from a ReportConfig and a PaymentRecord.

    Sections, in order: logo, title, payment details, customer information,
    timestamp, footer. Each one except the title is controlled by a config toggle.
    Holds no per-render state, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        logo_path: Union[str, Path] = DEFAULT_LOGO_PATH,
        timezone: Optional[str] = None,
        clock: Optional[Callable[[], datetime]] = None,
        invariant: bool = False,
    ):
        self.logo_path = Path(logo_path)
        self.timezone = timezone
        self.clock = clock or (lambda: now_in_timezone(self.timezone))
        self.invariant = invariant
        self.styles = getSampleStyleSheet()

    def get_page_size(self, page_format: PageFormat):
        return PAGE_SIZES[page_format]

    def get_styles(self, theme: Theme) -> dict:
        """Paragraph styles for a theme; every style takes its colour from ThemePalette"""
        text_color = ThemePalette.for_theme(theme).text
        return {
            'title': ParagraphStyle(
                'ReportTitle',
                parent=self.styles['Heading1'],
                fontName='Helvetica-Bold',
                fontSize=18,
                leading=22,
                spaceBefore=0,
                spaceAfter=20,
                textColor=text_color,
                alignment=TA_CENTER
            ),
            'header': ParagraphStyle(
                'ReportHeader',
                parent=self.styles['Heading2'],
                fontName='Helvetica-Bold',
                fontSize=14,
                leading=17,
                spaceBefore=15,
                spaceAfter=10,
                textColor=text_color,
                alignment=TA_LEFT
            ),
            'body': ParagraphStyle(
                'ReportBody',
                parent=self.styles['Normal'],
                fontName='Helvetica',
                fontSize=12,
                leading=15,
                textColor=text_color,
                alignment=TA_LEFT
            ),
            'timestamp': ParagraphStyle(
                'ReportTimestamp',
                parent=self.styles['Normal'],
                fontName='Helvetica-Oblique',
                fontSize=10,
                leading=12,
                spaceBefore=20,
                textColor=text_color,
                alignment=TA_RIGHT
            ),
            'footer': ParagraphStyle(
                'ReportFooter',
                parent=self.styles['Normal'],
                fontName='Helvetica-Oblique',
                fontSize=10,
                leading=12,
                spaceBefore=10,
                textColor=text_color,
                alignment=TA_CENTER
            ),
        }

    def generate_pdf(self, config: ReportConfig, payment: PaymentRecord) -> bytes:
        """
        Render the report and return the finished PDF bytes.

        Raises:
            ReportGenerationError: on any layout or encoding failure. A missing
            or unreadable logo is not a failure, a placeholder is drawn instead.
        """
        try:
            buffer = BytesIO()
            pagesize = self.get_page_size(config.format)
            doc = SimpleDocTemplate(
                buffer,
                pagesize=pagesize,
                rightMargin=PAGE_MARGIN,
                leftMargin=PAGE_MARGIN,
                topMargin=PAGE_MARGIN,
                bottomMargin=PAGE_MARGIN,
                title=config.title,
                subject=f"Payment {payment.transaction_id}",
                invariant=1 if self.invariant else 0,
            )

            story = self.build_story(config, payment, frame_width=doc.width)
            paint_background = partial(self.draw_background, theme=config.theme)

            doc.build(story, onFirstPage=paint_background, onLaterPages=paint_background)

            pdf_bytes = buffer.getvalue()
            buffer.close()
            return pdf_bytes

        except ReportGenerationError:
            raise
        except Exception as e:
            raise ReportGenerationError(f"Error generating PDF: {e}", e) from e

    def draw_background(self, canvas, doc, theme: Theme):
        """Fill the whole page with the theme background; runs before any flowable is drawn"""
        canvas.saveState()
        canvas.setFillColor(ThemePalette.for_theme(theme).background)
        canvas.rect(0, 0, doc.pagesize[0], doc.pagesize[1], fill=1, stroke=0)
        canvas.restoreState()

    def build_story(self, config: ReportConfig, payment: PaymentRecord, frame_width: Optional[float] = None) -> list:
        """Flowables of the report, in section order"""
        if frame_width is None:
            frame_width = self.get_page_size(config.format)[0] - 2 * PAGE_MARGIN

        styles = self.get_styles(config.theme)
        elements = []

        if config.include_logo:
            elements.extend(self.build_logo(styles))

        elements.append(Paragraph(escape(config.title), styles['title']))

        if config.include_payment_details:
            elements.extend(self.build_payment_details(payment, styles, frame_width))

        if config.include_user_info:
            elements.extend(self.build_user_info(payment, styles))

        if config.include_timestamp:
            elements.append(self.build_timestamp(styles))

        if config.footer_message:
            elements.extend(self.build_footer(config.footer_message, config.theme, styles))

        return elements

    def load_logo(self) -> Image:
        """Logo scaled to fit LOGO_MAX_SIZE x LOGO_MAX_SIZE. Raises AssetUnavailableError."""
        try:
            data = self.logo_path.read_bytes()
            width, height = ImageReader(BytesIO(data)).getSize()
        except Exception as e:
            raise AssetUnavailableError(f"Cannot load logo from {self.logo_path}: {e}") from e

        if not width or not height:
            raise AssetUnavailableError(f"Logo at {self.logo_path} has no size")

        scale = min(LOGO_MAX_SIZE / width, LOGO_MAX_SIZE / height)
        logo = Image(BytesIO(data), width=width * scale, height=height * scale)
        logo.hAlign = 'CENTER'
        return logo

    def build_logo(self, styles: dict) -> List:
        try:
            logo = self.load_logo()
        except AssetUnavailableError as e:
            logger.warning(f"{e}; using placeholder text")
            return [Paragraph(LOGO_PLACEHOLDER_TEXT, styles["body"])]
        return [logo, Spacer(1, 12)]

    def build_payment_details(self, payment: PaymentRecord, styles: dict, frame_width: float) -> List:
        cell_style = styles['body']
        rows = [
            ("Transaction ID:", payment.transaction_id),
            ("Amount:", format_amount(payment.amount)),
            ("Payment Method:", payment.payment_method),
        ]
        table_data = [
            [Paragraph(escape(label), cell_style), Paragraph(escape(value), cell_style)]
            for label, value in rows
        ]

        table_width = frame_width * TABLE_WIDTH_RATIO
        table = Table(
            table_data,
            colWidths=[table_width / 2, table_width / 2],
            hAlign='CENTER',
            spaceBefore=10,
            spaceAfter=10,
        )
        table.setStyle(TableStyle([
            ('LEFTPADDING', (0, 0), (-1, -1), CELL_PADDING),
            ('RIGHTPADDING', (0, 0), (-1, -1), CELL_PADDING),
            ('TOPPADDING', (0, 0), (-1, -1), CELL_PADDING),
            ('BOTTOMPADDING', (0, 0), (-1, -1), CELL_PADDING),
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ]))

        return [Paragraph(PAYMENT_DETAILS_HEADER, styles['header']), table]

    def build_user_info(self, payment: PaymentRecord, styles: dict) -> List:
        return [
            Paragraph(CUSTOMER_INFO_HEADER, styles['header']),
            Paragraph(escape(f"Customer: {payment.customer_name}"), styles['body']),
        ]

    def build_timestamp(self, styles: dict) -> Paragraph:
        text = TIMESTAMP_PREFIX + format_display_timestamp(self.clock())
        return Paragraph(text, styles['timestamp'])

    def build_footer(self, message: str, theme: Theme, styles: dict) -> List:
        return [
            Spacer(1, 12),
            HRFlowable(width="100%", thickness=1, color=ThemePalette.for_theme(theme).text),
            Paragraph(escape(message), styles['footer']),
        ]
