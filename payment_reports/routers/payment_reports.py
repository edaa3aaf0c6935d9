from urllib.parse import quote

from fastapi import APIRouter, Depends, Response
from fastapi.concurrency import run_in_threadpool

from ..dependencies import get_report_service
from ..schemas.payment import PaymentReportRequest
from ..schemas.report_config import ReportConfig, ReportConfigBuilder
from ..schemas.responses import ErrorResponse
from ..services.report_service import PaymentReportService


router = APIRouter(
    prefix="/reports",
    tags=["Payment Reports"],
)

DOWNLOAD_FILENAME = "payment-report.pdf"

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


def build_report_config(req: PaymentReportRequest) -> ReportConfig:
    """Translate the request options into a ReportConfig. Raises InvalidConfigurationError."""
    return (
        ReportConfigBuilder()
        .with_logo(req.includeLogo)
        .with_title(req.title)
        .with_payment_details(req.includePaymentDetails)
        .with_user_info(req.includeUserInfo)
        .with_theme(req.theme)
        .with_timestamp(req.includeTimestamp)
        .with_footer_message(req.footerMessage)
        .with_format(req.format)
        .build()
    )


@router.post(
    "/payment",
    summary="Generate a payment report PDF",
    description="Generates a PDF report from the supplied configuration and payment data",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}, "description": "Report generated"}, **ERROR_RESPONSES},
)
async def generate_payment_report(req: PaymentReportRequest, service: PaymentReportService = Depends(get_report_service)):
    config = build_report_config(req)
    payment = req.to_payment_record()

    resource = await run_in_threadpool(service.generate, config, payment)

    return Response(
        content=resource.content,
        media_type=resource.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{DOWNLOAD_FILENAME}"',
            # header values must be latin-1; the transaction id may not be
            "X-Report-Filename": quote(resource.filename),
        }
    )


@router.post(
    "/payment/preview",
    summary="Preview a payment report PDF",
    description="Renders the same report inline, under a temporary filename",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}, "description": "Preview generated"}, **ERROR_RESPONSES},
)
async def preview_payment_report(req: PaymentReportRequest, service: PaymentReportService = Depends(get_report_service)):
    config = build_report_config(req)
    payment = req.to_payment_record()

    resource = await run_in_threadpool(service.preview, config, payment)

    return Response(
        content=resource.content,
        media_type=resource.media_type,
        headers={"Content-Disposition": f'inline; filename="{resource.filename}"'}
    )
