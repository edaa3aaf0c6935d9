from .report_service import PaymentReportService, ReportResource, build_report_filename

__all__ = ['PaymentReportService', 'ReportResource', 'build_report_filename']
