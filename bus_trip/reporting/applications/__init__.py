from .report_service import ReportService as ReportService
