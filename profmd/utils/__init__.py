from .report_config import ReportOptions, DEFAULT_TOP_N, DEFAULT_TITLE

__all__ = ['ReportOptions', 'DEFAULT_TOP_N', 'DEFAULT_TITLE']
