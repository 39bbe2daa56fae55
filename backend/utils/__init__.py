from .aggregation import bucket_by_date, compute_profit, grade_distribution, sum_field
from .report_window import ReportWindow, window_bounds

__all__ = ['ReportWindow', 'bucket_by_date', 'compute_profit', 'grade_distribution', 'sum_field', 'window_bounds']
