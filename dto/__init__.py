from .dashboard_summary import DashboardSummary
