from app.dashboard.client import ReportingClient, ReportingClientError
from app.dashboard.poller import DashboardPoller
from app.dashboard.render import render_dashboard
from app.dashboard.state import DashboardPhase, DashboardState

__all__ = [
    "ReportingClient",
    "ReportingClientError",
    "DashboardPoller",
    "DashboardPhase",
    "DashboardState",
    "render_dashboard",
]
