from app.dashboard.state import DashboardState
from app.models.health import HealthReport, HealthStatus, StatsReport

TITLE = "AWS CI/CD Pipeline Demo"
SUBTITLE = "Full-Stack Application with Enterprise DevOps Practices"
LOADING_TEXT = "Loading application..."
RULE = "-" * 60


def status_badge(status: HealthStatus | str | None) -> str:
    value = str(getattr(status, "value", status) or "").lower()
    if value in ("healthy", "warning", "error"):
        return value
    return "healthy"


def _row(label: str, value) -> str:
    return f"  {label:<18}{value}"


def _health_card(health: HealthReport | None) -> list[str]:
    lines = ["System Health", "  Real-time health monitoring"]
    if health is None:
        lines.append("  Health data unavailable")
        return lines

    status = health.status.value
    lines += [
        _row("Status:", f"{status.upper()} [{status_badge(status)}]"),
        _row("Version:", health.version),
        _row("Environment:", health.environment.capitalize()),
        _row("Memory Used:", f"{health.memory.used} MB"),
        _row("Last Check:", health.timestamp.astimezone().strftime("%H:%M:%S")),
    ]
    return lines


def _stats_card(stats: StatsReport | None) -> list[str]:
    lines = ["API Statistics", "  Performance metrics"]
    if stats is None:
        lines.append("  Statistics unavailable")
        return lines

    lines += [
        _row("Total Requests:", f"{stats.total_requests:,}"),
        _row("Uptime:", stats.uptime),
        _row("Memory Usage:", stats.memory_usage),
        _row("Python Version:", stats.python_version),
        _row("Platform:", stats.platform.capitalize()),
    ]
    return lines


def render_dashboard(state: DashboardState, api_url: str = "") -> str:
    """Plain-text rendering of the dashboard for a terminal."""
    if state.loading:
        return LOADING_TEXT

    lines = [RULE, TITLE, SUBTITLE, RULE]

    if state.error:
        target = api_url or "the configured API URL"
        lines += [
            "!! Connection Error",
            f"!! {state.error}",
            f"!! Make sure the backend server is running at {target}",
            RULE,
        ]

    lines += _health_card(state.health)
    lines.append("")
    lines += _stats_card(state.stats)

    if state.features:
        lines += ["", "DevOps Features Implemented"]
        for feature in state.features:
            lines.append(f"  * {feature.name} - {feature.description} ({feature.status.value})")

    lines.append(RULE)
    return "\n".join(lines)
