"""Terminal dashboard: python -m app.dashboard"""

import asyncio
import logging

from app.core.config import load_dashboard_settings
from app.dashboard.client import ReportingClient
from app.dashboard.poller import DashboardPoller
from app.dashboard.render import render_dashboard

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def run_dashboard():
    settings = load_dashboard_settings()
    logger.info(f"Polling {settings.api_url} every {settings.poll_interval}s")

    def show(state):
        print(render_dashboard(state, api_url=settings.api_url), flush=True)

    async with ReportingClient(settings.api_url, timeout=settings.timeout) as client:
        poller = DashboardPoller(client, interval=settings.poll_interval, on_update=show)
        await poller.load_features()
        async with poller:
            # runs until cancelled (Ctrl-C)
            await asyncio.Event().wait()


def main():
    try:
        asyncio.run(run_dashboard())
    except KeyboardInterrupt:
        logger.info("Dashboard stopped")


if __name__ == "__main__":
    main()
