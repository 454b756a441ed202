"""FastMCP server initialization for Focus Matrix MCP."""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from mcp.server.fastmcp import FastMCP

from focus_matrix_mcp.config import get_settings
from focus_matrix_mcp.core.reminders import ReminderLoop
from focus_matrix_mcp.core.state import now_ms
from focus_matrix_mcp.session import get_session

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Run the reminder loop for as long as the server is up."""
    settings = get_settings()
    loop = ReminderLoop(
        get_tasks=lambda: get_session().tasks,
        clock=now_ms,
        interval=settings.reminder_interval_seconds,
        window_ms=int(settings.reminder_window_seconds * 1000),
    )
    loop.start()
    try:
        yield
    finally:
        await loop.stop()


# Initialize the MCP server
mcp = FastMCP("focus_matrix_mcp", lifespan=lifespan)


def configure_logging(level: str) -> None:
    # stdout carries the MCP stdio protocol
    logging.basicConfig(
        level=level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run() -> None:
    """Run the MCP server."""
    configure_logging(get_settings().log_level)
    logger.info("Starting focus_matrix_mcp")
    mcp.run()


if __name__ == "__main__":
    run()
