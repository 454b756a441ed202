"""Process-wide session accessor used by the MCP tools."""

import logging

from focus_matrix_mcp.config import get_settings
from focus_matrix_mcp.core.focus import RandomCheckInPolicy
from focus_matrix_mcp.core.state import FocusSession
from focus_matrix_mcp.utils.storage import JsonStore

logger = logging.getLogger(__name__)

_session: FocusSession | None = None


def get_session() -> FocusSession:
    """Return the live session, loading it from the configured store on first use."""
    global _session
    if _session is None:
        settings = get_settings()
        store = JsonStore(settings.data_dir)
        _session = FocusSession.load(store, policy=RandomCheckInPolicy(settings.check_in_threshold))
        logger.debug("Session loaded from %s", store.data_dir)
    return _session


def set_session(session: FocusSession | None) -> None:
    """Install (or with None, drop) the session the tools operate on."""
    global _session
    _session = session
