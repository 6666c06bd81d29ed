"""
HR Dashboard — Session Lifecycle
==================================
Creates and tears down the ``UserSession`` stored in Streamlit's session
state. Functions take the state mapping as an argument so they work the same
against ``st.session_state`` and a plain ``dict`` in tests.
"""

from __future__ import annotations

import logging
from typing import MutableMapping, Optional

from models.session import UserSession

logger = logging.getLogger(__name__)

#: The single key the signed-in user lives under.
SESSION_KEY = "user_session"

#: Session-state key of the ``DashboardController``, cleared on logout.
CONTROLLER_KEY = "dashboard"


def current_session(state: MutableMapping) -> Optional[UserSession]:
    """Return the signed-in user, or ``None``."""
    session = state.get(SESSION_KEY)
    if isinstance(session, UserSession) and session.authenticated:
        return session
    return None


def is_authenticated(state: MutableMapping) -> bool:
    return current_session(state) is not None


def start_session(state: MutableMapping, email: str) -> UserSession:
    """Create a session for *email*, replacing any previous one."""
    session = UserSession(email=email)
    state[SESSION_KEY] = session
    logger.info("Session %s started for %s", session.session_id, email)
    return session


def end_session(state: MutableMapping) -> bool:
    """
    Remove the signed-in user and all dashboard state.

    Returns:
        True if a session existed.
    """
    session = state.pop(SESSION_KEY, None)
    state.pop(CONTROLLER_KEY, None)
    if session is not None:
        logger.info("Session %s ended", session.session_id)
    return session is not None
