"""
HR Dashboard — Sign-in / Sign-out
===================================
Glue between the login form, the (mocked) backend login, the session store
and the dashboard controller.
"""

from __future__ import annotations

import logging
from typing import MutableMapping, Optional

from core import validators as val
from core.api_client import BaseBackendClient
from core.messages import (
    Notifier,
    null_notifier,
    toast_logged_out,
    toast_login_invalid,
    toast_login_success,
)
from core.session import CONTROLLER_KEY, end_session, start_session
from models.session import UserSession

logger = logging.getLogger(__name__)


def sign_in(
    state: MutableMapping,
    client: BaseBackendClient,
    email: str,
    password: str,
    notify: Notifier = null_notifier,
) -> Optional[UserSession]:
    """
    Validate the form, call the backend login, and start a session.

    Returns:
        The new ``UserSession``, or ``None`` if the form was invalid or the
        backend refused.
    """
    email_result = val.validate_email(email)
    if not email_result.is_valid:
        notify(toast_login_invalid(email_result.error))
        return None

    password_result = val.validate_password(password)
    if not password_result.is_valid:
        notify(toast_login_invalid(password_result.error))
        return None

    result = client.login(email_result.value, password_result.value)
    if not result.success:
        logger.warning("Login refused for %s", email_result.value)
        notify(toast_login_invalid("Invalid email or password."))
        return None

    session = start_session(state, email_result.value)
    controller = state.get(CONTROLLER_KEY)
    if controller is not None:
        controller.activate()
    notify(toast_login_success(session.display_name))
    return session


def sign_out(state: MutableMapping, notify: Notifier = null_notifier) -> None:
    """Tear down the session and the dashboard's run state."""
    controller = state.get(CONTROLLER_KEY)
    if controller is not None:
        controller.deactivate()
    end_session(state)
    notify(toast_logged_out())
