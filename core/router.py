"""
HR Dashboard — Page Routing
=============================
Maps the ``page`` query parameter to the page that should render, applying
the auth redirects:

    ""/"/"/"index"  → dashboard if signed in, else login
    "login"         → dashboard if signed in
    "dashboard"     → login if signed out
    anything else   → not found
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Route(str, Enum):
    LOGIN = "login"
    DASHBOARD = "dashboard"
    NOT_FOUND = "not_found"


_INDEX_PATHS = frozenset({"", "/", "index"})


def normalize_path(raw: Optional[str]) -> str:
    return (raw or "").strip().strip("/").lower()


def resolve_route(raw_path: Optional[str], authenticated: bool) -> Route:
    """
    Resolve the page to render.

    Examples::

        >>> resolve_route("dashboard", authenticated=False)
        <Route.LOGIN: 'login'>
        >>> resolve_route("login", authenticated=True)
        <Route.DASHBOARD: 'dashboard'>
    """
    path = normalize_path(raw_path)

    if path in _INDEX_PATHS:
        return Route.DASHBOARD if authenticated else Route.LOGIN
    if path == Route.LOGIN.value:
        return Route.DASHBOARD if authenticated else Route.LOGIN
    if path == Route.DASHBOARD.value:
        return Route.DASHBOARD if authenticated else Route.LOGIN

    logger.error("404 Error: User attempted to access non-existent route: %s", raw_path)
    return Route.NOT_FOUND
