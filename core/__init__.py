"""
HR Dashboard — Core Package
Contains: state manager, dashboard controller, backend client, validators,
routing, and session handling.

Note: Modules that import ``requests`` (api_client, dashboard, shortlist,
auth) are not re-exported here. Import them directly from their submodules:
    from core.dashboard import DashboardController
    from core.api_client import create_backend_client
"""
from .state_manager import DashboardState, StateManager, InvalidTransitionError

__all__ = [
    "DashboardState",
    "StateManager",
    "InvalidTransitionError",
]
