"""
HR Dashboard — Enum-Based State Machine
=========================================
Defines the dashboard's states and provides a guarded transition manager.

State Flow:
    UNAUTHENTICATED
        └─► IDLE
              └─► PROCESSING
                    └─► COMPLETE
                          └─► PROCESSING   (another sheet submitted)
    PROCESSING ──(run aborted)──► IDLE or COMPLETE, whichever it came from
    Any state ──(logout)──► UNAUTHENTICATED
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Dict, Set


# ---------------------------------------------------------------------------
# State Enumeration
# ---------------------------------------------------------------------------

class DashboardState(Enum):
    """Phases of a recruiter's visit to the dashboard."""

    UNAUTHENTICATED = auto()   # No session; the dashboard redirects to login
    IDLE            = auto()   # Signed in, nothing submitted yet
    PROCESSING      = auto()   # A sheet was submitted and the backend call is pending
    COMPLETE        = auto()   # Stats are available; the Results tab is enabled


# ---------------------------------------------------------------------------
# Allowed State Transitions (Adjacency Map)
# ---------------------------------------------------------------------------

#: Maps each state to the set of states it is permitted to transition into.
ALLOWED_TRANSITIONS: Dict[DashboardState, Set[DashboardState]] = {
    DashboardState.UNAUTHENTICATED: {DashboardState.IDLE},
    DashboardState.IDLE:            {DashboardState.PROCESSING, DashboardState.UNAUTHENTICATED},
    DashboardState.PROCESSING:      {DashboardState.COMPLETE,   DashboardState.IDLE, DashboardState.UNAUTHENTICATED},
    DashboardState.COMPLETE:        {DashboardState.PROCESSING, DashboardState.UNAUTHENTICATED},
}


# ---------------------------------------------------------------------------
# State Manager
# ---------------------------------------------------------------------------

class StateManager:
    """
    Holds the current dashboard state and enforces legal transitions.

    Raises:
        InvalidTransitionError: When an illegal state transition is attempted.

    Usage::

        sm = StateManager(DashboardState.IDLE)
        sm.transition(DashboardState.PROCESSING)
        print(sm.current_state)  # DashboardState.PROCESSING
    """

    def __init__(self, initial: DashboardState = DashboardState.UNAUTHENTICATED) -> None:
        self._state: DashboardState = initial

    @property
    def current_state(self) -> DashboardState:
        return self._state

    @property
    def is_authenticated(self) -> bool:
        return self._state != DashboardState.UNAUTHENTICATED

    @property
    def is_processing(self) -> bool:
        return self._state == DashboardState.PROCESSING

    @property
    def is_complete(self) -> bool:
        """True once a run has finished; gates the Results tab."""
        return self._state == DashboardState.COMPLETE

    def transition(self, next_state: DashboardState) -> None:
        """
        Transition to the given state if it is a legal move from the current state.

        Raises:
            InvalidTransitionError: If the transition is not permitted.
        """
        allowed = ALLOWED_TRANSITIONS.get(self._state, set())
        if next_state not in allowed:
            raise InvalidTransitionError(
                from_state=self._state,
                to_state=next_state,
                allowed=allowed,
            )
        self._state = next_state

    def __repr__(self) -> str:
        return f"StateManager(current={self._state.name})"


# ---------------------------------------------------------------------------
# Custom Exception
# ---------------------------------------------------------------------------

class InvalidTransitionError(Exception):
    """
    Raised when an illegal state transition is attempted in the StateManager.

    Attributes:
        from_state: The state the machine was in before the transition attempt.
        to_state:   The target state that was requested.
        allowed:    The set of legally reachable states from `from_state`.
    """

    def __init__(
        self,
        from_state: DashboardState,
        to_state: DashboardState,
        allowed: Set[DashboardState],
    ) -> None:
        self.from_state = from_state
        self.to_state = to_state
        self.allowed = allowed
        allowed_names = ", ".join(sorted(s.name for s in allowed)) or "none"
        super().__init__(
            f"Cannot transition from {from_state.name} → {to_state.name}. "
            f"Allowed: [{allowed_names}]"
        )
