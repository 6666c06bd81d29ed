"""
HR Dashboard — User Session Model
===================================
The signed-in user, held under a single key in Streamlit's per-browser
session state. Created by ``core.session.start_session`` on login and removed
by ``core.session.end_session`` on logout.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class UserSession(BaseModel):
    """An authenticated dashboard user."""

    session_id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        description="Unique identifier for this sign-in.",
    )
    email: str = Field(description="Email the user signed in with.")
    authenticated: bool = Field(default=True)
    created_at: str = Field(
        default_factory=lambda: datetime.utcnow().isoformat(),
        description="ISO 8601 timestamp of the sign-in.",
    )

    @property
    def display_name(self) -> str:
        """Local part of the email, e.g. ``jane`` for ``jane@acme.io``."""
        return self.email.split("@", 1)[0] or self.email
