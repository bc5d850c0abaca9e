"""Session management for dashboard pages"""

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

from fastapi import Request, Response

from ..services.dashboard import Dashboard
from .config import get_settings


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class DashboardSession:
    """One browser page and its dashboard"""
    session_id: str
    created_at: datetime
    updated_at: datetime
    dashboard: Dashboard

    def touch(self) -> None:
        self.updated_at = _now()


class SessionManager:
    """Manages dashboard sessions"""

    def __init__(self, factory: Callable[[], Dashboard], max_age_hours: int = 24):
        self.factory = factory
        self.max_age_hours = max_age_hours
        self.sessions: dict[str, DashboardSession] = {}

    def create_session(self) -> DashboardSession:
        """Create a new session with a freshly initialized dashboard"""
        self.cleanup_old_sessions(self.max_age_hours)
        now = _now()
        session = DashboardSession(
            session_id=str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            dashboard=self.factory(),
        )
        self.sessions[session.session_id] = session
        return session

    def get_session(self, session_id: Optional[str]) -> Optional[DashboardSession]:
        """Get session by ID"""
        if not session_id:
            return None
        session = self.sessions.get(session_id)
        if session:
            session.touch()
        return session

    def get_or_create_session(self, session_id: Optional[str] = None) -> tuple[DashboardSession, bool]:
        """
        Get existing session or create new one.

        Returns:
            Tuple of (session, created)
        """
        session = self.get_session(session_id)
        if session:
            return session, False
        return self.create_session(), True

    def delete_session(self, session_id: Optional[str]) -> bool:
        """Delete a session"""
        if session_id and session_id in self.sessions:
            del self.sessions[session_id]
            return True
        return False

    def cleanup_old_sessions(self, max_age_hours: int = 24) -> int:
        """Remove sessions older than max_age_hours"""
        now = _now()
        old_sessions = [
            sid for sid, session in self.sessions.items()
            if (now - session.updated_at).total_seconds() > max_age_hours * 3600
        ]
        for sid in old_sessions:
            del self.sessions[sid]
        return len(old_sessions)


async def get_session_manager(request: Request) -> SessionManager:
    """FastAPI dependency: the application's session manager"""
    return request.app.state.sessions


async def get_current_session(request: Request, response: Response) -> DashboardSession:
    """
    FastAPI dependency: the caller's session, from the session cookie.

    A missing or expired session is replaced by a new one and the cookie is
    set on the response.
    """
    manager: SessionManager = request.app.state.sessions
    cookie_name = get_settings().session_cookie
    session, created = manager.get_or_create_session(request.cookies.get(cookie_name))
    if created:
        response.set_cookie(cookie_name, session.session_id, httponly=True, samesite="lax")
    return session
