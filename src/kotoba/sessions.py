import logging
import uuid
from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, Field

from .models import QuizSession
from .view_state import ViewState

logger = logging.getLogger(__name__)


class UserSession(BaseModel):
    deck: str
    view: ViewState = Field(default_factory=ViewState)
    quiz: QuizSession = Field(default_factory=QuizSession)
    created_at: datetime = Field(default_factory=datetime.now)


class SessionStore:
    """In-memory sessions keyed by cookie id, expired after a timeout."""

    def __init__(self, timeout_minutes: int, default_deck: str):
        self.timeout = timedelta(minutes=timeout_minutes)
        self.default_deck = default_deck
        self.sessions: Dict[str, UserSession] = {}

    def _is_expired(self, session: UserSession) -> bool:
        return datetime.now() - session.created_at > self.timeout

    def get(self, session_id: Optional[str]) -> Optional[UserSession]:
        if not session_id or session_id not in self.sessions:
            return None
        session = self.sessions[session_id]
        if self._is_expired(session):
            del self.sessions[session_id]
            logger.info(f"Session expired: {session_id}")
            return None
        return session

    def purge_expired(self) -> int:
        expired = [sid for sid, s in self.sessions.items() if self._is_expired(s)]
        for sid in expired:
            del self.sessions[sid]
        if expired:
            logger.info(f"Purged {len(expired)} expired sessions")
        return len(expired)

    def create(self) -> Tuple[str, UserSession]:
        self.purge_expired()
        new_id = str(uuid.uuid4())
        session = UserSession(deck=self.default_deck)
        self.sessions[new_id] = session
        logger.info(f"New session: {new_id} [Deck: {session.deck}]")
        return new_id, session

    def get_or_create(self, session_id: Optional[str]) -> Tuple[str, UserSession]:
        session = self.get(session_id)
        if session is not None:
            return session_id, session
        return self.create()

    def get_or_blank(self, session_id: Optional[str]) -> UserSession:
        """Returns the stored session, or an unsaved blank one for read-only use."""
        session = self.get(session_id)
        if session is not None:
            return session
        return UserSession(deck=self.default_deck)

    def discard(self, session_id: Optional[str]) -> None:
        if session_id in self.sessions:
            del self.sessions[session_id]
