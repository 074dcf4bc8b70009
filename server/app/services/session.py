import logging
import time
import uuid
from collections import OrderedDict
from typing import Callable, Optional

from app.services.wizard import DEFAULT_TRANSITION_DELAY, WizardSession

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 1000
DEFAULT_IDLE_TIMEOUT = 30 * 60 # seconds

class SessionNotFound(KeyError):
    pass

class SessionRegistry:
    """
    Wizard sessions of this process. Nothing is written anywhere else.

    Sessions untouched for idle_timeout seconds are dropped, and once
    max_sessions are open the least recently used one makes room for a
    new session.
    """

    def __init__(
        self,
        transition_delay: float = DEFAULT_TRANSITION_DELAY,
        current_year: Optional[int] = None,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
        idle_timeout: float = DEFAULT_IDLE_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")

        self.transition_delay = transition_delay
        self.current_year = current_year
        self.max_sessions = max_sessions
        self.idle_timeout = idle_timeout
        self._clock = clock
        # least recently used first; values are (session, last access time)
        self._sessions: "OrderedDict[str, tuple[WizardSession, float]]" = OrderedDict()

    def create_session(self) -> WizardSession:
        self.evict_idle()
        while len(self._sessions) >= self.max_sessions:
            oldest = next(iter(self._sessions))
            self._drop(oldest)
            logger.warning("Session %s evicted, limit of %s sessions reached", oldest, self.max_sessions)

        session = WizardSession(
            session_id=uuid.uuid4().hex,
            transition_delay=self.transition_delay,
            current_year=self.current_year,
        )
        self._sessions[session.session_id] = (session, self._clock())
        logger.info("Session %s started", session.session_id)

        return session

    def get_session(self, session_id: str) -> WizardSession:
        try:
            session, last_seen = self._sessions[session_id]
        except KeyError:
            raise SessionNotFound(session_id) from None

        now = self._clock()
        if now - last_seen > self.idle_timeout:
            self._drop(session_id)
            logger.info("Session %s expired", session_id)
            raise SessionNotFound(session_id)

        self._sessions[session_id] = (session, now)
        self._sessions.move_to_end(session_id)
        return session

    def end_session(self, session_id: str):
        if session_id not in self._sessions:
            raise SessionNotFound(session_id)
        self._drop(session_id)
        logger.info("Session %s ended", session_id)

    def evict_idle(self):
        now = self._clock()
        expired = [
            session_id
            for session_id, (_, last_seen) in self._sessions.items()
            if now - last_seen > self.idle_timeout
        ]
        for session_id in expired:
            self._drop(session_id)
            logger.info("Session %s expired", session_id)

    def close(self):
        for session_id in list(self._sessions):
            self.end_session(session_id)

    def _drop(self, session_id: str):
        session, _ = self._sessions.pop(session_id)
        session.close()

    def __len__(self):
        return len(self._sessions)
