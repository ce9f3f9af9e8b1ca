"""
Session Context

One session id per engine instantiation, plus an optional external user id.
"""

from datetime import datetime
from typing import Callable, Optional

from lead_intel.core.logging import get_logger
from lead_intel.shared.helpers import generate_time_seeded_id, now_utc

logger = get_logger(__name__)


class SessionContext:
    def __init__(self, clock: Callable[[], datetime] = now_utc):
        self._clock = clock
        self.session_id = self.new_session_id()
        self.user_id: Optional[str] = None

    def new_session_id(self) -> str:
        return generate_time_seeded_id("session", self._clock())

    def new_event_id(self) -> str:
        return generate_time_seeded_id("event", self._clock())

    def set_user_id(self, user_id: str) -> bool:
        """
        Attach the external user id. It can be set once; a different id is
        ignored until the session is renewed. Returns True when it changed.
        """
        if self.user_id is None:
            self.user_id = user_id
            return True
        if self.user_id != user_id:
            logger.warning(
                "User id already set for session, ignoring new value",
                session_id=self.session_id,
            )
        return False

    def restore(self, session_id: Optional[str], user_id: Optional[str]) -> None:
        """Adopt identifiers loaded from a snapshot"""
        if session_id:
            self.session_id = session_id
        self.user_id = user_id

    def renew(self) -> None:
        """Start a new session and forget the user id"""
        self.session_id = self.new_session_id()
        self.user_id = None
