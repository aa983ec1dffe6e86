"""
Shopping sessions.

Each session owns exactly one CartStore. The browsing, cart and checkout
surfaces all reach the cart through the session, so they see the same
mutations. Sessions are in-memory: they are dropped when ended, after
sitting idle past the timeout, or when the process exits.

Session ids are always issued by the server; an id the registry does not
know is never adopted.
"""
import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, Optional

from storefront.cart import CartStore
from storefront.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)

DEFAULT_IDLE_TIMEOUT = 2 * 60 * 60  # seconds


@dataclass
class CartSession:
    """One shopper's browsing + checkout session."""
    session_id: Optional[str]  # None for a detached, unregistered view
    cart: CartStore = field(default_factory=CartStore)
    started_at: str = ""
    last_seen: float = 0.0

    def __post_init__(self):
        if not self.started_at:
            self.started_at = datetime.now(timezone.utc).isoformat()

    @property
    def is_registered(self) -> bool:
        return self.session_id is not None

    @classmethod
    def detached(cls) -> "CartSession":
        """Empty read-only stand-in for a request with no live session."""
        return cls(session_id=None)


class SessionRegistry:
    """Live sessions by id. Sessions never share a cart."""

    def __init__(
        self,
        idle_timeout: float = DEFAULT_IDLE_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._sessions: Dict[str, CartSession] = {}
        self.idle_timeout = idle_timeout
        self._clock = clock

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def start(self) -> CartSession:
        """Start a session with a fresh, empty cart and a new server-issued id."""
        self.sweep()
        session = CartSession(session_id=uuid.uuid4().hex, last_seen=self._clock())
        self._sessions[session.session_id] = session
        logger.info(f"Session started: {sanitize_id_for_logging(session.session_id)}")
        return session

    def get(self, session_id: Optional[str]) -> Optional[CartSession]:
        """Live session for an id, refreshing its idle timer. Expired sessions are dropped."""
        if not session_id:
            return None
        session = self._sessions.get(session_id)
        if session is None:
            return None

        now = self._clock()
        if now - session.last_seen > self.idle_timeout:
            self.end(session_id)
            return None
        session.last_seen = now
        return session

    def get_or_start(self, session_id: Optional[str]) -> CartSession:
        """Live session for the id, or a new one with its own id."""
        return self.get(session_id) or self.start()

    def sweep(self) -> int:
        """Drop every session idle past the timeout. Returns how many were dropped."""
        now = self._clock()
        expired = [
            session_id
            for session_id, session in self._sessions.items()
            if now - session.last_seen > self.idle_timeout
        ]
        for session_id in expired:
            del self._sessions[session_id]
        if expired:
            logger.info(f"Expired {len(expired)} idle sessions")
        return len(expired)

    def end(self, session_id: Optional[str]) -> bool:
        """Discard a session and its cart."""
        if not session_id:
            return False
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        logger.info(f"Session ended: {sanitize_id_for_logging(session_id)}")
        return True
