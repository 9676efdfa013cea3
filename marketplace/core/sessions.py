"""Server-side sessions carried by an opaque cookie token.

A session only remembers which username logged in. Records expire after
``SESSION_IDLE_SECONDS`` without a request; every successful lookup slides
the window forward.
"""
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from marketplace.core.config import settings
from marketplace.core.errors import AuthRequired
from marketplace.core.logging import log_event
from marketplace.db.models import UserSession, utcnow
from marketplace.db.session import get_db, store_guard


@dataclass(frozen=True)
class SessionData:
	token: str
	username: str


class SessionStore:
	def __init__(
		self,
		db: Session,
		idle_seconds: int = settings.SESSION_IDLE_SECONDS,
		clock: Callable[[], datetime] = utcnow,
	):
		self.db = db
		self.idle = timedelta(seconds=idle_seconds)
		self.clock = clock

	def create(self, username: str) -> SessionData:
		now = self.clock()
		record = UserSession(
			token=secrets.token_urlsafe(32),
			username=username,
			created_at=now,
			last_seen_at=now,
		)
		session = SessionData(token=record.token, username=record.username)
		with store_guard(self.db, "create session"):
			# Abandoned sessions are never looked up again; sweep them on every login.
			self.db.query(UserSession).filter(UserSession.last_seen_at < now - self.idle).delete()
			self.db.add(record)
			self.db.commit()
		return session

	def get(self, token: Optional[str]) -> Optional[SessionData]:
		if not token:
			return None
		with store_guard(self.db, "load session"):
			record = self.db.query(UserSession).filter(UserSession.token == token).first()
			if not record:
				return None

			session = SessionData(token=record.token, username=record.username)
			now = self.clock()
			if now - record.last_seen_at > self.idle:
				self.db.delete(record)
				self.db.commit()
				log_event("session_expired", username=session.username)
				return None

			record.last_seen_at = now
			self.db.commit()
			return session

	def destroy(self, token: Optional[str]) -> None:
		# Destroying an unknown token is a no-op.
		if not token:
			return
		with store_guard(self.db, "destroy session"):
			self.db.query(UserSession).filter(UserSession.token == token).delete()
			self.db.commit()


def get_session_store(db: Session = Depends(get_db)) -> SessionStore:
	return SessionStore(db)

def get_current_session(
	request: Request,
	store: SessionStore = Depends(get_session_store),
) -> Optional[SessionData]:
	return store.get(request.cookies.get(settings.SESSION_COOKIE_NAME))

def require_session(message: str = "You need to login first!"):
	# Resolved before the request body, so anonymous callers get 401 ahead of any 400.
	def _session_guard(session: Optional[SessionData] = Depends(get_current_session)) -> SessionData:
		if session is None:
			raise AuthRequired(message)
		return session
	return _session_guard
