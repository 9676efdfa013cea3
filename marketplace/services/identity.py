"""Registration, login and account management.

Username uniqueness is enforced by the ``users.username`` unique constraint:
the insert is attempted directly and a constraint violation becomes a
``Conflict``. A lookup before the insert would race with concurrent
registrations.
"""
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from marketplace.core.errors import AuthRequired, Conflict, NotFound, ValidationError
from marketplace.core.security import hash_password, verify_password
from marketplace.core.sessions import SessionData, SessionStore
from marketplace.db.models import User
from marketplace.db.session import store_guard
from marketplace.schemas.auth import LoginRequest, RegisterRequest
from marketplace.services.common import require_username

MIN_PASSWORD_LENGTH = 6


class IdentityService:
	def __init__(self, db: Session, sessions: SessionStore):
		self.db = db
		self.sessions = sessions

	def register(self, payload: RegisterRequest) -> User:
		if len(payload.password) < MIN_PASSWORD_LENGTH:
			raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")

		user = User(username=payload.username, password_hash=hash_password(payload.password))
		with store_guard(self.db, "register user"):
			self.db.add(user)
			try:
				self.db.commit()
			except IntegrityError as exc:
				self.db.rollback()
				raise Conflict("Username taken.") from exc
			self.db.refresh(user)
		return user

	def login(self, payload: LoginRequest, current: Optional[SessionData] = None) -> SessionData:
		with store_guard(self.db, "log in"):
			user = self.db.query(User).filter(User.username == payload.username).first()

		if not user or not verify_password(payload.password, user.password_hash):
			raise AuthRequired("Invalid credentials.")

		if current is not None:
			self.sessions.destroy(current.token)
		return self.sessions.create(user.username)

	def logout(self, current: Optional[SessionData]) -> None:
		self.sessions.destroy(current.token if current else None)

	def get_profile(self, session: Optional[SessionData]) -> User:
		username = require_username(session, "You must be logged in to see your profile!")
		with store_guard(self.db, "load profile"):
			user = self.db.query(User).filter(User.username == username).first()
		# The session outlived its account.
		if not user:
			raise AuthRequired("User not found!")
		return user

	def delete_account(self, session: Optional[SessionData]) -> None:
		username = require_username(session, "You need to be logged in to continue!")
		with store_guard(self.db, "delete account"):
			deleted = self.db.query(User).filter(User.username == username).delete()
			self.db.commit()
		if not deleted:
			raise NotFound("User not found.")
		self.sessions.destroy(session.token)
