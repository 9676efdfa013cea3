import re
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, String

from marketplace.db.base import Base

ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")

def new_id() -> str:
	return uuid.uuid4().hex

def is_valid_id(value) -> bool:
	return isinstance(value, str) and bool(ID_PATTERN.match(value))

def utcnow() -> datetime:
	# Naive UTC, which is what SQLite hands back.
	return datetime.now(timezone.utc).replace(tzinfo=None)

class User(Base):
	__tablename__ = "users"

	id = Column(String(32), primary_key=True, default=new_id)
	username = Column(String, unique=True, index=True, nullable=False)
	password_hash = Column(String, nullable=False)
	created_at = Column(DateTime, default=utcnow)

	def __repr__(self):
		return f"<User(id={self.id}, username={self.username})>"

class Item(Base):
	__tablename__ = "items"

	id = Column(String(32), primary_key=True, default=new_id)
	name = Column(String, nullable=False)
	price = Column(Float, nullable=False)
	# Username of the creator, not a foreign key: listings outlive a deleted account.
	owner = Column(String, index=True, nullable=False)

	def __repr__(self):
		return f"<Item(id={self.id}, name={self.name}, owner={self.owner})>"

class UserSession(Base):
	__tablename__ = "sessions"

	token = Column(String, primary_key=True)
	username = Column(String, index=True, nullable=False)
	created_at = Column(DateTime, default=utcnow, nullable=False)
	last_seen_at = Column(DateTime, default=utcnow, nullable=False)
