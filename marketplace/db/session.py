from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from marketplace.core.config import settings
from marketplace.core.errors import ServiceError, StoreError
from marketplace.core.logging import log_event
from marketplace.db.base import Base

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
	db = SessionLocal()
	try:
		yield db
	finally:
		db.close()

def init_db(bind=None):
	from marketplace.db import models  # noqa: F401  registers tables on Base.metadata

	Base.metadata.create_all(bind=bind or engine)

@contextmanager
def store_guard(db, action: str):
	"""Roll back and report any store failure raised inside the block as StoreError."""
	try:
		yield
	except ServiceError:
		raise
	except SQLAlchemyError as exc:
		db.rollback()
		log_event("store_error", action=action, error=str(exc))
		raise StoreError(f"Failed to {action}.") from exc
